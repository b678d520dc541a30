"""NormalizationResult dataclass for normalize_differential() output.

This module provides the rich result type returned by
``normalize_differential()`` calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from differential_tree.tree.elements import DifferentialElement

__all__ = ["NormalizationResult"]


@dataclass(frozen=True, slots=True)
class NormalizationResult:
    """Rich result of a normalize_differential() call.

    Attributes:
        elements: The normalized element list, synthetic parents included.
        synthetic_count: Number of synthetic elements that were inserted.
        inserted_paths: Paths of the inserted synthetic elements, in the
            order they were inserted (deepest missing level first for each gap).
        computation_time_ms: Wall-clock duration of the call in milliseconds.
    """

    elements: list[DifferentialElement]
    synthetic_count: int
    inserted_paths: list[str]
    computation_time_ms: float
