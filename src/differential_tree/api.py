"""Public API functions for differential-tree.

This module provides the three user-facing functions: normalize, make_tree,
and normalize_differential.  Each call creates a fresh
DifferentialTreeConstructor to guarantee zero global state mutation
between calls.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from typing import TYPE_CHECKING, TypeVar

from differential_tree.algorithm.config import TreeConfig
from differential_tree.algorithm.constructor import DifferentialTreeConstructor
from differential_tree.result import NormalizationResult
from differential_tree.tree.elements import Differential, DifferentialElement

if TYPE_CHECKING:
    from differential_tree.protocols import PayloadCopier

__all__ = ["make_tree", "normalize", "normalize_differential"]

P = TypeVar("P")


def normalize(
    elements: Sequence[DifferentialElement[P]],
    config: TreeConfig | None = None,
    copier: PayloadCopier | None = None,
) -> list[DifferentialElement[P]]:
    """Return a copy of ``elements`` with every skipped ancestor filled in.

    Args:
        elements: Ordered differential elements.  Never modified.
        config:   Path segmentation settings.  Defaults to ``TreeConfig()``.
        copier:   Payload cloning strategy.  Defaults to ``DeepCopier()``.

    Returns:
        A new list in which inserted ancestors are flagged ``synthetic=True``.
        An empty input yields an empty list.

    Raises:
        MultipleRootsError: If more than one root-level path is present.
        InvalidPathError:   If any path is malformed.
    """
    return DifferentialTreeConstructor(elements, config=config, copier=copier).make_tree().elements


def make_tree(
    differential: Differential[P],
    config: TreeConfig | None = None,
    copier: PayloadCopier | None = None,
) -> Differential[P]:
    """Like ``normalize()``, for a ``Differential`` container; its name is kept."""
    return DifferentialTreeConstructor(differential, config=config, copier=copier).make_tree()


def normalize_differential(
    elements: Differential[P] | Sequence[DifferentialElement[P]],
    config: TreeConfig | None = None,
    copier: PayloadCopier | None = None,
) -> NormalizationResult:
    """Normalize ``elements`` and report what was inserted.

    Returns:
        A ``NormalizationResult`` with the normalized elements, the number
        and paths of synthetic insertions, and computation_time_ms.
    """
    start = time.perf_counter()
    constructor = DifferentialTreeConstructor(elements, config=config, copier=copier)
    tree = constructor.make_tree()
    inserted = constructor.inserted_paths
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return NormalizationResult(
        elements=tree.elements,
        synthetic_count=len(inserted),
        inserted_paths=inserted,
        computation_time_ms=elapsed_ms,
    )
