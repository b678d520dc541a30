"""Differential tree - fills skipped ancestors into path-addressed differentials."""

from __future__ import annotations

from differential_tree.algorithm.config import TreeConfig
from differential_tree.algorithm.constructor import DifferentialTreeConstructor
from differential_tree.api import make_tree, normalize, normalize_differential
from differential_tree.errors import (
    DifferentialTreeError,
    InvalidPathError,
    MultipleRootsError,
)
from differential_tree.result import NormalizationResult
from differential_tree.tree.elements import Differential, DifferentialElement

__version__: str = "0.1.0"
__all__: list[str] = [
    "Differential",
    "DifferentialElement",
    "DifferentialTreeConstructor",
    "DifferentialTreeError",
    "InvalidPathError",
    "MultipleRootsError",
    "NormalizationResult",
    "TreeConfig",
    "make_tree",
    "normalize",
    "normalize_differential",
]
