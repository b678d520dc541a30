"""algorithm subpackage — public API for differential tree construction.

Provides the tree constructor, its configuration, and the read-only tree
checks.  Import from this module (not from sub-modules directly) to stay
on the stable public interface.

Example::

    from differential_tree.algorithm import DifferentialTreeConstructor, TreeConfig

    tree = DifferentialTreeConstructor(elements, config=TreeConfig(delimiter="/")).make_tree()
"""

from __future__ import annotations

from differential_tree.algorithm.config import TreeConfig
from differential_tree.algorithm.constructor import DifferentialTreeConstructor
from differential_tree.algorithm.validation import (
    find_adjacency_violations,
    find_orphans,
    is_complete_tree,
)

__all__ = [
    "DifferentialTreeConstructor",
    "TreeConfig",
    "find_adjacency_violations",
    "find_orphans",
    "is_complete_tree",
]
