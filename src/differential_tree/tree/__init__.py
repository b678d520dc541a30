"""Tree subpackage for path and element primitives.

Re-exports the public API for the tree module:
- DifferentialElement: frozen dataclass for one path-addressed entry
- Differential: named, ordered container of elements
- PathNavigator: parent / sibling / direct-child queries over paths
- parent_path, is_sibling, is_direct_child, is_root: module-level predicates
"""

from differential_tree.tree.elements import Differential, DifferentialElement
from differential_tree.tree.paths import (
    PathNavigator,
    is_direct_child,
    is_root,
    is_sibling,
    parent_path,
)

__all__ = [
    "Differential",
    "DifferentialElement",
    "PathNavigator",
    "is_direct_child",
    "is_root",
    "is_sibling",
    "parent_path",
]
