"""Read-only checks of whether an element list already forms a complete tree.

These never modify their input and never raise for structural problems;
they report them.  Malformed paths still raise ``InvalidPathError``.
"""

from __future__ import annotations

from collections.abc import Sequence

from differential_tree.tree.elements import DifferentialElement
from differential_tree.tree.paths import DEFAULT_DELIMITER, PathNavigator

__all__ = ["find_adjacency_violations", "find_orphans", "is_complete_tree"]


def find_orphans(
    elements: Sequence[DifferentialElement],
    delimiter: str = DEFAULT_DELIMITER,
) -> list[str]:
    """Return paths whose parent path does not occur earlier in ``elements``.

    The first element is never an orphan.  Any root path after the first
    element is reported, since it has no parent to find.
    """
    nav = PathNavigator(delimiter)
    seen: set[str] = set()
    orphans: list[str] = []
    for index, element in enumerate(elements):
        path = nav.validate(element.path)
        if index > 0 and (nav.is_root(path) or nav.parent_path(path) not in seen):
            orphans.append(path)
        seen.add(path)
    return orphans


def find_adjacency_violations(
    elements: Sequence[DifferentialElement],
    delimiter: str = DEFAULT_DELIMITER,
) -> list[tuple[int, str]]:
    """Return ``(index, path)`` for each element not tree-consistent with its predecessor.

    An element at index ``i > 0`` is consistent when it is a sibling of the
    element at ``i - 1``, a direct child of it, or its parent is an
    ancestor of it.  A non-root first element is reported at index 0.
    """
    nav = PathNavigator(delimiter)
    violations: list[tuple[int, str]] = []
    previous: str | None = None
    for index, element in enumerate(elements):
        path = nav.validate(element.path)
        if index == 0:
            if not nav.is_root(path):
                violations.append((index, path))
        elif nav.is_root(path):
            violations.append((index, path))
        elif not (
            nav.is_sibling(path, previous)
            or nav.is_direct_child(previous, path)
            or nav.is_ancestor(nav.parent_path(path), previous)
        ):
            violations.append((index, path))
        previous = path
    return violations


def is_complete_tree(
    elements: Sequence[DifferentialElement],
    delimiter: str = DEFAULT_DELIMITER,
) -> bool:
    """True when ``elements`` is empty or needs no synthetic insertions."""
    if not elements:
        return True
    return not find_orphans(elements, delimiter) and not find_adjacency_violations(
        elements, delimiter
    )
