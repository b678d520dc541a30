"""Path utilities over delimiter-segmented element paths.

A path such as ``"Patient.contact.name"`` names a tree node by the chain
of its ancestors' final segments.  A single-segment path (``"Patient"``)
is a root path and has no parent.

``PathNavigator`` answers the three questions the tree constructor needs
(parent, sibling, direct child) plus a few helpers built on them.  The
delimiter is an explicit constructor argument so the same code serves
any segmentation scheme.

The module-level functions delegate to one shared navigator per
delimiter, for callers that just want the predicates::

    parent_path("Patient.name.given")              # "Patient.name"
    is_sibling("Patient.name", "Patient.address")   # True
    is_direct_child("Patient", "Patient.name")      # True
"""

from __future__ import annotations

import threading

from cachetools import LRUCache, cached

from differential_tree.cache import SegmentCache
from differential_tree.errors import InvalidPathError

__all__ = [
    "DEFAULT_DELIMITER",
    "PathNavigator",
    "is_direct_child",
    "is_root",
    "is_sibling",
    "parent_path",
    "validate_delimiter",
]

DEFAULT_DELIMITER = "."


def validate_delimiter(delimiter: str) -> str:
    """Return ``delimiter`` unchanged, raising ``ValueError`` unless it is one non-whitespace character."""
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        msg = f"delimiter must be a single character, got {delimiter!r}"
        raise ValueError(msg)
    if delimiter.isspace():
        msg = "delimiter must not be whitespace"
        raise ValueError(msg)
    return delimiter


class PathNavigator:
    """Structural queries over paths segmented by a single delimiter.

    Split paths are memoised in a per-instance ``SegmentCache``.  Every
    query validates its operands: a non-string, an empty string, or a path
    with an empty segment (``"a..b"``, ``".a"``, ``"a."``) raises
    ``InvalidPathError``.  The sibling and direct-child predicates also
    accept ``None`` for the "no previous element" case and answer False.

    Args:
        delimiter:  Segment separator.  Defaults to ``"."``.
        cache_size: Capacity of the segment cache.  Defaults to 1024.
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER, cache_size: int = 1024) -> None:
        self._delimiter = validate_delimiter(delimiter)
        self._cache = SegmentCache(self._split, max_size=cache_size)

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def cache(self) -> SegmentCache:
        return self._cache

    def _split(self, path: str) -> tuple[str, ...]:
        if not path:
            raise InvalidPathError(path, "path is empty")
        parts = tuple(path.split(self._delimiter))
        if "" in parts:
            raise InvalidPathError(path, "path contains an empty segment")
        return parts

    # ------------------------------------------------------------------
    # Basic queries
    # ------------------------------------------------------------------

    def segments(self, path: str) -> tuple[str, ...]:
        """Return the segments of ``path``.

        Raises:
            InvalidPathError: If ``path`` is not a well-formed path.
        """
        if not isinstance(path, str):
            raise InvalidPathError(path, f"expected str, got {type(path).__name__}")
        return self._cache.segments(path)

    def validate(self, path: str) -> str:
        """Return ``path`` unchanged, raising ``InvalidPathError`` if malformed."""
        self.segments(path)
        return path

    def depth(self, path: str) -> int:
        return len(self.segments(path))

    def is_root(self, path: str) -> bool:
        return len(self.segments(path)) == 1

    def parent_path(self, path: str) -> str:
        """Return ``path`` with its last segment removed.

        Raises:
            InvalidPathError: If ``path`` is malformed or is a root path.
        """
        parts = self.segments(path)
        if len(parts) == 1:
            raise InvalidPathError(path, "a root path has no parent")
        return self._delimiter.join(parts[:-1])

    def ancestors(self, path: str) -> tuple[str, ...]:
        """Return every proper ancestor of ``path``, root first."""
        parts = self.segments(path)
        return tuple(self._delimiter.join(parts[:n]) for n in range(1, len(parts)))

    # ------------------------------------------------------------------
    # Relations
    # ------------------------------------------------------------------

    def is_sibling(self, a: str | None, b: str | None) -> bool:
        """True iff ``a`` and ``b`` are distinct non-root paths with the same parent."""
        if not a or not b:
            return False
        parts_a = self.segments(a)
        parts_b = self.segments(b)
        if len(parts_a) == 1 or len(parts_b) == 1:
            return False
        return parts_a[:-1] == parts_b[:-1] and parts_a[-1] != parts_b[-1]

    def is_direct_child(self, parent: str | None, candidate: str) -> bool:
        """True iff ``parent_path(candidate) == parent``."""
        if not parent:
            return False
        parts = self.segments(candidate)
        if len(parts) == 1:
            return False
        return parts[:-1] == self.segments(parent)

    def is_ancestor(self, ancestor: str, path: str | None) -> bool:
        """True iff ``path`` lies strictly below ``ancestor``."""
        if not path:
            return False
        self.validate(ancestor)
        return path.startswith(ancestor + self._delimiter)


@cached(LRUCache(maxsize=16), lock=threading.Lock())
def _default_navigator(delimiter: str) -> PathNavigator:
    return PathNavigator(delimiter)


def parent_path(path: str, *, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Return the parent of ``path``; ``InvalidPathError`` for a root path."""
    return _default_navigator(delimiter).parent_path(path)


def is_sibling(a: str | None, b: str | None, *, delimiter: str = DEFAULT_DELIMITER) -> bool:
    """True iff ``a`` and ``b`` share a parent and differ in their last segment."""
    return _default_navigator(delimiter).is_sibling(a, b)


def is_direct_child(
    parent: str | None, candidate: str, *, delimiter: str = DEFAULT_DELIMITER
) -> bool:
    """True iff ``candidate`` is exactly one level below ``parent``."""
    return _default_navigator(delimiter).is_direct_child(parent, candidate)


def is_root(path: str, *, delimiter: str = DEFAULT_DELIMITER) -> bool:
    """True iff ``path`` has a single segment."""
    return _default_navigator(delimiter).is_root(path)
