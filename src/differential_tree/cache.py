"""SegmentCache: LRU-backed memo of path -> segment tuples.

The tree constructor asks the same questions about the same paths many
times (a path is ``current`` on one iteration and ``previous`` on the
next, and its parent is recomputed for each sibling).  ``SegmentCache``
keeps the split form of recently seen paths so that each distinct path
is split at most once while it stays in the cache.  LRU eviction occurs
silently when ``max_size`` is exceeded — no error is raised.

Each ``SegmentCache`` instance maintains its own ``LRUCache`` — there is
no class-level shared state, so two separate instances never interfere
with each other.  Every read and write of that ``LRUCache`` happens under
the instance's lock, so one instance may be shared between threads.  The
splitter itself runs outside the lock; two threads missing on the same
path may both split it, and the last store wins.

Example::

    from differential_tree.cache import SegmentCache

    cache = SegmentCache(lambda p: tuple(p.split(".")), max_size=256)

    cache.segments("Patient.name")   # computed
    cache.segments("Patient.name")   # served from memory
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from cachetools import LRUCache, cached

__all__ = ["SegmentCache"]


def _path_key(path: str) -> str:
    return path


class SegmentCache:
    """Thread-safe LRU caching proxy around a path-splitting function.

    Args:
        splitter: Callable turning a path into its tuple of segments.  It
            is only called for paths not already cached; any exception it
            raises propagates and nothing is stored.
        max_size: Maximum number of paths to hold in memory.  Defaults to
            1024.  When exceeded, the least-recently-used entry is evicted.
    """

    def __init__(
        self,
        splitter: Callable[[str], tuple[str, ...]],
        max_size: int = 1024,
    ) -> None:
        self._cache: LRUCache[str, tuple[str, ...]] = LRUCache(maxsize=max_size)
        self._lock = threading.Lock()
        self._lookup = cached(self._cache, key=_path_key, lock=self._lock)(splitter)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        with self._lock:
            return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def segments(self, path: str) -> tuple[str, ...]:
        """Return the segments of ``path``, splitting it only on a cache miss."""
        return self._lookup(path)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._cache

    def clear(self) -> None:
        """Drop every cached entry."""
        with self._lock:
            self._cache.clear()
