"""Unit tests for SegmentCache.

Tests cover:
- Cache hits (cached paths bypass the splitter on second lookup)
- LRU eviction (silent eviction at max_size; evicted paths re-split on next call)
- Instance isolation (separate SegmentCache instances do not share state)
- Splitter errors propagate and are not cached
- Properties (max_size and curr_size return correct values)
- Concurrent lookups under eviction pressure never raise
"""

from __future__ import annotations

import threading

import pytest

from differential_tree.cache import SegmentCache

# ---------------------------------------------------------------------------
# Spy helper
# ---------------------------------------------------------------------------


def _make_spy_splitter() -> tuple[object, list[str]]:
    """Return (splitter, call_log) where call_log records each path split."""
    call_log: list[str] = []

    def splitter(path: str) -> tuple[str, ...]:
        call_log.append(path)
        if not path:
            raise ValueError("empty")
        return tuple(path.split("."))

    return splitter, call_log


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestCacheHits:
    def test_second_lookup_served_from_cache(self) -> None:
        splitter, call_log = _make_spy_splitter()
        cache = SegmentCache(splitter)  # type: ignore[arg-type]
        assert cache.segments("Patient.name") == ("Patient", "name")
        assert cache.segments("Patient.name") == ("Patient", "name")
        assert call_log == ["Patient.name"]

    def test_contains(self) -> None:
        splitter, _ = _make_spy_splitter()
        cache = SegmentCache(splitter)  # type: ignore[arg-type]
        cache.segments("Patient")
        assert "Patient" in cache
        assert "Observation" not in cache


class TestEviction:
    def test_lru_eviction_is_silent(self) -> None:
        splitter, call_log = _make_spy_splitter()
        cache = SegmentCache(splitter, max_size=2)  # type: ignore[arg-type]
        cache.segments("a")
        cache.segments("b")
        cache.segments("c")
        assert cache.curr_size == 2
        assert "a" not in cache
        cache.segments("a")
        assert call_log == ["a", "b", "c", "a"]

    def test_clear(self) -> None:
        splitter, _ = _make_spy_splitter()
        cache = SegmentCache(splitter)  # type: ignore[arg-type]
        cache.segments("a.b")
        cache.clear()
        assert cache.curr_size == 0


class TestIsolation:
    def test_instances_do_not_share_state(self) -> None:
        splitter, _ = _make_spy_splitter()
        first = SegmentCache(splitter)  # type: ignore[arg-type]
        second = SegmentCache(splitter)  # type: ignore[arg-type]
        first.segments("Patient")
        assert "Patient" not in second


class TestErrors:
    def test_splitter_error_propagates_and_is_not_cached(self) -> None:
        splitter, _ = _make_spy_splitter()
        cache = SegmentCache(splitter)  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="empty"):
            cache.segments("")
        assert cache.curr_size == 0


class TestProperties:
    def test_max_size(self) -> None:
        splitter, _ = _make_spy_splitter()
        assert SegmentCache(splitter, max_size=7).max_size == 7  # type: ignore[arg-type]

    def test_default_max_size(self) -> None:
        splitter, _ = _make_spy_splitter()
        assert SegmentCache(splitter).max_size == 1024  # type: ignore[arg-type]


class TestThreadSafety:
    def test_concurrent_lookups_with_eviction(self) -> None:
        cache = SegmentCache(lambda p: tuple(p.split(".")), max_size=32)
        errors: list[str] = []

        def work(t: int) -> None:
            try:
                for i in range(4000):
                    path = f"R.t{t}.n{i}"
                    if cache.segments(path) != ("R", f"t{t}", f"n{i}"):
                        errors.append(f"wrong segments for {path}")
            except Exception as exc:  # collected and asserted below
                errors.append(repr(exc))

        threads = [threading.Thread(target=work, args=(t,)) for t in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert cache.curr_size <= 32
