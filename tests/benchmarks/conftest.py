"""Deterministic differential generators for performance benchmarks.

All generators produce fixed, reproducible element lists. No random values.
Three tiers: 10-element shallow, 100-element gappy, 1000-element deep.
Each tier provides a "complete" list (no insertions needed) and a "sparse"
list (ancestors skipped) with the same leaves.
"""

from __future__ import annotations

import pytest

from differential_tree import DifferentialElement


def _complete(sections: int, leaves: int) -> list[DifferentialElement]:
    """Root, then each section followed by its leaves."""
    out = [DifferentialElement("Resource")]
    for i in range(sections):
        out.append(DifferentialElement(f"Resource.section{i}"))
        out.extend(
            DifferentialElement(f"Resource.section{i}.field{j}", payload={"n": j})
            for j in range(leaves)
        )
    return out


def _sparse(sections: int, leaves: int, depth: int) -> list[DifferentialElement]:
    """Only leaves ``depth`` levels below each section; every ancestor skipped."""
    middle = ".".join(f"level{k}" for k in range(depth))
    return [
        DifferentialElement(f"Resource.section{i}.{middle}.field{j}", payload={"n": j})
        for i in range(sections)
        for j in range(leaves)
    ]


@pytest.fixture
def diff_10_complete() -> list[DifferentialElement]:
    return _complete(3, 2)


@pytest.fixture
def diff_10_sparse() -> list[DifferentialElement]:
    return _sparse(5, 2, 1)


@pytest.fixture
def diff_100_complete() -> list[DifferentialElement]:
    return _complete(9, 10)


@pytest.fixture
def diff_100_sparse() -> list[DifferentialElement]:
    return _sparse(10, 10, 3)


@pytest.fixture
def diff_1000_complete() -> list[DifferentialElement]:
    return _complete(30, 32)


@pytest.fixture
def diff_1000_sparse() -> list[DifferentialElement]:
    return _sparse(40, 25, 6)
