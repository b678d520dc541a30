"""pytest plugin for differential-tree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from differential_tree.algorithm.validation import (
    find_adjacency_violations,
    find_orphans,
)
from differential_tree.tree.elements import Differential, DifferentialElement


@pytest.fixture(scope="session")
def assert_differential_tree() -> Any:
    """Fixture that returns a callable complete-tree asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_profile_tree(assert_differential_tree):
            assert_differential_tree(normalize(my_differential))

    Returns:
        A callable ``_assert(elements, delimiter=".") -> None`` that raises
        ``AssertionError`` when the elements do not form a complete tree.
    """

    def _assert(
        elements: Differential | Sequence[DifferentialElement],
        delimiter: str = ".",
    ) -> None:
        """Assert that ``elements`` needs no synthetic parents.

        Args:
            elements:  A Differential or a sequence of DifferentialElement.
            delimiter: Path segment separator.  Defaults to ".".

        Raises:
            AssertionError: When an element has no parent before it or is not
                tree-adjacent to its predecessor, with both lists in the message.
        """
        if isinstance(elements, Differential):
            elements = elements.elements
        if not elements:
            return
        orphans = find_orphans(elements, delimiter)
        violations = find_adjacency_violations(elements, delimiter)
        if orphans or violations:
            paths = [element.path for element in elements]
            raise AssertionError(
                f"Differential is not a complete tree:\n"
                f"  paths:      {paths}\n"
                f"  orphans:    {orphans}\n"
                f"  adjacency violations: {violations}"
            )

    return _assert
