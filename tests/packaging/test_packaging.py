"""Packaging correctness verification for differential-tree.

Validates that:
- The installed distribution metadata is correct
- py.typed marker ships with the package
- The pytest plugin entry point is registered
- The base install exposes the public API

These tests inspect the current installation rather than creating
temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

from importlib import metadata
from pathlib import Path

import differential_tree


class TestMetadata:
    def test_distribution_version_matches_package(self) -> None:
        assert metadata.version("differential-tree") == differential_tree.__version__

    def test_cachetools_is_a_dependency(self) -> None:
        requires = metadata.requires("differential-tree") or []
        assert any(req.startswith("cachetools") for req in requires)


class TestTypedMarker:
    def test_py_typed_present(self) -> None:
        package_dir = Path(differential_tree.__file__).parent
        assert (package_dir / "py.typed").is_file()


class TestEntryPoints:
    def test_pytest11_entry_point_registered(self) -> None:
        eps = metadata.entry_points(group="pytest11")
        values = {ep.value for ep in eps}
        assert "differential_tree.integrations._pytest_plugin" in values


class TestPublicSurface:
    def test_all_names_importable(self) -> None:
        for name in differential_tree.__all__:
            assert hasattr(differential_tree, name), name
