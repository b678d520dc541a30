"""Exception hierarchy for differential-tree.

Every error raised by the package derives from ``DifferentialTreeError``,
which is itself a ``ValueError``: both conditions mean the input is not a
valid differential, and only the caller can repair it.

Hierarchy::

    ValueError
    └── DifferentialTreeError
        ├── InvalidPathError
        └── MultipleRootsError
"""

from __future__ import annotations

from typing import Any

__all__ = ["DifferentialTreeError", "InvalidPathError", "MultipleRootsError"]


class DifferentialTreeError(ValueError):
    """Base class for all differential-tree errors."""


class InvalidPathError(DifferentialTreeError):
    """A path is malformed, or a parent was requested for a root path.

    Attributes:
        path: The offending path value (may not be a string).
    """

    def __init__(self, path: Any, reason: str) -> None:
        self.path = path
        msg = f"Invalid path {path!r}: {reason}"
        super().__init__(msg)


class MultipleRootsError(DifferentialTreeError):
    """A second root-level path was found after the first element.

    Attributes:
        path:  The root path found mid-list.
        index: Its position in the working list.
    """

    def __init__(self, path: str, index: int) -> None:
        self.path = path
        self.index = index
        msg = f"Differential has multiple roots: {path!r} at position {index}"
        super().__init__(msg)
