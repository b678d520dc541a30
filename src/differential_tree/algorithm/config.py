"""TreeConfig: configuration for differential tree construction.

TreeConfig is a frozen (immutable) dataclass holding the path
segmentation parameters shared by the constructor and the tree checks.
"""

from __future__ import annotations

from dataclasses import dataclass

from differential_tree.tree.paths import DEFAULT_DELIMITER, PathNavigator, validate_delimiter


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Immutable configuration for the tree constructor.

    Attributes:
        delimiter:  Single, non-whitespace character separating path
            segments.  Default ".".
        cache_size: Capacity of the navigator's segment cache (>= 1).
    """

    delimiter: str = DEFAULT_DELIMITER
    cache_size: int = 1024

    def __post_init__(self) -> None:
        validate_delimiter(self.delimiter)
        if self.cache_size < 1:
            msg = f"cache_size must be >= 1, got {self.cache_size}"
            raise ValueError(msg)

    def navigator(self) -> PathNavigator:
        """Build a fresh PathNavigator for this configuration."""
        return PathNavigator(self.delimiter, cache_size=self.cache_size)
