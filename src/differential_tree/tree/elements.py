"""DifferentialElement and Differential: the data carried through normalization.

A differential is an ordered list of path-addressed elements whose order
encodes a pre-order walk of the tree.  Each element holds an opaque,
domain-owned payload; the tree code only ever looks at ``path``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

__all__ = ["Differential", "DifferentialElement"]

P = TypeVar("P")


@dataclass(frozen=True, slots=True)
class DifferentialElement(Generic[P]):
    """One path-addressed entry of a differential.

    Attributes:
        path:      Delimiter-segmented path, e.g. "Patient.name.given".
        payload:   Opaque domain value.  None for synthetic placeholders.
        synthetic: True only for elements inserted to fill an ancestor gap.
                   Consumers merging payload semantics must skip these.
    """

    path: str
    payload: P | None = None
    synthetic: bool = False

    @classmethod
    def placeholder(cls, path: str) -> DifferentialElement[P]:
        """Build a synthetic stand-in for a skipped ancestor."""
        return cls(path=path, payload=None, synthetic=True)


@dataclass(slots=True)
class Differential(Generic[P]):
    """A named, ordered container of DifferentialElement.

    Attributes:
        elements: Elements in pre-order.  Must use field(default_factory=list)
                  so each instance gets its own independent list.
        name:     Optional label (e.g. the profile the differential belongs
                  to).  Carried through normalization unchanged.
    """

    elements: list[DifferentialElement[P]] = field(default_factory=list)
    name: str | None = None

    def __len__(self) -> int:
        return len(self.elements)

    def paths(self) -> list[str]:
        return [element.path for element in self.elements]

    def semantic_elements(self) -> list[DifferentialElement[P]]:
        """Elements that came from the original input, in order."""
        return [element for element in self.elements if not element.synthetic]

    def synthetic_elements(self) -> list[DifferentialElement[P]]:
        return [element for element in self.elements if element.synthetic]
