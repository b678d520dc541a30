"""DifferentialTreeConstructor: fills in ancestors a differential skipped.

Differentials may jump straight from ``Patient`` to
``Patient.contact.name.given``.  Downstream processing is simpler when
every intermediate node is present, so this module inserts synthetic
stand-ins for the skipped ancestors.  The stand-ins carry no payload and
are flagged ``synthetic=True``; they must not influence any merge of
payload semantics.

Algorithm (single left-to-right pass over a working copy)::

    i = 0
    while i < len(elements):
        current, previous = elements[i].path, elements[i-1].path (or None)
        root current                  -> i must be 0, else MultipleRootsError
        sibling / child of previous   -> i += 1
        previous under parent(current)-> i += 1   (ancestor already present)
        otherwise                     -> insert parent(current) at i, keep i

Insertion never advances the cursor: the freshly inserted parent is
checked against its own predecessor on the next iteration, so a gap of
several levels is closed one level per iteration.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Generic, TypeVar

from differential_tree.algorithm.config import TreeConfig
from differential_tree.errors import MultipleRootsError
from differential_tree.protocols import DeepCopier
from differential_tree.tree.elements import Differential, DifferentialElement

if TYPE_CHECKING:
    from differential_tree.protocols import PayloadCopier

__all__ = ["DifferentialTreeConstructor"]

logger = logging.getLogger(__name__)

P = TypeVar("P")


class DifferentialTreeConstructor(Generic[P]):
    """Builds a structurally complete copy of a differential.

    The source is never modified: ``make_tree()`` copies every element
    (payloads through the configured ``PayloadCopier``) and performs all
    insertions on that copy.

    Example::

        source = [
            DifferentialElement("Patient"),
            DifferentialElement("Patient.name.given", payload=rule),
        ]
        tree = DifferentialTreeConstructor(source).make_tree()
        tree.paths()   # ["Patient", "Patient.name", "Patient.name.given"]

    Args:
        source: A ``Differential`` or any sequence of ``DifferentialElement``.
        config: Path segmentation settings.  Defaults to ``TreeConfig()``.
        copier: Payload cloning strategy.  Defaults to ``DeepCopier()``.
    """

    def __init__(
        self,
        source: Differential[P] | Sequence[DifferentialElement[P]],
        config: TreeConfig | None = None,
        copier: PayloadCopier | None = None,
    ) -> None:
        self._source = source
        self._config = config if config is not None else TreeConfig()
        self._copier = copier if copier is not None else DeepCopier()
        self._navigator = self._config.navigator()
        self._inserted: list[str] = []

    @property
    def config(self) -> TreeConfig:
        return self._config

    @property
    def inserted_paths(self) -> list[str]:
        """Synthetic paths added by the most recent ``make_tree()``, in insertion order."""
        return list(self._inserted)

    def _copy_source(self) -> Differential[P]:
        if isinstance(self._source, Differential):
            name = self._source.name
            elements = self._source.elements
        else:
            name = None
            elements = self._source

        copied = [
            DifferentialElement(
                path=element.path,
                payload=None if element.payload is None else self._copier.copy(element.payload),
                synthetic=element.synthetic,
            )
            for element in elements
        ]
        return Differential(elements=copied, name=name)

    def make_tree(self) -> Differential[P]:
        """Return a new differential with every skipped parent filled in.

        Returns:
            A ``Differential`` whose elements satisfy the tree adjacency rule:
            each element after the first is a sibling of its predecessor, a
            direct child of it, or has its parent among its predecessor's
            ancestors.

        Raises:
            MultipleRootsError: If a root path appears anywhere but first.
            InvalidPathError:   If any path is malformed.
        """
        self._inserted = []
        diff = self._copy_source()
        elements = diff.elements
        if not elements:
            return diff

        nav = self._navigator
        index = 0
        while index < len(elements):
            current = nav.validate(elements[index].path)
            previous = elements[index - 1].path if index > 0 else None

            if nav.is_root(current):
                if index != 0:
                    raise MultipleRootsError(current, index)
                index += 1
            elif nav.is_sibling(current, previous) or nav.is_direct_child(previous, current):
                index += 1
            else:
                parent = nav.parent_path(current)
                if nav.is_ancestor(parent, previous):
                    # previous already descends from parent, so parent was placed earlier
                    index += 1
                else:
                    elements.insert(index, DifferentialElement.placeholder(parent))
                    self._inserted.append(parent)
                    logger.debug("Inserted synthetic parent %r before %r", parent, current)

        logger.debug(
            "Built differential tree %r: %d elements, %d synthetic",
            diff.name,
            len(elements),
            len(self._inserted),
        )
        return diff
