"""PayloadCopier Protocol: how element payloads are cloned into the output.

The tree constructor never inspects payloads, but it must hand back a
list that is independent of its input.  How a payload is cloned is the
caller's business, so it is injected as any object with a conformant
``copy`` method — no inheritance required.

Example::

    from differential_tree.protocols import PayloadCopier

    class RecordCopier:
        def copy(self, payload: Record) -> Record:
            return payload.clone()

    assert isinstance(RecordCopier(), PayloadCopier)  # True — structural conformance
"""

from __future__ import annotations

import copy as _copy
from typing import Any, Protocol, runtime_checkable

__all__ = ["DeepCopier", "IdentityCopier", "PayloadCopier"]


@runtime_checkable
class PayloadCopier(Protocol):
    """Structural protocol for payload cloning strategies.

    ``copy`` receives a payload that is never None and must return a value
    the caller may mutate without affecting the original.
    """

    def copy(self, payload: Any) -> Any: ...


class DeepCopier:
    """Default copier: ``copy.deepcopy`` of every payload."""

    def copy(self, payload: Any) -> Any:
        return _copy.deepcopy(payload)


class IdentityCopier:
    """Shares payload objects between input and output.

    Use when payloads are immutable, or when the caller guarantees it will
    not mutate them.  Elements themselves are still new objects.
    """

    def copy(self, payload: Any) -> Any:
        return payload
