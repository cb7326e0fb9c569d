"""
Operand interface definitions.

This module defines the domain-level interface for differentiable operands
using structural typing. An operand wraps an engine array value and carries
the provenance needed by the tape-based autograd engine: a name for
diagnostics, a `requires_grad` flag, a gradient accumulator and at most one
tape entry describing the operation that produced it.

Notes
-----
The protocol only describes the surface that tape entries and backward
rules rely on. The concrete `Tensor` exposes a much wider operation API.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from .device._device_protocol import DeviceLike
from .types import NDArrayLike


@runtime_checkable
class IOperand(Protocol):
    """
    Differentiable operand interface.

    Backward rules receive operands through tape entries and only ever read
    their values and push gradients into them through `diff`.
    """

    @property
    def value(self) -> NDArrayLike:
        """
        Return the engine array held by the operand.

        Returns
        -------
        NDArrayLike
            The forward value (a 0-d array for scalars).
        """
        ...

    @property
    def name(self) -> str:
        """Diagnostic label used by the graph printer."""
        ...

    @property
    def shape(self) -> tuple[int, ...]: ...

    @property
    def device(self) -> DeviceLike: ...

    @property
    def requires_grad(self) -> bool:
        """
        Whether gradients are accumulated into this operand.

        Returns
        -------
        bool
            False prunes the backward traversal at this operand.
        """
        ...

    @property
    def gradient(self) -> Optional[NDArrayLike]:
        """Accumulated gradient, or None before any backward pass reached it."""
        ...

    @property
    def tape(self) -> Optional[Any]:
        """The tape entry describing how this operand was produced, if any."""
        ...

    def diff(self, grad: Any = None) -> None:
        """
        Accumulate `grad` and propagate it through the operand's tape entry.

        Parameters
        ----------
        grad : Any, optional
            Upstream gradient. Defaults to ones shaped like the value.
        """
        ...

    def register_operation(
        self, operation: Any, args: Sequence[Any], context: Any = None
    ) -> "IOperand": ...
