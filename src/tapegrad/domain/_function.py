"""
Custom autograd function interface definitions.

This module defines the abstract base class for caller-defined
differentiable operations. Concrete subclasses of `Function` implement both
the forward computation on raw engine arrays and the corresponding backward
gradient computation.

This design is inspired by function-level autograd systems (e.g., PyTorch's
`autograd.Function`) while remaining lightweight and framework-agnostic.
The infrastructure layer provides `apply`, which records a subclass as a
custom operation on the gradient tape.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence


class Function(ABC):
    """
    Abstract base class for custom differentiable operations.

    Subclasses must implement both `forward` and `backward` as static
    methods. Any intermediate values required for gradient computation
    should be stored on the provided `ctx` object during the forward pass.

    Notes
    -----
    - Methods are declared as `@staticmethod` to avoid implicit state on the
      function object itself.
    - The `ctx` argument is a per-invocation operation context, allowing safe
      reuse of `Function` classes across multiple computation graphs.
    """

    @staticmethod
    @abstractmethod
    def forward(ctx, *inputs: Any) -> Any:
        """
        Perform the forward computation.

        Parameters
        ----------
        ctx : OperationContext
            A mutable context object used to store intermediate values
            required for gradient computation.
        *inputs : Any
            Engine arrays for operand inputs, other arguments unchanged.

        Returns
        -------
        Any
            The output value (engine array or scalar).
        """
        ...

    @staticmethod
    @abstractmethod
    def backward(ctx, grad_out: Any) -> Sequence[Optional[Any]]:
        """
        Compute gradients with respect to the inputs.

        Parameters
        ----------
        ctx : OperationContext
            The context object populated during the forward pass.
        grad_out : Any
            Gradient of the loss with respect to the output value.

        Returns
        -------
        tuple[Any | None, ...]
            Gradients with respect to each input passed to `forward`, in
            order. Entries may be None for inputs that are not operands or do
            not require gradients.
        """
        ...
