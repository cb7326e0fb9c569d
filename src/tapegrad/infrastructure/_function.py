"""
Recording `Function` subclasses as custom tape operations.

`Function.apply` runs a subclass's static `forward` on raw engine arrays and
records the result with `Tensor.operation`, so custom functions share the
tape, the graph printer and the `CustomBackward` dispatch path with
operations recorded directly through an `OperationContext`.

Usage example
-------------
    class Cube(Function):
        @staticmethod
        def forward(ctx, x):
            ctx.save_for_backward(x)
            return x**3

        @staticmethod
        def backward(ctx, grad_out):
            (x,) = ctx.saved_arrays
            return (3 * x**2 * grad_out,)

    y = Cube.apply(Tensor(2.0, requires_grad=True))
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from ..domain._errors import InvalidInputError
from ..domain._function import Function as _Function
from .tape import OperationContext
from .tensor._tensor import Tensor


def _push_gradients(grads: Any, tape_args: Sequence[Any]) -> None:
    if not isinstance(grads, (tuple, list)):
        grads = (grads,)
    for arg, g in zip(tape_args, grads):
        if g is not None and isinstance(arg, Tensor) and arg.requires_grad:
            arg.diff(g)


class Function(_Function):
    """
    Base class for custom differentiable functions.

    Subclasses implement `forward(ctx, *inputs)` and `backward(ctx, grad_out)`
    as static methods; `backward` returns one gradient (or None) per input.
    """

    @classmethod
    def apply(cls, *args: Any, name: Optional[str] = None) -> Tensor:
        """
        Run the function and record it on the gradient tape.

        Parameters
        ----------
        *args : Any
            Inputs. The first must be a Tensor; the output is placed on its
            device. Tensor inputs are passed to `forward` as arrays.
        name : str, optional
            Operation name, defaults to the class name.

        Returns
        -------
        Tensor
            The output, named ``out_<name>``.
        """
        if not args or not isinstance(args[0], Tensor):
            raise InvalidInputError(args[0] if args else None, op=name or cls.__name__)

        def forward_fn(ctx: OperationContext, *values: Any) -> Any:
            ctx.set_backward_function(
                lambda output, grad, *tape_args: _push_gradients(
                    cls.backward(ctx, grad), tape_args
                )
            )
            return cls.forward(ctx, *values)

        return args[0].operation(forward_fn, *args[1:], name=name or cls.__name__)
