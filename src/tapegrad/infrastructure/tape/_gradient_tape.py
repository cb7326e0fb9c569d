"""
Tape entries.

A `GradientTape` is attached to the output of every recorded operation. It
remembers which operation produced the output and the arguments it was
called with, and dispatches the output's upstream gradient to the matching
backward rule.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from ...domain._backward_rule import BackwardRule
from ...domain._operation import Operation
from ._backward_registry import BackwardOperation
from ._operation_context import OperationContext


class GradientTape:
    """
    Record of a single forward operation.

    Parameters
    ----------
    operation : Operation or str
        Catalogue member, or the name of an operation outside the catalogue
        (custom operations are recorded under their context's name).
    args : Sequence[Any]
        Forward arguments in call order. Operand arguments take part in the
        backward pass; anything else is an opaque forward parameter.
    context : OperationContext, optional
        Context carrying a caller-supplied backward function.
    """

    __slots__ = ("operation", "args", "context")

    def __init__(
        self,
        operation: Operation | str,
        args: Sequence[Any],
        context: Optional[OperationContext] = None,
    ) -> None:
        self.operation = Operation.lookup(operation) or str(operation)
        self.args = tuple(args)
        self.context = context

    @property
    def name(self) -> str:
        """Operation name, as shown by the graph printer."""
        return str(self.operation)

    def rule(self) -> BackwardRule:
        """Return the backward rule this entry dispatches to."""
        return BackwardOperation.resolve(self.operation, self.context)

    def diff(self, output: Any, grad: Any) -> None:
        """
        Propagate `grad` from `output` into the recorded arguments.

        Parameters
        ----------
        output : Tensor
            The tensor this entry is attached to.
        grad : numpy.ndarray or cupy.ndarray
            Upstream gradient, already reduced to ``output.shape``.
        """
        self.rule().apply(output, grad, *self.args)

    def __repr__(self) -> str:
        return f"GradientTape({self.name!r}, nargs={len(self.args)})"
