from typing import Any, Callable, Optional
from dataclasses import dataclass, field


@dataclass
class OperationContext:
    """
    Backward context attached to the output of a custom operation.

    An `OperationContext` names a caller-defined operation and carries the
    function that differentiates it. It is created before the forward
    function runs, so the forward function may install the backward function
    and stash intermediates on it.

    Attributes
    ----------
    name : str
        Operation name shown by the graph printer. The output of
        `Tensor.operation` is named ``out_<name>``.
    backward_function : Callable, optional
        Called as ``backward_function(output, grad, *tape_args)`` whenever
        the output is visited by a backward pass. It is responsible for
        calling `diff` on the operand arguments.
    saved_arrays : list
        Arrays explicitly saved during the forward pass.
    saved_meta : dict[str, Any]
        Non-array metadata required for backward (e.g. shapes, axes).
    """

    name: str = "custom_operation"
    backward_function: Optional[Callable[..., None]] = None
    saved_arrays: list = field(default_factory=list)
    saved_meta: dict[str, Any] = field(default_factory=dict)

    def set_backward_function(self, fn: Callable[..., None]) -> "OperationContext":
        """
        Install the function that differentiates this operation.

        Parameters
        ----------
        fn : Callable
            ``fn(output, grad, *tape_args) -> None``.

        Returns
        -------
        OperationContext
            This context, to allow chaining.
        """
        if not callable(fn):
            raise TypeError(f"backward function must be callable, got {type(fn).__name__}")
        self.backward_function = fn
        return self

    def get_backward_function(self) -> Optional[Callable[..., None]]:
        return self.backward_function

    def set_name(self, name: str) -> "OperationContext":
        self.name = str(name)
        return self

    def save_for_backward(self, *arrays: Any) -> None:
        """
        Save arrays for use during the backward computation.

        Parameters
        ----------
        *arrays : Any
            Any number of arrays to be stored in `saved_arrays`.
        """
        self.saved_arrays.extend(arrays)
