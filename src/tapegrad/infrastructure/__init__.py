from .tensor import Tensor, validate_operation_inputs
from .tape import (
    GradientTape,
    OperationContext,
    BackwardOperation,
    RegisteredBackward,
    CustomBackward,
    format_graph,
    print_graph,
)
from ._function import Function
from . import nn

__all__ = [
    Tensor.__name__,
    validate_operation_inputs.__name__,
    GradientTape.__name__,
    OperationContext.__name__,
    BackwardOperation.__name__,
    RegisteredBackward.__name__,
    CustomBackward.__name__,
    format_graph.__name__,
    print_graph.__name__,
    Function.__name__,
    "nn",
]
