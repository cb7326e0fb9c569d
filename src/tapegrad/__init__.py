"""
tapegrad: reverse-mode, tape-based automatic differentiation over NumPy
(host) and CuPy (accelerator) arrays.
"""

from .domain import (
    Device,
    Operation,
    InvalidInputError,
    ShapeMismatchError,
    NotScalarError,
    NoGradientError,
    NoComputableGradientError,
    UngradableOperationError,
    DeviceNotSupportedError,
    DeviceMismatchError,
)
from .infrastructure import (
    Tensor,
    Function,
    GradientTape,
    OperationContext,
    BackwardOperation,
    validate_operation_inputs,
    format_graph,
)
from . import nn

__version__ = "0.1.0"

__all__ = [
    Device.__name__,
    Operation.__name__,
    InvalidInputError.__name__,
    ShapeMismatchError.__name__,
    NotScalarError.__name__,
    NoGradientError.__name__,
    NoComputableGradientError.__name__,
    UngradableOperationError.__name__,
    DeviceNotSupportedError.__name__,
    DeviceMismatchError.__name__,
    Tensor.__name__,
    Function.__name__,
    GradientTape.__name__,
    OperationContext.__name__,
    BackwardOperation.__name__,
    validate_operation_inputs.__name__,
    format_graph.__name__,
    "nn",
]
