from ._errors import (
    InvalidInputError,
    ShapeMismatchError,
    NotScalarError,
    NoGradientError,
    NoComputableGradientError,
    UngradableOperationError,
    DeviceNotSupportedError,
    DeviceMismatchError,
)
from ._operation import Operation
from ._operand import IOperand
from ._backward_rule import BackwardRule
from ._function import Function
from .device import Device, DeviceType, DeviceLike

__all__ = [
    InvalidInputError.__name__,
    ShapeMismatchError.__name__,
    NotScalarError.__name__,
    NoGradientError.__name__,
    NoComputableGradientError.__name__,
    UngradableOperationError.__name__,
    DeviceNotSupportedError.__name__,
    DeviceMismatchError.__name__,
    Operation.__name__,
    IOperand.__name__,
    BackwardRule.__name__,
    Function.__name__,
    Device.__name__,
    DeviceType.__name__,
    DeviceLike.__name__,
]
