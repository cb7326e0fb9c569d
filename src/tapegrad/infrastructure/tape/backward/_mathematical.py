"""Backward rules for square roots and absolute value."""

from ....domain._operation import Operation
from ...engine import array_module
from .._backward_registry import BackwardOperation


@BackwardOperation.register(Operation.SQRT)
def sqrt_backward(output, grad, a):
    # d(sqrt(a))/da = 1 / (2 * sqrt(a))
    if a.requires_grad:
        a.diff(grad / (2 * output.value))


@BackwardOperation.register(Operation.RSQRT)
def rsqrt_backward(output, grad, a):
    # d(a^-1/2)/da = -1/2 * a^-3/2 = -1/2 * y^3
    if a.requires_grad:
        a.diff(-0.5 * grad * output.value**3)


@BackwardOperation.register(Operation.ABS)
def abs_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad * array_module(grad).sign(a.value))
