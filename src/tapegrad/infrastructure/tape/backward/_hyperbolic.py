"""Backward rules for hyperbolic functions and arctan2."""

from ....domain._operation import Operation
from ...engine import array_module
from .._backward_registry import BackwardOperation


@BackwardOperation.register(Operation.SINH)
def sinh_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad * array_module(grad).cosh(a.value))


@BackwardOperation.register(Operation.COSH)
def cosh_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad * array_module(grad).sinh(a.value))


@BackwardOperation.register(Operation.TANH)
def tanh_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad * (1 - output.value**2))


@BackwardOperation.register(Operation.ASINH)
def asinh_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad / array_module(grad).sqrt(a.value**2 + 1))


@BackwardOperation.register(Operation.ACOSH)
def acosh_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad / array_module(grad).sqrt(a.value**2 - 1))


@BackwardOperation.register(Operation.ATANH)
def atanh_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad / (1 - a.value**2))


@BackwardOperation.register(Operation.ARCTAN2)
def arctan2_backward(output, grad, a, b):
    # d/da atan2(a, b) = b / (a^2 + b^2), d/db = -a / (a^2 + b^2)
    denom = a.value**2 + b.value**2
    if a.requires_grad:
        a.diff(grad * b.value / denom)
    if b.requires_grad:
        b.diff(-grad * a.value / denom)
