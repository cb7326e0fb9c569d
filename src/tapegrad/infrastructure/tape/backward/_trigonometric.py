"""Backward rules for trigonometric functions."""

import math

from ....domain._operation import Operation
from ...engine import array_module
from .._backward_registry import BackwardOperation


@BackwardOperation.register(Operation.SIN)
def sin_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad * array_module(grad).cos(a.value))


@BackwardOperation.register(Operation.COS)
def cos_backward(output, grad, a):
    if a.requires_grad:
        a.diff(-grad * array_module(grad).sin(a.value))


@BackwardOperation.register(Operation.TAN)
def tan_backward(output, grad, a):
    # sec^2(a) = 1 + tan^2(a)
    if a.requires_grad:
        a.diff(grad * (1 + output.value**2))


@BackwardOperation.register(Operation.ASIN)
def asin_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad / array_module(grad).sqrt(1 - a.value**2))


@BackwardOperation.register(Operation.ACOS)
def acos_backward(output, grad, a):
    if a.requires_grad:
        a.diff(-grad / array_module(grad).sqrt(1 - a.value**2))


@BackwardOperation.register(Operation.ATAN)
def atan_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad / (a.value**2 + 1))


@BackwardOperation.register(Operation.RADIANS)
def radians_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad * (math.pi / 180.0))


@BackwardOperation.register(Operation.SINC)
def sinc_backward(output, grad, a):
    # sinc(x) = sin(pi x) / (pi x); the derivative is 0 at x = 0
    if not a.requires_grad:
        return
    xp = array_module(grad)
    x = a.value
    at_zero = x == 0
    safe = xp.where(at_zero, 1, x)
    px = math.pi * safe
    local = (px * xp.cos(px) - xp.sin(px)) / (math.pi * safe**2)
    a.diff(grad * xp.where(at_zero, 0, local))
