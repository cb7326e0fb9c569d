"""Backward rules for exponentials and logarithms."""

import math

from ....domain._operation import Operation
from .._backward_registry import BackwardOperation


@BackwardOperation.register(Operation.EXP)
def exp_backward(output, grad, a):
    # d(exp(a))/da = exp(a) = y
    if a.requires_grad:
        a.diff(grad * output.value)


@BackwardOperation.register(Operation.EXP2)
def exp2_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad * output.value * math.log(2.0))


@BackwardOperation.register(Operation.EXPM1)
def expm1_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad * (output.value + 1))


@BackwardOperation.register(Operation.LOG)
def log_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad / a.value)


@BackwardOperation.register(Operation.LOG1P)
def log1p_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad / (a.value + 1))


@BackwardOperation.register(Operation.LOG2)
def log2_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad / (a.value * math.log(2.0)))


@BackwardOperation.register(Operation.LOG10)
def log10_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad / (a.value * math.log(10.0)))
