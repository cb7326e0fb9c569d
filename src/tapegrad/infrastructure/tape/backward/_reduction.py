"""Backward rules for reductions."""

from ....domain._operation import Operation
from ...engine import array_module, ones
from .._backward_registry import BackwardOperation


@BackwardOperation.register(Operation.SUM)
def sum_backward(output, grad, a, keepdim):
    if a.requires_grad:
        a.diff(grad * ones(a.shape, like=grad))


@BackwardOperation.register(Operation.SUM_AXIS)
def sum_axis_backward(output, grad, a, axis, keepdim):
    if not a.requires_grad:
        return
    if not keepdim:
        grad = array_module(grad).expand_dims(grad, axis)
    a.diff(grad * ones(a.shape, like=grad))


@BackwardOperation.register(Operation.MEAN)
def mean_backward(output, grad, a):
    if a.requires_grad:
        n = max(int(a.value.size), 1)
        a.diff(grad * ones(a.shape, like=grad) / n)
