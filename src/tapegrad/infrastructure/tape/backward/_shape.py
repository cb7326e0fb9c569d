"""Backward rules for reshaping and indexed reads."""

from ....domain._operation import Operation
from ...engine import scatter_add, zeros
from .._backward_registry import BackwardOperation


@BackwardOperation.register(Operation.RESHAPE)
def reshape_backward(output, grad, a, shape):
    if a.requires_grad:
        a.diff(grad.reshape(a.shape))


@BackwardOperation.register(Operation.OFFSET_GET)
def offset_get_backward(output, grad, source, index):
    # scatter the gradient back into the slot(s) that were read
    if source.requires_grad:
        full = zeros(source.shape, like=grad)
        scatter_add(full, index, grad)
        source.diff(full)
