"""
Backward rules for clipping and rounding.

Rounding functions are piecewise constant, so their inputs receive a zero
gradient. Clip bounds are treated as constants.
"""

from ....domain._operation import Operation
from ...engine import zeros
from .._backward_registry import BackwardOperation


@BackwardOperation.register(Operation.CLIP)
def clip_backward(output, grad, a, low, high):
    if a.requires_grad:
        mask = (a.value >= low.value) & (a.value <= high.value)
        a.diff(grad * mask)
    for bound in (low, high):
        if bound.requires_grad:
            bound.diff(zeros(bound.shape, like=grad))


def _zero_backward(output, grad, a, *params):
    if a.requires_grad:
        a.diff(zeros(a.shape, like=grad))


for _op in (Operation.TRUNC, Operation.FLOOR, Operation.CEIL):
    BackwardOperation.register(_op)(_zero_backward)
