"""
Backward rules for elementwise arithmetic.

Gradients are pushed at the output's (broadcast) shape; `Tensor.diff`
reduces them back to each operand's own shape.
"""

from ....domain._operation import Operation
from ...engine import array_module, zeros
from .._backward_registry import BackwardOperation


@BackwardOperation.register(Operation.ADD)
def add_backward(output, grad, a, b):
    # d(a + b)/da = 1, d(a + b)/db = 1
    if a.requires_grad:
        a.diff(grad)
    if b.requires_grad:
        b.diff(grad)


@BackwardOperation.register(Operation.SUBTRACT)
def subtract_backward(output, grad, a, b):
    if a.requires_grad:
        a.diff(grad)
    if b.requires_grad:
        b.diff(-grad)


@BackwardOperation.register(Operation.MULTIPLY)
def multiply_backward(output, grad, a, b):
    if a.requires_grad:
        a.diff(grad * b.value)
    if b.requires_grad:
        b.diff(a.value * grad)


@BackwardOperation.register(Operation.DIVIDE)
def divide_backward(output, grad, a, b):
    # d(a / b)/da = 1 / b, d(a / b)/db = -a / b^2
    if a.requires_grad:
        a.diff(grad / b.value)
    if b.requires_grad:
        b.diff(-grad * a.value / (b.value**2))


@BackwardOperation.register(Operation.POWER)
def power_backward(output, grad, a, b):
    xp = array_module(grad)
    if a.requires_grad:
        a.diff(grad * b.value * a.value ** (b.value - 1))
    if b.requires_grad:
        b.diff(grad * output.value * xp.log(a.value))


@BackwardOperation.register(Operation.MOD)
def mod_backward(output, grad, x, y):
    if x.requires_grad:
        x.diff(grad)
    if y.requires_grad:
        y.diff(zeros(y.shape, like=grad))


@BackwardOperation.register(Operation.NEGATIVE)
def negative_backward(output, grad, a):
    if a.requires_grad:
        a.diff(-grad)
