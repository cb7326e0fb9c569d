"""
Backward rules for neural-network primitives.

`binary_cross_entropy` and `cce` average over the batch like their forward
passes, so their gradients carry the same ``1 / N`` factor.
"""

from ....domain._operation import Operation
from ...engine import array_module
from ...ops.conv2d import conv2d_backward
from .._backward_registry import BackwardOperation


@BackwardOperation.register(Operation.RELU)
def relu_backward(output, grad, a):
    if a.requires_grad:
        a.diff(grad * (a.value > 0))


@BackwardOperation.register(Operation.SELU)
def selu_backward(output, grad, a, alpha, scale):
    if not a.requires_grad:
        return
    xp = array_module(grad)
    x = a.value
    local = xp.where(x > 0, 1.0, alpha * xp.exp(x))
    a.diff(grad * scale * local)


@BackwardOperation.register(Operation.CELU)
def celu_backward(output, grad, a, alpha):
    if not a.requires_grad:
        return
    xp = array_module(grad)
    x = a.value
    a.diff(xp.where(x > 0, grad, grad * xp.exp(x / alpha)))


@BackwardOperation.register(Operation.BINARY_CROSS_ENTROPY)
def binary_cross_entropy_backward(output, grad, x, y, epsilon, reduction):
    xp = array_module(grad)
    p, t = x.value, y.value
    n = p.size if reduction == "mean" else 1
    if x.requires_grad:
        denom = xp.maximum(p * (1 - p), epsilon)
        x.diff(grad * (p - t) / denom / n)
    if y.requires_grad:
        y.diff(-grad * xp.log(p / (1 - p)) / n)


@BackwardOperation.register(Operation.CCE)
def cce_backward(output, grad, true, pred, epsilon):
    xp = array_module(grad)
    p = pred.value
    clipped = xp.clip(p, epsilon, 1 - epsilon)
    n = p.shape[0] if p.ndim > 1 else 1
    if pred.requires_grad:
        inside = (p >= epsilon) & (p <= 1 - epsilon)
        pred.diff(-grad * true.value / clipped / n * inside)
    if true.requires_grad:
        true.diff(-grad * xp.log(clipped) / n)


@BackwardOperation.register(Operation.CONV2D)
def conv2d_backward_rule(output, grad, inputs, filters, strides, padding):
    if not (inputs.requires_grad or filters.requires_grad):
        return
    grad_x, grad_w = conv2d_backward(inputs.value, filters.value, grad, strides, padding)
    if inputs.requires_grad:
        inputs.diff(grad_x)
    if filters.requires_grad:
        filters.diff(grad_w)
