"""
Backward rules for linear algebra.

Matrix operands follow NumPy's conventions: the last two axes are the
matrix axes and any leading axes are batch axes. 1-D `matmul` operands are
promoted to matrices for the computation and demoted again before the
gradient is pushed.
"""

from ....domain._operation import Operation
from ...engine import array_module, zeros
from .._backward_registry import BackwardOperation


def _mT(x):
    return x.swapaxes(-1, -2)


@BackwardOperation.register(Operation.MATMUL)
def matmul_backward(output, grad, a, b):
    # dL/dA = g @ B^T, dL/dB = A^T @ g
    A, B = a.value, b.value

    if A.ndim == 1 and B.ndim == 1:
        if a.requires_grad:
            a.diff(grad * B)
        if b.requires_grad:
            b.diff(grad * A)
        return

    xp = array_module(grad)
    A2 = A[None, :] if A.ndim == 1 else A
    B2 = B[:, None] if B.ndim == 1 else B
    g2 = grad
    if A.ndim == 1:
        g2 = xp.expand_dims(g2, -2)
    if B.ndim == 1:
        g2 = xp.expand_dims(g2, -1)

    if a.requires_grad:
        grad_a = xp.matmul(g2, _mT(B2))
        if A.ndim == 1:
            grad_a = grad_a[..., 0, :]
        a.diff(grad_a)
    if b.requires_grad:
        grad_b = xp.matmul(_mT(A2), g2)
        if B.ndim == 1:
            grad_b = grad_b[..., 0]
        b.diff(grad_b)


@BackwardOperation.register(Operation.DOT)
def dot_backward(output, grad, a, b):
    if a.requires_grad:
        a.diff(grad * b.value)
    if b.requires_grad:
        b.diff(grad * a.value)


@BackwardOperation.register(Operation.OUTER)
def outer_backward(output, grad, x, y):
    # out[i, j] = x[i] * y[j]
    if x.requires_grad:
        x.diff((grad @ y.value.ravel()).reshape(x.shape))
    if y.requires_grad:
        y.diff((_mT(grad) @ x.value.ravel()).reshape(y.shape))


@BackwardOperation.register(Operation.DET)
def det_backward(output, grad, a):
    # d det(A)/dA = det(A) * inv(A)^T
    if not a.requires_grad:
        return
    xp = array_module(grad)
    scale = (grad * output.value)[..., None, None]
    a.diff(scale * _mT(xp.linalg.inv(a.value)))


@BackwardOperation.register(Operation.INV)
def inv_backward(output, grad, a):
    # d inv(A) = -inv(A) dA inv(A)  =>  dL/dA = -Y^T g Y^T
    if a.requires_grad:
        y_t = _mT(output.value)
        a.diff(-(y_t @ grad @ y_t))


@BackwardOperation.register(Operation.SVD)
def svd_backward(output, grad, a):
    # singular values only: dL/dA = U diag(g) V^T
    if not a.requires_grad:
        return
    xp = array_module(grad)
    u, _, vh = xp.linalg.svd(a.value, full_matrices=False)
    a.diff(u @ (grad[..., :, None] * vh))


@BackwardOperation.register(Operation.NORM)
def norm_backward(output, grad, a):
    # d ||A||_F / dA = A / ||A||_F, taken as 0 when the norm is 0
    if not a.requires_grad:
        return
    xp = array_module(grad)
    y = output.value
    safe = xp.where(y == 0, 1, y)
    a.diff(xp.where(y == 0, 0, grad * a.value / safe))


@BackwardOperation.register(Operation.TRANSPOSE)
def transpose_backward(output, grad, a, axes):
    if not a.requires_grad:
        return
    xp = array_module(grad)
    if axes is None:
        a.diff(xp.transpose(grad))
        return
    inverse = [0] * len(axes)
    for i, ax in enumerate(axes):
        inverse[ax % len(axes)] = i
    a.diff(xp.transpose(grad, inverse))


def _zero_backward(output, grad, a, *params):
    if a.requires_grad:
        a.diff(zeros(a.shape, like=grad))


for _op in (Operation.MATRIX_RANK, Operation.COND):
    BackwardOperation.register(_op)(_zero_backward)
