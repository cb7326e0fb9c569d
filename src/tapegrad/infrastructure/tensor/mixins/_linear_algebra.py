"""
Linear algebra mixin.

Matrix operations follow NumPy's conventions: the last two axes hold the
matrix and leading axes are batch axes. Shapes are validated before any
output or tape entry is created; violations raise `ShapeMismatchError`.

Backward rules (see ``tape/backward/_linear_algebra.py``):

- ``matmul``: ``dA = g @ B^T``, ``dB = A^T @ g``
- ``det``: ``dA = g * det(A) * inv(A)^T``
- ``inv``: ``dA = -Y^T @ g @ Y^T``
- ``svd`` (singular values): ``dA = U diag(g) V^T``
- ``norm`` (Frobenius): ``dA = g * A / ||A||``
- ``matrix_rank`` and ``cond`` are treated as constants.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from ....domain._errors import ShapeMismatchError
from ....domain._operation import Operation
from ._base import TensorMixinBase


def _require_square(op: Operation, shape: tuple[int, ...]) -> None:
    if len(shape) < 2 or shape[-1] != shape[-2]:
        raise ShapeMismatchError(op.value, f"expected square matrices, got shape {shape}")


class TensorMixinLinearAlgebra(TensorMixinBase):
    def matmul(self, other: Any, name: str = ""):
        """
        Matrix product with NumPy ``matmul`` semantics.

        Raises
        ------
        ShapeMismatchError
            If an operand is 0-d, the inner dimensions differ or the batch
            dimensions do not broadcast.
        """
        a, b = self._operands(Operation.MATMUL, other)
        if a.ndim == 0 or b.ndim == 0:
            raise ShapeMismatchError("matmul", "operands must have at least one dimension")
        inner_b = b.shape[0] if b.ndim == 1 else b.shape[-2]
        if a.shape[-1] != inner_b:
            raise ShapeMismatchError(
                "matmul", f"inner dimensions differ: {a.shape} @ {b.shape}"
            )
        try:
            value = self._xp.matmul(a.value, b.value)
        except ValueError as e:
            raise ShapeMismatchError("matmul", str(e)) from e
        return self._from_operation(Operation.MATMUL, value, (a, b), name)

    def __matmul__(self, other: Any):
        return self.matmul(other)

    def __rmatmul__(self, other: Any):
        return self._lift(Operation.MATMUL, other).matmul(self)

    def dot(self, other: Any, name: str = ""):
        """
        Inner product of two 1-D tensors of equal length.

        Raises
        ------
        ShapeMismatchError
            If either operand is not 1-D or the lengths differ.
        """
        a, b = self._operands(Operation.DOT, other)
        if a.ndim != 1 or b.ndim != 1:
            raise ShapeMismatchError(
                "dot", f"both operands must be 1-D, got {a.shape} and {b.shape}"
            )
        if a.shape != b.shape:
            raise ShapeMismatchError("dot", f"length mismatch: {a.shape} vs {b.shape}")
        return self._from_operation(Operation.DOT, self._xp.dot(a.value, b.value), (a, b), name)

    def outer(self, other: Any, name: str = ""):
        """Outer product ``out[i, j] = self[i] * other[j]`` of two vectors."""
        a, b = self._operands(Operation.OUTER, other)
        if a.ndim > 1 or b.ndim > 1:
            raise ShapeMismatchError(
                "outer", f"operands must be vectors or scalars, got {a.shape} and {b.shape}"
            )
        return self._from_operation(Operation.OUTER, self._xp.outer(a.value, b.value), (a, b), name)

    def det(self, name: str = ""):
        _require_square(Operation.DET, self.shape)
        return self._unary(Operation.DET, self._xp.linalg.det, name)

    def inv(self, name: str = ""):
        """
        Matrix inverse.

        Raises
        ------
        ShapeMismatchError
            If the matrix is not square.
        numpy.linalg.LinAlgError
            If the matrix is singular.
        """
        _require_square(Operation.INV, self.shape)
        return self._unary(Operation.INV, self._xp.linalg.inv, name)

    def svd(self, name: str = ""):
        """Singular values of a (batch of) matrix, in descending order."""
        if self.ndim < 2:
            raise ShapeMismatchError("svd", f"expected a matrix, got shape {self.shape}")
        return self._unary(
            Operation.SVD, lambda a: self._xp.linalg.svd(a, compute_uv=False), name
        )

    def norm(self, name: str = ""):
        """Frobenius norm over all elements (the 2-norm for vectors)."""
        return self._unary(Operation.NORM, lambda a: self._xp.sqrt(self._xp.sum(a * a)), name)

    def matrix_rank(self, name: str = ""):
        return self._unary(Operation.MATRIX_RANK, self._xp.linalg.matrix_rank, name)

    def cond(self, name: str = ""):
        """2-norm condition number: largest over smallest singular value."""
        if self.ndim < 2:
            raise ShapeMismatchError("cond", f"expected a matrix, got shape {self.shape}")

        def _cond(a):
            s = self._xp.linalg.svd(a, compute_uv=False)
            return s[..., 0] / s[..., -1]

        return self._unary(Operation.COND, _cond, name)

    def transpose(self, axes: Optional[Sequence[int]] = None, name: str = ""):
        """Permute axes; reverses them when `axes` is None."""
        axes = None if axes is None else tuple(int(ax) for ax in axes)
        value = self._xp.transpose(self._value, axes)
        return self._from_operation(Operation.TRANSPOSE, value, (self, axes), name)

    @property
    def T(self):
        return self.transpose()
