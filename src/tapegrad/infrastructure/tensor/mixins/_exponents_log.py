"""Exponential and logarithm mixin."""

from __future__ import annotations

from ....domain._operation import Operation
from ._base import TensorMixinBase


class TensorMixinExponentsLog(TensorMixinBase):
    """
    Elementwise exponentials and logarithms.

    Logarithms of non-positive values follow NumPy (NaN or -inf with a
    RuntimeWarning from the array module).
    """

    def exp(self, name: str = ""):
        return self._unary(Operation.EXP, self._xp.exp, name)

    def exp2(self, name: str = ""):
        return self._unary(Operation.EXP2, self._xp.exp2, name)

    def expm1(self, name: str = ""):
        """Compute ``exp(x) - 1`` accurately for small ``x``."""
        return self._unary(Operation.EXPM1, self._xp.expm1, name)

    def log(self, name: str = ""):
        return self._unary(Operation.LOG, self._xp.log, name)

    def log1p(self, name: str = ""):
        """Compute ``log(1 + x)`` accurately for small ``x``."""
        return self._unary(Operation.LOG1P, self._xp.log1p, name)

    def log2(self, name: str = ""):
        return self._unary(Operation.LOG2, self._xp.log2, name)

    def log10(self, name: str = ""):
        return self._unary(Operation.LOG10, self._xp.log10, name)
