"""Square roots, absolute value and the logistic sigmoid."""

from __future__ import annotations

from ....domain._operation import Operation
from ._base import TensorMixinBase


class TensorMixinMathematical(TensorMixinBase):
    def sqrt(self, name: str = ""):
        return self._unary(Operation.SQRT, self._xp.sqrt, name)

    def rsqrt(self, name: str = ""):
        """Reciprocal square root ``1 / sqrt(x)``."""
        return self._unary(Operation.RSQRT, lambda a: 1 / self._xp.sqrt(a), name)

    def abs(self, name: str = ""):
        return self._unary(Operation.ABS, self._xp.abs, name)

    def __abs__(self):
        return self.abs()

    def sigmoid(self, name: str = ""):
        """
        Logistic sigmoid ``1 / (1 + exp(-x))``.

        Composed from recorded primitives, so it has no backward rule of its
        own.
        """
        out = 1.0 / (self.negative().exp() + 1.0)
        return out.set_name(name, self)
