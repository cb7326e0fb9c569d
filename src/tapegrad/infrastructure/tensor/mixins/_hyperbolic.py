"""Hyperbolic mixin, plus the two-argument arctangent."""

from __future__ import annotations

from typing import Any

from ....domain._operation import Operation
from ._base import TensorMixinBase


class TensorMixinHyperbolic(TensorMixinBase):
    def sinh(self, name: str = ""):
        return self._unary(Operation.SINH, self._xp.sinh, name)

    def cosh(self, name: str = ""):
        return self._unary(Operation.COSH, self._xp.cosh, name)

    def tanh(self, name: str = ""):
        return self._unary(Operation.TANH, self._xp.tanh, name)

    def asinh(self, name: str = ""):
        return self._unary(Operation.ASINH, self._xp.arcsinh, name)

    def acosh(self, name: str = ""):
        return self._unary(Operation.ACOSH, self._xp.arccosh, name)

    def atanh(self, name: str = ""):
        return self._unary(Operation.ATANH, self._xp.arctanh, name)

    def arctan2(self, other: Any, name: str = ""):
        """
        Elementwise ``atan2(self, other)``, choosing the quadrant correctly.

        Parameters
        ----------
        other : Any
            The x-coordinates; `self` holds the y-coordinates.
        """
        return self._binary(Operation.ARCTAN2, self._xp.arctan2, other, name)

    arcsinh = asinh
    arccosh = acosh
    arctanh = atanh
