"""Trigonometric mixin (angles in radians)."""

from __future__ import annotations

from ....domain._operation import Operation
from ._base import TensorMixinBase


class TensorMixinTrigonometric(TensorMixinBase):
    def sin(self, name: str = ""):
        return self._unary(Operation.SIN, self._xp.sin, name)

    def cos(self, name: str = ""):
        return self._unary(Operation.COS, self._xp.cos, name)

    def tan(self, name: str = ""):
        return self._unary(Operation.TAN, self._xp.tan, name)

    def asin(self, name: str = ""):
        return self._unary(Operation.ASIN, self._xp.arcsin, name)

    def acos(self, name: str = ""):
        return self._unary(Operation.ACOS, self._xp.arccos, name)

    def atan(self, name: str = ""):
        return self._unary(Operation.ATAN, self._xp.arctan, name)

    def radians(self, name: str = ""):
        """Convert degrees to radians."""
        return self._unary(Operation.RADIANS, self._xp.radians, name)

    def sinc(self, name: str = ""):
        """Normalized sinc ``sin(pi x) / (pi x)``, equal to 1 at 0."""
        return self._unary(Operation.SINC, self._xp.sinc, name)

    arcsin = asin
    arccos = acos
    arctan = atan
