"""
Clipping and rounding mixin.

Rounding functions are piecewise constant and propagate zero gradients.
`clip` passes the gradient through where the input lies inside the bounds.
"""

from __future__ import annotations

from typing import Any

from ....domain._operation import Operation
from ._base import TensorMixinBase


class TensorMixinRounding(TensorMixinBase):
    def clip(self, min: Any, max: Any, name: str = ""):
        """
        Limit values to ``[min, max]``.

        Parameters
        ----------
        min, max : Any
            Bounds, broadcast against `self`. They are recorded as Tensors
            and always receive a zero gradient.
        """
        a, low, high = self._operands(Operation.CLIP, min, max)
        value = self._xp.clip(a.value, low.value, high.value)
        return self._from_operation(Operation.CLIP, value, (a, low, high), name)

    def trunc(self, name: str = ""):
        return self._unary(Operation.TRUNC, self._xp.trunc, name)

    def floor(self, name: str = ""):
        return self._unary(Operation.FLOOR, self._xp.floor, name)

    def ceil(self, name: str = ""):
        return self._unary(Operation.CEIL, self._xp.ceil, name)
