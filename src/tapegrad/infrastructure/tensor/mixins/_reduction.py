"""
Reduction mixin.

``keepdim`` has NumPy ``keepdims`` semantics: reduced axes are kept with
size 1 so the result broadcasts against the input.
"""

from __future__ import annotations

from typing import Union

from ....domain._operation import Operation
from ._base import TensorMixinBase


class TensorMixinReduction(TensorMixinBase):
    def sum(self, keepdim: bool = False, name: str = ""):
        """
        Sum of all elements.

        Returns
        -------
        Tensor
            A 0-d tensor, or an all-ones-shape tensor when `keepdim` is True.
        """
        value = self._xp.sum(self._value, keepdims=bool(keepdim))
        return self._from_operation(Operation.SUM, value, (self, bool(keepdim)), name)

    def sum_axis(self, axis: Union[int, tuple[int, ...], None], keepdim: bool = False, name: str = ""):
        """
        Sum over `axis`.

        Parameters
        ----------
        axis : int or tuple[int, ...] or None
            Axis or axes to reduce. None reduces every axis and is recorded
            as `sum`.
        keepdim : bool, optional
            Keep reduced axes with size 1.
        """
        if axis is None:
            return self.sum(keepdim=keepdim, name=name)
        if isinstance(axis, list):
            axis = tuple(axis)
        value = self._xp.sum(self._value, axis=axis, keepdims=bool(keepdim))
        return self._from_operation(
            Operation.SUM_AXIS, value, (self, axis, bool(keepdim)), name
        )

    def mean(self, name: str = ""):
        """Arithmetic mean of all elements, as a 0-d tensor."""
        return self._unary(Operation.MEAN, self._xp.mean, name)
