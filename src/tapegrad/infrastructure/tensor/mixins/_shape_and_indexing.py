"""
Shape and indexing mixin.

Indexed reads are recorded (``offsetGet``) and scatter their gradient back
into the selected slots. Indexed writes and deletions mutate the value in
place and are not recorded; they live on the concrete Tensor.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

from ....domain._operation import Operation
from ._base import TensorMixinBase


class TensorMixinShapeAndIndexing(TensorMixinBase):
    def reshape(self, shape: Union[int, Sequence[int]], name: str = ""):
        """
        Return a tensor with the same elements and a new shape.

        Parameters
        ----------
        shape : int or Sequence[int]
            Target shape; one entry may be -1.
        """
        shape = (int(shape),) if isinstance(shape, int) else tuple(int(d) for d in shape)
        value = self._value.reshape(shape)
        return self._from_operation(Operation.RESHAPE, value, (self, shape), name)

    def _normalize_index(self, key: Any) -> Any:
        # Tensor keys select by their (integer) values
        if isinstance(key, tuple):
            return tuple(self._normalize_index(k) for k in key)
        value = getattr(key, "value", None)
        if value is not None and hasattr(key, "tape"):
            return value.astype("int64")
        return key

    def __getitem__(self, key: Any):
        key = self._normalize_index(key)
        value = self._value[key]
        return self._from_operation(Operation.OFFSET_GET, value, (self, key))

    def __len__(self) -> int:
        if self._value.ndim == 0:
            raise TypeError("len() of a 0-d tensor")
        return int(self._value.shape[0])
