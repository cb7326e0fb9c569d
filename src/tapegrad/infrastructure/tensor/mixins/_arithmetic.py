"""
Arithmetic mixin for elementwise Tensor operators.

Every method broadcasts like NumPy. Scalars and arrays are coerced to leaf
Tensors on the receiver's device before the forward value is computed.

Backward rules (see ``tape/backward/_arithmetic.py``):

- ``d(a + b) = (g, g)``
- ``d(a - b) = (g, -g)``
- ``d(a * b) = (g * b, a * g)``
- ``d(a / b) = (g / b, -g * a / b^2)``
- ``d(a ** b) = (g * b * a^(b-1), g * a^b * ln a)``
- ``d(a % b) = (g, 0)``
"""

from __future__ import annotations

from typing import Any

from ....domain._operation import Operation
from ._base import TensorMixinBase


class TensorMixinArithmetic(TensorMixinBase):
    """Elementwise arithmetic and the corresponding Python operators."""

    def add(self, other: Any, name: str = ""):
        return self._binary(Operation.ADD, lambda a, b: a + b, other, name)

    def subtract(self, other: Any, name: str = ""):
        return self._binary(Operation.SUBTRACT, lambda a, b: a - b, other, name)

    def multiply(self, other: Any, name: str = ""):
        return self._binary(Operation.MULTIPLY, lambda a, b: a * b, other, name)

    def divide(self, other: Any, name: str = ""):
        return self._binary(Operation.DIVIDE, lambda a, b: a / b, other, name)

    def power(self, other: Any, name: str = ""):
        return self._binary(Operation.POWER, lambda a, b: a**b, other, name)

    def mod(self, other: Any, name: str = ""):
        """
        Elementwise remainder with the sign of the divisor (NumPy ``mod``).

        Notes
        -----
        The divisor is treated as a constant by the backward pass.
        """
        return self._binary(Operation.MOD, lambda a, b: self._xp.mod(a, b), other, name)

    def negative(self, name: str = ""):
        return self._unary(Operation.NEGATIVE, lambda a: -a, name)

    # ----------------------------
    # Operators
    # ----------------------------
    def __add__(self, other: Any):
        return self.add(other)

    def __radd__(self, other: Any):
        return self._lift(Operation.ADD, other).add(self)

    def __sub__(self, other: Any):
        return self.subtract(other)

    def __rsub__(self, other: Any):
        return self._lift(Operation.SUBTRACT, other).subtract(self)

    def __mul__(self, other: Any):
        return self.multiply(other)

    def __rmul__(self, other: Any):
        return self._lift(Operation.MULTIPLY, other).multiply(self)

    def __truediv__(self, other: Any):
        return self.divide(other)

    def __rtruediv__(self, other: Any):
        return self._lift(Operation.DIVIDE, other).divide(self)

    def __pow__(self, other: Any):
        return self.power(other)

    def __rpow__(self, other: Any):
        return self._lift(Operation.POWER, other).power(self)

    def __mod__(self, other: Any):
        return self.mod(other)

    def __rmod__(self, other: Any):
        return self._lift(Operation.MOD, other).mod(self)

    def __neg__(self):
        return self.negative()
