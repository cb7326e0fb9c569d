"""
Shared plumbing for the Tensor operation mixins.

The mixins only describe how each forward value is computed. Operand
coercion (`_operands`) and output construction (`_from_operation`) are
provided by the concrete `Tensor` class.
"""

from __future__ import annotations

from typing import Any, Callable


class TensorMixinBase:
    """
    Base class of every operation mixin.

    Notes
    -----
    `fn` arguments receive raw engine arrays and must return the forward
    value on the same device.
    """

    def _unary(self, op, fn: Callable[[Any], Any], name: str = ""):
        return self._from_operation(op, fn(self._value), (self,), name)

    def _binary(self, op, fn: Callable[[Any, Any], Any], other: Any, name: str = ""):
        a, b = self._operands(op, other)
        return self._from_operation(op, fn(a.value, b.value), (a, b), name)

    def _lift(self, op, other: Any):
        # coerce the left operand of a reflected operator
        return self._operands(op, other)[1]
