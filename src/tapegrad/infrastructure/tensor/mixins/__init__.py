"""
Operation mixins composing the public Tensor API.

Each mixin groups one family of operations. The mixins compute forward
values only; operand coercion, output construction and tape attachment are
provided by the concrete `Tensor` class, and backward rules live in the
tape package.
"""

from ._arithmetic import TensorMixinArithmetic
from ._exponents_log import TensorMixinExponentsLog
from ._mathematical import TensorMixinMathematical
from ._trigonometric import TensorMixinTrigonometric
from ._hyperbolic import TensorMixinHyperbolic
from ._rounding import TensorMixinRounding
from ._linear_algebra import TensorMixinLinearAlgebra
from ._reduction import TensorMixinReduction
from ._shape_and_indexing import TensorMixinShapeAndIndexing

__all__ = [
    TensorMixinArithmetic.__name__,
    TensorMixinExponentsLog.__name__,
    TensorMixinMathematical.__name__,
    TensorMixinTrigonometric.__name__,
    TensorMixinHyperbolic.__name__,
    TensorMixinRounding.__name__,
    TensorMixinLinearAlgebra.__name__,
    TensorMixinReduction.__name__,
    TensorMixinShapeAndIndexing.__name__,
]
