"""
Closed catalogue of differentiable primitives.

Every forward primitive that records itself on a gradient tape is listed
here exactly once. The enum value is the operation name shown by the graph
printer and used as the registry key for its backward rule.

The infrastructure registry checks coverage against this enum, so adding a
member without registering a backward rule is caught by
`BackwardOperation.missing()` rather than at the first backward pass that
reaches the new node.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Operation(str, Enum):
    """
    Forward primitives known to the backward registry.

    Members are grouped by the tensor mixin that produces them.
    """

    # arithmetic
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POWER = "power"
    MOD = "mod"
    NEGATIVE = "negative"

    # exponents and logarithms
    EXP = "exp"
    EXP2 = "exp2"
    EXPM1 = "expm1"
    LOG = "log"
    LOG1P = "log1p"
    LOG2 = "log2"
    LOG10 = "log10"

    # elementwise math
    SQRT = "sqrt"
    RSQRT = "rsqrt"
    ABS = "abs"

    # trigonometric
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    RADIANS = "radians"
    SINC = "sinc"

    # hyperbolic
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    ASINH = "asinh"
    ACOSH = "acosh"
    ATANH = "atanh"
    ARCTAN2 = "arctan2"

    # rounding
    CLIP = "clip"
    TRUNC = "trunc"
    FLOOR = "floor"
    CEIL = "ceil"

    # linear algebra
    MATMUL = "matmul"
    DOT = "dot"
    OUTER = "outer"
    DET = "det"
    INV = "inv"
    SVD = "svd"
    NORM = "norm"
    MATRIX_RANK = "matrix_rank"
    COND = "cond"
    TRANSPOSE = "transpose"

    # reductions
    SUM = "sum"
    SUM_AXIS = "sum_axis"
    MEAN = "mean"

    # shape and indexing
    RESHAPE = "reshape"
    OFFSET_GET = "offsetGet"

    # neural-network primitives
    RELU = "relu"
    SELU = "selu"
    CELU = "celu"
    BINARY_CROSS_ENTROPY = "binary_cross_entropy"
    CCE = "cce"
    CONV2D = "conv2d"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def lookup(cls, name: "Operation | str") -> Optional["Operation"]:
        """
        Resolve an operation name to its catalogue member.

        Parameters
        ----------
        name : Operation or str
            Either a member or its string value.

        Returns
        -------
        Optional[Operation]
            The matching member, or None if `name` is not in the catalogue.
        """
        if isinstance(name, Operation):
            return name
        try:
            return cls(name)
        except ValueError:
            return None
