"""
Functional activations.

`relu`, `selu` and `celu` are recorded as primitives with their own backward
rules. The remaining activations are compositions of recorded Tensor
operations and differentiate through them.

Every function accepts anything `validate_operation_inputs` accepts and
returns a new Tensor named `name` (falling back to the input's name).
"""

from __future__ import annotations

from typing import Any

from ...domain._operation import Operation
from ..tensor._tensor import Tensor
from ..tensor._validation import validate_operation_inputs


def relu(x: Any, name: str = "out_relu") -> Tensor:
    """Rectified linear unit ``max(x, 0)``."""
    (x,) = validate_operation_inputs(name, x)
    value = x.value * (x.value > 0)
    return Tensor._from_operation(Operation.RELU, value, (x,), name)


def selu(x: Any, alpha: float = 1.67326, scale: float = 1.0507, name: str = "out_selu") -> Tensor:
    """
    Scaled exponential linear unit.

    ``scale * x`` for ``x > 0`` and ``scale * alpha * (exp(x) - 1)``
    otherwise.
    """
    (x,) = validate_operation_inputs(name, x)
    xp = x._xp
    v = x.value
    value = scale * xp.where(v > 0, v, alpha * (xp.exp(v) - 1))
    return Tensor._from_operation(Operation.SELU, value, (x, float(alpha), float(scale)), name)


def celu(x: Any, alpha: float = 1.0, name: str = "out_celu") -> Tensor:
    """
    Continuously differentiable exponential linear unit.

    ``max(0, x) + min(0, alpha * (exp(x / alpha) - 1))``.
    """
    if alpha == 0:
        raise ValueError("celu: alpha must be non-zero")
    (x,) = validate_operation_inputs(name, x)
    xp = x._xp
    v = x.value
    value = xp.maximum(0, v) + xp.minimum(0, alpha * (xp.exp(v / alpha) - 1))
    return Tensor._from_operation(Operation.CELU, value, (x, float(alpha)), name)


def silu(x: Any, beta: float = 1.0, name: str = "out_silu") -> Tensor:
    """Sigmoid-weighted linear unit ``x * sigmoid(beta * x)``."""
    (x,) = validate_operation_inputs(name, x)
    return x.multiply(x.multiply(beta).sigmoid()).set_name(name, x)


def sigmoid(x: Any, name: str = "out_sigmoid") -> Tensor:
    (x,) = validate_operation_inputs(name, x)
    return x.sigmoid().set_name(name, x)


def softsign(x: Any, name: str = "out_softsign") -> Tensor:
    """``x / (|x| + 1)``."""
    (x,) = validate_operation_inputs(name, x)
    return x.divide(x.abs().add(1)).set_name(name, x)


def softmax(x: Any, axis: int = -1, name: str = "") -> Tensor:
    """
    Normalized exponentials along `axis`.

    The per-slice maximum is subtracted first as a constant, which leaves
    both the result and its gradient unchanged.
    """
    (x,) = validate_operation_inputs(name, x)
    shift = Tensor(x._xp.max(x.value, axis=axis, keepdims=True), device=x.device)
    e = x.subtract(shift).exp()
    return e.divide(e.sum_axis(axis, keepdim=True)).set_name(name, x)


def softplus(x: Any, name: str = "") -> Tensor:
    """``log(exp(x) + 1)``."""
    (x,) = validate_operation_inputs(name, x)
    return x.exp().add(1).log().set_name(name, x)


def exponential(x: Any, name: str = "") -> Tensor:
    (x,) = validate_operation_inputs(name, x)
    return x.exp().set_name(name, x)


def linear(x: Any, name: str = "") -> Tensor:
    """Identity activation; returns the coerced input itself."""
    (x,) = validate_operation_inputs(name, x)
    return x


def mish(x: Any, name: str = "") -> Tensor:
    """``x * tanh(softplus(x))``."""
    (x,) = validate_operation_inputs(name, x)
    return x.multiply(x.exp().add(1).log().tanh()).set_name(name, x)
