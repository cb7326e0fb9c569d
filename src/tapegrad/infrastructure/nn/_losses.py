"""
Functional losses.

`mean_squared_error` and `mean_absolute_error` are compositions of recorded
Tensor operations. `binary_cross_entropy` and the core of
`categorical_cross_entropy` are primitives with dedicated backward rules.

Reductions
----------
``"mean"`` averages over all elements, ``"sum"`` adds them, and ``None``
returns the elementwise loss.
"""

from __future__ import annotations

from typing import Any, Optional

from ...domain._errors import DeviceMismatchError, ShapeMismatchError
from ...domain._operation import Operation
from ..tensor._tensor import Tensor
from ..tensor._validation import validate_operation_inputs

_REDUCTIONS = (None, "", "mean", "sum")

# log terms of the binary cross-entropy are clamped from below
_LOG_CLAMP = -100.0


def _check_reduction(reduction: Optional[str]) -> None:
    if reduction not in _REDUCTIONS:
        raise ValueError(f"Unsupported reduction: {reduction!r}. Expected 'mean', 'sum' or None")


def _check_device(a: Tensor, b: Tensor) -> None:
    if a.device != b.device:
        raise DeviceMismatchError(str(a.device), str(b.device))


def _reduce(loss: Tensor, reduction: Optional[str], name: str) -> Tensor:
    if reduction == "mean":
        return loss.mean(name=name)
    if reduction == "sum":
        return loss.sum(name=name)
    return loss


def mean_squared_error(x: Any, y: Any, reduction: Optional[str] = "mean", name: str = "") -> Tensor:
    """
    Squared error ``(x - y)^2``, reduced by `reduction`.

    Parameters
    ----------
    x : Any
        Predictions.
    y : Any
        Targets, broadcastable to `x`.
    """
    _check_reduction(reduction)
    x, y = validate_operation_inputs(name, x, y)
    loss = x.subtract(y, name=name).power(2, name=name)
    return _reduce(loss, reduction, name).set_name(name, x)


def mean_absolute_error(x: Any, y: Any, reduction: Optional[str] = "mean", name: str = "") -> Tensor:
    """Absolute error ``|x - y|``, reduced by `reduction`."""
    _check_reduction(reduction)
    x, y = validate_operation_inputs(name, x, y)
    loss = x.subtract(y, name=name).abs(name=name)
    return _reduce(loss, reduction, name).set_name(name, x)


def binary_cross_entropy(
    x: Any,
    y: Any,
    epsilon: float = 1e-15,
    reduction: Optional[str] = "mean",
    name: str = "",
) -> Tensor:
    """
    Binary cross-entropy of probabilities `x` against targets `y`.

    Elementwise ``(y - 1) * max(log(1 - x), -100) - y * max(log(x), -100)``.

    Parameters
    ----------
    x : Any
        Predicted probabilities in ``(0, 1)``.
    y : Any
        Targets with the shape of `x`.
    epsilon : float, optional
        Lower bound of ``x * (1 - x)`` in the gradient denominator.
    reduction : {"mean", "sum", None}, optional
        Reduction of the elementwise loss.

    Raises
    ------
    ShapeMismatchError
        If `x` and `y` have different shapes.
    """
    _check_reduction(reduction)
    (x,) = validate_operation_inputs(name, x)
    (y,) = validate_operation_inputs(name, y, device=x.device)
    _check_device(x, y)
    if x.shape != y.shape:
        raise ShapeMismatchError(
            "binary_cross_entropy", f"shape mismatch: {x.shape} vs {y.shape}"
        )
    xp = x._xp
    p, t = x.value, y.value
    loss = (t - 1) * xp.maximum(xp.log1p(-p), _LOG_CLAMP) - t * xp.maximum(xp.log(p), _LOG_CLAMP)
    if reduction == "mean":
        loss = xp.mean(loss)
    elif reduction == "sum":
        loss = xp.sum(loss)
    return Tensor._from_operation(
        Operation.BINARY_CROSS_ENTROPY,
        loss,
        (x, y, float(epsilon), reduction or None),
        name,
    )


def categorical_cross_entropy(true: Any, pred: Any, epsilon: float = 1e-15, name: str = "") -> Tensor:
    """
    Categorical cross-entropy averaged over the batch.

    `pred` is first normalized over axis 1 (through recorded operations),
    then clipped to ``[epsilon, 1 - epsilon]``. The result is
    ``-sum(true * log(pred)) / N`` with ``N`` the batch size.

    Parameters
    ----------
    true : Any
        One-hot (or soft) targets of shape (N, C).
    pred : Any
        Non-negative scores of shape (N, C).

    Raises
    ------
    ShapeMismatchError
        If the operands are not 2-D tensors of equal shape.
    """
    (pred,) = validate_operation_inputs(name, pred)
    (true,) = validate_operation_inputs(name, true, device=pred.device)
    _check_device(pred, true)
    if pred.ndim != 2 or true.shape != pred.shape:
        raise ShapeMismatchError(
            "cce", f"expected 2-D operands of equal shape, got {true.shape} and {pred.shape}"
        )
    normalized = pred.divide(pred.sum_axis(1, keepdim=True))

    xp = pred._xp
    clipped = xp.clip(normalized.value, epsilon, 1 - epsilon)
    loss = -xp.sum(true.value * xp.log(clipped)) / pred.shape[0]
    return Tensor._from_operation(
        Operation.CCE, loss, (true, normalized, float(epsilon)), name
    )
