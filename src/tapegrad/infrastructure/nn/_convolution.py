"""Functional 2D convolution (NCHW)."""

from __future__ import annotations

from typing import Any, Tuple, Union

from ...domain._errors import DeviceMismatchError
from ...domain._operation import Operation
from ..ops.conv2d import conv2d_forward
from ..tensor._tensor import Tensor
from ..tensor._validation import validate_operation_inputs


def conv2d(
    input: Any,
    filters: Any,
    strides: Union[int, Tuple[int, int]] = 1,
    padding: Union[int, Tuple[int, int]] = 0,
    name: str = "",
) -> Tensor:
    """
    Cross-correlate `input` with `filters` (no bias, no dilation).

    Parameters
    ----------
    input : Any
        Batch of shape (N, C_in, H, W).
    filters : Any
        Kernels of shape (C_out, C_in, K_h, K_w).
    strides : int or tuple[int, int], optional
        Step between windows.
    padding : int or tuple[int, int], optional
        Symmetric zero padding of the spatial axes.

    Returns
    -------
    Tensor
        Output of shape (N, C_out, H_out, W_out).

    Raises
    ------
    ShapeMismatchError
        If operands are not 4-D, channels disagree, or the kernel does not
        fit the padded input.
    """
    (input,) = validate_operation_inputs(name, input)
    (filters,) = validate_operation_inputs(name, filters, device=input.device)
    if input.device != filters.device:
        raise DeviceMismatchError(str(input.device), str(filters.device))
    strides = tuple(strides) if isinstance(strides, (list, tuple)) else int(strides)
    padding = tuple(padding) if isinstance(padding, (list, tuple)) else int(padding)
    value = conv2d_forward(input.value, filters.value, strides, padding)
    return Tensor._from_operation(
        Operation.CONV2D, value, (input, filters, strides, padding), name
    )
