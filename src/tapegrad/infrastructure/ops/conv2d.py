"""
Conv2D forward and backward kernels.

These kernels are written against the array-module interface shared by
NumPy and CuPy, so the same code runs on host and accelerator arrays. The
loop runs over kernel offsets only; each offset contributes one strided
window of the padded input, contracted over the input channels.

Tensor layout
-------------
All arrays follow the NCHW layout:

- N: batch size
- C: channels
- H: height
- W: width

Filters follow (C_out, C_in, K_h, K_w).
"""

from __future__ import annotations

from typing import Tuple

from ...domain._errors import ShapeMismatchError
from ..engine import array_module, device_context


def _pair(v: int | Tuple[int, int]) -> Tuple[int, int]:
    """
    Normalize an integer or pair into a 2-tuple.

    Parameters
    ----------
    v : int or tuple[int, int]
        A scalar value or a 2D pair.

    Returns
    -------
    tuple[int, int]
        A normalized (height, width) pair.
    """
    if isinstance(v, (tuple, list)):
        if len(v) != 2:
            raise ValueError(f"expected an int or a pair, got {v!r}")
        return int(v[0]), int(v[1])
    return int(v), int(v)


def conv2d_output_shape(
    x_shape: Tuple[int, ...],
    w_shape: Tuple[int, ...],
    stride: int | Tuple[int, int],
    padding: int | Tuple[int, int],
) -> Tuple[int, int, int, int]:
    """
    Validate operand shapes and compute the output shape.

    Returns
    -------
    tuple[int, int, int, int]
        (N, C_out, H_out, W_out), where
        ``H_out = (H + 2 * padding_h - K_h) // stride_h + 1`` (same for W).

    Raises
    ------
    ShapeMismatchError
        If either operand is not 4-D, channels disagree or the kernel does
        not fit in the padded input.
    """
    if len(x_shape) != 4 or len(w_shape) != 4:
        raise ShapeMismatchError(
            "conv2d", f"expected 4-D input and filters, got {x_shape} and {w_shape}"
        )
    s_h, s_w = _pair(stride)
    p_h, p_w = _pair(padding)
    if s_h < 1 or s_w < 1 or p_h < 0 or p_w < 0:
        raise ValueError(f"invalid stride {stride!r} or padding {padding!r}")

    N, C_in, H, W = x_shape
    C_out, C_in2, K_h, K_w = w_shape
    if C_in != C_in2:
        raise ShapeMismatchError(
            "conv2d", f"in_channels mismatch: input has {C_in}, filters have {C_in2}"
        )

    H_out = (H + 2 * p_h - K_h) // s_h + 1
    W_out = (W + 2 * p_w - K_w) // s_w + 1
    if H_out < 1 or W_out < 1:
        raise ShapeMismatchError(
            "conv2d", f"kernel {(K_h, K_w)} does not fit input {(H, W)} with padding {(p_h, p_w)}"
        )
    return N, C_out, H_out, W_out


def _window(k: int, s: int, out: int) -> slice:
    return slice(k, k + s * (out - 1) + 1, s)


def conv2d_forward(x, w, stride: int | Tuple[int, int] = 1, padding: int | Tuple[int, int] = 0):
    """
    Compute the forward pass of a 2D convolution.

    Parameters
    ----------
    x : numpy.ndarray or cupy.ndarray
        Input of shape (N, C_in, H, W).
    w : numpy.ndarray or cupy.ndarray
        Filters of shape (C_out, C_in, K_h, K_w), on the same device as `x`.
    stride : int or tuple[int, int]
        Convolution stride.
    padding : int or tuple[int, int]
        Symmetric zero padding.

    Returns
    -------
    numpy.ndarray or cupy.ndarray
        Output of shape (N, C_out, H_out, W_out).
    """
    N, C_out, H_out, W_out = conv2d_output_shape(x.shape, w.shape, stride, padding)
    s_h, s_w = _pair(stride)
    p_h, p_w = _pair(padding)
    K_h, K_w = w.shape[2], w.shape[3]

    xp = array_module(x)
    with device_context(x):
        x_pad = xp.pad(x, ((0, 0), (0, 0), (p_h, p_h), (p_w, p_w)), mode="constant")
        y = xp.zeros((N, C_out, H_out, W_out), dtype=x.dtype)

        for ki in range(K_h):
            rows = _window(ki, s_h, H_out)
            for kj in range(K_w):
                cols = _window(kj, s_w, W_out)
                patch = x_pad[:, :, rows, cols]
                y += xp.einsum("nchw,oc->nohw", patch, w[:, :, ki, kj])
    return y


def conv2d_backward(
    x,
    w,
    grad_out,
    stride: int | Tuple[int, int] = 1,
    padding: int | Tuple[int, int] = 0,
):
    """
    Compute the gradients of a 2D convolution.

    Parameters
    ----------
    x : numpy.ndarray or cupy.ndarray
        Forward input of shape (N, C_in, H, W).
    w : numpy.ndarray or cupy.ndarray
        Forward filters of shape (C_out, C_in, K_h, K_w).
    grad_out : numpy.ndarray or cupy.ndarray
        Upstream gradient of shape (N, C_out, H_out, W_out).
    stride, padding : int or tuple[int, int]
        Same values as in the forward call.

    Returns
    -------
    tuple
        ``(grad_x, grad_w)`` with the shapes of `x` and `w`.
    """
    _, _, H_out, W_out = conv2d_output_shape(x.shape, w.shape, stride, padding)
    s_h, s_w = _pair(stride)
    p_h, p_w = _pair(padding)
    H, W = x.shape[2], x.shape[3]
    K_h, K_w = w.shape[2], w.shape[3]

    xp = array_module(x)
    with device_context(x):
        x_pad = xp.pad(x, ((0, 0), (0, 0), (p_h, p_h), (p_w, p_w)), mode="constant")
        grad_x_pad = xp.zeros_like(x_pad)
        grad_w = xp.zeros_like(w)

        for ki in range(K_h):
            rows = _window(ki, s_h, H_out)
            for kj in range(K_w):
                cols = _window(kj, s_w, W_out)
                patch = x_pad[:, :, rows, cols]
                grad_w[:, :, ki, kj] = xp.einsum("nohw,nchw->oc", grad_out, patch)
                grad_x_pad[:, :, rows, cols] += xp.einsum(
                    "nohw,oc->nchw", grad_out, w[:, :, ki, kj]
                )

        grad_x = grad_x_pad[:, :, p_h : p_h + H, p_w : p_w + W]
    return grad_x, grad_w
