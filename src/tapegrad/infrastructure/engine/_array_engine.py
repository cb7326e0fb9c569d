"""
Array engine adapter.

The autograd core never touches NumPy or CuPy directly for placement
decisions. It goes through this module, which maps a `Device` to the array
module that owns its memory:

- ``Device("cpu")``      -> ``numpy``
- ``Device("cuda:<i>")`` -> ``cupy`` (imported lazily)

Backward rules allocate intermediates with `zeros`/`ones` using the
upstream gradient as the `like` argument, which keeps every new array on
the device of the node it is accumulated into.
"""

from __future__ import annotations

from contextlib import nullcontext
from typing import Any, Optional, Sequence

import numpy as np

from ...domain._errors import DeviceNotSupportedError
from ...domain.device._device import Device


def _import_cupy(device: Device):
    try:
        import cupy
    except ImportError as e:
        raise DeviceNotSupportedError("array allocation", str(device)) from e
    return cupy


def get_array_module(device: Device):
    """
    Return the array module that owns memory on `device`.

    Parameters
    ----------
    device : Device
        Target device.

    Returns
    -------
    module
        ``numpy`` for CPU devices, ``cupy`` for CUDA devices.

    Raises
    ------
    DeviceNotSupportedError
        If a CUDA device is requested and CuPy cannot be imported.
    """
    if device.is_cpu():
        return np
    return _import_cupy(device)


def is_on_accelerator(array: Any) -> bool:
    """Return True if `array` is a CuPy array."""
    return type(array).__module__.split(".", 1)[0] == "cupy"


def array_module(array: Any):
    """Return the array module `array` belongs to (NumPy for non-arrays)."""
    if is_on_accelerator(array):
        import cupy

        return cupy
    return np


def device_of(array: Any) -> Device:
    """Return the `Device` an engine array resides on."""
    if is_on_accelerator(array):
        return Device(f"cuda:{int(array.device.id)}")
    return Device("cpu")


def _resolve_dtype(value: Any, dtype: Any, default: np.dtype) -> np.dtype:
    if dtype is not None:
        return np.dtype(dtype)
    value_dtype = getattr(value, "dtype", None)
    if value_dtype is not None and np.dtype(value_dtype).kind == "f":
        return np.dtype(value_dtype)
    return default


def asarray(
    value: Any,
    device: Device,
    dtype: Any = None,
    default_dtype: Optional[np.dtype] = None,
):
    """
    Convert `value` into an engine array on `device`.

    Parameters
    ----------
    value : Any
        Python scalar, nested sequence, NumPy array or CuPy array.
    device : Device
        Target device. Arrays on another device are copied across.
    dtype : Any, optional
        Explicit dtype. When omitted, floating values keep their dtype and
        everything else is cast to `default_dtype`.
    default_dtype : numpy.dtype, optional
        Fallback dtype, ``float64`` when omitted.

    Returns
    -------
    numpy.ndarray or cupy.ndarray
        The converted array. Scalars become 0-d arrays.
    """
    dt = _resolve_dtype(value, dtype, default_dtype or np.dtype(np.float64))

    if device.is_cpu():
        if is_on_accelerator(value):
            value = value.get()
        return np.asarray(value, dtype=dt)

    cupy = _import_cupy(device)
    with cupy.cuda.Device(device.index or 0):
        return cupy.asarray(value, dtype=dt)


def to_host(array: Any) -> np.ndarray:
    """Return a NumPy copy (or view, for host arrays) of `array`."""
    if is_on_accelerator(array):
        return array.get()
    return np.asarray(array)


def device_context(array: Any):
    """Context manager selecting the CUDA device of `array`, if any."""
    if is_on_accelerator(array):
        import cupy

        return cupy.cuda.Device(int(array.device.id))
    return nullcontext()


def zeros(shape: Sequence[int], like: Any):
    """Allocate zeros of `shape` with the dtype and device of `like`."""
    xp = array_module(like)
    with device_context(like):
        return xp.zeros(tuple(shape), dtype=like.dtype)


def ones(shape: Sequence[int], like: Any):
    """Allocate ones of `shape` with the dtype and device of `like`."""
    xp = array_module(like)
    with device_context(like):
        return xp.ones(tuple(shape), dtype=like.dtype)


def sum_to_shape(array: Any, shape: Sequence[int]):
    """
    Reduce or expand `array` so that it has exactly `shape`.

    This is the inverse of broadcasting used by the backward pass:

    - leading axes that do not exist in `shape` are summed away,
    - axes where `shape` has size 1 but `array` does not are summed with
      ``keepdims=True``,
    - the result is finally broadcast up to `shape`, which covers gradients
      of lower rank (e.g. a scalar gradient for a full tensor).

    Parameters
    ----------
    array : numpy.ndarray or cupy.ndarray
        Gradient to reshape.
    shape : Sequence[int]
        Target shape.

    Returns
    -------
    numpy.ndarray or cupy.ndarray
        Array of shape `shape` on the same device as `array`.

    Raises
    ------
    ValueError
        If `array` cannot be reduced or broadcast to `shape`.
    """
    shape = tuple(int(d) for d in shape)
    if tuple(array.shape) == shape:
        return array

    xp = array_module(array)

    lead = array.ndim - len(shape)
    if lead > 0:
        array = array.sum(axis=tuple(range(lead)))

    tail = shape[len(shape) - array.ndim :]
    axes = tuple(
        i for i, (have, want) in enumerate(zip(array.shape, tail)) if want == 1 and have != 1
    )
    if axes:
        array = array.sum(axis=axes, keepdims=True)

    if tuple(array.shape) != shape:
        array = xp.broadcast_to(array, shape)
    return array


def scatter_add(target: Any, index: Any, values: Any) -> None:
    """
    Unbuffered in-place ``target[index] += values``.

    Repeated indices accumulate, which is what the gradient of an indexed
    read requires.
    """
    if is_on_accelerator(target):
        import cupyx

        cupyx.scatter_add(target, index, values)
        return
    np.add.at(target, index, values)
