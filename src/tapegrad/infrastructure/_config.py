"""
Process-wide defaults for tensor construction.

Defaults are read once from the environment when the package is imported:

- ``TAPEGRAD_DEFAULT_DEVICE``: device string used when a Tensor is created
  without an explicit device (``"cpu"`` unless set, e.g. ``"cuda:0"``).
- ``TAPEGRAD_DEFAULT_DTYPE``: NumPy dtype name used when a value has no
  floating dtype of its own (``"float64"`` unless set).

Everything else is configured per call through keyword arguments.
"""

import os

import numpy as np

from ..domain.device._device import Device

_DEFAULT_DEVICE = os.environ.get("TAPEGRAD_DEFAULT_DEVICE", "cpu").strip() or "cpu"
_DEFAULT_DTYPE = os.environ.get("TAPEGRAD_DEFAULT_DTYPE", "float64").strip() or "float64"


def get_default_device() -> Device:
    """
    Return the device used for tensors created without an explicit device.

    Returns
    -------
    Device
        Parsed from ``TAPEGRAD_DEFAULT_DEVICE``.

    Raises
    ------
    ValueError
        If the environment variable holds an invalid device string.
    """
    return Device(_DEFAULT_DEVICE)


def get_default_dtype() -> np.dtype:
    """Return the floating dtype used when a value carries none."""
    dtype = np.dtype(_DEFAULT_DTYPE)
    if dtype.kind != "f":
        raise ValueError(
            f"TAPEGRAD_DEFAULT_DTYPE must name a floating dtype, got {_DEFAULT_DTYPE!r}"
        )
    return dtype
