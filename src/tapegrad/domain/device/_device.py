"""
Device abstraction utilities.

This module defines lightweight abstractions for representing where a
tensor's array lives:

- `DeviceType`: an enumeration of supported device categories
- `Device`: a concrete device descriptor that validates and normalizes
  user-facing device strings such as "cpu" or "cuda:0"

The autograd engine only distinguishes "on host" from "on accelerator".
Backward rules use the device of the node they write into when allocating
intermediate arrays, so gradients always live next to the values they
belong to.
"""

from enum import Enum
import re


class DeviceType(Enum):
    """
    Enumeration of supported device categories.

    Attributes
    ----------
    CPU : DeviceType
        Host memory, backed by NumPy arrays.
    CUDA : DeviceType
        Accelerator memory, backed by CuPy arrays.
    """

    CPU = "cpu"
    CUDA = "cuda"


class Device:
    """
    Concrete computation device descriptor.

    Parameters
    ----------
    device : str
        Device identifier string. Must be either:
        - "cpu"
        - "cuda" (shorthand for "cuda:0")
        - "cuda:<index>", where <index> is a non-negative integer

    Raises
    ------
    ValueError
        If the provided device string does not match the supported formats.

    Notes
    -----
    `__slots__` keeps the descriptor immutable in practice; it owns no
    backend resources.
    """

    __slots__ = ("type", "index")

    _CUDA_PATTERN = re.compile(r"^cuda(?::(\d+))?$")

    def __init__(self, device: str):
        if device == "cpu":
            self.type = DeviceType.CPU
            self.index = None
        else:
            m = self._CUDA_PATTERN.match(str(device))
            if not m:
                raise ValueError(
                    f"Invalid device '{device}'. Expected 'cpu' or 'cuda:<index>'"
                )
            self.type = DeviceType.CUDA
            self.index = int(m.group(1) or 0)

    @classmethod
    def coerce(cls, device: "Device | str | None", default: str = "cpu") -> "Device":
        """
        Normalize a device argument into a `Device`.

        Parameters
        ----------
        device : Device or str or None
            A descriptor, a device string, or None for `default`.
        default : str, optional
            Device string used when `device` is None.

        Returns
        -------
        Device
            The normalized descriptor.
        """
        if device is None:
            return cls(default)
        if isinstance(device, Device):
            return device
        return cls(str(device))

    def __str__(self) -> str:
        return "cpu" if self.type is DeviceType.CPU else f"cuda:{self.index}"

    def __repr__(self) -> str:
        return f"Device('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Device):
            return NotImplemented
        return (self.type, self.index) == (other.type, other.index)

    def __hash__(self) -> int:
        return hash((self.type, self.index))

    def is_cpu(self) -> bool:
        """
        Check whether this device represents host memory.

        Returns
        -------
        bool
            True if the device type is CPU, False otherwise.
        """
        return self.type is DeviceType.CPU

    def is_cuda(self) -> bool:
        """
        Check whether this device represents an accelerator.

        Returns
        -------
        bool
            True if the device type is CUDA, False otherwise.
        """
        return self.type is DeviceType.CUDA
