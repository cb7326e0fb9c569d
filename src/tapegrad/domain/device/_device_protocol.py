"""
Device abstraction contracts.

This module defines a duck-typed `DeviceLike` protocol describing a
computation device descriptor without coupling to the concrete `Device`
class. Infrastructure code only needs `is_cpu()`, `is_cuda()`, an optional
index and a stable string form.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class DeviceLike(Protocol):
    """
    Duck-typed device contract.

    Any object that provides these members can be used as a device
    descriptor, regardless of its concrete class identity.
    """

    type: object
    index: Optional[int]

    def is_cpu(self) -> bool: ...
    def is_cuda(self) -> bool: ...
    def __str__(self) -> str: ...
