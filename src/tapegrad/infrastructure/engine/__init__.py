"""
Array engine adapter package.

Exposes the device-aware helpers the tensor and tape layers use to
allocate, convert and reshape engine arrays.
"""

from ._array_engine import (
    get_array_module,
    array_module,
    is_on_accelerator,
    device_of,
    device_context,
    asarray,
    to_host,
    zeros,
    ones,
    sum_to_shape,
    scatter_add,
)

__all__ = [
    get_array_module.__name__,
    array_module.__name__,
    is_on_accelerator.__name__,
    device_of.__name__,
    device_context.__name__,
    asarray.__name__,
    to_host.__name__,
    zeros.__name__,
    ones.__name__,
    sum_to_shape.__name__,
    scatter_add.__name__,
]
