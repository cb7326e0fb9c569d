"""
Engine-level kernels that have no single array-module counterpart.
"""

from .conv2d import conv2d_forward, conv2d_backward, conv2d_output_shape

__all__ = [
    conv2d_forward.__name__,
    conv2d_backward.__name__,
    conv2d_output_shape.__name__,
]
