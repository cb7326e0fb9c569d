"""
Neural-network primitives built on the Tensor API.
"""

from ._activations import (
    relu,
    selu,
    celu,
    silu,
    sigmoid,
    softsign,
    softmax,
    softplus,
    exponential,
    linear,
    mish,
)
from ._losses import (
    mean_squared_error,
    mean_absolute_error,
    binary_cross_entropy,
    categorical_cross_entropy,
)
from ._convolution import conv2d

__all__ = [
    relu.__name__,
    selu.__name__,
    celu.__name__,
    silu.__name__,
    sigmoid.__name__,
    softsign.__name__,
    softmax.__name__,
    softplus.__name__,
    exponential.__name__,
    linear.__name__,
    mish.__name__,
    mean_squared_error.__name__,
    mean_absolute_error.__name__,
    binary_cross_entropy.__name__,
    categorical_cross_entropy.__name__,
    conv2d.__name__,
]
