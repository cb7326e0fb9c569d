from ._ndarray import NDArrayLike

__all__ = [
    NDArrayLike.__name__,
]
