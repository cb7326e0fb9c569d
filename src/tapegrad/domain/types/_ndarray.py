"""
Domain-level structural typing for engine arrays.

This module defines :class:`NDArrayLike`, a backend-agnostic Protocol for the
array values a Tensor wraps, so the domain layer can describe array-shaped
data without importing NumPy or CuPy.

Typical implementers include ``numpy.ndarray`` and ``cupy.ndarray``. The
protocol is for typing and documentation; it models only the members the
autograd core relies on.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class NDArrayLike(Protocol):
    """
    Structural interface for NumPy-like n-dimensional arrays.

    Notes
    -----
    Exact view/copy behavior is backend-defined. The autograd core never
    relies on views except for indexed writes, which are documented as
    untracked.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """Shape of the array as a tuple of dimension sizes."""
        ...

    @property
    def ndim(self) -> int:
        """Number of dimensions of the array."""
        ...

    @property
    def size(self) -> int:
        """Total number of elements in the array."""
        ...

    @property
    def dtype(self) -> Any:
        """Backend-defined dtype descriptor."""
        ...

    def reshape(self, *shape: int) -> "NDArrayLike": ...

    def astype(self, dtype: Any, copy: bool = ...) -> "NDArrayLike": ...

    def copy(self) -> "NDArrayLike": ...

    def tolist(self) -> Any: ...

    def __getitem__(self, key: Any) -> Any: ...

    def __setitem__(self, key: Any, value: Any) -> None: ...

    def __add__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...
