"""
Domain-level structural typing for NumPy-like n-dimensional arrays.

This module defines :class:`NDArrayLike`, a backend-agnostic Protocol for
host arrays whose layout is described to a dispatch, without introducing a
dependency on NumPy in the domain layer.

Only the layout members are modelled: extents, rank, byte strides and item
size. Typical implementers are ``numpy.ndarray`` and arrays from other
backends that follow its buffer conventions.
"""

from __future__ import annotations

from typing import Protocol, Tuple, runtime_checkable


@runtime_checkable
class NDArrayLike(Protocol):
    """
    Structural interface for objects with an ndarray-style memory layout.

    Notes
    -----
    ``strides`` are expressed in bytes, as in NumPy.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """
        Shape of the array as a tuple of dimension sizes.

        Returns
        -------
        Tuple[int, ...]
            The size of each dimension.
        """
        ...

    @property
    def ndim(self) -> int:
        """Number of dimensions of the array."""
        ...

    @property
    def strides(self) -> Tuple[int, ...]:
        """Byte offset between consecutive elements along each dimension."""
        ...

    @property
    def itemsize(self) -> int:
        """Size of one element in bytes."""
        ...
