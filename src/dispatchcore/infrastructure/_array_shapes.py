"""
Shape helpers for host arrays (NumPy backend).

Argument-binding code describes host arrays to a dispatch through `Shape`
values. These helpers derive those shapes and compare an array's actual
memory layout against the contiguous layout its shape implies.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..domain._shape import Shape
from ..domain.types._numpy import NDArrayLike


def shape_of(array: Optional[NDArrayLike]) -> Shape:
    """
    Return the shape of an array-like object.

    Parameters
    ----------
    array : NDArrayLike | None
        Any object exposing an ndarray-style ``shape`` tuple. ``None`` stands
        for "no array bound yet".

    Returns
    -------
    Shape
        A valid shape with the array's extents, or an invalid shape if
        `array` is None.
    """
    if array is None:
        return Shape()
    return Shape(array.shape)


def byte_strides(shape: Shape, itemsize: int) -> Shape:
    """
    Contiguous (row-major) strides of `shape` in bytes.

    Parameters
    ----------
    shape : Shape
        A valid, concrete shape.
    itemsize : int
        Element size in bytes. Must be positive.

    Returns
    -------
    Shape
        Per-dimension byte strides.

    Raises
    ------
    InvalidStateError
        If `shape` is invalid.
    ValueError
        If `shape` has symbolic dimensions or `itemsize` is not positive.
    """
    if not shape.concrete():
        raise ValueError(f"byte_strides() requires a concrete shape, got {shape}")
    if itemsize <= 0:
        raise ValueError(f"itemsize must be positive, got {itemsize}")
    strides = np.asarray(shape.calc_contiguous_strides().as_tuple(), dtype=np.int64)
    return Shape(strides * itemsize)


def is_contiguous(array: NDArrayLike) -> bool:
    """
    Check whether an array is laid out as a contiguous row-major buffer.

    Dimensions of extent 0 or 1 are skipped, as their stride never affects
    which memory is visited.

    Parameters
    ----------
    array : NDArrayLike
        Array exposing ``shape``, ``strides`` (bytes) and ``itemsize``.

    Returns
    -------
    bool
        True if the array's strides match its shape's contiguous strides.
    """
    shape = np.asarray(array.shape, dtype=np.int64)
    if shape.size == 0 or np.any(shape == 0):
        return True

    actual = np.asarray(array.strides, dtype=np.int64)
    expected = np.asarray(
        byte_strides(shape_of(array), array.itemsize).as_tuple(), dtype=np.int64
    )
    mask = shape > 1
    return bool(np.array_equal(actual[mask], expected[mask]))
