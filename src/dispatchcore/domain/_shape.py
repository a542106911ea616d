"""
N-dimensional extent descriptor with an explicit validity state.

This module defines `Shape`, the value type used throughout a dispatch to
describe the iteration extent of a kernel invocation or the layout of a
buffer.

Design notes
------------
- A `Shape` is either *invalid* (no dimension sequence at all, the default)
  or *valid* (a possibly empty sequence). Invalid is distinct from the
  zero-dimensional shape `Shape([])`, which describes a single scalar.
- Each dimension is a non-negative size or `-1`, the symbolic "unknown size"
  sentinel.
- Every accessor except `valid()`, equality, string rendering and
  `calc_contiguous_strides()` raises `InvalidStateError` on an invalid shape.
- Dimensions are normalized with `operator.index`, so NumPy integer scalars
  are accepted without importing NumPy here.
"""

from __future__ import annotations

import math
import operator
from typing import Iterable, Iterator, List, Optional, SupportsIndex, Tuple

from typing_extensions import Self

from ._errors import IndexOutOfRangeError, InvalidStateError

SYMBOLIC_DIM = -1


class Shape:
    """
    Optional ordered sequence of dimension sizes.

    Parameters
    ----------
    shape : Iterable[SupportsIndex] | Shape | None, optional
        Dimension sizes in order. `None` (the default) yields an invalid
        shape; any iterable, including an empty one, yields a valid shape.
        Passing a `Shape` copies it.

    Raises
    ------
    TypeError
        If `shape` is not iterable or an element is not an integer.

    Notes
    -----
    Item assignment (`shape[i] = v`) is supported, so shapes are unhashable.
    """

    __slots__ = ("_dims",)

    def __init__(self, shape: Optional[Iterable[SupportsIndex]] = None) -> None:
        self._dims: Optional[List[int]]
        if shape is None:
            self._dims = None
        elif isinstance(shape, Shape):
            self._dims = None if shape._dims is None else list(shape._dims)
        else:
            self._dims = [operator.index(d) for d in shape]

    def _require_valid(self, op: str) -> List[int]:
        if self._dims is None:
            raise InvalidStateError(op)
        return self._dims

    def _normalize_index(self, i: SupportsIndex, op: str) -> int:
        dims = self._require_valid(op)
        i = operator.index(i)
        n = len(dims)
        if not -n <= i < n:
            raise IndexOutOfRangeError(i, n)
        return i

    # ---------------------------------------------------------------------
    # State queries
    # ---------------------------------------------------------------------
    def valid(self) -> bool:
        """Return True if the shape holds a dimension sequence."""
        return self._dims is not None

    def size(self) -> int:
        """
        Return the number of dimensions.

        Raises
        ------
        InvalidStateError
            If the shape is invalid.
        """
        return len(self._require_valid("size"))

    def concrete(self) -> bool:
        """
        Check whether no dimension is symbolic (`-1`).

        Raises
        ------
        InvalidStateError
            If the shape is invalid.
        """
        return all(d != SYMBOLIC_DIM for d in self._require_valid("concrete"))

    def element_count(self) -> int:
        """
        Return the total number of elements of a contiguous array of this shape.

        The empty shape yields 1 (a single scalar element).

        Returns
        -------
        int
            Product of all dimension sizes.

        Raises
        ------
        InvalidStateError
            If the shape is invalid.

        Notes
        -----
        Symbolic dimensions are multiplied as-is, so the result is only
        meaningful for concrete shapes. Check `concrete()` first.
        """
        return math.prod(self._require_valid("element_count"))

    # ---------------------------------------------------------------------
    # Sequence access
    # ---------------------------------------------------------------------
    def as_tuple(self) -> Tuple[int, ...]:
        """Return the dimensions as a tuple."""
        return tuple(self._require_valid("as_tuple"))

    def as_list(self) -> List[int]:
        """Return a copy of the dimensions as a list."""
        return list(self._require_valid("as_list"))

    def __getitem__(self, i: SupportsIndex) -> int:
        """
        Return the size of dimension `i`.

        Negative indices count from the last dimension.

        Raises
        ------
        InvalidStateError
            If the shape is invalid.
        IndexOutOfRangeError
            If `i` is outside `[-size, size)`.
        """
        return self._dims[self._normalize_index(i, "index")]

    def __setitem__(self, i: SupportsIndex, value: SupportsIndex) -> None:
        """Overwrite the size of dimension `i` in place."""
        self._dims[self._normalize_index(i, "index")] = operator.index(value)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._require_valid("iterate")))

    # ---------------------------------------------------------------------
    # Composition
    # ---------------------------------------------------------------------
    def concat(self, other: "Shape") -> "Shape":
        """
        Concatenate two shapes.

        This is pure sequence concatenation, not broadcasting: the result's
        dimensions are this shape's followed by `other`'s.

        Parameters
        ----------
        other : Shape
            The shape appended after this one.

        Returns
        -------
        Shape
            A new valid shape with `self.size() + other.size()` dimensions.

        Raises
        ------
        InvalidStateError
            If either operand is invalid.
        """
        if not isinstance(other, Shape):
            raise TypeError(
                f"Shape.concat() expects a Shape, got {type(other).__name__}"
            )
        left = self._require_valid("concat")
        right = other._require_valid("concat")
        return Shape(left + right)

    def __add__(self, other: object) -> "Shape":
        if not isinstance(other, Shape):
            return NotImplemented
        return self.concat(other)

    def calc_contiguous_strides(self) -> "Shape":
        """
        Calculate the element strides of a contiguous (row-major) buffer of this shape.

        The stride of each dimension is the product of all dimension sizes to
        its right, so the last stride is always 1. For example `[2, 3, 4]`
        yields `[12, 4, 1]`.

        Returns
        -------
        Shape
            A shape of the same rank holding the strides, or an invalid shape
            if this shape is invalid.
        """
        if self._dims is None:
            return Shape()
        strides = [1] * len(self._dims)
        total = 1
        for i in range(len(self._dims) - 1, -1, -1):
            strides[i] = total
            total *= self._dims[i]
        return Shape(strides)

    def copy(self) -> Self:
        """Return an independent shape with the same state."""
        return self.__class__(self)

    # ---------------------------------------------------------------------
    # Equality and rendering
    # ---------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        """
        Compare two shapes.

        Two invalid shapes are equal, an invalid and a valid shape never are,
        and valid shapes are equal when their dimensions match in order and
        length.
        """
        if not isinstance(other, Shape):
            return NotImplemented
        return self._dims == other._dims

    __hash__ = None  # mutable via __setitem__

    def to_string(self) -> str:
        """
        Render the shape for display.

        Returns
        -------
        str
            `"[d0, d1, ...]"` for a valid shape, `"[invalid]"` otherwise.
        """
        if self._dims is None:
            return "[invalid]"
        return "[" + ", ".join(str(d) for d in self._dims) + "]"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self._dims is None:
            return "Shape(None)"
        return f"Shape({self._dims!r})"
