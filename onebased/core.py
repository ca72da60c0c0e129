from __future__ import annotations

from collections.abc import Callable, Iterator
from functools import reduce
from typing import Any, TypeVar

import numpy as np
import numpy.typing as npt

from onebased import dense
from onebased._info import ArrayInfo
from onebased.config import Orientation, parse_orientation
from onebased.errors import ArrayShapeError, EmptyArrayError
from onebased.indexing import check_index

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

__all__ = ["OneBasedArray", "OneBasedArray2D"]


def _wrap(data: npt.ArrayLike, ndim: int) -> npt.NDArray[Any]:
    # no copy for ndarray input, the wrapper shares the caller's storage
    data = np.asarray(data)
    if data.ndim != ndim:
        raise ArrayShapeError(ndim, data.ndim)
    return data


def _unwrap(obj: Any) -> Any:
    if isinstance(obj, (OneBasedArray, OneBasedArray2D)):
        return obj.zero_based
    return obj


class OneBasedArray:
    """A linear array addressed with indices starting at 1.

    Parameters
    ----------
    data : array-like
        The 1D array to wrap. A NumPy array is wrapped by reference, so writes through the
        one-based array are visible in ``data`` and vice versa.

    Examples
    --------
    >>> a = OneBasedArray(np.array([10, 20, 30]))
    >>> a[1]
    np.int64(10)
    >>> a[3] = 31
    >>> a.zero_based
    array([10, 20, 31])
    """

    def __init__(self, data: npt.ArrayLike) -> None:
        self._data = _wrap(data, 1)

    @property
    def zero_based(self) -> npt.NDArray[Any]:
        """The wrapped zero-based array."""
        return self._data

    @property
    def shape(self) -> tuple[int]:
        return (len(self._data),)

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._data.dtype

    @property
    def length(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def _translate(self, index: Any) -> int:
        check_index(index, len(self._data), origin=1)
        return int(index) - 1

    def __getitem__(self, index: int) -> Any:
        return self._data[self._translate(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[self._translate(index)] = value

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, OneBasedArray)
            and bool(np.array_equal(self._data, other._data))
        )

    def __array__(
        self, dtype: npt.DTypeLike | None = None, copy: bool | None = None
    ) -> npt.NDArray[Any]:
        if copy is False:
            msg = "`copy=False` is not supported. This method always creates a copy."
            raise ValueError(msg)
        return np.array(self._data, dtype=dtype)

    def __repr__(self) -> str:
        return f"<OneBasedArray shape={self.shape} dtype={self.dtype}>"

    @property
    def info(self) -> ArrayInfo:
        return ArrayInfo(
            _type="OneBasedArray",
            _data_type=self.dtype,
            _shape=self.shape,
            _count_bytes=self._data.nbytes,
        )

    def map(
        self, func: Callable[[T], R], *, dtype: npt.DTypeLike | None = None
    ) -> OneBasedArray:
        out = np.empty(len(self._data), dtype=object)
        for i, value in enumerate(self._data):
            out[i] = func(value)
        return OneBasedArray(out.astype(dense.result_dtype(dtype), copy=False))

    def fold(self, func: Callable[[T, T], T]) -> Any:
        """Reduce the array to a single value with a left fold of ``func``."""
        if len(self._data) == 0:
            raise EmptyArrayError(self.shape)
        return reduce(func, self._data)

    def to_2d(self, orientation: Orientation) -> OneBasedArray2D:
        """Convert to a 2D array with a single row or a single column.

        Parameters
        ----------
        orientation : {"row", "column"}
            ``"column"`` lays the values out across columns, giving a ``(1, n)`` array.
            ``"row"`` lays them out down the rows, giving a ``(n, 1)`` array.

        The result is a new array; the data is copied.
        """
        orientation = parse_orientation(orientation)
        if orientation == "column":
            return OneBasedArray2D(self._data.reshape(1, -1).copy())
        return OneBasedArray2D(self._data.reshape(-1, 1).copy())


class OneBasedArray2D:
    """A two-dimensional view onto a dense array, addressed with indices starting at 1.

    The view translates every row and column index it receives by subtracting 1 and delegates
    to the zero-based operations in :mod:`onebased.dense`. Indices are validated against the
    one-based range first, so bounds errors report the index the caller actually passed.
    Offsets (the shift arguments of the ``write_to_*`` methods) are relative displacements and
    are passed through untranslated.

    Parameters
    ----------
    data : array-like
        The 2D array to wrap. A NumPy array is wrapped by reference and never copied.

    Examples
    --------
    >>> backing = np.array([[1, 2, 3], [4, 5, 6]])
    >>> z = OneBasedArray2D(backing)
    >>> z[2, 3]
    np.int64(6)
    >>> z[1, 1] = 0
    >>> backing[0, 0]
    np.int64(0)
    """

    def __init__(self, data: npt.ArrayLike) -> None:
        self._data = _wrap(data, 2)

    @property
    def zero_based(self) -> npt.NDArray[Any]:
        """The wrapped zero-based array."""
        return self._data

    @property
    def shape(self) -> tuple[int, int]:
        return (self._data.shape[0], self._data.shape[1])

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._data.dtype

    @property
    def ndim(self) -> int:
        return 2

    @property
    def size(self) -> int:
        return int(self._data.size)

    def get_length(self, dim: int) -> int:
        """Length of dimension ``dim``. The dimension number is zero-based: 0 for rows, 1 for
        columns."""
        return int(self._data.shape[dim])

    def _check_row(self, row: Any) -> int:
        check_index(row, self._data.shape[0], origin=1, axis="row")
        return int(row) - 1

    def _check_column(self, column: Any) -> int:
        check_index(column, self._data.shape[1], origin=1, axis="column")
        return int(column) - 1

    def _translate(self, selection: Any) -> tuple[int, int]:
        if not isinstance(selection, tuple) or len(selection) != 2:
            raise ArrayShapeError(
                f"expected a (row, column) tuple of one-based indices, got {selection!r}"
            )
        row, column = selection
        return self._check_row(row), self._check_column(column)

    def __getitem__(self, selection: tuple[int, int]) -> Any:
        return self._data[self._translate(selection)]

    def __setitem__(self, selection: tuple[int, int], value: Any) -> None:
        self._data[self._translate(selection)] = value

    def __len__(self) -> int:
        return int(self._data.shape[0])

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, OneBasedArray2D)
            and bool(np.array_equal(self._data, other._data))
        )

    def __array__(
        self, dtype: npt.DTypeLike | None = None, copy: bool | None = None
    ) -> npt.NDArray[Any]:
        """
        This method is used by numpy when converting a OneBasedArray2D into a numpy array.
        The result is always a copy; use ``zero_based`` to reach the wrapped array itself.
        """
        if copy is False:
            msg = "`copy=False` is not supported. This method always creates a copy."
            raise ValueError(msg)
        return np.array(self._data, dtype=dtype)

    def __repr__(self) -> str:
        return f"<OneBasedArray2D shape={self.shape} dtype={self.dtype}>"

    @property
    def info(self) -> ArrayInfo:
        """
        Return a summary of the array.

        Examples
        --------
        >>> OneBasedArray2D(np.zeros((3, 4), dtype="int32")).info
        Type         : OneBasedArray2D
        Data type    : int32
        Shape        : (3, 4)
        Index origin : 1
        No. bytes    : 48
        """
        return ArrayInfo(
            _type="OneBasedArray2D",
            _data_type=self.dtype,
            _shape=self.shape,
            _count_bytes=self._data.nbytes,
        )

    # derived arrays

    def map(
        self, func: Callable[[T], R], *, dtype: npt.DTypeLike | None = None
    ) -> OneBasedArray2D:
        return OneBasedArray2D(dense.map_array(self._data, func, dtype=dtype))

    def zip_array(
        self,
        func: Callable[[T, U], R],
        other: OneBasedArray2D | npt.ArrayLike,
        *,
        dtype: npt.DTypeLike | None = None,
    ) -> OneBasedArray2D:
        """Combine with ``other`` item by item. The result covers the intersection of the two
        shapes; see :func:`onebased.dense.zip_array`."""
        other = _wrap(_unwrap(other), 2)
        return OneBasedArray2D(dense.zip_array(self._data, func, other, dtype=dtype))

    def transpose(self) -> OneBasedArray2D:
        return OneBasedArray2D(dense.transpose(self._data))

    def slice_row(self, row: int) -> OneBasedArray:
        return OneBasedArray(dense.slice_row(self._data, self._check_row(row)))

    def slice_column(self, column: int) -> OneBasedArray:
        return OneBasedArray(dense.slice_column(self._data, self._check_column(column)))

    def fold_to_single_column(
        self, func: Callable[[T, T], T], *, dtype: npt.DTypeLike | None = None
    ) -> OneBasedArray:
        return OneBasedArray(dense.fold_to_single_column(self._data, func, dtype=dtype))

    def fold_to_single_row(
        self, func: Callable[[T, T], T], *, dtype: npt.DTypeLike | None = None
    ) -> OneBasedArray:
        return OneBasedArray(dense.fold_to_single_row(self._data, func, dtype=dtype))

    def sub_array(
        self, start_row: int, start_column: int, stop_row: int, stop_column: int
    ) -> OneBasedArray2D:
        """Copy the rectangle from (``start_row``, ``start_column``) up to but excluding
        (``stop_row``, ``stop_column``), all one-based.

        Bounds are clamped rather than checked, so a selection partly or wholly outside the
        array yields a smaller or empty array.

        Examples
        --------
        >>> z = OneBasedArray2D(np.array([[1, 11], [2, 12], [3, 13], [4, 14]]))
        >>> z.sub_array(1, 1, 4, 4).zero_based
        array([[ 1, 11],
               [ 2, 12],
               [ 3, 13]])
        """
        return OneBasedArray2D(
            dense.sub_array(
                self._data, start_row - 1, start_column - 1, stop_row - 1, stop_column - 1
            )
        )

    # predicates

    def any(self, predicate: Callable[[T], bool]) -> bool:
        return dense.any_of(self._data, predicate)

    def all(self, predicate: Callable[[T], bool]) -> bool:
        return dense.all_of(self._data, predicate)

    def count(self, predicate: Callable[[T], bool] | None = None) -> int:
        return dense.count(self._data, predicate)

    # windowed writes

    def write_to_row(
        self, values: OneBasedArray | npt.ArrayLike, row: int, column_offset: int
    ) -> None:
        """Write ``values`` into one-based ``row``, shifted by ``column_offset`` columns.

        With an offset of 0, ``values[1]`` lands in column 1. Only values that line up with a
        column of this array are written.
        """
        dense.write_to_row(self._data, _unwrap(values), self._check_row(row), column_offset)

    def write_to_column(
        self, values: OneBasedArray | npt.ArrayLike, column: int, row_offset: int
    ) -> None:
        dense.write_to_column(
            self._data, _unwrap(values), self._check_column(column), row_offset
        )

    def write_to_area(
        self, values: OneBasedArray2D | npt.ArrayLike, row_offset: int, column_offset: int
    ) -> None:
        """Write the 2D ``values`` into this array, anchored at row ``1 + row_offset`` and
        column ``1 + column_offset``. Only the overlapping area is written."""
        dense.write_to_area(self._data, _wrap(_unwrap(values), 2), row_offset, column_offset)
