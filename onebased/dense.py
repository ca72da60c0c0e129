"""
Operations on dense, zero-based, two-dimensional NumPy arrays.

All functions take the array as their first argument. Functions that derive a new array never
return a view onto their input; the ``write_to_*`` functions mutate their target in place.

Indexed access (``slice_row``, ``slice_column``, the row/column of ``write_to_row`` and
``write_to_column``) is strict and raises ``BoundsCheckError``. Windowed access (offsets of the
``write_to_*`` functions, the bounds of ``sub_array``) is permissive: only the overlapping region
is touched, anything else is skipped without an error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import reduce
from typing import Any, TypeVar

import numpy as np
import numpy.typing as npt

from onebased.config import BadConfigError, config
from onebased.errors import EmptyArrayError
from onebased.indexing import (
    check_column_index,
    check_row_index,
    clamp_slice,
    overlap,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

__all__ = [
    "all_of",
    "any_of",
    "count",
    "fold_to_single_column",
    "fold_to_single_row",
    "map_array",
    "slice_column",
    "slice_row",
    "sub_array",
    "transpose",
    "write_to_area",
    "write_to_column",
    "write_to_row",
    "zip_array",
]


def result_dtype(dtype: npt.DTypeLike | None = None) -> np.dtype[Any]:
    """Resolve the dtype used to store values produced by user functions."""
    if dtype is not None:
        return np.dtype(dtype)
    value = config.get("array.result_dtype")
    try:
        return np.dtype(value)
    except TypeError as e:
        raise BadConfigError(f"array.result_dtype is not a valid dtype: {value!r}") from e


def _as_result(out: npt.NDArray[Any], dtype: npt.DTypeLike | None) -> npt.NDArray[Any]:
    resolved = result_dtype(dtype)
    if out.dtype == resolved:
        return out
    return out.astype(resolved)


def map_array(
    array: npt.NDArray[Any], func: Callable[[T], R], *, dtype: npt.DTypeLike | None = None
) -> npt.NDArray[Any]:
    """Apply ``func`` to every item, returning a new array of the same shape."""
    out = np.empty(array.shape, dtype=object)
    for row in range(array.shape[0]):
        for column in range(array.shape[1]):
            out[row, column] = func(array[row, column])
    return _as_result(out, dtype)


def zip_array(
    array: npt.NDArray[Any],
    func: Callable[[T, U], R],
    other: npt.NDArray[Any],
    *,
    dtype: npt.DTypeLike | None = None,
) -> npt.NDArray[Any]:
    """Combine two arrays item by item using ``func``.

    If the two arrays differ in shape, the result covers only their intersection: both arrays are
    anchored at (0, 0) and items beyond the smaller length of either dimension are dropped.

    Examples
    --------
    >>> a = np.array([["Hel", "wo", "a"], ["1", "2", "b"]])
    >>> b = np.array([["lo", "rld"], ["3", "4"], ["5", "6"]])
    >>> zip_array(a, lambda x, y: x + y, b).tolist()
    [['Hello', 'world'], ['13', '24']]
    """
    nrows = min(array.shape[0], other.shape[0])
    ncolumns = min(array.shape[1], other.shape[1])
    out = np.empty((nrows, ncolumns), dtype=object)
    for row in range(nrows):
        for column in range(ncolumns):
            out[row, column] = func(array[row, column], other[row, column])
    return _as_result(out, dtype)


def transpose(array: npt.NDArray[Any]) -> npt.NDArray[Any]:
    return array.T.copy()


def slice_row(array: npt.NDArray[Any], row: int) -> npt.NDArray[Any]:
    check_row_index(array, row)
    return array[row, :].copy()


def slice_column(array: npt.NDArray[Any], column: int) -> npt.NDArray[Any]:
    check_column_index(array, column)
    return array[:, column].copy()


def any_of(array: npt.NDArray[Any], predicate: Callable[[T], bool]) -> bool:
    # ndarray.flat walks in row-major order whatever the memory layout
    return any(predicate(value) for value in array.flat)


def all_of(array: npt.NDArray[Any], predicate: Callable[[T], bool]) -> bool:
    return not any_of(array, lambda value: not predicate(value))


def count(array: npt.NDArray[Any], predicate: Callable[[T], bool] | None = None) -> int:
    """Count the items matching ``predicate``, or all items when no predicate is given."""
    if predicate is None:
        return int(array.shape[0] * array.shape[1])
    return sum(1 for value in array.flat if predicate(value))


def _check_foldable(array: npt.NDArray[Any]) -> None:
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise EmptyArrayError(array.shape)


def fold_to_single_column(
    array: npt.NDArray[Any], func: Callable[[T, T], T], *, dtype: npt.DTypeLike | None = None
) -> npt.NDArray[Any]:
    """Reduce every row to a single value with a left fold of ``func`` over its items.

    Returns a 1D array with one item per row.

    Examples
    --------
    >>> a = np.array([["a", "b", "c"], ["1", "2", "3"]])
    >>> fold_to_single_column(a, lambda x, y: x + y).tolist()
    ['abc', '123']
    """
    _check_foldable(array)
    out = np.empty(array.shape[0], dtype=object)
    for row in range(array.shape[0]):
        out[row] = reduce(func, slice_row(array, row))
    return _as_result(out, dtype)


def fold_to_single_row(
    array: npt.NDArray[Any], func: Callable[[T, T], T], *, dtype: npt.DTypeLike | None = None
) -> npt.NDArray[Any]:
    """Reduce every column to a single value with a left fold of ``func`` over its items.

    Returns a 1D array with one item per column.
    """
    _check_foldable(array)
    out = np.empty(array.shape[1], dtype=object)
    for column in range(array.shape[1]):
        out[column] = reduce(func, slice_column(array, column))
    return _as_result(out, dtype)


def write_to_row(
    array: npt.NDArray[Any], values: npt.ArrayLike, row: int, column_offset: int
) -> None:
    """Write a 1D array into a row of ``array``, shifted by ``column_offset``.

    Item ``i`` of ``values`` goes to column ``i + column_offset``. Only items that line up
    with a column of ``array`` are written; neither all of ``values`` nor all of the row are
    guaranteed to be covered.

    Parameters
    ----------
    array : ndarray
        The 2D array to write to.
    values : array-like
        The 1D array to write.
    row : int
        The row to write to. Must be a valid zero-based row index.
    column_offset : int
        Positive or negative amount by which to shift ``values`` along the row.

    Examples
    --------
    >>> a = np.array([[1, 2, 3, 4], [11, 12, 13, 14]])
    >>> write_to_row(a, [21, 22, 23, 24], 0, -1)
    >>> a
    array([[22, 23, 24,  4],
           [11, 12, 13, 14]])
    """
    check_row_index(array, row)
    values = np.asarray(values)
    dim = overlap(column_offset, len(values), array.shape[1])
    logger.debug(
        "write_to_row: row %d, columns %r <- items %r (offset %d)",
        row,
        dim.dst_sel,
        dim.src_sel,
        column_offset,
    )
    if dim.nitems > 0:
        array[row, dim.dst_sel] = values[dim.src_sel]


def write_to_column(
    array: npt.NDArray[Any], values: npt.ArrayLike, column: int, row_offset: int
) -> None:
    """Write a 1D array into a column of ``array``, shifted by ``row_offset``.

    The column counterpart of ``write_to_row``: item ``i`` of ``values`` goes to row
    ``i + row_offset`` and non-overlapping items are skipped.
    """
    check_column_index(array, column)
    values = np.asarray(values)
    dim = overlap(row_offset, len(values), array.shape[0])
    logger.debug(
        "write_to_column: column %d, rows %r <- items %r (offset %d)",
        column,
        dim.dst_sel,
        dim.src_sel,
        row_offset,
    )
    if dim.nitems > 0:
        array[dim.dst_sel, column] = values[dim.src_sel]


def write_to_area(
    target: npt.NDArray[Any], source: npt.ArrayLike, row_offset: int, column_offset: int
) -> None:
    """Write one 2D array into another. The arrays do not need to be the same size.

    ``source`` is first aligned with the top left corner of ``target``, then shifted by
    ``row_offset`` and ``column_offset``, either of which may be negative. Exactly the
    rectangular area where the two arrays overlap after the shift is written; when they do not
    overlap at all, ``target`` is left unchanged.

    Examples
    --------
    >>> target = np.zeros((3, 3), dtype=int)
    >>> write_to_area(target, np.ones((2, 2), dtype=int), 2, -1)
    >>> target
    array([[0, 0, 0],
           [0, 0, 0],
           [1, 0, 0]])
    """
    source = np.asarray(source)
    rows = overlap(row_offset, source.shape[0], target.shape[0])
    columns = overlap(column_offset, source.shape[1], target.shape[1])
    if rows.nitems == 0 or columns.nitems == 0:
        logger.debug(
            "write_to_area: source %r at offset (%d, %d) does not overlap target %r",
            source.shape,
            row_offset,
            column_offset,
            target.shape,
        )
        return
    logger.debug(
        "write_to_area: rows %r, columns %r <- source rows %r, columns %r",
        rows.dst_sel,
        columns.dst_sel,
        rows.src_sel,
        columns.src_sel,
    )
    target[rows.dst_sel, columns.dst_sel] = source[rows.src_sel, columns.src_sel]


def sub_array(
    array: npt.NDArray[Any], start_row: int, start_column: int, stop_row: int, stop_column: int
) -> npt.NDArray[Any]:
    """Copy the rectangle ``[start_row, stop_row) x [start_column, stop_column)``.

    Each bound is clamped to the array independently: negative starts become zero and stops
    beyond the end become the length. A dimension whose stop ends up at or before its start has
    length zero in the result, e.g. a ``(0, n)`` array for an empty row selection.
    """
    rows = clamp_slice(start_row, stop_row, array.shape[0])
    columns = clamp_slice(start_column, stop_column, array.shape[1])
    logger.debug(
        "sub_array: requested rows [%d, %d), columns [%d, %d) of %r; selected %r, %r",
        start_row,
        stop_row,
        start_column,
        stop_column,
        array.shape,
        rows,
        columns,
    )
    return array[rows, columns].copy()
