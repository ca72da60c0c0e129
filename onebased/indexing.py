from __future__ import annotations

import numbers
from typing import TYPE_CHECKING, Any, NamedTuple

from onebased.errors import BoundsCheckError

if TYPE_CHECKING:
    import numpy.typing as npt


def is_integer(x: Any) -> bool:
    """True if x is an integer (both pure Python or NumPy), booleans excluded."""
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def is_valid_index(index: int, dim_len: int, *, origin: int = 0) -> bool:
    return origin <= index < dim_len + origin


def check_index(index: Any, dim_len: int, *, origin: int = 0, axis: str = "index") -> None:
    """Raise ``BoundsCheckError`` unless ``index`` addresses an item of a dimension.

    Parameters
    ----------
    index : int
        The index to check.
    dim_len : int
        Length of the dimension.
    origin : int, default=0
        Index of the first item; 0 for zero-based storage, 1 for the one-based view.
    axis : str, default="index"
        Name of the index used in the error message, e.g. "row" or "column".
    """
    if not is_integer(index):
        raise TypeError(f"{axis} must be an integer, got {index!r}")
    if not is_valid_index(index, dim_len, origin=origin):
        raise BoundsCheckError(int(index), dim_len, origin=origin, axis=axis)


def check_row_index(array: npt.NDArray[Any], row: Any) -> None:
    check_index(row, array.shape[0], axis="row")


def check_column_index(array: npt.NDArray[Any], column: Any) -> None:
    check_index(column, array.shape[1], axis="column")


class DimOverlap(NamedTuple):
    """The overlap of a source shifted along a single dimension with a destination.

    Attributes
    ----------
    start
        First source position that lands inside the destination.
    stop
        Source position before which to stop; equal to ``start`` when nothing overlaps.
    offset
        Signed displacement of the source relative to the destination origin.
    """

    start: int
    stop: int
    offset: int

    @property
    def nitems(self) -> int:
        return self.stop - self.start

    @property
    def src_sel(self) -> slice:
        return slice(self.start, self.stop)

    @property
    def dst_sel(self) -> slice:
        return slice(self.start + self.offset, self.stop + self.offset)


def overlap(offset: int, src_len: int, dst_len: int) -> DimOverlap:
    """Compute which items of a source of length ``src_len``, shifted by ``offset``, line up
    with a destination of length ``dst_len``.

    Examples
    --------
    >>> overlap(-1, 4, 4)
    DimOverlap(start=1, stop=4, offset=-1)
    >>> overlap(4, 4, 4).nitems
    0
    """
    start = max(0, -offset)
    stop = min(src_len, dst_len - offset)
    return DimOverlap(start, max(start, stop), offset)


def clamp_slice(start: int, stop: int, dim_len: int) -> slice:
    """Clamp ``[start, stop)`` to ``[0, dim_len)``. An inverted or fully out of range request
    yields an empty slice rather than an error."""
    start = min(max(start, 0), dim_len)
    stop = max(min(stop, dim_len), start)
    return slice(start, stop)
