from __future__ import annotations

from typing import Any

import numpy as np
import numpy.typing as npt

from onebased.config import Orientation, config
from onebased.core import OneBasedArray, OneBasedArray2D

__all__ = ["array", "empty", "from_1d", "full", "ones", "zeros"]


def _default_dtype(dtype: npt.DTypeLike | None) -> npt.DTypeLike:
    if dtype is None:
        return config.get("array.dtype")
    return dtype


def array(data: npt.ArrayLike, dtype: npt.DTypeLike | None = None) -> OneBasedArray2D:
    """Create a one-based view of `data`.

    The `data` argument should be a NumPy array or array-like object. A NumPy array whose dtype
    already matches is wrapped as is, without copying.

    Examples
    --------
    >>> import numpy as np
    >>> import onebased
    >>> a = np.arange(6).reshape(2, 3)
    >>> z = onebased.array(a)
    >>> z
    <OneBasedArray2D shape=(2, 3) dtype=int64>
    >>> z[2, 1]
    np.int64(3)

    """
    return OneBasedArray2D(np.asarray(data, dtype=dtype))


def empty(shape: tuple[int, int], dtype: npt.DTypeLike | None = None) -> OneBasedArray2D:
    """Create an array without initializing its items.

    For object arrays every item starts out as None.
    """
    return OneBasedArray2D(np.empty(shape, dtype=_default_dtype(dtype)))


def zeros(shape: tuple[int, int], dtype: npt.DTypeLike | None = None) -> OneBasedArray2D:
    """Create an array filled with zeros.

    Examples
    --------
    >>> import onebased
    >>> z = onebased.zeros((2, 2))
    >>> z
    <OneBasedArray2D shape=(2, 2) dtype=float64>
    >>> z.zero_based
    array([[0., 0.],
           [0., 0.]])

    """
    return OneBasedArray2D(np.zeros(shape, dtype=_default_dtype(dtype)))


def ones(shape: tuple[int, int], dtype: npt.DTypeLike | None = None) -> OneBasedArray2D:
    """Create an array filled with ones."""
    return OneBasedArray2D(np.ones(shape, dtype=_default_dtype(dtype)))


def full(
    shape: tuple[int, int], fill_value: Any, dtype: npt.DTypeLike | None = None
) -> OneBasedArray2D:
    """Create an array filled with `fill_value`. Without an explicit `dtype`, the dtype is
    inferred from `fill_value` as NumPy does."""
    return OneBasedArray2D(np.full(shape, fill_value, dtype=dtype))


def from_1d(values: OneBasedArray | npt.ArrayLike, orientation: Orientation) -> OneBasedArray2D:
    """Create a single-row or single-column array from 1D `values`.

    See :meth:`onebased.core.OneBasedArray.to_2d` for the meaning of `orientation`.
    """
    if not isinstance(values, OneBasedArray):
        values = OneBasedArray(values)
    return values.to_2d(orientation)
