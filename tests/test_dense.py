import logging
from typing import Any

import numpy as np
import numpy.typing as npt
import pytest
from numpy.testing import assert_array_equal

from onebased import dense
from onebased.config import BadConfigError, config
from onebased.errors import BoundsCheckError, EmptyArrayError

STRINGS = np.array([["a", "b"], ["1", "2"]])


def concat(a: str, b: str) -> str:
    return a + b


def test_map_array() -> None:
    grid = np.array([["H", "el", "lo "], ["Wor", "ld", "!"]])
    result = dense.map_array(grid, len)
    assert result.shape == (2, 3)
    assert result.dtype == object
    assert result.tolist() == [[1, 2, 3], [3, 2, 1]]


def test_map_array_dtype() -> None:
    grid = np.array([["H", "el"], ["Wor", "ld"]])
    result = dense.map_array(grid, len, dtype="i4")
    assert result.dtype == np.dtype("i4")
    assert_array_equal(result, [[1, 2], [3, 2]])


def test_map_array_empty() -> None:
    result = dense.map_array(np.empty((0, 3)), str)
    assert result.shape == (0, 3)


def test_map_array_result_dtype_from_config() -> None:
    config.set({"array.result_dtype": "int64"})
    result = dense.map_array(np.array([[1, 2]]), lambda x: x * 2)
    assert result.dtype == np.dtype("int64")
    assert_array_equal(result, [[2, 4]])


def test_result_dtype_bad_config() -> None:
    config.set({"array.result_dtype": "not-a-dtype"})
    with pytest.raises(BadConfigError):
        dense.map_array(np.array([[1]]), str)


def test_zip_array_same_shape() -> None:
    first = np.array([["Hel", "wo"], ["1", "2"]])
    second = np.array([["lo", "rld"], ["3", "4"]])
    zipped = dense.zip_array(first, concat, second)
    assert zipped.tolist() == [["Hello", "world"], ["13", "24"]]


def test_zip_array_different_shapes_takes_intersection() -> None:
    first = np.array([["Hel", "wo", "a"], ["1", "2", "b"]])
    second = np.array([["lo", "rld"], ["3", "4"], ["5", "6"]])
    zipped = dense.zip_array(first, concat, second)
    assert zipped.shape == (2, 2)
    assert zipped.tolist() == [["Hello", "world"], ["13", "24"]]


@pytest.mark.parametrize(
    ("shape_a", "shape_b", "expected"),
    [
        ((2, 3), (3, 2), (2, 2)),
        ((1, 5), (4, 4), (1, 4)),
        ((0, 3), (2, 2), (0, 2)),
    ],
)
def test_zip_array_shape(
    shape_a: tuple[int, int], shape_b: tuple[int, int], expected: tuple[int, int]
) -> None:
    zipped = dense.zip_array(np.zeros(shape_a), lambda x, y: x + y, np.ones(shape_b))
    assert zipped.shape == expected


TRANSPOSE_CASES = [
    np.array([["1", "2"], ["3", "4"]]),
    np.array([["1"], ["2"], ["3"]]),
    np.array([["1", "2", "3"]]),
    np.array([["1", "2", "3"], ["4", "5", "6"]]),
    np.empty((0, 2), dtype="U1"),
]


@pytest.mark.parametrize("a", TRANSPOSE_CASES)
def test_transpose(a: npt.NDArray[Any]) -> None:
    transposed = dense.transpose(a)
    assert transposed.shape == (a.shape[1], a.shape[0])
    for i in range(transposed.shape[0]):
        for j in range(transposed.shape[1]):
            assert transposed[i, j] == a[j, i]
    assert_array_equal(dense.transpose(transposed), a)


def test_transpose_is_a_copy() -> None:
    a = np.array([[1, 2], [3, 4]])
    transposed = dense.transpose(a)
    transposed[0, 1] = 100
    assert a[1, 0] == 3


def test_slice_row_and_column() -> None:
    a = np.array([["1", "2"], ["a", "b"], ["5", "6"]])
    assert_array_equal(dense.slice_row(a, 1), ["a", "b"])
    assert_array_equal(dense.slice_column(a, 1), ["2", "b", "6"])

    row = dense.slice_row(a, 0)
    row[0] = "x"
    assert a[0, 0] == "1"


@pytest.mark.parametrize("row", [-1, 3, 100])
def test_slice_row_out_of_bounds(row: int) -> None:
    a = np.zeros((3, 2))
    with pytest.raises(BoundsCheckError):
        dense.slice_row(a, row)


@pytest.mark.parametrize("column", [-1, 2])
def test_slice_column_out_of_bounds(column: int) -> None:
    a = np.zeros((3, 2))
    with pytest.raises(BoundsCheckError):
        dense.slice_column(a, column)


@pytest.mark.parametrize(
    ("data", "value", "expected"),
    [
        (STRINGS, "a", True),
        (STRINGS, "A", False),
        (np.empty((0, 0)), 0, False),
    ],
)
def test_any_of(data: npt.NDArray[Any], value: Any, expected: bool) -> None:
    assert dense.any_of(data, lambda s: s == value) is expected


def test_any_of_short_circuits() -> None:
    seen = []

    def predicate(value: int) -> bool:
        seen.append(value)
        return value == 2

    assert dense.any_of(np.array([[1, 2], [3, 4]]), predicate)
    assert seen == [1, 2]


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (STRINGS, True),
        (np.array([["a", "b"], ["12", "2"]]), False),
        (np.empty((0, 2), dtype="U1"), True),
    ],
)
def test_all_of(data: npt.NDArray[Any], expected: bool) -> None:
    assert dense.all_of(data, lambda s: len(s) == 1) is expected


def test_all_of_single_match_is_not_all() -> None:
    assert not dense.all_of(STRINGS, lambda s: s == "a")


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (STRINGS, 4),
        (np.array([["a", "b"], ["12", "2"]]), 3),
        (np.array([["aa", "bb"]]), 0),
    ],
)
def test_count_predicate(data: npt.NDArray[Any], expected: int) -> None:
    assert dense.count(data, lambda s: len(s) == 1) == expected


def test_count() -> None:
    assert dense.count(np.zeros((3, 5))) == 15
    assert dense.count(np.zeros((0, 5))) == 0


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (np.array([["a", "b"], ["1", "2"]]), ["a1", "b2"]),
        (np.array([["a", "b", "c"], ["1", "2", "3"]]), ["a1", "b2", "c3"]),
        (np.array([["a"], ["1"]]), ["a1"]),
    ],
)
def test_fold_to_single_row(data: npt.NDArray[Any], expected: list[str]) -> None:
    assert dense.fold_to_single_row(data, concat).tolist() == expected


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (np.array([["a", "b"], ["1", "2"]]), ["ab", "12"]),
        (np.array([["a", "b", "c"], ["1", "2", "3"]]), ["abc", "123"]),
        (np.array([["a"], ["1"]]), ["a", "1"]),
    ],
)
def test_fold_to_single_column(data: npt.NDArray[Any], expected: list[str]) -> None:
    assert dense.fold_to_single_column(data, concat).tolist() == expected


def test_fold_is_a_left_fold() -> None:
    data = np.array([[16, 4, 2]])
    assert dense.fold_to_single_column(data, lambda a, b: a // b).tolist() == [2]


@pytest.mark.parametrize("shape", [(0, 3), (3, 0), (0, 0)])
def test_fold_empty_raises(shape: tuple[int, int]) -> None:
    a = np.empty(shape)
    with pytest.raises(EmptyArrayError):
        dense.fold_to_single_row(a, concat)
    with pytest.raises(EmptyArrayError):
        dense.fold_to_single_column(a, concat)


ROWS = [[1, 2, 3, 4], [11, 12, 13, 14]]


@pytest.mark.parametrize(
    ("values", "row", "offset", "expected"),
    [
        ([21, 22, 23], 1, 1, [[1, 2, 3, 4], [11, 21, 22, 23]]),
        ([21, 22, 23], 1, 0, [[1, 2, 3, 4], [21, 22, 23, 14]]),
        ([1, 2, 3, 4], 0, 0, [[1, 2, 3, 4], [11, 12, 13, 14]]),
        ([1, 2, 3, 4], 0, 2, [[1, 2, 1, 2], [11, 12, 13, 14]]),
        ([21, 22, 23, 24], 0, 4, [[1, 2, 3, 4], [11, 12, 13, 14]]),
        ([21, 22, 23, 24], 0, -1, [[22, 23, 24, 4], [11, 12, 13, 14]]),
        ([21, 22, 23, 24], 0, -4, [[1, 2, 3, 4], [11, 12, 13, 14]]),
        ([21, 22, 23, 24, 25, 26], 0, -1, [[22, 23, 24, 25], [11, 12, 13, 14]]),
        ([], 0, 0, [[1, 2, 3, 4], [11, 12, 13, 14]]),
    ],
)
def test_write_to_row(
    values: list[int], row: int, offset: int, expected: list[list[int]]
) -> None:
    data = np.array(ROWS, dtype="u1")
    dense.write_to_row(data, np.array(values, dtype="u1"), row, offset)
    assert_array_equal(data, expected)


@pytest.mark.parametrize("row", [-1, 2, 462])
def test_write_to_row_invalid_row(row: int) -> None:
    data = np.array(ROWS)
    with pytest.raises(BoundsCheckError):
        dense.write_to_row(data, [], row, 0)


COLUMNS = [[1, 11], [2, 12], [3, 13], [4, 14]]


@pytest.mark.parametrize(
    ("values", "column", "offset", "expected"),
    [
        ([21, 22, 23], 1, 1, [[1, 11], [2, 21], [3, 22], [4, 23]]),
        ([21, 22, 23], 1, 0, [[1, 21], [2, 22], [3, 23], [4, 14]]),
        ([1, 2, 3, 4], 0, 0, [[1, 11], [2, 12], [3, 13], [4, 14]]),
        ([1, 2, 3, 4], 0, 2, [[1, 11], [2, 12], [1, 13], [2, 14]]),
        ([21, 22, 23, 24], 0, 4, [[1, 11], [2, 12], [3, 13], [4, 14]]),
        ([21, 22, 23, 24], 0, -1, [[22, 11], [23, 12], [24, 13], [4, 14]]),
    ],
)
def test_write_to_column(
    values: list[int], column: int, offset: int, expected: list[list[int]]
) -> None:
    data = np.array(COLUMNS, dtype="u1")
    dense.write_to_column(data, np.array(values, dtype="u1"), column, offset)
    assert_array_equal(data, expected)


@pytest.mark.parametrize("column", [-1, 2, 34])
def test_write_to_column_invalid_column(column: int) -> None:
    data = np.array(COLUMNS)
    with pytest.raises(BoundsCheckError):
        dense.write_to_column(data, [], column, 0)


SOURCE = np.array([[101, 111, 121], [102, 112, 122], [103, 113, 123]])


@pytest.mark.parametrize(
    ("source", "row_offset", "column_offset", "expected"),
    [
        (
            SOURCE,
            0,
            0,
            [[101, 111, 121, 31], [102, 112, 122, 32], [103, 113, 123, 33], [4, 14, 24, 34]],
        ),
        (
            SOURCE[:, :2],
            1,
            1,
            [[1, 11, 21, 31], [2, 101, 111, 32], [3, 102, 112, 33], [4, 103, 113, 34]],
        ),
        (
            SOURCE,
            -2,
            -1,
            [[113, 123, 21, 31], [2, 12, 22, 32], [3, 13, 23, 33], [4, 14, 24, 34]],
        ),
        (
            SOURCE,
            2,
            2,
            [[1, 11, 21, 31], [2, 12, 22, 32], [3, 13, 101, 111], [4, 14, 102, 112]],
        ),
    ],
)
def test_write_to_area(
    grid: npt.NDArray[Any],
    source: npt.NDArray[Any],
    row_offset: int,
    column_offset: int,
    expected: list[list[int]],
) -> None:
    dense.write_to_area(grid, source, row_offset, column_offset)
    assert_array_equal(grid, expected)


@pytest.mark.parametrize(
    ("row_offset", "column_offset"),
    [(4, 0), (0, 4), (-3, 0), (0, -3), (100, -100), (-3, -3)],
)
def test_write_to_area_no_overlap(
    grid: npt.NDArray[Any], row_offset: int, column_offset: int
) -> None:
    before = grid.copy()
    dense.write_to_area(grid, SOURCE, row_offset, column_offset)
    assert_array_equal(grid, before)


def test_write_to_area_logs_no_overlap(
    grid: npt.NDArray[Any], caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG, logger="onebased.dense"):
        dense.write_to_area(grid, SOURCE, 10, 0)
    assert "does not overlap" in caplog.text


BYTES = np.array([[1, 11], [2, 12], [3, 13], [4, 14]], dtype="u1")


@pytest.mark.parametrize(
    ("bounds", "expected"),
    [
        ((-6, -3, 7, 5), BYTES),
        ((0, 0, 4, 2), BYTES),
        ((1, 1, 3, 2), np.array([[12], [13]], dtype="u1")),
        ((1, 1, 3, 1), np.empty((2, 0), dtype="u1")),
        ((1, 0, 1, 2), np.empty((0, 2), dtype="u1")),
        ((2, 1, 2, 1), np.empty((0, 0), dtype="u1")),
        ((100, 0, 200, 2), np.empty((0, 2), dtype="u1")),
        ((3, 0, 1, 2), np.empty((0, 2), dtype="u1")),
    ],
)
def test_sub_array(bounds: tuple[int, int, int, int], expected: npt.NDArray[Any]) -> None:
    sub = dense.sub_array(BYTES, *bounds)
    assert sub.shape == expected.shape
    assert sub.dtype == BYTES.dtype
    assert_array_equal(sub, expected)


def test_sub_array_square(grid: npt.NDArray[Any]) -> None:
    assert_array_equal(dense.sub_array(grid, 1, 1, 3, 3), [[12, 22], [13, 23]])


def test_sub_array_is_a_copy(grid: npt.NDArray[Any]) -> None:
    sub = dense.sub_array(grid, 0, 0, 2, 2)
    sub[0, 0] = 0
    assert grid[0, 0] == 1
