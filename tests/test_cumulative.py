import math
import warnings

import pytest

from matstats.cumulative import (
    IntegerOverflowWarning,
    row_cummaxs,
    row_cummins,
    row_cumsums,
)
from matstats.indices import SubscriptError

INT_X = [[3, 1, 4, 1], [5, 9, 2, 6], [5, 3, 5, 8]]
REAL_X = [[0.5, -1.5, 2.25], [3.0, 0.25, -4.0]]


def transpose(m):
    return [list(r) for r in zip(*m)]


@pytest.mark.parametrize("x", [INT_X, REAL_X])
def test_cumsums_last_entry_is_row_sum(x):
    result = row_cumsums(x)
    assert [r[-1] for r in result] == [sum(r) for r in x]
    assert [r[0] for r in result] == [r[0] for r in x]


@pytest.mark.parametrize("func", [row_cumsums, row_cummins, row_cummaxs])
@pytest.mark.parametrize("x", [INT_X, REAL_X])
def test_by_column_is_transpose_of_by_row(func, x):
    assert func(x, by_row=False) == transpose(func(transpose(x)))


def test_cumsum_small_example():
    assert row_cumsums([[1, 2, 3]]) == [[1, 3, 6]]


def test_cummins_properties():
    result = row_cummins(INT_X)
    for row, out in zip(INT_X, result):
        assert out[0] == row[0]
        assert out[-1] == min(row)
        assert all(a >= b for a, b in zip(out, out[1:]))


def test_cummaxs_properties():
    result = row_cummaxs(REAL_X)
    for row, out in zip(REAL_X, result):
        assert out[0] == row[0]
        assert out[-1] == max(row)
        assert all(a <= b for a, b in zip(out, out[1:]))


@pytest.mark.parametrize("func", [row_cumsums, row_cummins, row_cummaxs])
def test_integer_missing_propagates(func):
    assert func([[1, None, 3]]) == [[1, None, None]]


@pytest.mark.parametrize("func", [row_cumsums, row_cummins, row_cummaxs])
def test_real_missing_propagates(func):
    out = func([[1.5, math.nan, 3.0]])[0]
    assert out[0] == 1.5
    assert math.isnan(out[1]) and math.isnan(out[2])


def test_real_none_becomes_nan():
    out = row_cummins([[None, 2.0]])[0]
    assert [math.isnan(v) for v in out] == [True, True]


def test_integer_overflow_warns_and_sets_missing():
    with pytest.warns(IntegerOverflowWarning):
        result = row_cumsums([[2147483647, 1, 5]])
    assert result == [[2147483647, None, None]]


def test_no_warning_without_overflow():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = row_cumsums([[2147483646, 1]])
    assert result == [[2147483646, 2147483647]]


def test_booleans_count_as_integers():
    x = [[True, False, True]]
    result = row_cumsums(x)
    assert result[0][-1] == sum(x[0])
    assert all(type(v) is int for v in result[0])


def test_row_subset_matches_direct():
    assert row_cummaxs(INT_X, rows=[2]) == row_cummaxs([INT_X[1]])


def test_negative_cols_exclude():
    expected = row_cumsums([row[1:] for row in INT_X])
    assert row_cumsums(INT_X, cols=[-1]) == expected


def test_missing_row_subscript_gives_missing_row():
    result = row_cumsums(INT_X, rows=[1, None])
    assert result[0] == row_cumsums([INT_X[0]])[0]
    assert result[1] == [None] * len(INT_X[0])


def test_empty_columns_keep_rows():
    assert row_cummins(INT_X, cols=[0]) == [[], [], []]


def test_mixed_subscripts_rejected():
    with pytest.raises(SubscriptError):
        row_cumsums(INT_X, rows=[1, -2])


def test_out_of_bound_subscript_rejected():
    with pytest.raises(SubscriptError):
        row_cummaxs(INT_X, cols=[10])


def test_non_numeric_element_rejected():
    with pytest.raises(TypeError):
        row_cumsums([[1, "a"]])