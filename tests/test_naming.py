from matstats.naming import (
    col_diffs_dimnames,
    diff_names,
    row_diffs_dimnames,
    subset_dimnames,
    subset_names,
)

NAMES = ["a", "b", "c", "d"]
ROWNAMES = ["r1", "r2", "r3"]
COLNAMES = ["c1", "c2", "c3", "c4"]


def test_subset_names_zero_length_has_no_names():
    assert subset_names(NAMES, 0, None) is None
    assert subset_names(NAMES, 0, []) is None


def test_subset_names_without_subscripts_copies():
    result = subset_names(NAMES, len(NAMES), None)
    assert result == NAMES
    assert result is not NAMES


def test_subset_names_follows_subscripts():
    assert subset_names(NAMES, 3, [2, 0, None]) == ["c", "a", None]


def test_diff_names_takes_trailing_positions():
    assert diff_names(NAMES, 4, 2, None) == NAMES[2:]


def test_diff_names_with_subscripts():
    assert diff_names(NAMES, 3, 2, [3, None, 1]) == [None, "b"]


def test_diff_names_empty_result_is_empty_list():
    assert diff_names(NAMES, 4, 0, None) == []


def test_subset_dimnames_both_missing():
    assert subset_dimnames((None, None), 2, None, 2, None) is None


def test_subset_dimnames_no_subsetting_returns_original():
    assert subset_dimnames((ROWNAMES, COLNAMES), 3, None, 4, None) == (ROWNAMES, COLNAMES)


def test_subset_dimnames_with_subscripts():
    result = subset_dimnames((ROWNAMES, COLNAMES), 2, [2, None], 1, [3])
    assert result == (["r3", None], ["c4"])


def test_subset_dimnames_missing_colnames():
    result = subset_dimnames((ROWNAMES, None), 1, [1], 2, [0, 1])
    assert result == (["r2"], None)


def test_subset_dimnames_zero_rows_drops_rownames():
    result = subset_dimnames((ROWNAMES, COLNAMES), 0, [], 4, None)
    assert result == (None, COLNAMES)


def test_subset_dimnames_reverse_swaps_sources():
    result = subset_dimnames((COLNAMES, ROWNAMES), 1, [0], 1, [1], reverse=True)
    assert result == (["r1"], ["c2"])


def test_row_diffs_dimnames_empty_result():
    assert row_diffs_dimnames((ROWNAMES, COLNAMES), 0, None, 4, 0, None) is None


def test_row_diffs_dimnames_both_missing():
    assert row_diffs_dimnames((None, None), 3, None, 4, 2, None) is None


def test_row_diffs_dimnames_keeps_trailing_columns():
    result = row_diffs_dimnames((ROWNAMES, COLNAMES), 3, None, 4, 3, None)
    assert result == (ROWNAMES, COLNAMES[1:])


def test_row_diffs_dimnames_subset():
    result = row_diffs_dimnames((ROWNAMES, COLNAMES), 1, [2], 3, 1, [0, 1, None])
    assert result == (["r3"], [None])


def test_row_diffs_dimnames_no_columns_left():
    result = row_diffs_dimnames((ROWNAMES, COLNAMES), 3, None, 4, 0, None)
    assert result == (ROWNAMES, None)


def test_col_diffs_dimnames_empty_result():
    assert col_diffs_dimnames((ROWNAMES, COLNAMES), 3, 0, None, 0, None) is None


def test_col_diffs_dimnames_keeps_trailing_rows():
    result = col_diffs_dimnames((ROWNAMES, COLNAMES), 3, 2, None, 4, None)
    assert result == (ROWNAMES[1:], COLNAMES)


def test_col_diffs_dimnames_subset():
    result = col_diffs_dimnames((ROWNAMES, COLNAMES), 2, 1, [0, None], 2, [3, 0])
    assert result == ([None], ["c4", "c1"])


def test_col_diffs_dimnames_no_rownames():
    result = col_diffs_dimnames((None, COLNAMES), 3, 2, None, 4, None)
    assert result == (None, COLNAMES)