"""Names and dimnames for results computed on subsets.

Names are lists of strings in which ``None`` is a missing name.  Dimnames
are pairs ``(rownames, colnames)`` where either part may be ``None``.
Subscripts are validated zero-based offsets (``None`` marks a missing
index) or ``None`` for no subsetting.  A function returning ``None``
means the result carries no names at all.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

__all__ = [
    "subset_names",
    "diff_names",
    "subset_dimnames",
    "row_diffs_dimnames",
    "col_diffs_dimnames",
]

Names = Optional[list[Optional[str]]]
Subscripts = Optional[Sequence[Optional[int]]]
Dimnames = tuple[Names, Names]


def _pick(
    names: Sequence[Optional[str]],
    positions: Iterable[int],
    subscripts: Subscripts,
) -> list[Optional[str]]:
    """Names at the given positions of the result, mapped through subscripts."""
    if subscripts is None:
        return [names[i] for i in positions]
    picked = []
    for i in positions:
        offset = subscripts[i]
        picked.append(None if offset is None else names[offset])
    return picked


def subset_names(
    names: Sequence[Optional[str]], length: int, subscripts: Subscripts
) -> Names:
    """Names for a vector of ``length`` results taken at ``subscripts``."""
    if length == 0:
        return None
    if subscripts is None:
        return list(names)
    return _pick(names, range(length), subscripts)


def diff_names(
    names: Sequence[Optional[str]],
    length: int,
    length_ans: int,
    subscripts: Subscripts,
) -> list[Optional[str]]:
    """Names for differences: the last ``length_ans`` of ``length`` positions.

    Unlike :func:`subset_names`, an empty result still gets (empty) names.
    """
    return _pick(names, range(length - length_ans, length), subscripts)


def subset_dimnames(
    dimnames: Sequence[Names],
    nrows: int,
    rows: Subscripts,
    ncols: int,
    cols: Subscripts,
    reverse: bool = False,
) -> Optional[Dimnames]:
    """Dimnames for an ``nrows`` by ``ncols`` result taken at ``rows``, ``cols``.

    With ``reverse`` the row names are read from the second element of
    ``dimnames`` and the column names from the first.
    """
    rownames = dimnames[1] if reverse else dimnames[0]
    colnames = dimnames[0] if reverse else dimnames[1]

    if rownames is None and colnames is None:
        return None

    if rows is None and cols is None and nrows > 0 and ncols > 0:
        return (dimnames[0], dimnames[1])

    if nrows == 0 or rownames is None:
        ans_rows: Names = None
    elif rows is None:
        ans_rows = rownames
    else:
        ans_rows = _pick(rownames, range(nrows), rows)

    if ncols == 0 or colnames is None:
        ans_cols: Names = None
    elif cols is None:
        ans_cols = colnames
    else:
        ans_cols = _pick(colnames, range(ncols), cols)

    return (ans_rows, ans_cols)


def row_diffs_dimnames(
    dimnames: Sequence[Names],
    nrows: int,
    rows: Subscripts,
    ncols: int,
    ncol_ans: int,
    cols: Subscripts,
) -> Optional[Dimnames]:
    """Dimnames for differences taken along each row."""
    if nrows == 0 and ncol_ans == 0:
        return None

    rownames, colnames = dimnames[0], dimnames[1]
    if rownames is None and colnames is None:
        return None

    if nrows == 0 or rownames is None:
        ans_rows: Names = None
    elif rows is None:
        ans_rows = rownames
    else:
        ans_rows = _pick(rownames, range(nrows), rows)

    if ncol_ans == 0 or colnames is None:
        ans_cols: Names = None
    else:
        ans_cols = diff_names(colnames, ncols, ncol_ans, cols)

    return (ans_rows, ans_cols)


def col_diffs_dimnames(
    dimnames: Sequence[Names],
    nrows: int,
    nrow_ans: int,
    rows: Subscripts,
    ncols: int,
    cols: Subscripts,
) -> Optional[Dimnames]:
    """Dimnames for differences taken down each column."""
    if nrow_ans == 0 and ncols == 0:
        return None

    rownames, colnames = dimnames[0], dimnames[1]
    if rownames is None and colnames is None:
        return None

    if nrow_ans == 0 or rownames is None:
        ans_rows: Names = None
    else:
        ans_rows = diff_names(rownames, nrows, nrow_ans, rows)

    if ncols == 0 or colnames is None:
        ans_cols: Names = None
    elif cols is None:
        ans_cols = colnames
    else:
        ans_cols = _pick(colnames, range(ncols), cols)

    return (ans_rows, ans_cols)