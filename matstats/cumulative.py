"""Cumulative sums, minima and maxima along the rows or columns of a matrix.

A matrix is a sequence of rows.  It is real-valued as soon as one element
is a float, and integer-valued otherwise; booleans count as integers.
Missing values are ``None``; in real matrices NaN is missing as well and
results use NaN for missing.  Subscripts for ``rows`` and ``cols`` are
one-based, as accepted by :func:`matstats.indices.validate_indices`.  A
missing subscript selects a missing element.
"""

from __future__ import annotations

import math
import warnings
from collections.abc import Callable, Sequence
from typing import Any, Optional

from .indices import extract, validate_indices

__all__ = [
    "IntegerOverflowWarning",
    "row_cumsums",
    "row_cummins",
    "row_cummaxs",
]

INT_MAX = 2147483647
INT_MIN = -INT_MAX

Matrix = list[list[Any]]


class IntegerOverflowWarning(RuntimeWarning):
    """Issued when an integer cumulative sum leaves the 32-bit integer range."""


def _check_elements(x: Sequence[Sequence[Any]]) -> bool:
    """Check element types and tell whether the matrix is real-valued."""
    real = False
    for row in x:
        for value in row:
            if isinstance(value, float):
                real = True
            elif value is not None and not isinstance(value, int):
                raise TypeError(
                    "Argument 'x' must be a logical, integer or numeric matrix."
                )
    return real


def _submatrix(
    x: Sequence[Sequence[Any]],
    rows: Optional[Sequence[Any]],
    cols: Optional[Sequence[Any]],
    real: bool,
) -> Matrix:
    nrow = len(x)
    ncol = len(x[0]) if nrow else 0
    row_offsets = validate_indices(rows, nrow, allow_out_of_bound=False)
    col_offsets = validate_indices(cols, ncol, allow_out_of_bound=False)
    sub = extract(x, row_offsets, col_offsets)
    if real:
        return [[math.nan if v is None else float(v) for v in row] for row in sub]
    return [[None if v is None else int(v) for v in row] for row in sub]


def _along(sub: Matrix, by_row: bool, scan: Callable[[list[Any]], list[Any]]) -> Matrix:
    """Apply ``scan`` to each row (``by_row``) or each column of ``sub``."""
    if not sub or not sub[0]:
        return [list(row) for row in sub]
    if by_row:
        return [scan(row) for row in sub]
    columns = [scan(list(column)) for column in zip(*sub)]
    return [list(row) for row in zip(*columns)]


def _cumsum_real(values: list[float]) -> list[float]:
    total = 0.0
    out = []
    for value in values:
        total += value
        out.append(total)
    return out


def _cumsum_int(values: list[Optional[int]], overflowed: list[bool]) -> list[Optional[int]]:
    total = 0
    ok = True
    out: list[Optional[int]] = []
    for value in values:
        if not ok:
            out.append(None)
        elif value is None:
            ok = False
            out.append(None)
        else:
            total += value
            if total < INT_MIN or total > INT_MAX:
                ok = False
                overflowed[0] = True
                out.append(None)
            else:
                out.append(total)
    return out


def _cum_extreme(
    values: list[Any], better: Callable[[Any, Any], bool], real: bool
) -> list[Any]:
    missing = math.nan if real else None
    out: list[Any] = []
    ok = True
    current: Any = None
    for value in values:
        is_na = value is None or (real and math.isnan(value))
        if not ok or is_na:
            ok = False
            out.append(missing)
            continue
        if current is None or better(value, current):
            current = value
        out.append(current)
    return out


def row_cumsums(
    x: Sequence[Sequence[Any]],
    rows: Optional[Sequence[Any]] = None,
    cols: Optional[Sequence[Any]] = None,
    by_row: bool = True,
) -> Matrix:
    """Cumulative sums along each row (``by_row``) or down each column.

    For integer matrices a missing value makes it and every later sum
    missing; a sum outside the 32-bit integer range becomes ``None`` as
    well, and an :class:`IntegerOverflowWarning` is issued.
    """
    real = _check_elements(x)
    sub = _submatrix(x, rows, cols, real)
    if real:
        return _along(sub, by_row, _cumsum_real)

    overflowed = [False]
    result = _along(sub, by_row, lambda values: _cumsum_int(values, overflowed))
    if overflowed[0]:
        warnings.warn(
            "Integer overflow. Detected one or more elements whose absolute "
            f"values were out of the range [{INT_MIN},{INT_MAX}] that can be "
            "used to for integers. Such values are set to NA_integer_.",
            IntegerOverflowWarning,
            stacklevel=2,
        )
    return result


def row_cummins(
    x: Sequence[Sequence[Any]],
    rows: Optional[Sequence[Any]] = None,
    cols: Optional[Sequence[Any]] = None,
    by_row: bool = True,
) -> Matrix:
    """Cumulative minima along each row (``by_row``) or down each column.

    A missing value makes it and every later result missing.
    """
    real = _check_elements(x)
    sub = _submatrix(x, rows, cols, real)
    return _along(sub, by_row, lambda v: _cum_extreme(v, lambda a, b: a < b, real))


def row_cummaxs(
    x: Sequence[Sequence[Any]],
    rows: Optional[Sequence[Any]] = None,
    cols: Optional[Sequence[Any]] = None,
    by_row: bool = True,
) -> Matrix:
    """Cumulative maxima along each row (``by_row``) or down each column.

    A missing value makes it and every later result missing.
    """
    real = _check_elements(x)
    sub = _submatrix(x, rows, cols, real)
    return _along(sub, by_row, lambda v: _cum_extreme(v, lambda a, b: a > b, real))