"""Means and sums along the rows or columns of a matrix.

A matrix is a sequence of rows.  It is real-valued as soon as one element
is a float, and integer-valued otherwise; booleans count as integers.
Missing values are ``None``; in real matrices NaN is missing as well.
Subscripts for ``rows`` and ``cols`` are one-based, as accepted by
:func:`matstats.indices.validate_indices`.  A missing subscript selects a
missing element.  Results are floats, with NaN for a missing result.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from typing import Any, Optional

from .indices import extract, validate_indices

__all__ = ["row_means2", "row_sums2"]


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


def _lines(
    x: Sequence[Sequence[Any]],
    rows: Optional[Sequence[Any]],
    cols: Optional[Sequence[Any]],
    by_row: bool,
    real: bool,
) -> list[list[Any]]:
    """The selected rows (``by_row``) or columns, with missing values normalised."""
    nrow = len(x)
    ncol = len(x[0]) if nrow else 0
    row_offsets = validate_indices(rows, nrow, allow_out_of_bound=False)
    col_offsets = validate_indices(cols, ncol, allow_out_of_bound=False)
    sub = extract(x, row_offsets, col_offsets)
    if real:
        sub = [[math.nan if v is None else float(v) for v in row] for row in sub]
    else:
        sub = [[None if v is None else int(v) for v in row] for row in sub]
    if by_row:
        return sub
    nsel_cols = len(col_offsets) if col_offsets is not None else ncol
    return [[row[j] for row in sub] for j in range(nsel_cols)]


def _clamp(total: float) -> float:
    if total > sys.float_info.max:
        return math.inf
    if total < -sys.float_info.max:
        return -math.inf
    return total


def _sum_values(values: list[Any], real: bool, na_rm: bool) -> tuple[float, int]:
    """Sum and count of the values taken into account.

    A missing value in an integer line, when not removed, makes the sum NaN.
    """
    total: Any = 0.0 if real else 0
    count = 0
    for value in values:
        if real:
            if not na_rm or not math.isnan(value):
                total += value
                count += 1
        elif value is not None:
            total += value
            count += 1
        elif not na_rm:
            return math.nan, count
    return float(total), count


def row_means2(
    x: Sequence[Sequence[Any]],
    rows: Optional[Sequence[Any]] = None,
    cols: Optional[Sequence[Any]] = None,
    na_rm: bool = False,
    refine: bool = True,
    has_na: bool = True,
    by_row: bool = True,
) -> list[float]:
    """Mean of each selected row (``by_row``) or column.

    Missing values are skipped when ``na_rm`` is true; ``has_na`` false
    promises there are none, so nothing is removed.  The mean of nothing is
    NaN.  For real matrices ``refine`` adds a pass over the residuals for
    extra precision.
    """
    if not has_na:
        na_rm = False
    real = _check_elements(x)
    if not real:
        refine = False

    result = []
    for values in _lines(x, rows, cols, by_row, real):
        total, count = _sum_values(values, real, na_rm)
        if total > sys.float_info.max or total < -sys.float_info.max:
            result.append(_clamp(total))
            continue
        avg = total / count if count else math.nan
        if refine:
            residual = 0.0
            for value in values:
                if not na_rm or not math.isnan(value):
                    residual += value - avg
            avg = avg + residual / count if count else math.nan
        result.append(avg)
    return result


def row_sums2(
    x: Sequence[Sequence[Any]],
    rows: Optional[Sequence[Any]] = None,
    cols: Optional[Sequence[Any]] = None,
    na_rm: bool = False,
    has_na: bool = True,
    by_row: bool = True,
) -> list[float]:
    """Sum of each selected row (``by_row``) or column.

    Missing values are skipped when ``na_rm`` is true; ``has_na`` false
    promises there are none, so nothing is removed.  The sum of nothing is 0.
    """
    if not has_na:
        na_rm = False
    real = _check_elements(x)
    return [
        _clamp(_sum_values(values, real, na_rm)[0])
        for values in _lines(x, rows, cols, by_row, real)
    ]