"""Order statistics of each row of a matrix.

A matrix is a sequence of rows and is real-valued as soon as one element is
a float.  In real matrices missing values sort last and come back as NaN;
in integer matrices a missing value (``None``) sorts first.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, Optional, Union

from .indices import validate_indices

__all__ = ["row_order_stats"]


def _is_real(x: Sequence[Sequence[Any]]) -> bool:
    return any(isinstance(v, float) for row in x for v in row)


def _real_key(value: float) -> tuple[bool, float]:
    return (math.isnan(value), value)


def _int_key(value: Optional[int]) -> tuple[bool, int]:
    return (value is not None, 0 if value is None else value)


def _which_offset(which: Any, ncols: int) -> int:
    if isinstance(which, (list, tuple, set, dict)):
        raise ValueError("Argument 'which' must be a single number.")
    if not isinstance(which, (int, float)):
        raise TypeError("Argument 'which' must be a numeric number.")
    if isinstance(which, float) and not math.isfinite(which):
        raise ValueError(f"Argument 'which' is out of range: {which}")
    qq = int(which) - 1
    if qq < 0 or qq >= ncols:
        raise ValueError(f"Argument 'which' is out of range: {qq + 1}")
    return qq


def row_order_stats(
    x: Sequence[Sequence[Any]],
    which: Union[int, float],
    rows: Optional[Sequence[Any]] = None,
    cols: Optional[Sequence[Any]] = None,
) -> list[Any]:
    """The ``which``-th smallest value of each selected row.

    ``rows`` and ``cols`` are one-based subscripts; they must not contain
    missing values.  ``which`` counts from 1 among the selected columns.
    """
    nrow = len(x)
    ncol = len(x[0]) if nrow else 0

    if isinstance(which, (list, tuple, set, dict)):
        raise ValueError("Argument 'which' must be a single number.")
    if not isinstance(which, (int, float)):
        raise TypeError("Argument 'which' must be a numeric number.")

    row_offsets = validate_indices(rows, nrow, allow_out_of_bound=False)
    col_offsets = validate_indices(cols, ncol, allow_out_of_bound=False)
    if row_offsets is None:
        row_offsets = list(range(nrow))
    if col_offsets is None:
        col_offsets = list(range(ncol))
    nrows, ncols = len(row_offsets), len(col_offsets)

    if any(r is None for r in row_offsets) and ncols > 0:
        raise ValueError("Argument 'rows' must not contain missing value")
    if any(c is None for c in col_offsets) and nrows > 0:
        raise ValueError("Argument 'cols' must not contain missing value")

    qq = _which_offset(which, ncols)

    real = _is_real(x)
    result = []
    for r in row_offsets:
        values = [x[r][c] for c in col_offsets]
        if real:
            floats = [math.nan if v is None else float(v) for v in values]
            result.append(sorted(floats, key=_real_key)[qq])
        else:
            result.append(sorted(values, key=_int_key)[qq])
    return result