"""Validation of one-based subscripts and extraction of matrix subsets.

Subscripts follow the usual statistical conventions: positive values are
one-based positions, negative values exclude positions, zeros are dropped,
and missing values (``None`` or NaN) select a missing element.  Validated
subscripts are zero-based offsets in which ``None`` marks a missing index.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, Optional

__all__ = ["SubscriptError", "validate_indices", "extract"]

Index = Optional[int]


class SubscriptError(ValueError):
    """Raised when a set of subscripts cannot be used."""


def _is_na(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _is_inf(value: Any) -> bool:
    return isinstance(value, float) and math.isinf(value)


def _selects(value: Any) -> bool:
    """True for subscripts taken by a positive selection (everything but zero)."""
    return _is_na(value) or value != 0


def _to_offset(value: Any, max_idx: int) -> Index:
    if _is_na(value) or _is_inf(value) or value > max_idx:
        return None
    return math.trunc(value - 1)


def validate_indices(
    idxs: Optional[Sequence[Any]],
    max_idx: int,
    allow_out_of_bound: bool = False,
) -> Optional[list[Index]]:
    """Turn one-based subscripts into zero-based offsets.

    Returns ``None`` when ``idxs`` is ``None`` (no subsetting).  Otherwise a
    list of offsets in which ``None`` stands for a missing index; missing
    subscripts, infinities and, when ``allow_out_of_bound`` is true,
    subscripts beyond ``max_idx`` all become ``None``.

    Raises :class:`SubscriptError` when positive and negative subscripts are
    mixed, or when a subscript is out of bounds and that is not allowed.
    """
    if idxs is None:
        return None

    state = 0
    for idx in idxs:
        na = _is_na(idx)
        inf = _is_inf(idx)
        if na or inf or idx > 0:
            if state < 0:
                raise SubscriptError("only 0's may be mixed with negative subscripts")
            if not na and not inf and idx > max_idx and not allow_out_of_bound:
                raise SubscriptError("subscript out of bounds")
            state = 1
        elif idx < 0:
            if state > 0:
                raise SubscriptError("only 0's may be mixed with negative subscripts")
            state = -1

    if state >= 0:
        return [_to_offset(idx, max_idx) for idx in idxs if _selects(idx)]

    excluded = set()
    for idx in idxs:
        position = math.trunc(-idx)
        if 0 < position <= max_idx:
            excluded.add(position - 1)
    return [offset for offset in range(max_idx) if offset not in excluded]


def extract(
    x: Sequence[Sequence[Any]],
    rows: Optional[Sequence[Index]] = None,
    cols: Optional[Sequence[Index]] = None,
) -> list[list[Any]]:
    """Return the submatrix of ``x`` (a sequence of rows) at validated offsets.

    ``None`` for ``rows`` or ``cols`` keeps every row or column.  A ``None``
    offset yields ``None`` (missing) for each element it touches.
    """
    nrow = len(x)
    ncol = len(x[0]) if nrow else 0
    row_offsets = range(nrow) if rows is None else rows
    col_offsets = range(ncol) if cols is None else cols
    return [
        [None if r is None or c is None else x[r][c] for c in col_offsets]
        for r in row_offsets
    ]