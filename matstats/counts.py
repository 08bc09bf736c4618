"""Per-column counts of a value, with ``all``/``any``/``count`` summaries.

A matrix is a sequence of rows.  Missing values are ``None``; in matrices
holding floats NaN is missing as well.  Subscripts for ``rows`` and ``cols``
are one-based, as accepted by :func:`matstats.indices.validate_indices`.
A missing subscript selects a missing element.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import IntEnum
from typing import Any, Optional, Union

from .indices import validate_indices

__all__ = ["CountWhat", "col_counts"]


class CountWhat(IntEnum):
    """What to report for each column."""

    ALL = 0
    ANY = 1
    COUNT = 2


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _as_what(what: Union[CountWhat, int, str]) -> CountWhat:
    if isinstance(what, str):
        try:
            return CountWhat[what.upper()]
        except KeyError:
            raise ValueError(f"Unknown value of 'what' for counts: {what!r}") from None
    try:
        return CountWhat(what)
    except ValueError:
        raise ValueError(f"Unknown value of 'what' for counts: {what!r}") from None


def _check_value(value: Any) -> None:
    if isinstance(value, (list, tuple, set, dict)):
        raise ValueError("Argument 'value' must be a single value.")
    if value is not None and not isinstance(value, (bool, int, float)):
        raise TypeError("Argument 'value' must be a numeric or a logical value.")


def _all(column: list[Any], value: Any, na_rm: bool) -> Optional[bool]:
    if _is_missing(value):
        return all(_is_missing(v) for v in column)
    result: Optional[bool] = True
    for v in column:
        if _is_missing(v):
            if not na_rm:
                result = None
        elif v != value:
            return False
    return result


def _any(column: list[Any], value: Any, na_rm: bool) -> Optional[bool]:
    if _is_missing(value):
        return any(_is_missing(v) for v in column)
    result: Optional[bool] = False
    for v in column:
        if _is_missing(v):
            if not na_rm:
                result = None
        elif v == value:
            return True
    return result


def _count(column: list[Any], value: Any, na_rm: bool) -> Optional[int]:
    if _is_missing(value):
        return sum(1 for v in column if _is_missing(v))
    count = 0
    for v in column:
        if _is_missing(v):
            if not na_rm:
                return None
        elif v == value:
            count += 1
    return count


_SUMMARIES = {CountWhat.ALL: _all, CountWhat.ANY: _any, CountWhat.COUNT: _count}


def col_counts(
    x: Sequence[Sequence[Any]],
    value: Any = True,
    what: Union[CountWhat, int, str] = CountWhat.COUNT,
    rows: Optional[Sequence[Any]] = None,
    cols: Optional[Sequence[Any]] = None,
    na_rm: bool = False,
) -> list[Union[bool, int, None]]:
    """Summarise, for each selected column, how often ``value`` occurs.

    With ``CountWhat.COUNT`` each entry is the number of matches; with
    ``CountWhat.ALL`` or ``CountWhat.ANY`` it is a boolean.  A missing
    ``value`` (``None`` or NaN) looks for missing elements.  Otherwise,
    missing elements are skipped when ``na_rm`` is true and may make an
    entry ``None`` (unknown) when it is false.
    """
    summary = _SUMMARIES[_as_what(what)]
    _check_value(value)

    nrow = len(x)
    ncol = len(x[0]) if nrow else 0
    row_offsets = validate_indices(rows, nrow, allow_out_of_bound=False)
    col_offsets = validate_indices(cols, ncol, allow_out_of_bound=False)
    if row_offsets is None:
        row_offsets = list(range(nrow))
    if col_offsets is None:
        col_offsets = list(range(ncol))

    result = []
    for c in col_offsets:
        column = [
            None if c is None or r is None else x[r][c] for r in row_offsets
        ]
        result.append(summary(column, value, na_rm))
    return result