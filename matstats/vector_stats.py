"""Summaries of a single vector, optionally restricted to a subset.

Missing values are ``None``; in vectors holding floats NaN is missing as well.
A vector is treated as real-valued as soon as one element is a float, and
as integer-valued otherwise.  Subscripts are one-based, as accepted by
:func:`matstats.indices.validate_indices`. A subscript past the end of the
vector selects a missing value.
"""

from __future__ import annotations

import heapq
import math
import sys
from collections.abc import Iterator, Sequence
from typing import Any, Optional

from .indices import validate_indices

__all__ = ["any_missing", "mean2", "sign_tabulate", "psort_km"]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, complex):
        return math.isnan(value.real) or math.isnan(value.imag)
    return False


def _is_real(x: Sequence[Any]) -> bool:
    return any(isinstance(value, float) for value in x)


def _selected(x: Sequence[Any], idxs: Optional[Sequence[Any]]) -> Iterator[Any]:
    """Yield the elements of ``x`` at ``idxs``, ``None`` for missing indices."""
    offsets = validate_indices(idxs, len(x), allow_out_of_bound=True)
    if offsets is None:
        yield from x
        return
    for offset in offsets:
        yield None if offset is None else x[offset]


def any_missing(x: Sequence[Any], idxs: Optional[Sequence[Any]] = None) -> bool:
    """True if any selected element of ``x`` is missing.

    Byte strings have no missing values, so they always give ``False``.
    """
    if isinstance(x, (bytes, bytearray, memoryview)):
        return False
    return any(_is_missing(value) for value in _selected(x, idxs))


def _finish_mean(total: float, count: int) -> float:
    if total > sys.float_info.max:
        return math.inf
    if total < -sys.float_info.max:
        return -math.inf
    if count == 0:
        return math.nan
    return total / count


def mean2(
    x: Sequence[Any],
    idxs: Optional[Sequence[Any]] = None,
    na_rm: bool = False,
    refine: bool = True,
) -> float:
    """Arithmetic mean of the selected elements of ``x``.

    Missing values make the result NaN unless ``na_rm`` is true, in which
    case they are skipped.  The mean of nothing is NaN.  For real-valued
    vectors ``refine`` adds a second pass over the residuals for extra
    precision.
    """
    values = list(_selected(x, idxs))

    if not _is_real(x):
        total = 0
        count = 0
        for value in values:
            if value is not None:
                total += value
                count += 1
            elif not na_rm:
                return math.nan
        return _finish_mean(total, count)

    reals = [math.nan if value is None else float(value) for value in values]
    used = reals if not na_rm else [v for v in reals if not math.isnan(v)]
    total_f = 0.0
    for value in used:
        total_f += value
    count = len(used)
    avg = _finish_mean(total_f, count)
    if total_f > sys.float_info.max or total_f < -sys.float_info.max:
        return avg

    if refine and math.isfinite(avg):
        residual = 0.0
        for value in used:
            residual += value - avg
        avg += residual / count
    return avg


def sign_tabulate(
    x: Sequence[Any], idxs: Optional[Sequence[Any]] = None
) -> tuple[int, ...]:
    """Count the signs of the selected elements of ``x``.

    Returns ``(negative, zero, positive, missing)``; for real-valued vectors
    ``(negative_infinite, positive_infinite)`` follow.  Infinite values are
    also counted among the negatives or positives.
    """
    real = _is_real(x)
    n_neg = n_zero = n_pos = n_na = 0
    n_neg_inf = n_pos_inf = 0
    for value in _selected(x, idxs):
        if _is_missing(value):
            n_na += 1
        elif value > 0:
            n_pos += 1
            if value == math.inf:
                n_pos_inf += 1
        elif value < 0:
            n_neg += 1
            if value == -math.inf:
                n_neg_inf += 1
        else:
            n_zero += 1

    counts = (n_neg, n_zero, n_pos, n_na)
    if real:
        counts += (n_neg_inf, n_pos_inf)
    return counts


def _check_count(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Argument '{name}' must be an integer.")
    if value <= 0:
        raise ValueError(f"Argument '{name}' must be a positive integer.")
    return value


def psort_km(x: Sequence[Any], k: int, m: int = 1) -> list[float]:
    """The ``m`` order statistics of ``x`` ending at the ``k``-th smallest.

    Returns the ``(k-m+1)``-th through ``k``-th smallest values in increasing
    order; missing values sort last.
    """
    if len(x) == 0:
        raise ValueError("Argument 'x' must not be empty.")
    k = _check_count(k, "k")
    if k > len(x):
        raise ValueError(
            "Argument 'k' must not be greater than number of elements in 'x'."
        )
    m = _check_count(m, "m")
    if m > k:
        raise ValueError("Argument 'm' must not be greater than argument 'k'.")

    values = [math.nan if value is None else float(value) for value in x]
    smallest = heapq.nsmallest(k, values, key=lambda v: (math.isnan(v), v))
    return smallest[k - m :]