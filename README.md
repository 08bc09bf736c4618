# matstats

Row, column and vector statistics in pure Python, with support for missing
values and for computing on a subset of rows, columns or elements chosen by
one-based subscripts.

A matrix is a sequence of rows (for example a list of lists). Missing values
are `None`; where floats are involved, NaN is missing as well. A vector or
matrix counts as real-valued as soon as one element is a float, and as
integer-valued otherwise.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Subscripts

Wherever a function takes `idxs`, `rows` or `cols`, the subscripts are
one-based:

- positive values select positions,
- negative values exclude positions (they may not be mixed with positive ones),
- zeros are dropped,
- `None` or NaN select a missing element.

`None` for the subscripts means "use everything".

## Modules

- `matstats.indices`
  - `validate_indices(idxs, max_idx, allow_out_of_bound)` turns subscripts
    into zero-based offsets, with `None` for a missing index. Mixing signs,
    or going out of bounds when that is not allowed, raises `SubscriptError`
    (a `ValueError`).
  - `extract(x, rows, cols)` returns the submatrix at validated offsets.
- `matstats.naming`: `subset_names`, `diff_names`, `subset_dimnames`,
  `row_diffs_dimnames` and `col_diffs_dimnames` work out the names or
  `(rownames, colnames)` pair a result carries when it was computed on a
  subset; `None` means no names.
- `matstats.vector_stats`
  - `any_missing(x, idxs)`: whether any selected element is missing (always
    `False` for byte strings).
  - `mean2(x, idxs, na_rm, refine)`: mean, with an optional second pass over
    the residuals for real vectors.
  - `sign_tabulate(x, idxs)`: `(negative, zero, positive, missing)`, followed
    by `(negative_infinite, positive_infinite)` for real vectors.
  - `psort_km(x, k, m)`: the `(k-m+1)`-th through `k`-th smallest values.
- `matstats.counts`: `col_counts(x, value, what, rows, cols, na_rm)` reports
  per column whether all or any elements equal `value`, or how many do;
  `what` is a `CountWhat` (`ALL`, `ANY`, `COUNT`), its integer value or its
  name. Unknown results are `None`.
- `matstats.order_stats`: `row_order_stats(x, which, rows, cols)` gives the
  `which`-th smallest value of each row; `rows` and `cols` may not hold
  missing subscripts.
- `matstats.cumulative`: `row_cumsums`, `row_cummins` and `row_cummaxs`,
  along rows (`by_row=True`) or down columns. A missing value makes it and
  every later result missing. An integer sum outside the 32-bit range
  becomes `None` and an `IntegerOverflowWarning` is issued.
- `matstats.means`: `row_means2(x, rows, cols, na_rm, refine, has_na, by_row)`
  and `row_sums2(x, rows, cols, na_rm, has_na, by_row)`, returning floats.

## Example

```python
from matstats.vector_stats import mean2, sign_tabulate
from matstats.means import row_means2
from matstats.counts import col_counts, CountWhat

mean2([1.0, 2.0, float("nan"), 4.0], na_rm=True)          # 2.333...
sign_tabulate([-1.0, 0.0, 3.0, float("inf")])             # (1, 1, 2, 0, 0, 1)
row_means2([[1, 2, 3], [4, 5, 6]], cols=[1, 3])           # [2.0, 5.0]
col_counts([[1, 0], [1, 1]], value=1, what=CountWhat.ALL)  # [True, False]
```

## What it does not do

This is a library only; it installs no command. It has no medians, median
absolute deviations, log-sum-exp, ranks, products or matrix differences;
the naming helpers for differences only compute names.