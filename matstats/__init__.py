"""Row, column and vector statistics with missing values and one-based index subsets."""

__version__ = "0.1.0"

__all__ = [
    "counts",
    "cumulative",
    "indices",
    "means",
    "naming",
    "order_stats",
    "vector_stats",
]