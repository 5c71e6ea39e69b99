"""
Descriptive statistics module.

Public API:
    mean(x)                     - Arithmetic mean (truncating for integer samples)
    median(x)                   - Middle value
    mode(x)                     - Most frequent value (smallest on ties)
    variance(x, ddof=0)         - Variance with divisor n - ddof
    standard_deviation(x)       - Square root of variance
    weighted_average(x, w)      - Weighted arithmetic mean
"""

from numstat.descriptive.solvers import (
    mean,
    median,
    mode,
    variance,
    standard_deviation,
    weighted_average,
)

__all__ = [
    "mean",
    "median",
    "mode",
    "variance",
    "standard_deviation",
    "weighted_average",
]
