"""
Descriptive statistics over 1-D samples.

All functions are stateless. Integer samples take the integer path for
mean() and variance(): sums stay integral and divisions truncate toward
zero before the result is converted to float. Floating samples are
computed in float64 throughout.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numstat.core.exceptions import ValidationError
from numstat.core.validation import (
    check_array, check_1d, check_finite, check_not_empty, check_consistent_length,
)
from numstat.descriptive._integer import truncating_div


def _sample(data: ArrayLike, name: str) -> NDArray[Any]:
    """Validated non-empty, finite 1-D int64/float64 sample."""
    values = check_array(data, name)
    check_1d(values, name)
    check_not_empty(values, name)
    check_finite(values, name)
    return values


def _is_integer(values: NDArray[Any]) -> bool:
    return np.issubdtype(values.dtype, np.integer)


def _integer_mean(values: NDArray[Any]) -> int:
    total = sum(values.tolist())
    return truncating_div(total, values.size)


def mean(data: ArrayLike) -> float:
    """
    Arithmetic mean.

    Integer samples: the integer sum is divided by n with truncation, so
    mean([1, 2]) == 1.0.

    Parameters
    ----------
    data : array-like
        Non-empty 1D sample.
    """
    values = _sample(data, 'data')
    if _is_integer(values):
        return float(_integer_mean(values))
    return float(np.sum(values) / values.size)


def median(data: ArrayLike) -> float:
    """
    Middle value of the sorted sample; the average of the two middle
    values for even-length samples.
    """
    values = np.sort(_sample(data, 'data'))
    n = values.size
    middle = n // 2
    if n % 2 == 1:
        return float(values[middle])
    return (float(values[middle - 1]) + float(values[middle])) / 2.0


def mode(data: ArrayLike) -> int | float:
    """
    Most frequent value.

    Ties are resolved to the smallest of the most frequent values. The
    return type follows the sample's element type.
    """
    values = _sample(data, 'data')
    unique, counts = np.unique(values, return_counts=True)
    # unique is sorted and argmax picks the first maximum
    return unique[int(np.argmax(counts))].item()


def variance(data: ArrayLike, *, ddof: int = 0) -> float:
    """
    Variance with divisor n - ddof.

    Parameters
    ----------
    data : array-like
        Non-empty 1D sample.
    ddof : int
        Delta degrees of freedom. 0 gives the population variance,
        1 the Bessel-corrected sample variance.

    Integer samples use the truncated integer mean, an integer sum of
    squared deviations and a truncating division.
    """
    values = _sample(data, 'data')
    n = values.size
    if ddof < 0:
        raise ValidationError(f"ddof: must be non-negative, got {ddof}")
    if n - ddof <= 0:
        raise ValidationError(
            f"data: variance with ddof={ddof} requires more than {ddof} values, got {n}"
        )

    if _is_integer(values):
        center = _integer_mean(values)
        squares = sum((x - center) ** 2 for x in values.tolist())
        return float(truncating_div(squares, n - ddof))

    deviations = values - np.sum(values) / n
    return float(np.sum(deviations ** 2) / (n - ddof))


def standard_deviation(data: ArrayLike, *, ddof: int = 0) -> float:
    """Square root of variance(data, ddof=ddof)."""
    return float(np.sqrt(variance(data, ddof=ddof)))


def weighted_average(values: ArrayLike, weights: ArrayLike) -> float:
    """
    Sum of values * weights divided by the sum of weights.

    Raises
    ------
    DimensionError
        If values and weights have different lengths.
    ValidationError
        If the weights sum to zero.
    """
    v = _sample(values, 'values').astype(np.float64)
    w = _sample(weights, 'weights').astype(np.float64)
    check_consistent_length(v, w, names=('values', 'weights'))

    total_weight = float(np.sum(w))
    if total_weight == 0.0:
        raise ValidationError("weights: sum of weights is zero")
    return float(np.sum(v * w) / total_weight)
