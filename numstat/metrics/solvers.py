"""
Error-distance metrics between observed and predicted values.

Every metric takes (y_true, y_pred) of equal, non-zero length and is
computed in float64.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numstat.core.validation import (
    check_array, check_1d, check_finite, check_not_empty, check_consistent_length,
)


def _errors(y_true: ArrayLike, y_pred: ArrayLike) -> NDArray[np.floating[Any]]:
    """Validated prediction errors y_true - y_pred."""
    observed = check_array(y_true, 'y_true').astype(np.float64)
    predicted = check_array(y_pred, 'y_pred').astype(np.float64)
    for arr, name in ((observed, 'y_true'), (predicted, 'y_pred')):
        check_1d(arr, name)
        check_not_empty(arr, name)
        check_finite(arr, name)
    check_consistent_length(observed, predicted, names=('y_true', 'y_pred'))
    return observed - predicted


def mean_absolute_error(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Mean of |y_true - y_pred|."""
    return float(np.mean(np.abs(_errors(y_true, y_pred))))


def mean_squared_error(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Mean of (y_true - y_pred)²."""
    errors = _errors(y_true, y_pred)
    return float(np.mean(errors ** 2))


def root_mean_squared_error(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Square root of mean_squared_error()."""
    return float(np.sqrt(mean_squared_error(y_true, y_pred)))


def max_error(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Largest absolute error."""
    return float(np.max(np.abs(_errors(y_true, y_pred))))
