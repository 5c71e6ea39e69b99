"""
Error-distance metrics.

Public API:
    mean_absolute_error(y_true, y_pred)
    mean_squared_error(y_true, y_pred)
    root_mean_squared_error(y_true, y_pred)
    max_error(y_true, y_pred)
"""

from numstat.metrics.solvers import (
    mean_absolute_error,
    mean_squared_error,
    root_mean_squared_error,
    max_error,
)

__all__ = [
    "mean_absolute_error",
    "mean_squared_error",
    "root_mean_squared_error",
    "max_error",
]
