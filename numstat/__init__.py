"""
numstat: small numeric utilities for Python.

Descriptive statistics, error metrics and elementary linear algebra
(vectors, matrices, Gauss-Jordan inversion, normal-equation regression)
without a full scientific computing stack.

Submodules:
    linalg: Vector, Matrix, Gauss-Jordan inversion
    regression: LinearRegression via the normal equation
    descriptive: mean, median, mode, variance, standard deviation, weighted average
    metrics: mean absolute / squared error and friends
"""

__version__ = "0.1.0"

from numstat import linalg
from numstat import regression
from numstat import descriptive
from numstat import metrics

__all__ = [
    "__version__",
    "linalg",
    "regression",
    "descriptive",
    "metrics",
]
