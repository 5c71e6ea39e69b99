"""
Linear regression via the normal equation.

Public API:
    LinearRegression()          fit(x, y) -> self, predict(x)
    fit(x, y, ...)              -> fitted LinearRegression

The design matrix gets an intercept column of ones prepended, and the
coefficients solve β = (X'X)⁻¹ X'y using the Gauss-Jordan inverse from
numstat.linalg.

Example:
    >>> import numpy as np
    >>> from numstat.regression import LinearRegression
    >>> model = LinearRegression().fit([[1, 2], [2, 1], [3, 5], [4, 3]], [5, 5, 10, 9])
    >>> np.round(model.coefficients, 6)
    array([2., 1., 1.])
"""

from numstat.regression.design import RegressionDesign
from numstat.regression.solution import LinearParams
from numstat.regression.backends import CPUNormalEquationBackend
from numstat.regression.model import LinearRegression
from numstat.regression.solvers import fit

__all__ = [
    "fit",
    "LinearRegression",
    "RegressionDesign",
    "LinearParams",
    "CPUNormalEquationBackend",
]
