"""
Solver dispatch for regression.

This module provides the fit() function, a one-call alternative to
constructing a LinearRegression and calling its fit() method.
"""

from numpy.typing import ArrayLike

from numstat.linalg.inversion import Pivoting
from numstat.regression.backends import BackendChoice
from numstat.regression.model import LinearRegression


def fit(
    x: ArrayLike,
    y: ArrayLike,
    *,
    pivoting: Pivoting = 'value',
    backend: BackendChoice = 'auto',
) -> LinearRegression:
    """
    Fit a linear regression model with an intercept.

    Solves the ordinary least squares problem through the normal
    equation β = (X'X)⁻¹ X'y, where X is x with a leading column of ones.

    Args:
        x: Feature rows (n x p). Can be any array-like of equal-length rows.
        y: Targets (n,).
        pivoting: Pivot selection for the Gauss-Jordan inversion:
            - 'value': compare raw values (default)
            - 'absolute': compare magnitudes
        backend: Computational backend ('auto', 'cpu', 'cpu_normal_equation')

    Returns:
        A fitted LinearRegression

    Raises:
        InvalidInputDimensionsError: If x and y are empty or inconsistent
        SingularMatrixError: If X'X is singular

    Example:
        >>> from numstat.regression import fit
        >>> model = fit([[1.0], [2.0], [3.0]], [3.0, 5.0, 7.0])
        >>> import numpy as np
        >>> np.round(model.coefficients, 6)
        array([1., 2.])
    """
    return LinearRegression(pivoting=pivoting, backend=backend)._fit(x, y)
