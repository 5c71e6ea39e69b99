"""
LinearRegression: a fit/predict model over the normal-equation backend.

The model has two states. It starts Unfitted; a successful fit() makes it
Fitted and replaces any previous coefficients. A failed fit() raises and
leaves the previous state untouched.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numstat.core.exceptions import InvalidInputDimensionsError, ModelNotFittedError
from numstat.core.result import Result
from numstat.linalg import Matrix
from numstat.linalg.inversion import Pivoting
from numstat.regression.backends import BackendChoice, get_backend
from numstat.regression.design import RegressionDesign, augment, feature_matrix
from numstat.regression.solution import LinearParams


class LinearRegression:
    """
    Ordinary least squares with an intercept.

    Example:
        >>> model = LinearRegression()
        >>> model.fit([[1, 2], [2, 1], [3, 5], [4, 3]], [5, 5, 10, 9])
        LinearRegression(n_features=2, fitted=True)
        >>> np.round(model.predict([[5, 5]]), 6)
        array([12.])
    """

    def __init__(
        self,
        *,
        pivoting: Pivoting = 'value',
        backend: BackendChoice = 'auto',
    ):
        self._backend = get_backend(backend, pivoting=pivoting)
        self._result: Result[LinearParams] | None = None
        self._n_features: int | None = None

    def fit(self, x: ArrayLike, y: ArrayLike) -> LinearRegression:
        """
        Fit coefficients by solving the normal equation.

        Args:
            x: Feature rows (n x p), n >= 1, p >= 1
            y: Targets (n,)

        Returns:
            self

        Raises:
            InvalidInputDimensionsError: If x is empty, has empty or ragged
                rows, or len(x) != len(y)
            SingularMatrixError: If X'X cannot be inverted

        Warns:
            RuntimeWarning: If X'X is near-singular; the fit still succeeds
        """
        return self._fit(x, y)

    def _fit(self, x: ArrayLike, y: ArrayLike) -> LinearRegression:
        design = RegressionDesign.build(x, y)
        result = self._backend.solve(design)
        # Only commit once everything has succeeded
        self._result = result
        self._n_features = design.p
        # Every public entry point calls _fit directly, so level 3 is the caller
        for message in result.warnings:
            warnings.warn(message, RuntimeWarning, stacklevel=3)
        return self

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Predict one value per feature row, in input order.

        Raises:
            ModelNotFittedError: If fit() has not succeeded yet
            InvalidInputDimensionsError: If rows do not have n_features entries
        """
        result = self._require_fitted()
        features = feature_matrix(x, 'x')
        n, p = features.shape
        if n == 0:
            return np.empty(0, dtype=np.float64)
        if p != self._n_features:
            raise InvalidInputDimensionsError(
                f"x: model was fitted with {self._n_features} features, got {p}"
            )
        beta = Matrix(result.params.coefficients.reshape(-1, 1))
        return augment(features).matrix_multiplication(beta).column(0).to_numpy()

    def _require_fitted(self) -> Result[LinearParams]:
        if self._result is None:
            raise ModelNotFittedError(
                "LinearRegression is not fitted yet; call fit() before using the model"
            )
        return self._result

    # === Properties ===

    @property
    def is_fitted(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> Result[LinearParams]:
        """Backend result envelope of the last successful fit."""
        return self._require_fitted()

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Intercept followed by one slope per feature."""
        return self._require_fitted().params.coefficients.copy()

    @property
    def intercept(self) -> float:
        return float(self._require_fitted().params.coefficients[0])

    @property
    def slopes(self) -> NDArray[np.floating[Any]]:
        return self._require_fitted().params.coefficients[1:].copy()

    @property
    def n_features(self) -> int:
        self._require_fitted()
        return self._n_features

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._require_fitted().params.fitted_values.copy()

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._require_fitted().params.residuals.copy()

    @property
    def rss(self) -> float:
        return self._require_fitted().params.rss

    @property
    def tss(self) -> float:
        return self._require_fitted().params.tss

    @property
    def r_squared(self) -> float:
        return self._require_fitted().params.r_squared

    def __repr__(self) -> str:
        if self._result is None:
            return "LinearRegression(fitted=False)"
        return f"LinearRegression(n_features={self._n_features}, fitted=True)"
