"""
Regression Design.

Design validates the feature rows and targets and builds the augmented
design matrix: a leading column of 1.0 (intercept) followed by the
features. Backends receive a Design and never re-validate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numstat.core.exceptions import DimensionError, InvalidInputDimensionsError
from numstat.core.validation import check_array, check_finite
from numstat.linalg import Matrix


@dataclass(frozen=True)
class RegressionDesign:
    """
    Validated regression inputs.

    Immutable after construction.

    Construction:
        RegressionDesign.build(x, y)    # x: rows of features, y: one target per row
    """
    _X: Matrix
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int

    @classmethod
    def build(cls, x: ArrayLike, y: ArrayLike) -> RegressionDesign:
        """
        Validate inputs and build the intercept-augmented design.

        Raises:
            InvalidInputDimensionsError: If x is empty, has an empty or
                ragged row, y is not 1D, or len(x) != len(y)
            ValidationError: If inputs are non-numeric or non-finite
        """
        features = feature_matrix(x, 'x')
        n, p = features.shape
        if n == 0:
            raise InvalidInputDimensionsError("x: requires at least 1 row, got 0")
        if p == 0:
            raise InvalidInputDimensionsError("x: rows must contain at least 1 feature, got 0")

        y_arr = check_array(y, 'y').astype(np.float64)
        # Column vector of targets is accepted
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()
        if y_arr.ndim != 1:
            raise InvalidInputDimensionsError(
                f"y: expected 1D targets, got {y_arr.ndim}D with shape {y_arr.shape}"
            )
        check_finite(y_arr, 'y')
        if y_arr.shape[0] != n:
            raise InvalidInputDimensionsError(
                f"Inconsistent lengths: x={n}, y={y_arr.shape[0]}"
            )

        return cls(_X=augment(features), _y=y_arr, _n=n, _p=p)

    # === Properties ===

    @property
    def X(self) -> Matrix:
        """Augmented design matrix (n x (p + 1)), intercept column first."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Targets (n,)."""
        return self._y

    @property
    def y_column(self) -> Matrix:
        """Targets as an (n x 1) matrix."""
        return Matrix(self._y.reshape(-1, 1))

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of features (excluding the intercept)."""
        return self._p

    def __repr__(self) -> str:
        return f"RegressionDesign(n={self._n}, p={self._p})"


def feature_matrix(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert feature rows to a finite float64 (n x p) array.

    Shape problems (ragged rows, non-row input) are reported as
    InvalidInputDimensionsError.
    """
    try:
        matrix = Matrix(x)
    except DimensionError as e:
        raise InvalidInputDimensionsError(f"{name}: {e}") from e
    features = matrix.to_numpy().astype(np.float64)
    check_finite(features, name)
    return features


def augment(features: NDArray[np.floating[Any]]) -> Matrix:
    """Prepend a column of 1.0 to (n x p) features."""
    n = features.shape[0]
    return Matrix(np.column_stack([np.ones(n, dtype=np.float64), features]))
