"""
CPU backend for linear regression.

Solves the normal equation

    β = (X'X)⁻¹ X'y

with the Matrix type: transpose, multiply, Gauss-Jordan inverse,
multiply. The inversion is exact-zero-pivot strict; pivots that are
merely tiny are recorded in Result.warnings rather than raised.
"""

from typing import Any
import numpy as np

from numstat.core.result import Result
from numstat.core.compute.timing import Timer
from numstat.core.compute.tolerances import near_singular_threshold
from numstat.linalg import Matrix
from numstat.linalg.inversion import Pivoting, check_pivoting, gauss_jordan_inverse
from numstat.regression.design import RegressionDesign
from numstat.regression.solution import LinearParams


class CPUNormalEquationBackend:
    """
    CPU backend using the normal equation and Gauss-Jordan inversion.

    Implements the Backend protocol for RegressionDesign -> LinearParams.
    """

    def __init__(self, pivoting: Pivoting = 'value'):
        check_pivoting(pivoting)
        self._pivoting = pivoting

    @property
    def name(self) -> str:
        return 'cpu_normal_equation'

    @property
    def pivoting(self) -> str:
        return self._pivoting

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Solve OLS via the normal equation.

        Algorithm:
            1. Form X'X from the intercept-augmented design
            2. Invert X'X by Gauss-Jordan elimination
            3. β = (X'X)⁻¹ (X'y)
            4. Compute fitted values, residuals and sums of squares

        Args:
            design: Validated regression design

        Returns:
            Result containing LinearParams

        Raises:
            SingularMatrixError: If X'X has an exactly zero pivot
        """
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        X = design.X
        y = design.y

        # === Normal matrix ===
        with timer.section('normal_matrix'):
            Xt = X.transpose()
            XtX = Xt.matrix_multiplication(X)

        # === Inversion ===
        with timer.section('inversion'):
            inversion = gauss_jordan_inverse(
                XtX.to_numpy(), pivoting=self._pivoting, matrix_name="X'X"
            )

        # === Coefficients ===
        with timer.section('solve'):
            Xty = Xt.matrix_multiplication(design.y_column)
            beta = Matrix(inversion.inverse).matrix_multiplication(Xty)
            coefficients = beta.column(0).to_numpy()

        # === Residuals and sums of squares ===
        with timer.section('residuals'):
            fitted_values = X.matrix_multiplication(beta).column(0).to_numpy()
            residuals = y - fitted_values
            rss = float(residuals @ residuals)
            tss = float(np.sum((y - np.mean(y)) ** 2))

        scale = float(np.max(np.abs(XtX.to_numpy())))
        threshold = near_singular_threshold(XtX.rows, scale)
        if inversion.min_abs_pivot <= threshold:
            message = (
                f"X'X is near-singular: smallest pivot {inversion.min_abs_pivot:.3g} "
                f"<= {threshold:.3g}; coefficients may be unreliable "
                f"(collinear features?)"
            )
            warnings_list.append(message)

        timer.stop()

        params = LinearParams(
            coefficients=coefficients,
            fitted_values=fitted_values,
            residuals=residuals,
            rss=rss,
            tss=tss,
        )

        info: dict[str, Any] = {
            'method': 'normal_equation',
            'pivoting': self._pivoting,
            'pivots': inversion.pivots.tolist(),
            'row_swaps': inversion.row_swaps,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
