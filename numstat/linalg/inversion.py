"""
Matrix inversion by Gauss-Jordan elimination.

Works on the augmented matrix [A | I]. For each pivot column the pivot
row is chosen among the rows not yet processed, swapped into place,
normalised, and used to clear the column in every other row. When all
columns are processed the right half holds A⁻¹.

Pivot selection:
    'value'     compare raw values; the first row holding the largest
                value wins. A column whose largest value is 0 (e.g. only
                zeros and negatives remain) reports the matrix singular
                even when a nonzero negative pivot exists.
    'absolute'  compare magnitudes (classic partial pivoting).

A pivot is rejected only when it is exactly 0.0; there is no epsilon
tolerance. Callers that care about near-singularity inspect
InversionResult.pivots.
"""

from dataclasses import dataclass
from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numstat.core.exceptions import SingularMatrixError, ValidationError
from numstat.core.validation import check_2d, check_finite, check_square


Pivoting = Literal['value', 'absolute']

PIVOTING_CHOICES: tuple[str, ...] = ('value', 'absolute')


@dataclass(frozen=True)
class InversionResult:
    """
    Result of Gauss-Jordan inversion.

    Attributes:
        inverse: A⁻¹ (n x n, float64)
        pivots: Pivot value used for each column, before normalisation
        row_swaps: (column, row) pairs for every swap performed
        pivoting: Pivot selection strategy that was used
    """
    inverse: NDArray[np.floating[Any]]
    pivots: NDArray[np.floating[Any]]
    row_swaps: tuple[tuple[int, int], ...]
    pivoting: str

    @property
    def order(self) -> int:
        return self.inverse.shape[0]

    @property
    def min_abs_pivot(self) -> float:
        """Smallest pivot magnitude, or inf for a 0x0 matrix."""
        if self.pivots.size == 0:
            return float('inf')
        return float(np.min(np.abs(self.pivots)))


def check_pivoting(pivoting: str) -> None:
    """Reject unknown pivot selection strategies."""
    if pivoting not in PIVOTING_CHOICES:
        raise ValidationError(
            f"Unknown pivoting: {pivoting!r}. Must be one of {PIVOTING_CHOICES}"
        )


def gauss_jordan_inverse(
    A: ArrayLike,
    *,
    pivoting: Pivoting = 'value',
    matrix_name: str = 'A',
) -> InversionResult:
    """
    Invert a square matrix by Gauss-Jordan elimination.

    Args:
        A: Square matrix; integer input is widened to float64
        pivoting: 'value' (raw value comparison) or 'absolute'
        matrix_name: Name used in error messages

    Returns:
        InversionResult with the inverse and elimination diagnostics

    Raises:
        DimensionError: If A is not a square 2D matrix
        ValidationError: If A contains NaN/Inf or pivoting is unknown
        SingularMatrixError: If a pivot is exactly zero
    """
    check_pivoting(pivoting)
    A = np.asarray(A, dtype=np.float64)
    check_2d(A, matrix_name)
    check_square(A, matrix_name)
    check_finite(A, matrix_name)

    n = A.shape[0]
    augmented = np.hstack([A, np.eye(n, dtype=np.float64)])
    pivots = np.empty(n, dtype=np.float64)
    swaps: list[tuple[int, int]] = []

    for i in range(n):
        pivot_row = _select_pivot_row(augmented[i:, i], pivoting) + i
        if pivot_row != i:
            augmented[[i, pivot_row]] = augmented[[pivot_row, i]]
            swaps.append((i, pivot_row))

        pivot = float(augmented[i, i])
        if pivot == 0.0:
            raise SingularMatrixError(
                f"{matrix_name} is singular: zero pivot in column {i} "
                f"after {i} of {n} eliminations",
                matrix_name=matrix_name,
                pivot_column=i,
                rank=i,
                expected_rank=n,
            )

        augmented[i] = augmented[i] / pivot
        for r in range(n):
            if r == i:
                continue
            factor = float(augmented[r, i])
            augmented[r] = augmented[r] - factor * augmented[i]
        pivots[i] = pivot

    return InversionResult(
        inverse=augmented[:, n:].copy(),
        pivots=pivots,
        row_swaps=tuple(swaps),
        pivoting=pivoting,
    )


def _select_pivot_row(candidates: NDArray[np.floating[Any]], pivoting: str) -> int:
    """Offset of the pivot within the unprocessed part of the column."""
    if pivoting == 'absolute':
        candidates = np.abs(candidates)
    # argmax returns the first occurrence, like a strict '>' scan
    return int(np.argmax(candidates))
