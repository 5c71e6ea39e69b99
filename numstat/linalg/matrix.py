"""
Dense numeric matrices.

A Matrix is a row-major int64 or float64 container with explicit row and
column counts. add(), scalar_multiplication() and swap_row() mutate the
receiver; matrix_multiplication(), transpose() and inverse() return new
matrices that share no storage with their operands.
"""

from __future__ import annotations

import operator
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numstat.core.compute.tolerances import ToleranceTier, CPU_FP64
from numstat.core.exceptions import (
    DimensionError,
    InconsistentColumnSizesError,
    IntegerOverflowError,
    MultiplicationDimensionError,
    RowOutOfBoundError,
)
from numstat.core.validation import check_array, check_2d
from numstat.linalg._elements import (
    ElementKind, kind_of, scalar_kind, promoted_dtype, check_in_place,
)
from numstat.linalg.inversion import Pivoting, gauss_jordan_inverse
from numstat.linalg.vector import Vector


class Matrix:
    """
    Dense 2D numeric container.

    Construction:
        Matrix([[1, 2], [3, 4]])            # validated rows
        Matrix.from_rows([[1.0, 2.0]])      # same factory
        Matrix([])                          # 0x0 matrix
        Matrix.identity(3)
        Matrix.zeros(2, 3)

    Every row must have the same length; a ragged input raises
    InconsistentColumnSizesError.
    A matrix with no rows always has shape (0, 0).
    """

    def __init__(self, rows: ArrayLike = ()):
        data = _without_empty_rows(_validated_rows(rows))
        self._data: NDArray[Any] = data
        self._rows: int = data.shape[0]
        self._cols: int = data.shape[1]

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """Build a Matrix from a sequence of equal-length rows."""
        return cls(rows)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n floating identity matrix."""
        return cls._wrap(np.eye(n, dtype=np.float64))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """rows x cols floating zero matrix."""
        return cls._wrap(np.zeros((rows, cols), dtype=np.float64))

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Matrix:
        """Adopt an already validated int64/float64 2D array without copying."""
        assert data.ndim == 2 and data.dtype in (np.int64, np.float64), data.dtype
        data = _without_empty_rows(data)
        matrix = cls.__new__(cls)
        matrix._data = data
        matrix._rows, matrix._cols = data.shape
        return matrix

    # === Properties ===

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def kind(self) -> ElementKind:
        """'integer' or 'floating'."""
        return kind_of(self._data)

    @property
    def is_integer(self) -> bool:
        return self.kind == 'integer'

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    # === In-place operations ===

    def swap_row(self, i: int, j: int) -> None:
        """
        Exchange rows i and j in place.

        Raises:
            RowOutOfBoundError: If either index is outside [0, rows);
                the matrix is left unchanged
        """
        i, j = operator.index(i), operator.index(j)
        for index in (i, j):
            if not 0 <= index < self._rows:
                raise RowOutOfBoundError(
                    f"swap_row: row index {index} out of bounds for matrix with "
                    f"{self._rows} rows",
                    index=index,
                    n_rows=self._rows,
                )
        if i != j:
            self._data[[i, j]] = self._data[[j, i]]

    def add(self, other: Matrix) -> None:
        """
        Add another matrix elementwise, in place.

        Raises:
            DimensionError: If shapes differ
            ElementTypeError: If self is integer and other is floating
        """
        _check_matrix(other, 'add')
        if self.shape != other.shape:
            raise DimensionError(
                f"add: dimension mismatch ({self._rows}x{self._cols} vs "
                f"{other._rows}x{other._cols})"
            )
        check_in_place(self.kind, other.kind, 'add')
        self._data += other._data

    def scalar_multiplication(self, scalar: int | float) -> None:
        """
        Scale every cell in place.

        Raises:
            ValidationError: If scalar is not an integer or floating number
            ElementTypeError: If self is integer and scalar is floating
        """
        kind = scalar_kind(scalar)
        check_in_place(self.kind, kind, 'scalar_multiplication')
        if kind == 'integer':
            self._data *= np.int64(scalar)
        else:
            self._data *= float(scalar)

    # === Operations producing new matrices ===

    def matrix_multiplication(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other.

        Cell (i, j) is the sum over k of self[i, k] * other[k, j], added
        in index order. Integer x integer stays integer; anything else is
        computed in floating point.

        Raises:
            MultiplicationDimensionError: If self.cols != other.rows
            IntegerOverflowError: If an integer cell exceeds the int64 range
        """
        _check_matrix(other, 'matrix_multiplication')
        if self._cols != other._rows:
            raise MultiplicationDimensionError(
                f"matrix_multiplication: cannot multiply {self._rows}x{self._cols} "
                f"by {other._rows}x{other._cols} (inner dimensions {self._cols} != {other._rows})",
                left_shape=self.shape,
                right_shape=other.shape,
            )

        dtype = promoted_dtype(self.kind, other.kind)
        left = self._data.astype(dtype).tolist()
        right = other._data.astype(dtype).tolist()
        inner = self._cols

        product = np.zeros((self._rows, other._cols), dtype=dtype)
        for i in range(self._rows):
            left_row = left[i]
            for j in range(other._cols):
                total = 0
                for k in range(inner):
                    total += left_row[k] * right[k][j]
                try:
                    product[i, j] = total
                except OverflowError as e:
                    raise IntegerOverflowError(
                        f"matrix_multiplication: cell ({i}, {j}) does not fit in int64",
                        operation="matrix_multiplication",
                        cell=(i, j),
                    ) from e
        return Matrix._wrap(product)

    def transpose(self) -> Matrix:
        """New matrix with rows and columns exchanged."""
        return Matrix._wrap(self._data.T.copy())

    def inverse(self, *, pivoting: Pivoting = 'value') -> Matrix:
        """
        Inverse by Gauss-Jordan elimination (always floating).

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If a pivot is exactly zero
        """
        result = gauss_jordan_inverse(self._data, pivoting=pivoting)
        return Matrix._wrap(result.inverse)

    # === Access ===

    def row(self, i: int) -> Vector:
        if not 0 <= i < self._rows:
            raise RowOutOfBoundError(
                f"row: index {i} out of bounds for matrix with {self._rows} rows",
                index=i,
                n_rows=self._rows,
            )
        return Vector(self._data[i])

    def column(self, j: int) -> Vector:
        if not 0 <= j < self._cols:
            raise DimensionError(
                f"column: index {j} out of bounds for matrix with {self._cols} columns"
            )
        return Vector(self._data[:, j])

    def __getitem__(self, index: tuple[int, int]) -> int | float:
        i, j = index
        return self._data[i, j].item()

    def to_list(self) -> list[list[Any]]:
        return self._data.tolist()

    def to_numpy(self) -> NDArray[Any]:
        return self._data.copy()

    def allclose(self, other: Matrix, tolerance: ToleranceTier = CPU_FP64) -> bool:
        """Same shape and every cell equal within the tolerance tier."""
        _check_matrix(other, 'allclose')
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._data, other._data, rtol=tolerance.rtol, atol=tolerance.atol,
        ))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"


def _check_matrix(other: Any, operation: str) -> None:
    if not isinstance(other, Matrix):
        raise TypeError(f"{operation}: expected Matrix, got {type(other).__name__}")


def _without_empty_rows(data: NDArray[Any]) -> NDArray[Any]:
    """A matrix with no rows has no columns either."""
    if data.shape[0] == 0 and data.shape[1] != 0:
        return np.zeros((0, 0), dtype=data.dtype)
    return data


def _validated_rows(rows: ArrayLike) -> NDArray[Any]:
    """Convert row data to a 2D int64/float64 array, checking row lengths first."""
    if isinstance(rows, Matrix):
        return rows.to_numpy()

    if isinstance(rows, np.ndarray):
        data = check_array(rows, 'rows')
        if data.size == 0 and data.ndim == 1:
            return np.zeros((0, 0), dtype=np.float64)
        check_2d(data, 'rows')
        return data

    try:
        row_lists = [list(row) for row in rows]
    except TypeError as e:
        raise DimensionError(f"rows: expected a sequence of rows: {e}") from e

    if not row_lists:
        return np.zeros((0, 0), dtype=np.float64)

    expected = len(row_lists[0])
    for index, row in enumerate(row_lists):
        if len(row) != expected:
            raise InconsistentColumnSizesError(
                f"rows: row {index} has {len(row)} columns, expected {expected}",
                row=index,
                expected=expected,
                actual=len(row),
            )

    data = check_array(row_lists, 'rows')
    if expected == 0:
        # np.asarray([[], []]) is float64 with shape (n, 0)
        return data.reshape(len(row_lists), 0)
    check_2d(data, 'rows')
    return data
