"""
Exception hierarchy for numstat.

All exceptions inherit from NumstatError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class NumstatError(Exception):
    """Base exception for all numstat errors."""
    pass


class ValidationError(NumstatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when two operands of a vector or matrix operation have
    incompatible shapes, or when an input has the wrong number of
    dimensions.
    """
    pass


class InconsistentColumnSizesError(DimensionError):
    """
    Matrix rows have different lengths.

    Attributes:
        row: Index of the first row whose length differs
        expected: Column count established by the first row
        actual: Length of the offending row
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual


class MultiplicationDimensionError(DimensionError):
    """
    Inner dimensions of a matrix product disagree.

    Attributes:
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class InvalidInputDimensionsError(DimensionError):
    """
    Model inputs are empty, ragged, or inconsistent with each other.

    Raised by regression fitting and prediction.
    """
    pass


class RowOutOfBoundError(ValidationError):
    """
    Row index outside of [0, rows).

    Attributes:
        index: The offending row index
        n_rows: Number of rows in the matrix
    """

    def __init__(self, message: str, index: int | None = None, n_rows: int | None = None):
        super().__init__(message)
        self.index = index
        self.n_rows = n_rows


class ElementTypeError(ValidationError):
    """
    Operation would narrow a floating value into an integer container.

    Integer operands widen to floating point; the reverse is never done
    implicitly.
    """
    pass


class NumericalError(NumstatError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class IntegerOverflowError(NumericalError):
    """
    An integer result does not fit in int64.

    Attributes:
        operation: Operation that produced the value
        cell: (row, column) of the offending result, when there is one
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        cell: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.cell = cell


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when Gauss-Jordan elimination meets a pivot that is exactly zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_column: Column at which elimination stopped
        rank: Number of pivots successfully eliminated before failure
        expected_rank: Expected rank (the matrix order)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_column: int | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_column = pivot_column
        self.rank = rank
        self.expected_rank = expected_rank


class ModelNotFittedError(NumstatError):
    """
    A model was used for prediction before a successful fit.
    """
    pass
