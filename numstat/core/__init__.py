"""
Core infrastructure for numstat.

This module provides shared abstractions and utilities used by the
domain submodules (linalg, regression, descriptive, metrics).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from numstat.core.protocols import Backend
from numstat.core.result import Result
from numstat.core.exceptions import (
    NumstatError,
    ValidationError,
    DimensionError,
    InconsistentColumnSizesError,
    MultiplicationDimensionError,
    InvalidInputDimensionsError,
    RowOutOfBoundError,
    ElementTypeError,
    NumericalError,
    IntegerOverflowError,
    SingularMatrixError,
    ModelNotFittedError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "NumstatError",
    "ValidationError",
    "DimensionError",
    "InconsistentColumnSizesError",
    "MultiplicationDimensionError",
    "InvalidInputDimensionsError",
    "RowOutOfBoundError",
    "ElementTypeError",
    "NumericalError",
    "IntegerOverflowError",
    "SingularMatrixError",
    "ModelNotFittedError",
]
