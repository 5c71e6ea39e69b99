"""
Element-type rules shared by Vector and Matrix.

There are exactly two element types, int64 and float64. Integer values
widen to floating point; floating values are never narrowed.
"""

from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray

from numstat.core.exceptions import ElementTypeError, ValidationError

ElementKind = Literal['integer', 'floating']


def kind_of(array: NDArray[Any]) -> ElementKind:
    """Element kind of a validated int64/float64 array."""
    return 'integer' if np.issubdtype(array.dtype, np.integer) else 'floating'


def scalar_kind(value: Any, name: str = 'scalar') -> ElementKind:
    """
    Element kind of a Python or NumPy scalar.

    Raises:
        ValidationError: If value is a bool or not a real number
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: boolean is not a numeric element type")
    if isinstance(value, (int, np.integer)):
        return 'integer'
    if isinstance(value, (float, np.floating)):
        return 'floating'
    raise ValidationError(
        f"{name}: expected an integer or floating scalar, got {type(value).__name__}"
    )


def promoted_dtype(left: ElementKind, right: ElementKind) -> type[np.generic]:
    """Result dtype of combining two element kinds."""
    if left == 'integer' and right == 'integer':
        return np.int64
    return np.float64


def check_in_place(receiver: ElementKind, operand: ElementKind, operation: str) -> None:
    """
    Verify an in-place operation keeps the receiver's element type.

    Raises:
        ElementTypeError: If a floating operand would be stored into an
            integer receiver
    """
    if receiver == 'integer' and operand == 'floating':
        raise ElementTypeError(
            f"{operation}: cannot store floating values in an integer container; "
            f"convert the receiver to floating point first"
        )
