"""
Input validation utilities for numstat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - Exactly two element types survive validation: int64 and float64
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from numstat.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[Any]:
    """
    Validate and convert input to a numpy array of int64 or float64.

    Any integer dtype is widened to int64 and any floating dtype to
    float64. Booleans, complex numbers, strings and object arrays are
    rejected.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype int64 or float64

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    check_numeric_dtype(result, name)

    # An empty list converts to float64; keep it that way
    if np.issubdtype(result.dtype, np.integer):
        return result.astype(np.int64, copy=True)
    return result.astype(np.float64, copy=True)


def check_numeric_dtype(array: NDArray[Any], name: str) -> None:
    """
    Verify array holds real integer or floating values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If dtype is bool, complex, or non-numeric
    """
    if array.dtype == np.bool_:
        raise ValidationError(f"{name}: boolean dtype is not a numeric element type")

    if not (np.issubdtype(array.dtype, np.integer) or np.issubdtype(array.dtype, np.floating)):
        raise ValidationError(
            f"{name}: non-numeric dtype {array.dtype}, expected integer or floating data"
        )


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_not_empty(array: NDArray[Any], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        ValidationError: If array is empty
    """
    if array.size == 0:
        raise ValidationError(f"{name}: requires at least 1 value, got 0")


def check_square(array: NDArray[Any], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        DimensionError: If rows != cols
    """
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(f"{name}: expected a square matrix, got shape ({rows}, {cols})")


def check_consistent_length(
    *arrays: NDArray[Any],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")
