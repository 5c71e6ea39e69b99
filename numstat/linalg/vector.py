"""
Fixed-dimension numeric vectors.

A Vector holds either int64 or float64 components. Mixed arithmetic
widens integer operands to floating point and never the reverse.
"""

from __future__ import annotations

from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numstat.core.exceptions import DimensionError, ValidationError
from numstat.core.validation import check_array, check_1d
from numstat.linalg._elements import (
    ElementKind, kind_of, scalar_kind, check_in_place,
)


class Vector:
    """
    Ordered sequence of numeric components.

    Construction never fails for 1-D numeric input; the dimension is the
    number of components.

    Example:
        >>> v = Vector([3, 4])
        >>> v.magnitude()
        5.0
        >>> v.dot_product(Vector([1.5, 2.0]))
        12.5
    """

    def __init__(self, components: ArrayLike):
        data = check_array(components, 'components')
        check_1d(data, 'components')
        self._components: NDArray[Any] = data
        self._dimensions: int = data.shape[0]

    # === Properties ===

    @property
    def dimensions(self) -> int:
        """Number of components."""
        return self._dimensions

    @property
    def components(self) -> NDArray[Any]:
        """Copy of the components (int64 or float64)."""
        return self._components.copy()

    @property
    def kind(self) -> ElementKind:
        """'integer' or 'floating'."""
        return kind_of(self._components)

    @property
    def is_integer(self) -> bool:
        return self.kind == 'integer'

    # === Operations ===

    def magnitude(self) -> float:
        """Euclidean norm, always floating point."""
        widened = self._components.astype(np.float64)
        return float(np.sqrt(np.sum(widened ** 2)))

    def add(self, other: Vector) -> None:
        """
        Add another vector in place.

        Both vectors must have the same dimension. Nothing is modified
        when validation fails.

        Raises:
            DimensionError: If dimensions differ
            ElementTypeError: If self is integer and other is floating
        """
        self._check_compatible(other, 'add')
        check_in_place(self.kind, other.kind, 'add')
        self._components += other._components

    def dot_product(self, other: Vector) -> float:
        """
        Sum of elementwise products.

        Integer pairs are summed as Python integers, which cannot wrap,
        and widened to float only for the return value.

        Raises:
            DimensionError: If dimensions differ
        """
        self._check_compatible(other, 'dot_product')
        if self.is_integer and other.is_integer:
            return float(sum(a * b for a, b in zip(self.to_list(), other.to_list())))
        left = self._components.astype(np.float64)
        right = other._components.astype(np.float64)
        return float(np.sum(left * right))

    def __mul__(self, scalar: Any) -> Vector:
        try:
            kind = scalar_kind(scalar)
        except ValidationError:
            return NotImplemented
        if kind == 'floating' and self.is_integer:
            # integer vector times floating scalar is undefined
            return NotImplemented
        if kind == 'integer':
            return Vector(self._components * np.int64(scalar))
        return Vector(self._components * float(scalar))

    __rmul__ = __mul__

    def _check_compatible(self, other: Vector, operation: str) -> None:
        if not isinstance(other, Vector):
            raise TypeError(f"{operation}: expected Vector, got {type(other).__name__}")
        if self._dimensions != other._dimensions:
            raise DimensionError(
                f"{operation}: dimension mismatch ({self._dimensions} vs {other._dimensions})"
            )

    # === Conversion and dunder helpers ===

    def to_list(self) -> list[Any]:
        return self._components.tolist()

    def to_numpy(self) -> NDArray[Any]:
        return self._components.copy()

    def __len__(self) -> int:
        return self._dimensions

    def __iter__(self) -> Iterator[Any]:
        return iter(self._components.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._components, other._components))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Vector({self.to_list()!r})"
