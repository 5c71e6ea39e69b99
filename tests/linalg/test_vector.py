"""
Tests for Vector.

Covers magnitude, in-place add, dot product, scalar multiplication and
the integer -> floating promotion rules.
"""

import numpy as np
import pytest

from numstat.core.exceptions import DimensionError, ElementTypeError, ValidationError
from numstat.linalg import Vector


class TestConstruction:

    def test_dimension_matches_length(self):
        v = Vector([1, 2, 3])
        assert v.dimensions == 3
        assert len(v) == 3

    def test_integer_components(self):
        v = Vector([1, 2, 3])
        assert v.is_integer
        assert v.components.dtype == np.int64

    def test_floating_components(self):
        v = Vector([1.0, 2.5])
        assert v.kind == 'floating'

    def test_empty_vector(self):
        v = Vector([])
        assert v.dimensions == 0
        assert v.magnitude() == 0.0

    def test_components_is_copy(self):
        v = Vector([1, 2])
        c = v.components
        c[0] = 100
        assert v.to_list() == [1, 2]

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            Vector([[1, 2], [3, 4]])

    def test_rejects_strings(self):
        with pytest.raises(ValidationError):
            Vector(["a", "b"])


class TestMagnitude:

    def test_integer_pythagorean(self):
        assert Vector([3, 4]).magnitude() == 5.0

    def test_returns_float_for_integer_vector(self):
        assert isinstance(Vector([3, 4]).magnitude(), float)

    def test_floating(self):
        assert Vector([1.0, 2.0, 2.0]).magnitude() == pytest.approx(3.0)

    def test_zero_vector(self):
        assert Vector([0, 0, 0]).magnitude() == 0.0

    def test_non_negative_and_zero_iff_all_zero(self, rng):
        for _ in range(20):
            components = rng.integers(-3, 4, size=5)
            m = Vector(components).magnitude()
            assert m >= 0.0
            assert (m == 0.0) == bool(np.all(components == 0))


class TestAdd:

    def test_integer_add_in_place(self):
        v = Vector([1, 2, 3])
        v.add(Vector([10, 20, 30]))
        assert v.to_list() == [11, 22, 33]
        assert v.is_integer

    def test_floating_plus_integer_widens(self):
        v = Vector([0.5, 1.5])
        v.add(Vector([1, 2]))
        assert v.to_list() == [1.5, 3.5]
        assert v.kind == 'floating'

    def test_floating_plus_floating(self):
        v = Vector([0.25, 0.5])
        v.add(Vector([0.25, 0.5]))
        assert v.to_list() == [0.5, 1.0]

    def test_integer_plus_floating_rejected_without_mutation(self):
        v = Vector([1, 2])
        with pytest.raises(ElementTypeError):
            v.add(Vector([0.5, 0.5]))
        assert v.to_list() == [1, 2]

    def test_dimension_mismatch_leaves_receiver_unchanged(self):
        v = Vector([1, 2, 3])
        with pytest.raises(DimensionError, match="3 vs 2"):
            v.add(Vector([1, 2]))
        assert v.to_list() == [1, 2, 3]

    def test_operand_unchanged(self):
        other = Vector([1, 1])
        Vector([2, 2]).add(other)
        assert other.to_list() == [1, 1]

    def test_non_vector_operand(self):
        with pytest.raises(TypeError, match="expected Vector"):
            Vector([1, 2]).add([1, 2])


class TestDotProduct:

    def test_integer(self):
        result = Vector([1, 2, 3]).dot_product(Vector([4, 5, 6]))
        assert result == 32.0
        assert isinstance(result, float)

    def test_floating_with_integer(self):
        assert Vector([0.5, 1.5]).dot_product(Vector([2, 2])) == 4.0

    def test_integer_with_floating(self):
        assert Vector([2, 2]).dot_product(Vector([0.5, 1.5])) == 4.0

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionError):
            Vector([1, 2]).dot_product(Vector([1, 2, 3]))

    def test_commutative(self, rng):
        for _ in range(20):
            a = Vector(rng.standard_normal(6))
            b = Vector(rng.standard_normal(6))
            assert a.dot_product(b) == b.dot_product(a)

    def test_commutative_integer(self, rng):
        a = Vector(rng.integers(-100, 100, size=8))
        b = Vector(rng.integers(-100, 100, size=8))
        assert a.dot_product(b) == b.dot_product(a)

    def test_empty_vectors(self):
        assert Vector([]).dot_product(Vector([])) == 0.0

    def test_large_integers_do_not_wrap(self):
        result = Vector([2 ** 62, 2 ** 62]).dot_product(Vector([4, 4]))
        assert result == float(2 ** 65)

    def test_large_negative_integers(self):
        result = Vector([-(2 ** 62), 2 ** 62]).dot_product(Vector([4, -4]))
        assert result == -float(2 ** 65)


class TestScalarMultiplication:

    def test_integer_by_integer(self):
        v = Vector([1, -2, 3]) * 3
        assert v.to_list() == [3, -6, 9]
        assert v.is_integer

    def test_floating_by_floating(self):
        v = Vector([1.0, 2.0]) * 0.5
        assert v.to_list() == [0.5, 1.0]

    def test_floating_by_integer(self):
        v = Vector([1.5, 2.0]) * 2
        assert v.to_list() == [3.0, 4.0]
        assert v.kind == 'floating'

    def test_reflected(self):
        assert (2 * Vector([1, 2])).to_list() == [2, 4]

    def test_returns_new_vector(self):
        original = Vector([1, 2])
        scaled = original * 5
        assert scaled is not original
        assert original.to_list() == [1, 2]

    def test_integer_by_floating_undefined(self):
        with pytest.raises(TypeError):
            Vector([1, 2]) * 0.5

    def test_non_numeric_scalar(self):
        with pytest.raises(TypeError):
            Vector([1.0, 2.0]) * "x"

    def test_boolean_scalar(self):
        with pytest.raises(TypeError):
            Vector([1, 2]) * True


class TestDunder:

    def test_equality(self):
        assert Vector([1, 2]) == Vector([1, 2])
        assert Vector([1, 2]) != Vector([1, 3])
        assert Vector([1, 2]) != Vector([1, 2, 3])

    def test_iteration(self):
        assert list(Vector([4, 5])) == [4, 5]

    def test_repr(self):
        assert repr(Vector([1, 2])) == "Vector([1, 2])"

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector([1]))
