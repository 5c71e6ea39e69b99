"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from numstat.linalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_linear_data():
    """Feature rows with targets exactly y = 2 + x1 + x2."""
    x = [
        [1.0, 2.0],
        [2.0, 1.0],
        [3.0, 5.0],
        [4.0, 3.0],
        [5.0, 8.0],
        [6.0, 4.0],
    ]
    y = [2.0 + a + b for a, b in x]
    return x, y, np.array([2.0, 1.0, 1.0])


@pytest.fixture
def collinear_data():
    """Second feature is always the first plus one; y = x1 + 1."""
    x = [[1, 2], [2, 3], [3, 4], [4, 5]]
    y = [3, 4, 5, 6]
    return x, y


@pytest.fixture
def well_conditioned_matrix(rng):
    """Random 4x4 float matrix made diagonally dominant."""
    A = rng.standard_normal((4, 4))
    A += np.eye(4) * 8.0
    return Matrix(A)
