"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def example_2x2():
    """The 2x2 matrix [[1, 2], [3, 4]]: det -2, inverse [[-2, 1], [1.5, -0.5]]."""
    return Matrix([[1, 2], [3, 4]])


@pytest.fixture
def singular_2x2():
    """Proportional rows, so no inverse exists."""
    return Matrix([[1, 2], [2, 4]])


@pytest.fixture
def random_nonsingular(rng):
    """Factory for diagonally dominant (hence nonsingular) float matrices."""
    def make(n):
        data = rng.standard_normal((n, n)) + n * np.eye(n)
        return Matrix(data)
    return make


@pytest.fixture
def random_vector_pair(rng):
    """Factory for two float vectors of the same dimension."""
    def make(n):
        return Vector(rng.standard_normal(n)), Vector(rng.standard_normal(n))
    return make
