"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_matrix(rng):
    """Factory for matrices with standard normal entries."""
    def make(rows, cols):
        return Matrix.from_rows(rng.standard_normal((rows, cols)))
    return make


@pytest.fixture
def small_pair():
    """The 2x2 worked example: [[1,2],[3,4]] and [[5,6],[7,8]]."""
    a = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
    b = Matrix.from_rows([[5.0, 6.0], [7.0, 8.0]])
    return a, b
