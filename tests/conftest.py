"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyalgebra import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def invertible_matrix(rng):
    """Diagonally dominant 5x5 matrix (always invertible)."""
    values = rng.standard_normal((5, 5)) + 10.0 * np.eye(5)
    return Matrix.from_rows(values)


@pytest.fixture
def singular_matrix():
    """3x3 matrix whose third row is the sum of the first two."""
    return Matrix.from_rows([
        [1.0, 2.0, 3.0],
        [4.0, 5.0, 6.0],
        [5.0, 7.0, 9.0],
    ])

