"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymat import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m3():
    """3x3 matrix used across the arithmetic tests (det = 73)."""
    return Matrix([
        [5, 9, 2],
        [1, 8, 5],
        [3, 6, 4],
    ])


@pytest.fixture
def textbook():
    """4x4 textbook matrix with det = 88."""
    return Matrix([
        [5, -2, 2, 7],
        [1, 0, 0, 3],
        [-3, 1, 5, 0],
        [3, -1, -9, 4],
    ])


@pytest.fixture
def rank_deficient():
    """3x3 matrix of rank 2 (det exactly 0)."""
    return Matrix([
        [1, 2, 3],
        [4, 5, 6],
        [7, 8, 9],
    ])


@pytest.fixture
def column_dominant(rng):
    """5x5 strictly column diagonally dominant matrix (no pivoting needed)."""
    A = rng.random((5, 5))
    A += np.diag(A.sum(axis=0) + 1.0)
    return Matrix(A)
