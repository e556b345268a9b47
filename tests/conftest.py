"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def underdetermined_system():
    """2 equations, 3 unknowns, rank 2: one free variable (column 2)."""
    A = np.array([[1.0, 1.0, 1.0], [2.0, 1.0, 1.0]])
    b = np.array([3.0, 4.0])
    return A, b


@pytest.fixture
def wide_system():
    """2 equations, 3 unknowns with a pivot in every row."""
    A = np.array([[1.0, 5.0, 1.0], [2.0, 11.0, 5.0]])
    b = np.array([10.0, 11.0])
    return A, b


@pytest.fixture
def inconsistent_system():
    """Second equation is twice the first with a different right-hand side."""
    A = np.array([[1.0, 1.0], [2.0, 2.0]])
    b = np.array([3.0, 7.0])
    return A, b


@pytest.fixture
def square_system():
    """Nonsingular 3x3 system with known solution [1, -2, 3]."""
    A = np.array([
        [2.0, 1.0, -1.0],
        [-3.0, -1.0, 2.0],
        [-2.0, 1.0, 2.0],
    ])
    x = np.array([1.0, -2.0, 3.0])
    return A, A @ x, x


@pytest.fixture
def rank_deficient_system():
    """4 equations, 5 unknowns, rank 3 (one redundant equation)."""
    A = np.array([
        [-2.0, 4.0, -2.0, -1.0, 4.0],
        [4.0, -8.0, 3.0, -3.0, 1.0],
        [1.0, -2.0, 1.0, -1.0, 1.0],
        [1.0, -2.0, 0.0, -3.0, 4.0],
    ])
    b = np.array([-3.0, 2.0, 0.0, -1.0])
    return A, b
