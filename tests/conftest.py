"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pydense.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


SPD_EIGENVALUES = np.array([10.0, 6.0, 3.0, 1.5, 0.5])


@pytest.fixture
def spd_array(rng):
    """
    5x5 symmetric positive-definite matrix with eigenvalues SPD_EIGENVALUES.

    The eigenvalues are well separated so the shift-free QR algorithm
    converges in well under its default cap.
    """
    q, _ = np.linalg.qr(rng.standard_normal((5, 5)))
    a = (q * SPD_EIGENVALUES) @ q.T
    return 0.5 * (a + a.T)


@pytest.fixture
def general_array(rng):
    """Random 4x4 matrix shifted away from singularity and zero pivots."""
    return rng.standard_normal((4, 4)) + 4.0 * np.eye(4)


@pytest.fixture
def cholesky_example():
    """Classic SPD example with an integer Cholesky factor."""
    a = Matrix.from_rows([[4, 12, -16], [12, 37, -43], [-16, -43, 98]])
    expected = np.array([[2.0, 0.0, 0.0], [6.0, 1.0, 0.0], [-8.0, 5.0, 3.0]])
    return a, expected


@pytest.fixture
def svd_example():
    """Lower-triangular 3x3 matrix with well-separated singular values."""
    return Matrix.from_rows([[14, 0, 0], [21, 175, 0], [-14, -70, 35]])
