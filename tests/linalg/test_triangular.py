"""
Tests for Gram-Schmidt QR and Doolittle LU.

SciPy serves as the independent reference for LU on matrices that do not
need pivoting.
"""

import math

import numpy as np
import pytest
import scipy.linalg

from pydense.core.exceptions import DimensionError, SingularMatrixError
from pydense.linalg import DecompositionPair, gram_schmidt, lu_decomp, qr_decomp
from pydense.matrix import Matrix, all_close, identity, matmul, transpose, zeros


def _orthonormal_columns(q: Matrix) -> bool:
    return all_close(matmul(transpose(q), q), identity(q.cols))


# ═══════════════════════════════════════════════════════════════════════
# QR
# ═══════════════════════════════════════════════════════════════════════


class TestQRDecomp:

    def test_returns_pair(self, general_array):
        pair = qr_decomp(Matrix.from_numpy(general_array))
        assert isinstance(pair, DecompositionPair)
        q, r = pair
        assert q is pair.a and r is pair.b

    def test_reconstruction(self, general_array):
        a = Matrix.from_numpy(general_array)
        q, r = qr_decomp(a)
        assert all_close(matmul(q, r), a)

    def test_q_orthonormal(self, general_array):
        q, _ = qr_decomp(Matrix.from_numpy(general_array))
        assert _orthonormal_columns(q)

    def test_r_upper_with_positive_diagonal(self, general_array):
        _, r = qr_decomp(Matrix.from_numpy(general_array))
        grid = r.to_numpy()
        np.testing.assert_array_equal(np.tril(grid, -1), 0.0)
        assert np.all(np.diag(grid) > 0)

    def test_textbook_example(self):
        a = Matrix.from_rows([[12, -51, 4], [6, 167, -68], [-4, 24, -41]])
        _, r = qr_decomp(a)
        np.testing.assert_allclose(
            r.to_numpy(),
            [[14, 21, -14], [0, 175, -70], [0, 0, 35]],
            atol=1e-10,
        )

    def test_singular_raises(self):
        with pytest.raises(SingularMatrixError):
            qr_decomp(Matrix.from_rows([[1, 2], [2, 4]]))

    def test_non_square_raises(self):
        with pytest.raises(DimensionError):
            qr_decomp(Matrix(3, 2))


class TestGramSchmidtKernel:

    def test_accepts_singular_input(self):
        a = Matrix.from_rows([[1, 2], [2, 4]])
        q, r = gram_schmidt(a)
        assert all_close(matmul(q, r), a)
        assert _orthonormal_columns(q)

    def test_dependent_column_completed(self):
        a = Matrix.from_rows([[1, 1, 0], [0, 0, 0], [0, 0, 1]])
        q, r = gram_schmidt(a)
        assert r.get_at(1, 1) == 0.0
        assert _orthonormal_columns(q)
        assert all_close(matmul(q, r), a)

    def test_zero_matrix_gives_identity_basis(self):
        q, r = gram_schmidt(zeros(3, 3))
        np.testing.assert_array_equal(q.to_numpy(), np.eye(3))
        assert np.all(r.data == 0.0)

    def test_tall_matrix(self, rng):
        a = Matrix.from_numpy(rng.standard_normal((5, 3)))
        q, r = gram_schmidt(a)
        assert q.shape == (5, 3)
        assert r.shape == (3, 3)
        assert all_close(matmul(q, r), a)


# ═══════════════════════════════════════════════════════════════════════
# LU
# ═══════════════════════════════════════════════════════════════════════


class TestLUDecomp:

    def test_reconstruction(self, general_array):
        a = Matrix.from_numpy(general_array)
        lower, upper = lu_decomp(a)
        assert all_close(matmul(lower, upper), a)

    def test_triangular_structure(self, general_array):
        lower, upper = lu_decomp(Matrix.from_numpy(general_array))
        lg, ug = lower.to_numpy(), upper.to_numpy()
        np.testing.assert_array_equal(np.diag(lg), 1.0)
        np.testing.assert_array_equal(np.triu(lg, 1), 0.0)
        np.testing.assert_array_equal(np.tril(ug, -1), 0.0)

    def test_matches_scipy_without_pivoting(self, spd_array):
        # Diagonally dominant SPD input: partial pivoting picks no swaps
        spd = spd_array + 50.0 * np.eye(5)
        p, l_ref, u_ref = scipy.linalg.lu(spd)
        np.testing.assert_array_equal(p, np.eye(5))

        lower, upper = lu_decomp(Matrix.from_numpy(spd))
        np.testing.assert_allclose(lower.to_numpy(), l_ref, rtol=1e-10, atol=1e-12)
        np.testing.assert_allclose(upper.to_numpy(), u_ref, rtol=1e-10, atol=1e-12)

    def test_zero_pivot_propagates_silently(self):
        lower, upper = lu_decomp(Matrix.from_rows([[0, 1], [1, 0]]))
        assert upper.get_at(0, 0) == 0.0
        assert math.isinf(lower.get_at(1, 0))

    def test_zero_pivot_strict(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            lu_decomp(Matrix.from_rows([[0, 1], [1, 0]]), strict=True)
        assert exc_info.value.pivot_index == 0

    def test_non_square_raises(self):
        with pytest.raises(DimensionError):
            lu_decomp(Matrix(2, 3))

    def test_float32(self, general_array):
        a = Matrix.from_numpy(general_array.astype(np.float32))
        lower, upper = lu_decomp(a)
        assert lower.dtype == np.float32
        np.testing.assert_allclose(
            (lower.to_numpy() @ upper.to_numpy()), general_array, rtol=1e-4, atol=1e-5
        )
