"""
Tests for the array-level solvers: qr(), lu(), cholesky(), eig(), svd().

Tests the complete pipeline: Design construction, backend selection,
and solution properties.
"""

import warnings

import numpy as np
import pytest

import pydense
from pydense.core.exceptions import (
    DimensionError,
    NotPositiveDefiniteError,
    NotSymmetricError,
    SingularMatrixError,
    ValidationError,
)
from pydense.linalg import DecompositionDesign, DecompositionSolution
from pydense.linalg.backends import CPUDecompositionBackend
from pydense.core.protocols import Backend


# ═══════════════════════════════════════════════════════════════════════
# Design
# ═══════════════════════════════════════════════════════════════════════


class TestDecompositionDesign:

    def test_from_array(self):
        design = DecompositionDesign.from_array([[1, 2], [3, 4]])
        assert design.shape == (2, 2)
        assert design.is_square
        assert design.dtype == np.float64

    def test_from_array_float32(self):
        design = DecompositionDesign.from_array(np.eye(2), dtype=np.float32)
        assert design.dtype == np.float32

    def test_from_matrix_copies(self):
        m = pydense.Matrix.from_rows([[1, 2], [3, 4]])
        design = DecompositionDesign.from_matrix(m)
        m.set_at(0, 0, 100.0)
        assert design.matrix.get_at(0, 0) == 1.0

    def test_rejects_non_finite(self):
        with pytest.raises(ValidationError, match="non-finite"):
            DecompositionDesign.from_array([[1.0, np.nan], [0.0, 1.0]])

    def test_rejects_1d(self):
        with pytest.raises(DimensionError):
            DecompositionDesign.from_array([1.0, 2.0])

    def test_rejects_empty(self):
        with pytest.raises(DimensionError):
            DecompositionDesign.from_array(np.zeros((0, 3)))


# ═══════════════════════════════════════════════════════════════════════
# Direct factorizations
# ═══════════════════════════════════════════════════════════════════════


class TestDirectSolvers:

    def test_qr(self, general_array):
        result = pydense.qr(general_array)
        assert isinstance(result, DecompositionSolution)
        assert result.method == 'qr'
        np.testing.assert_allclose(result.reconstruct(), general_array, atol=1e-10)
        np.testing.assert_allclose(result.q.T @ result.q, np.eye(4), atol=1e-10)

    def test_qr_singular(self):
        with pytest.raises(SingularMatrixError):
            pydense.qr([[1, 2], [2, 4]])

    def test_lu(self, general_array):
        result = pydense.lu(general_array)
        np.testing.assert_allclose(result.reconstruct(), general_array, atol=1e-10)
        np.testing.assert_array_equal(np.diag(result.lower), 1.0)

    def test_lu_strict(self):
        with pytest.raises(SingularMatrixError):
            pydense.lu([[0, 1], [1, 0]], strict=True)

    def test_cholesky(self, spd_array):
        result = pydense.cholesky(spd_array)
        np.testing.assert_allclose(result.lower, np.linalg.cholesky(spd_array), atol=1e-10)
        np.testing.assert_allclose(result.reconstruct(), spd_array, atol=1e-10)

    def test_cholesky_errors(self):
        with pytest.raises(NotSymmetricError):
            pydense.cholesky([[1, 2], [0, 1]])
        with pytest.raises(NotPositiveDefiniteError):
            pydense.cholesky([[1, 2], [2, 1]], strict=True)

    def test_non_square(self):
        with pytest.raises(DimensionError):
            pydense.lu(np.ones((2, 3)))

    def test_missing_factor_raises_attribute_error(self, general_array):
        result = pydense.lu(general_array)
        with pytest.raises(AttributeError, match="'q' is not produced"):
            result.q

    def test_direct_methods_report_converged(self, general_array):
        result = pydense.lu(general_array)
        assert result.converged
        assert result.iterations is None


# ═══════════════════════════════════════════════════════════════════════
# Iterative solvers
# ═══════════════════════════════════════════════════════════════════════


class TestEig:

    def test_values(self, spd_array):
        result = pydense.eig(spd_array)
        np.testing.assert_allclose(
            np.sort(result.eigenvalues), np.linalg.eigvalsh(spd_array), rtol=1e-8
        )
        assert result.converged
        assert result.iterations > 0

    def test_vectors_not_computed_by_default(self, spd_array):
        with pytest.raises(AttributeError):
            pydense.eig(spd_array).eigenvectors

    def test_vectors(self):
        data = np.array([[2.0, 1.0], [1.0, 2.0]])
        result = pydense.eig(data, vectors=True)
        for i in range(2):
            v = result.eigenvectors[:, i]
            np.testing.assert_allclose(data @ v, result.eigenvalues[i] * v, atol=1e-6)

    def test_vectors_of_diagonal_input(self):
        data = np.diag([2.0, 1.0])
        result = pydense.eig(data, vectors=True)
        np.testing.assert_allclose(np.abs(result.eigenvectors), np.eye(2))
        np.testing.assert_allclose(
            data @ result.eigenvectors, result.eigenvectors * result.eigenvalues,
            atol=1e-12,
        )

    def test_svd_max_iter_passed_through(self):
        result = pydense.eig([[2, 1], [1, 2]], vectors=True, svd_max_iter=5)
        assert result.info['svd_max_iter'] == 5
        assert pydense.eig([[2, 1], [1, 2]], vectors=True).info['svd_max_iter'] == 100

    def test_no_warning_when_converged(self, spd_array):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            pydense.eig(spd_array)

    def test_warns_at_cap(self):
        with pytest.warns(RuntimeWarning, match="did not converge"):
            result = pydense.eig([[0, -1], [1, 0]], max_iter=20)
        assert not result.converged
        assert result.iterations == 20
        assert any("did not converge" in w for w in result.warnings)

    def test_summary_lists_eigenvalues(self):
        summary = pydense.eig([[2, 1], [1, 2]]).summary()
        assert "Method: eig" in summary
        assert "λ[0]" in summary
        assert "converged" in summary


class TestSVD:

    def test_reconstruction(self, svd_example):
        result = pydense.svd(svd_example.to_numpy())
        np.testing.assert_allclose(
            result.reconstruct(), svd_example.to_numpy(), rtol=1e-5, atol=1e-8
        )
        assert result.iterations == 100

    def test_max_iter(self, svd_example):
        assert pydense.svd(svd_example.to_numpy(), max_iter=5).iterations == 5

    def test_summary(self, svd_example):
        summary = pydense.svd(svd_example.to_numpy()).summary()
        assert "σ[2]" in summary
        assert "iteration cap reached" in summary


# ═══════════════════════════════════════════════════════════════════════
# Backend plumbing
# ═══════════════════════════════════════════════════════════════════════


class TestBackend:

    def test_satisfies_protocol(self):
        assert isinstance(CPUDecompositionBackend(), Backend)

    def test_timing_sections(self, spd_array):
        design = DecompositionDesign.from_array(spd_array)
        result = CPUDecompositionBackend().solve(design, method='eig', vectors=True)
        assert result.backend_name == 'cpu_dense'
        assert {'total_seconds', 'qr_algorithm', 'eigenvectors'} <= set(result.timing)

    def test_unknown_method(self):
        design = DecompositionDesign.from_array(np.eye(2))
        with pytest.raises(ValidationError, match="method"):
            CPUDecompositionBackend().solve(design, method='schur')

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            pydense.qr(np.eye(2), backend='gpu')

    def test_repr(self, general_array):
        assert repr(pydense.lu(general_array)) == (
            "DecompositionSolution(method='lu', shape=(4, 4), converged=True)"
        )
