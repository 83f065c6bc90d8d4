"""
Eigenvalues by the shift-free QR algorithm, eigenvectors by SVD null space.

The QR algorithm repeats A <- R Q where A = Q R. For a matrix with real,
well-separated eigenvalues the iterate converges to upper-triangular form
with the eigenvalues on its diagonal. There is no shift and no 2x2 block
handling, so complex-conjugate pairs never converge: the loop runs to its
cap and the diagonal is returned as is.

Eigenvectors: for each eigenvalue lambda, A - lambda I is (nearly)
singular, and the right singular vector belonging to its smallest singular
value spans the null space.
"""

from __future__ import annotations

import numpy as np

from pydense.core.compute.tolerances import QR_ALGORITHM, SVD
from pydense.core.validation import check_nonempty, check_square
from pydense.linalg.svd import svd_init
from pydense.linalg.triangular import gram_schmidt
from pydense.matrix.ops import (
    diagonal,
    identity,
    matmul,
    max_abs,
    normalize,
    scalar_mul,
    slice_matrix,
    sub,
    tril,
    zeros,
)
from pydense.matrix.storage import Matrix, Vector


def qr_iterate(
    matrix: Matrix,
    max_iter: int = QR_ALGORITHM.max_iter,
    tol: float = QR_ALGORITHM.tol,
) -> tuple[Matrix, int, bool]:
    """
    Run the QR algorithm and report how it ended.

    Returns:
        (iterate, sweeps performed, converged) where converged means the
        largest strictly-lower entry dropped below ``tol``
    """
    check_square(matrix, 'matrix')
    check_nonempty(matrix, 'matrix')

    out = matrix.copy()
    for sweep in range(1, max_iter + 1):
        q, r = gram_schmidt(out)
        out = matmul(r, q)

        # tril(., 1) keeps j <= i - 1: the strictly lower part
        if max_abs(tril(out, 1)) < tol:
            return out, sweep, True

    return out, max_iter, False


def qr_algo(
    matrix: Matrix,
    max_iter: int = QR_ALGORITHM.max_iter,
    tol: float = QR_ALGORITHM.tol,
) -> Matrix:
    """Final QR-algorithm iterate (quasi-upper-triangular on success)."""
    out, _, _ = qr_iterate(matrix, max_iter=max_iter, tol=tol)
    return out


def eigenvalues(
    matrix: Matrix,
    max_iter: int = QR_ALGORITHM.max_iter,
    tol: float = QR_ALGORITHM.tol,
) -> Vector:
    """Diagonal of the QR-algorithm iterate."""
    return diagonal(qr_algo(matrix, max_iter=max_iter, tol=tol))


def eigenvectors_for(
    matrix: Matrix,
    values: Vector,
    svd_max_iter: int = SVD.max_iter,
) -> Matrix:
    """
    Unit eigenvectors for already computed eigenvalues, one per column.

    Column i is the row of ``right`` paired with the smallest singular value
    in the SVD of ``matrix - values[i] * I``, scaled to unit norm. The
    sweep does not sort its output, so the row is located by argmin.
    """
    n = matrix.rows
    out = zeros(n, n, dtype=matrix.dtype)
    eye = identity(n, dtype=matrix.dtype)

    for i in range(values.size):
        shifted = sub(matrix, scalar_mul(eye, values.get(i)))
        decomposition = svd_init(shifted, max_iter=svd_max_iter)
        k = int(np.argmin(np.abs(decomposition.singular.data)))
        null_row = normalize(slice_matrix(decomposition.right, k, k + 1, 0, n))
        out.grid[:, i] = null_row.data

    return out


def eigenvec(
    matrix: Matrix,
    max_iter: int = QR_ALGORITHM.max_iter,
    tol: float = QR_ALGORITHM.tol,
    svd_max_iter: int = SVD.max_iter,
) -> Matrix:
    """
    Eigenvector matrix: column i belongs to ``eigenvalues(matrix)[i]``.

    Signs are arbitrary. Repeated eigenvalues give the same direction for
    every copy, so the columns are not guaranteed to be independent.
    """
    values = eigenvalues(matrix, max_iter=max_iter, tol=tol)
    return eigenvectors_for(matrix, values, svd_max_iter=svd_max_iter)
