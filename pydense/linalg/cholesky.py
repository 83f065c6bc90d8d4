"""
Cholesky decomposition A = L L' for symmetric positive-definite input.

Symmetry is a precondition (checked with all_close against the
transpose). Positive-definiteness is not: a non-positive radicand gives a
NaN diagonal entry, which then spreads through the rows below it.
"""

from __future__ import annotations

import numpy as np

from pydense.core.exceptions import NotPositiveDefiniteError, NotSymmetricError
from pydense.core.validation import check_nonempty, check_square
from pydense.matrix.ops import all_close, transpose, zeros
from pydense.matrix.storage import Matrix


def cholesky_decomp(matrix: Matrix, strict: bool = False) -> Matrix:
    """
    Lower-triangular L with L @ L' == matrix.

    Row by row: off-diagonal L[i][j] = (A[i][j] - sum_k L[i][k] L[j][k]) / L[j][j],
    diagonal L[i][i] = sqrt(A[i][i] - sum_k L[i][k]^2).

    Args:
        matrix: Square symmetric matrix
        strict: Raise when a radicand is not strictly positive

    Raises:
        DimensionError: If the matrix is empty or not square
        NotSymmetricError: If matrix is not all-close to its transpose
        NotPositiveDefiniteError: If strict and the matrix is not positive definite
    """
    check_square(matrix, 'matrix')
    check_nonempty(matrix, 'matrix')

    mirrored = transpose(matrix)
    if not all_close(matrix, mirrored):
        asymmetry = float(np.max(np.abs(matrix.data - mirrored.data)))
        raise NotSymmetricError(
            f"Cholesky decomposition requires a symmetric matrix, "
            f"max |A - A'| = {asymmetry:.3e}",
            matrix_name='matrix',
            max_asymmetry=asymmetry,
        )

    n = matrix.rows
    lower = zeros(n, n, dtype=matrix.dtype)
    a, L = matrix.grid, lower.grid

    with np.errstate(divide='ignore', invalid='ignore'):
        for i in range(n):
            for j in range(i):
                partial = float(np.dot(L[i, :j], L[j, :j]))
                L[i, j] = (a[i, j] - partial) / L[j, j]

            radicand = a[i, i] - float(np.dot(L[i, :i], L[i, :i]))
            if strict and not radicand > 0.0:
                raise NotPositiveDefiniteError(
                    f"Matrix is not positive definite: radicand {radicand:.6g} "
                    f"at row {i}",
                    matrix_name='matrix',
                    pivot_index=i,
                    min_radicand=float(radicand),
                )
            L[i, i] = np.sqrt(radicand)

    return lower
