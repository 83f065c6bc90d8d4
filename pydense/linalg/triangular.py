"""
QR and LU decompositions.

QR uses Gram-Schmidt orthogonalization: each column is copied into the
orthogonal accumulator, its projections onto the previously finished
columns are removed one at a time (the coefficients form R above the
diagonal), and the remainder is normalized (its length is R's diagonal).
Projections are taken against the partially orthogonalized column, so
this is the modified variant. It is less robust than Householder QR on
ill-conditioned input, which is acceptable for the small dense matrices
this engine targets.

LU is the Doolittle scheme (unit diagonal on L) with NO pivoting: a zero
pivot produces Inf/NaN unless strict=True.
"""

from __future__ import annotations

from typing import NamedTuple
import numpy as np

from pydense.core.compute.tolerances import DEPENDENCE_TOLERANCE
from pydense.core.exceptions import SingularMatrixError
from pydense.core.validation import check_nonempty, check_square
from pydense.linalg.elimination import determinant
from pydense.matrix.ops import zeros
from pydense.matrix.primitives import (
    col_copy,
    col_div,
    col_sub,
    dot_cols,
    vector_length,
)
from pydense.matrix.storage import Matrix


class DecompositionPair(NamedTuple):
    """Two factors of a decomposition: (Q, R) for QR, (L, U) for LU."""
    a: Matrix
    b: Matrix


def _complete_column(orthogonal: Matrix, col: int) -> None:
    """
    Fill column ``col`` with a unit vector orthogonal to columns [0, col).

    Used when a column's residual is negligible (it lies in the span of
    the previous ones). The standard basis vector least represented in the
    existing columns is orthogonalized against them; if none survives the
    column stays zero.
    """
    grid = orthogonal.grid
    grid[:, col] = 0.0
    basis = grid[:, :col]
    alignment = np.sum(basis * basis, axis=1)
    k = int(np.argmin(alignment))

    candidate = np.zeros(orthogonal.rows, dtype=orthogonal.dtype)
    candidate[k] = 1.0
    for j in range(col):
        candidate -= np.dot(candidate, basis[:, j]) * basis[:, j]

    norm = float(np.linalg.norm(candidate))
    if norm > 0.0:
        grid[:, col] = candidate / norm


def gram_schmidt(
    matrix: Matrix,
    dependence_tol: float = DEPENDENCE_TOLERANCE,
) -> DecompositionPair:
    """
    Unchecked Gram-Schmidt kernel: returns (Q, R) with Q @ R == matrix.

    No shape or singularity precondition is enforced; the iterative
    solvers call this directly on shifted or rank-deficient iterates. A
    column whose residual is no longer than ``dependence_tol`` times its
    original length is treated as dependent: R[i][i] = 0 and Q gets a
    completing orthonormal direction, so Q stays orthonormal.
    """
    orthogonal = zeros(matrix.rows, matrix.cols, dtype=matrix.dtype)
    upper = zeros(matrix.cols, matrix.cols, dtype=matrix.dtype)

    for i in range(matrix.cols):
        col_copy(matrix, i, orthogonal, i)
        original = vector_length(orthogonal, i)

        for j in range(i):
            r = dot_cols(orthogonal, i, orthogonal, j)
            upper.set_at(j, i, r)
            col_sub(orthogonal, i, orthogonal, j, r)

        norm = vector_length(orthogonal, i)
        if norm <= dependence_tol * original:
            upper.set_at(i, i, 0.0)
            _complete_column(orthogonal, i)
        else:
            upper.set_at(i, i, norm)
            col_div(orthogonal, i, norm)

    return DecompositionPair(orthogonal, upper)


def qr_decomp(matrix: Matrix) -> DecompositionPair:
    """
    QR decomposition of a square, non-singular matrix.

    Returns:
        DecompositionPair(Q, R): Q has orthonormal columns, R is upper
        triangular with a positive diagonal, and Q @ R == matrix.

    Raises:
        DimensionError: If the matrix is empty or not square
        SingularMatrixError: If the determinant is exactly zero
    """
    check_square(matrix, 'matrix')
    check_nonempty(matrix, 'matrix')

    det = determinant(matrix)
    if det == 0.0:
        raise SingularMatrixError(
            f"QR decomposition requires a non-singular matrix, "
            f"{matrix.rows}x{matrix.cols} input has determinant 0",
            matrix_name='matrix',
            determinant=det,
            expected_rank=matrix.rows,
        )

    return gram_schmidt(matrix)


def lu_decomp(matrix: Matrix, strict: bool = False) -> DecompositionPair:
    """
    Doolittle LU decomposition without pivoting.

    Row i of U is formed from the rows of U above it; column i of L below
    the diagonal is then divided by the pivot U[i][i]; L[i][i] = 1.

    Args:
        matrix: Square matrix to factor
        strict: Raise on a zero pivot instead of propagating Inf/NaN

    Returns:
        DecompositionPair(L, U)

    Raises:
        DimensionError: If the matrix is empty or not square
        SingularMatrixError: If strict and a zero pivot is met
    """
    check_square(matrix, 'matrix')
    check_nonempty(matrix, 'matrix')

    n = matrix.rows
    lower = zeros(n, n, dtype=matrix.dtype)
    upper = zeros(n, n, dtype=matrix.dtype)
    a, L, U = matrix.grid, lower.grid, upper.grid

    with np.errstate(divide='ignore', invalid='ignore'):
        for i in range(n):
            U[i, i:] = a[i, i:] - L[i, :i] @ U[:i, i:]

            pivot = U[i, i]
            if strict and pivot == 0.0:
                raise SingularMatrixError(
                    f"Zero pivot at position {i}; LU without pivoting cannot continue",
                    matrix_name='matrix',
                    pivot_index=i,
                    expected_rank=n,
                )

            L[i + 1:, i] = (a[i + 1:, i] - L[i + 1:, :i] @ U[:i, i]) / pivot
            L[i, i] = 1.0

    return DecompositionPair(lower, upper)
