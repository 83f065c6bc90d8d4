"""
Singular value decomposition by alternating QR sweeps.

Each sweep factors the current middle matrix S = Q R and folds Q into the
left accumulator, then factors the transpose R' = P T and folds P into the
right accumulator, leaving S = T' (lower triangular). The invariant

    A == left @ S @ right_accumulator'

holds after every sweep, and S drifts towards a diagonal holding the
singular values. The values are not sorted: a diagonal input is already a
fixed point of the sweep and keeps its entries in place, while a general
input usually settles with the largest value first.

The early exit fires only when diag(S) is all-close to zero, which for a
non-zero matrix practically never happens: expect the full sweep count.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydense.core.compute.tolerances import SVD
from pydense.core.validation import check_nonempty, check_square
from pydense.linalg.triangular import gram_schmidt
from pydense.matrix.ops import (
    diagonal,
    identity,
    matmul,
    transpose,
    vector_all_close,
    vector_scale,
    vector_zeros,
)
from pydense.matrix.storage import Matrix, Vector


@dataclass(frozen=True)
class SVDResult:
    """
    Factors of A ~= left @ diag(singular) @ right.

    Attributes:
        left: Left singular vectors as columns (U)
        right: Right singular vectors as ROWS (V transposed)
        singular: Singular values, in the order the sweep left them
        iterations: Sweeps performed
        converged: Whether the early-exit test fired
    """
    left: Matrix
    right: Matrix
    singular: Vector
    iterations: int = 0
    converged: bool = False

    def reconstruct(self) -> Matrix:
        """left @ diag(singular) @ right."""
        return matmul(vector_scale(self.left, self.singular), self.right)


def svd_init(matrix: Matrix, max_iter: int = SVD.max_iter) -> SVDResult:
    """
    SVD of a square matrix.

    Args:
        matrix: Square matrix to decompose
        max_iter: Sweep cap

    Raises:
        DimensionError: If the matrix is empty or not square
    """
    check_square(matrix, 'matrix')
    check_nonempty(matrix, 'matrix')

    n = matrix.rows
    left = identity(n, dtype=matrix.dtype)
    right = identity(n, dtype=matrix.dtype)
    middle = matrix.copy()
    target = vector_zeros(n, dtype=matrix.dtype)

    iterations = 0
    converged = False
    for _ in range(max_iter):
        iterations += 1

        q, r = gram_schmidt(middle)
        left = matmul(left, q)

        q, r = gram_schmidt(transpose(r))
        right = matmul(right, q)
        middle = transpose(r)

        if vector_all_close(diagonal(middle), target):
            converged = True
            break

    return SVDResult(
        left=left,
        right=transpose(right),
        singular=diagonal(middle),
        iterations=iterations,
        converged=converged,
    )
