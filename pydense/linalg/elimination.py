"""
Gaussian elimination and the quantities derived from it.

row_echelon produces the REDUCED row-echelon form (every pivot is 1 and is
the only non-zero entry in its column), which is what inverse() and rank()
rely on. Pivots are chosen first-adequate (see find_pivot), not by largest
magnitude.

determinant() uses recursive cofactor expansion along the first row. It is
exact for small integer matrices but costs O(n!): treat n ~ 9 as the
practical ceiling. inverse() and rank() call it as a singularity test.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydense.core.compute.precision import canonical_zeros
from pydense.core.compute.tolerances import PIVOT_TOLERANCE
from pydense.core.exceptions import DimensionError, SingularMatrixError
from pydense.core.validation import check_nonempty, check_square
from pydense.matrix.ops import append, identity, matmul, slice_matrix, transpose
from pydense.matrix.primitives import (
    NOT_FOUND,
    add_row,
    find_pivot,
    multiply_row,
    swap_rows,
)
from pydense.matrix.storage import Matrix


def row_echelon(matrix: Matrix, tol: float = PIVOT_TOLERANCE) -> Matrix:
    """
    Reduced row-echelon form of a copy of ``matrix``.

    For lead = 0, 1, ... while lead < min(rows, cols): search column
    ``lead`` from row ``lead`` down for a pivot. Without one, lead advances
    and the column is left as is (rank-deficient input). With one, the
    pivot row is swapped into place, scaled to a leading 1, and column
    ``lead`` is eliminated from every other row.

    Negative zeros in the result are replaced by positive zeros.
    """
    out = matrix.copy()
    lead = 0

    while lead < out.rows and lead < out.cols:
        pivot = find_pivot(out, lead, lead, tol=tol)
        if pivot == NOT_FOUND:
            lead += 1
            continue

        swap_rows(out, lead, pivot)
        multiply_row(out, lead, 1.0 / out.get_at(lead, lead))

        for i in range(out.rows):
            if i != lead:
                add_row(out, i, lead, -out.get_at(i, lead))

        lead += 1

    canonical_zeros(out.data)
    return out


def _cofactor_determinant(grid: NDArray[np.floating[Any]]) -> float:
    n = grid.shape[0]
    if n == 1:
        return float(grid[0, 0])
    if n == 2:
        return float(grid[0, 0] * grid[1, 1] - grid[0, 1] * grid[1, 0])

    total = 0.0
    rest = grid[1:]
    for i in range(n):
        minor = np.delete(rest, i, axis=1)
        sign = 1.0 if i % 2 == 0 else -1.0
        total += sign * float(grid[0, i]) * _cofactor_determinant(minor)
    return total


def determinant(matrix: Matrix) -> float:
    """
    Determinant by cofactor expansion along the first row.

    Closed forms for 1x1 and 2x2; O(n!) recursion above that.

    Raises:
        DimensionError: If the matrix is empty or not square
    """
    check_square(matrix, 'matrix')
    check_nonempty(matrix, 'matrix')
    return _cofactor_determinant(matrix.grid)


def log_determinant(matrix: Matrix) -> float:
    """Natural log of the determinant; NaN for a negative determinant."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.log(determinant(matrix)))


def inverse(matrix: Matrix) -> Matrix:
    """
    Inverse via reduction of the augmented matrix [A | I].

    Raises:
        DimensionError: If the matrix is empty or not square
        SingularMatrixError: If the determinant is exactly zero
    """
    check_square(matrix, 'matrix')
    check_nonempty(matrix, 'matrix')

    det = determinant(matrix)
    if det == 0.0:
        raise SingularMatrixError(
            f"Cannot invert a singular {matrix.rows}x{matrix.cols} matrix (determinant is 0)",
            matrix_name='matrix',
            determinant=det,
            expected_rank=matrix.rows,
        )

    n = matrix.rows
    augmented = append(matrix, identity(n, dtype=matrix.dtype), axis=0)
    echelon = row_echelon(augmented)
    return slice_matrix(echelon, 0, n, n, 2 * n)


def non_zero_rows(matrix: Matrix, tol: float = PIVOT_TOLERANCE) -> int:
    """Number of rows holding at least one entry with |value| > tol."""
    if matrix.size == 0:
        return 0
    return int(np.count_nonzero(np.any(np.abs(matrix.grid) > tol, axis=1)))


def rank(matrix: Matrix) -> int:
    """
    Rank of a matrix.

    A square matrix with non-zero determinant short-circuits to its
    dimension; everything else is reduced to row-echelon form and its
    non-zero rows are counted.
    """
    if matrix.rows == matrix.cols and matrix.rows > 0 and determinant(matrix) != 0.0:
        return matrix.rows
    return non_zero_rows(row_echelon(matrix))


def solve(matrix: Matrix, rhs: Matrix) -> Matrix:
    """
    Solve with right-hand sides stored as columns of ``rhs``.

    Returns ``transpose(rhs) @ inverse(matrix)``: row k of the result is
    the solution x_k of ``x_k @ matrix = rhs[:, k]'``. For a symmetric
    ``matrix`` this is the transpose of the solution of ``matrix @ X = rhs``.

    Raises:
        DimensionError: If matrix is not square or rhs.rows != matrix.rows
        SingularMatrixError: If matrix is singular
    """
    if rhs.rows != matrix.rows:
        raise DimensionError(
            f"rhs has {rhs.rows} rows but matrix has {matrix.rows}"
        )
    inv = inverse(matrix)
    return matmul(transpose(rhs), inv)
