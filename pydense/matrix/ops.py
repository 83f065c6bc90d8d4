"""
Matrix-level operations the solvers are built on.

Allocation helpers, transpose, matrix product, concatenation, slicing,
triangular masks, diagonals, norms and the all-close comparison. Each
function returns a NEW Matrix (or Vector/float) and never mutates its
arguments. Results take the dtype of the first matrix argument.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np

from pydense.core.compute.tolerances import ALL_CLOSE
from pydense.core.exceptions import DimensionError, ValidationError
from pydense.core.validation import (
    check_product_compatible,
    check_same_shape,
    check_square,
)
from pydense.matrix.storage import Matrix, Vector


# ═══════════════════════════════════════════════════════════════════════
# Allocation
# ═══════════════════════════════════════════════════════════════════════


def zeros(rows: int, cols: int, dtype: Any = None) -> Matrix:
    return Matrix(rows, cols, dtype=dtype)


def zeros_like(matrix: Matrix) -> Matrix:
    return Matrix(matrix.rows, matrix.cols, dtype=matrix.dtype)


def full(rows: int, cols: int, value: float, dtype: Any = None) -> Matrix:
    out = Matrix(rows, cols, dtype=dtype)
    out.fill(value)
    return out


def ones(rows: int, cols: int, dtype: Any = None) -> Matrix:
    return full(rows, cols, 1.0, dtype=dtype)


def identity(side: int, dtype: Any = None) -> Matrix:
    """side x side identity matrix."""
    out = Matrix(side, side, dtype=dtype)
    np.fill_diagonal(out.grid, 1.0)
    return out


def from_vector(vector: Vector) -> Matrix:
    """1 x size row matrix holding a copy of ``vector``."""
    out = Matrix(1, vector.size, dtype=vector.dtype)
    out.data[:] = vector.data
    return out


def vector_zeros(size: int, dtype: Any = None) -> Vector:
    return Vector(size, dtype=dtype)


# ═══════════════════════════════════════════════════════════════════════
# Structural
# ═══════════════════════════════════════════════════════════════════════


def transpose(matrix: Matrix) -> Matrix:
    out = Matrix(matrix.cols, matrix.rows, dtype=matrix.dtype)
    out.grid[:] = matrix.grid.T
    return out


def append(matrix: Matrix, subject: Matrix, axis: int = 0) -> Matrix:
    """
    Concatenate two matrices.

    axis=0 places ``subject`` to the right of ``matrix`` (row counts must
    match); axis=1 places it below (column counts must match). This is the
    augmentation used by ``inverse`` to build [A | I].

    Raises:
        DimensionError: If the shared dimension differs
        ValidationError: If axis is not 0 or 1
    """
    if axis == 0:
        if matrix.rows != subject.rows:
            raise DimensionError(
                f"append axis=0 needs equal row counts, got {matrix.rows} and {subject.rows}"
            )
        out = Matrix(matrix.rows, matrix.cols + subject.cols, dtype=matrix.dtype)
        out.grid[:, :matrix.cols] = matrix.grid
        out.grid[:, matrix.cols:] = subject.grid
        return out
    if axis == 1:
        if matrix.cols != subject.cols:
            raise DimensionError(
                f"append axis=1 needs equal column counts, got {matrix.cols} and {subject.cols}"
            )
        out = Matrix(matrix.rows + subject.rows, matrix.cols, dtype=matrix.dtype)
        out.grid[:matrix.rows] = matrix.grid
        out.grid[matrix.rows:] = subject.grid
        return out
    raise ValidationError(f"axis: expected 0 or 1, got {axis!r}")


def slice_matrix(
    matrix: Matrix,
    from_row: int,
    to_row: int,
    from_col: int,
    to_col: int,
) -> Matrix:
    """
    Copy of the half-open block [from_row, to_row) x [from_col, to_col).

    Raises:
        DimensionError: If the block falls outside the matrix
    """
    if (from_row < 0 or from_col < 0 or to_row > matrix.rows or to_col > matrix.cols
            or from_row > to_row or from_col > to_col):
        raise DimensionError(
            f"slice [{from_row}:{to_row}, {from_col}:{to_col}] is outside "
            f"a {matrix.rows}x{matrix.cols} matrix"
        )
    out = Matrix(to_row - from_row, to_col - from_col, dtype=matrix.dtype)
    out.grid[:] = matrix.grid[from_row:to_row, from_col:to_col]
    return out


def tril(matrix: Matrix, diag: int = 0) -> Matrix:
    """Lower-triangular part: keep (i, j) where j <= i - diag. Square only."""
    check_square(matrix, 'matrix')
    out = Matrix(matrix.rows, matrix.cols, dtype=matrix.dtype)
    out.grid[:] = np.tril(matrix.grid, -diag)
    return out


def triu(matrix: Matrix, diag: int = 0) -> Matrix:
    """Upper-triangular part: keep (i, j) where j >= i + diag. Square only."""
    check_square(matrix, 'matrix')
    out = Matrix(matrix.rows, matrix.cols, dtype=matrix.dtype)
    out.grid[:] = np.triu(matrix.grid, diag)
    return out


def diagonal(matrix: Matrix, k: int = 0) -> Vector:
    """
    k-th diagonal of a square matrix as a Vector (k > 0 above, k < 0 below).

    Raises:
        DimensionError: If the matrix is not square or |k| >= rows
    """
    check_square(matrix, 'matrix')
    if k != 0 and abs(k) >= matrix.rows:
        raise DimensionError(f"diagonal offset {k} out of range for {matrix.rows}x{matrix.cols}")
    out = Vector(matrix.rows - abs(k), dtype=matrix.dtype)
    out.data[:] = np.diagonal(matrix.grid, offset=k)
    return out


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


def matmul(matrix: Matrix, subject: Matrix) -> Matrix:
    """Matrix product ``matrix @ subject``."""
    check_product_compatible(matrix, subject, ('matrix', 'subject'))
    out = Matrix(matrix.rows, subject.cols, dtype=matrix.dtype)
    out.grid[:] = matrix.grid @ subject.grid
    return out


def add(matrix: Matrix, subject: Matrix) -> Matrix:
    check_same_shape(matrix, subject, ('matrix', 'subject'))
    out = matrix.copy()
    out.data += subject.data
    return out


def sub(matrix: Matrix, subject: Matrix) -> Matrix:
    check_same_shape(matrix, subject, ('matrix', 'subject'))
    out = matrix.copy()
    out.data -= subject.data
    return out


def scalar_mul(matrix: Matrix, x: float) -> Matrix:
    out = matrix.copy()
    out.data *= x
    return out


def vector_scale(matrix: Matrix, vector: Vector) -> Matrix:
    """Scale column j of ``matrix`` by ``vector[j]`` (i.e. ``matrix @ diag(vector)``)."""
    if matrix.cols != vector.size:
        raise DimensionError(
            f"vector_scale needs vector.size == matrix.cols, got {vector.size} and {matrix.cols}"
        )
    out = matrix.copy()
    out.grid[:] *= vector.data
    return out


# ═══════════════════════════════════════════════════════════════════════
# Reductions and comparisons
# ═══════════════════════════════════════════════════════════════════════


def trace(matrix: Matrix) -> float:
    check_square(matrix, 'matrix')
    return float(np.trace(matrix.grid))


def frobenius(matrix: Matrix) -> float:
    """Frobenius norm: sqrt of the sum of squared elements."""
    return math.sqrt(float(np.dot(matrix.data, matrix.data)))


def normalize(matrix: Matrix) -> Matrix:
    """
    Copy scaled to unit Frobenius norm. A zero matrix stays zero.
    """
    out = Matrix(matrix.rows, matrix.cols, dtype=matrix.dtype)
    norm = frobenius(matrix)
    if norm > 0.0:
        out.data[:] = matrix.data / norm
    return out


def max_abs(matrix: Matrix) -> float:
    """Largest absolute element, 0.0 for an empty matrix."""
    if matrix.size == 0:
        return 0.0
    return float(np.max(np.abs(matrix.data)))


def all_close(
    matrix: Matrix,
    subject: Matrix,
    rtol: float = ALL_CLOSE.rtol,
    atol: float = ALL_CLOSE.atol,
) -> bool:
    """
    True when shapes match and |matrix - subject| <= atol + rtol * |subject|
    element-wise. ``subject`` is the reference.
    """
    if matrix.rows != subject.rows or matrix.cols != subject.cols:
        return False
    return bool(np.all(
        np.abs(matrix.data - subject.data) <= atol + rtol * np.abs(subject.data)
    ))


def vector_all_close(
    vector: Vector,
    subject: Vector,
    rtol: float = ALL_CLOSE.rtol,
    atol: float = ALL_CLOSE.atol,
) -> bool:
    """Vector counterpart of all_close; sizes must match."""
    if vector.size != subject.size:
        return False
    return bool(np.all(
        np.abs(vector.data - subject.data) <= atol + rtol * np.abs(subject.data)
    ))


def vector_norm(vector: Vector) -> float:
    return math.sqrt(float(np.dot(vector.data, vector.data)))
