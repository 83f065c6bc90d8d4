"""
Row and column primitives.

Building blocks for Gaussian elimination (pivot search, row swap, row
scale, row axpy) and Gram-Schmidt (column copy, column axpy, column
divide, column inner product, column length).

Every function whose name does not start with ``find``/``dot``/``vector``
MUTATES a matrix in place and returns None: the row operations and
``col_sub``/``col_div`` change their first argument, ``col_copy`` changes
its destination ``dst``. Callers that need the original must ``copy()``
it first. Index arguments are not bounds-checked.
"""

from __future__ import annotations

import math
import numpy as np

from pydense.core.compute.tolerances import PIVOT_TOLERANCE
from pydense.core.validation import check_same_rows
from pydense.matrix.storage import Matrix

# Returned by find_pivot when no row qualifies
NOT_FOUND = -1


def find_pivot(
    matrix: Matrix,
    col: int,
    row: int,
    tol: float = PIVOT_TOLERANCE,
) -> int:
    """
    First row index >= ``row`` whose entry in ``col`` exceeds ``tol`` in
    magnitude, or NOT_FOUND.

    This is first-adequate pivoting, not partial pivoting: the largest
    candidate is not searched for.
    """
    column = matrix.grid[row:, col]
    hits = np.flatnonzero(np.abs(column) > tol)
    if hits.size == 0:
        return NOT_FOUND
    return row + int(hits[0])


def swap_rows(matrix: Matrix, row1: int, row2: int) -> None:
    """Exchange two rows in place."""
    if row1 == row2:
        return
    grid = matrix.grid
    grid[[row1, row2]] = grid[[row2, row1]]


def multiply_row(matrix: Matrix, row: int, scalar: float) -> None:
    """Scale one row in place."""
    matrix.grid[row] *= scalar


def add_row(matrix: Matrix, row1: int, row2: int, scalar: float) -> None:
    """In place: row1 += scalar * row2."""
    grid = matrix.grid
    grid[row1] += scalar * grid[row2]


def col_copy(matrix: Matrix, col: int, dst: Matrix, dst_col: int) -> None:
    """Copy column ``col`` of ``matrix`` into column ``dst_col`` of ``dst`` (mutates dst)."""
    dst.grid[:matrix.rows, dst_col] = matrix.grid[:, col]


def col_sub(
    matrix: Matrix,
    col: int,
    other: Matrix,
    other_col: int,
    scalar: float,
) -> None:
    """In place: matrix[:, col] -= scalar * other[:, other_col]."""
    matrix.grid[:, col] -= scalar * other.grid[:matrix.rows, other_col]


def col_div(matrix: Matrix, col: int, scalar: float) -> None:
    """
    In place: matrix[:, col] /= scalar.

    Division by zero yields Inf/NaN without raising.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        matrix.grid[:, col] /= scalar


def dot_cols(matrix: Matrix, col: int, other: Matrix, other_col: int) -> float:
    """
    Inner product of column ``col`` of ``matrix`` with column ``other_col``
    of ``other``.

    Raises:
        DimensionError: If the two matrices have different row counts
    """
    check_same_rows(matrix, other, ('matrix', 'other'))
    return float(np.dot(matrix.grid[:, col], other.grid[:, other_col]))


def vector_length(matrix: Matrix, col: int) -> float:
    """Euclidean norm of one column."""
    return math.sqrt(dot_cols(matrix, col, matrix, col))
