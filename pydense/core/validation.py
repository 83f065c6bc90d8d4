"""
Input validation utilities for PyDense.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Array validators take NumPy input (used when wrapping array-likes into a
Matrix). Shape validators take anything exposing ``rows`` and ``cols``
(Matrix), so this module stays free of storage imports.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any, Protocol

from pydense.core.exceptions import ValidationError, DimensionError


class _Shaped(Protocol):
    rows: int
    cols: int


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric or complex dtype {result.dtype}, expected real numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_dimensions(rows: int, cols: int, name: str) -> None:
    """
    Verify requested matrix dimensions are non-negative integers.

    Raises:
        DimensionError: If either dimension is negative
    """
    if rows < 0 or cols < 0:
        raise DimensionError(
            f"{name}: dimensions must be non-negative, got {rows}x{cols}"
        )


def check_nonempty(matrix: _Shaped, name: str) -> None:
    """
    Verify a matrix has at least one element.

    Raises:
        DimensionError: If the matrix has zero rows or zero columns
    """
    if matrix.rows == 0 or matrix.cols == 0:
        raise DimensionError(
            f"{name}: expected a non-empty matrix, got {matrix.rows}x{matrix.cols}"
        )


def check_square(matrix: _Shaped, name: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != cols
    """
    if matrix.rows != matrix.cols:
        raise DimensionError(
            f"{name}: expected a square matrix, got {matrix.rows}x{matrix.cols}"
        )


def check_same_shape(
    a: _Shaped,
    b: _Shaped,
    names: tuple[str, str],
) -> None:
    """
    Verify two matrices have identical dimensions.

    Raises:
        DimensionError: If the shapes differ
    """
    if a.rows != b.rows or a.cols != b.cols:
        raise DimensionError(
            f"Shape mismatch: {names[0]}={a.rows}x{a.cols}, {names[1]}={b.rows}x{b.cols}"
        )


def check_same_rows(
    a: _Shaped,
    b: _Shaped,
    names: tuple[str, str],
) -> None:
    """
    Verify two matrices have the same number of rows.

    Raises:
        DimensionError: If the row counts differ
    """
    if a.rows != b.rows:
        raise DimensionError(
            f"Inconsistent row counts: {names[0]}={a.rows}, {names[1]}={b.rows}"
        )


def check_product_compatible(
    a: _Shaped,
    b: _Shaped,
    names: tuple[str, str],
) -> None:
    """
    Verify ``a @ b`` is defined (a.cols == b.rows).

    Raises:
        DimensionError: If the inner dimensions differ
    """
    if a.cols != b.rows:
        raise DimensionError(
            f"Cannot multiply {names[0]} ({a.rows}x{a.cols}) by "
            f"{names[1]} ({b.rows}x{b.cols}): inner dimensions differ"
        )
