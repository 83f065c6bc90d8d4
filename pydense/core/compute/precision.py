"""
Numerical precision constants and utilities.

Every Matrix and Vector carries a single floating-point element type.
float64 is the default; float32 is supported for callers that need the
smaller footprint. Operations never mix precisions: results inherit the
dtype of their first operand.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any

from pydense.core.exceptions import ValidationError


# Default element type for newly allocated matrices and vectors
DEFAULT_DTYPE: np.dtype = np.dtype(np.float64)

# Element types a Matrix or Vector may hold
SUPPORTED_DTYPES: tuple[np.dtype, ...] = (
    np.dtype(np.float64),
    np.dtype(np.float32),
)

# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7


def resolve_dtype(dtype: Any = None) -> np.dtype:
    """
    Normalize a dtype request to one of the supported element types.

    Args:
        dtype: NumPy dtype, type, string alias, or None for the default

    Returns:
        The resolved numpy dtype

    Raises:
        ValidationError: If the dtype is not a supported floating type
    """
    if dtype is None:
        return DEFAULT_DTYPE
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: cannot interpret {dtype!r}: {e}") from e

    if resolved not in SUPPORTED_DTYPES:
        supported = ", ".join(str(d) for d in SUPPORTED_DTYPES)
        raise ValidationError(
            f"dtype: unsupported element type {resolved}, expected one of {supported}"
        )
    return resolved


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def canonical_zeros(data: NDArray[np.floating[Any]]) -> None:
    """Replace negative zeros with positive zeros, in place."""
    data[data == 0] = 0.0
