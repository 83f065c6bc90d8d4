"""
Core infrastructure for PyDense.

This module provides shared abstractions and utilities used by the storage
layer and the solvers.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Precision, tolerances, timing
"""

from pydense.core.protocols import Backend
from pydense.core.result import Result
from pydense.core.exceptions import (
    PyDenseError,
    ValidationError,
    DimensionError,
    NotSymmetricError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyDenseError",
    "ValidationError",
    "DimensionError",
    "NotSymmetricError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
]
