"""
Exception hierarchy for PyDense.

All exceptions inherit from PyDenseError to allow catching any
library-specific error. Precondition violations (wrong shape, singular
input, asymmetric input) raise immediately; numerical degeneracy inside
an algorithm propagates as NaN/Inf unless the caller asks for a strict
check.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDenseError(Exception):
    """Base exception for all PyDense errors."""
    pass


class ValidationError(PyDenseError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when an operation requires a square matrix, or when two
    operands have shapes that cannot be combined.
    """
    pass


class NotSymmetricError(ValidationError):
    """
    Matrix is not symmetric.

    Raised by the Cholesky decomposition when the input is not all-close
    to its own transpose.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        max_asymmetry: Largest absolute difference between A and A'
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        max_asymmetry: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.max_asymmetry = max_asymmetry


class NumericalError(PyDenseError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an operation requires invertibility (inverse, QR
    decomposition) but the determinant is exactly zero, or when strict
    LU decomposition meets a zero pivot.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Determinant that triggered the error, if computed
        pivot_index: Diagonal position of the zero pivot, if applicable
        rank: Rank, if computed
        expected_rank: Expected rank (the matrix dimension)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        pivot_index: int | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.pivot_index = pivot_index
        self.rank = rank
        self.expected_rank = expected_rank


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised by strict Cholesky decomposition when a diagonal radicand is
    not strictly positive.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Row at which the factorization broke down
        min_radicand: The offending value under the square root
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        min_radicand: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.min_radicand = min_radicand
