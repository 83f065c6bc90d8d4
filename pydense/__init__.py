"""
PyDense: a small dense linear-algebra engine for Python.

Row-major dense matrices with the classic direct and iterative
decompositions implemented on top of them: Gaussian elimination,
determinant, inverse and rank; QR, LU and Cholesky; eigenvalues by the
QR algorithm; SVD by alternating QR sweeps.

Submodules:
    matrix: Matrix/Vector storage, primitives, operations, serialization
    linalg: Decompositions and the array-level solvers
    core: Exceptions, validation, tolerances, timing, Result
"""

__version__ = "0.1.0"

from pydense import core
from pydense import matrix
from pydense import linalg
from pydense.matrix import Matrix, Vector
from pydense.linalg import cholesky, eig, lu, qr, svd

__all__ = [
    "__version__",
    "core",
    "matrix",
    "linalg",
    "Matrix",
    "Vector",
    "cholesky",
    "eig",
    "lu",
    "qr",
    "svd",
]
