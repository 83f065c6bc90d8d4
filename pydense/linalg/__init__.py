"""
Dense decompositions and the solvers built on them.

Matrix-level API (operates on pydense.matrix.Matrix):
    row_echelon, determinant, log_determinant, inverse, rank, solve
    qr_decomp, lu_decomp, gram_schmidt
    cholesky_decomp
    qr_algo, qr_iterate, eigenvalues, eigenvec
    svd_init -> SVDResult
    batched_apply, stack_results

Array-level API (any 2-D array-like in, DecompositionSolution out):
    qr(data), lu(data), cholesky(data), eig(data), svd(data)

Example:
    >>> from pydense.linalg import eig
    >>> result = eig([[2, 1], [1, 2]], vectors=True)
    >>> print(result.eigenvalues)
    >>> print(result.summary())
"""

from pydense.linalg.elimination import (
    determinant,
    inverse,
    log_determinant,
    non_zero_rows,
    rank,
    row_echelon,
    solve,
)
from pydense.linalg.triangular import (
    DecompositionPair,
    gram_schmidt,
    lu_decomp,
    qr_decomp,
)
from pydense.linalg.cholesky import cholesky_decomp
from pydense.linalg.eigen import (
    eigenvalues,
    eigenvec,
    eigenvectors_for,
    qr_algo,
    qr_iterate,
)
from pydense.linalg.svd import SVDResult, svd_init
from pydense.linalg.batched import batched_apply, stack_results
from pydense.linalg.design import DecompositionDesign
from pydense.linalg.solution import DecompositionParams, DecompositionSolution
from pydense.linalg.solvers import cholesky, eig, lu, qr, svd

__all__ = [
    # Elimination
    "determinant",
    "inverse",
    "log_determinant",
    "non_zero_rows",
    "rank",
    "row_echelon",
    "solve",
    # Decompositions
    "DecompositionPair",
    "gram_schmidt",
    "lu_decomp",
    "qr_decomp",
    "cholesky_decomp",
    # Iterative
    "eigenvalues",
    "eigenvec",
    "eigenvectors_for",
    "qr_algo",
    "qr_iterate",
    "SVDResult",
    "svd_init",
    # Batching
    "batched_apply",
    "stack_results",
    # Array-level API
    "DecompositionDesign",
    "DecompositionParams",
    "DecompositionSolution",
    "cholesky",
    "eig",
    "lu",
    "qr",
    "svd",
]
