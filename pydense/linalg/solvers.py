"""
Solver dispatch for dense decompositions.

Public API:
    qr()       - Gram-Schmidt QR of a square, non-singular matrix
    lu()       - Doolittle LU without pivoting
    cholesky() - Cholesky factor of a symmetric positive-definite matrix
    eig()      - eigenvalues (and optionally eigenvectors) by the QR algorithm
    svd()      - singular value decomposition by alternating QR sweeps
"""

from __future__ import annotations

import warnings
from typing import Any, Literal
from numpy.typing import ArrayLike

from pydense.linalg.backends.cpu import CPUDecompositionBackend
from pydense.linalg.design import DecompositionDesign
from pydense.linalg.solution import DecompositionSolution


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu']


def _run(
    data: ArrayLike,
    *,
    method: str,
    backend: BackendChoice,
    dtype: Any,
    **options: Any,
) -> DecompositionSolution:
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    design = DecompositionDesign.from_array(data, dtype=dtype)

    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design, method=method, **options)

    return DecompositionSolution(_result=result, _design=design)


def qr(
    data: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
    dtype: Any = None,
) -> DecompositionSolution:
    """
    QR decomposition.

    Args:
        data: Square, non-singular matrix (any 2-D array-like)
        backend: 'auto' or 'cpu'
        dtype: Element type (float64 default, float32 supported)

    Returns:
        DecompositionSolution with ``q`` and ``r``

    Raises:
        ValidationError: If data is non-numeric or non-finite
        DimensionError: If data is not a non-empty square 2-D matrix
        SingularMatrixError: If the determinant is zero

    Example:
        >>> import pydense
        >>> result = pydense.qr([[12, -51, 4], [6, 167, -68], [-4, 24, -41]])
        >>> result.r
    """
    return _run(data, method='qr', backend=backend, dtype=dtype)


def lu(
    data: ArrayLike,
    *,
    strict: bool = False,
    backend: BackendChoice = 'auto',
    dtype: Any = None,
) -> DecompositionSolution:
    """
    LU decomposition without pivoting.

    A zero pivot yields Inf/NaN entries unless ``strict`` is set, in which
    case SingularMatrixError is raised.

    Returns:
        DecompositionSolution with ``lower`` (unit diagonal) and ``upper``
    """
    return _run(data, method='lu', backend=backend, dtype=dtype, strict=strict)


def cholesky(
    data: ArrayLike,
    *,
    strict: bool = False,
    backend: BackendChoice = 'auto',
    dtype: Any = None,
) -> DecompositionSolution:
    """
    Cholesky decomposition.

    Returns:
        DecompositionSolution with ``lower``

    Raises:
        NotSymmetricError: If data is not symmetric
        NotPositiveDefiniteError: If strict and data is not positive definite
    """
    return _run(data, method='cholesky', backend=backend, dtype=dtype, strict=strict)


def eig(
    data: ArrayLike,
    *,
    vectors: bool = False,
    max_iter: int | None = None,
    tol: float | None = None,
    svd_max_iter: int | None = None,
    backend: BackendChoice = 'auto',
    dtype: Any = None,
) -> DecompositionSolution:
    """
    Eigenvalues by the shift-free QR algorithm.

    Suited to matrices with real, well-separated eigenvalues (symmetric
    matrices in particular). When the iteration cap is reached a
    RuntimeWarning is emitted and the current diagonal is returned.

    Args:
        data: Square matrix
        vectors: Also compute unit eigenvectors (columns, signs arbitrary)
        max_iter: QR-algorithm cap (default 500)
        tol: Stop once every strictly-lower entry is below this (default 1e-10)
        svd_max_iter: SVD sweep cap for each eigenvector (default 100)

    Returns:
        DecompositionSolution with ``eigenvalues`` (and ``eigenvectors``)
    """
    solution = _run(
        data, method='eig', backend=backend, dtype=dtype,
        vectors=vectors, max_iter=max_iter, tol=tol, svd_max_iter=svd_max_iter,
    )

    if not solution.converged:
        warnings.warn(
            f"QR algorithm did not converge after {solution.iterations} iterations. "
            f"Eigenvalues are the diagonal of the last iterate.",
            RuntimeWarning,
            stacklevel=2,
        )

    return solution


def svd(
    data: ArrayLike,
    *,
    max_iter: int | None = None,
    backend: BackendChoice = 'auto',
    dtype: Any = None,
) -> DecompositionSolution:
    """
    Singular value decomposition of a square matrix.

    Runs ``max_iter`` sweeps (default 100); the early exit only fires for
    a matrix whose singular values are all zero.

    Returns:
        DecompositionSolution with ``left`` (U), ``right`` (V transposed)
        and ``singular``; ``reconstruct()`` gives left @ diag(singular) @ right
    """
    return _run(data, method='svd', backend=backend, dtype=dtype, max_iter=max_iter)


def _get_backend(choice: BackendChoice) -> CPUDecompositionBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUDecompositionBackend()

    raise ValueError(f"Unknown backend: {choice!r}")
