"""
CPU reference backend for dense decompositions.

Runs the PyDense algorithms (Gram-Schmidt QR, Doolittle LU, row-by-row
Cholesky, shift-free QR algorithm, alternating-QR SVD) on the design's
Matrix and packages the factors as NumPy arrays.
"""

from typing import Any, Literal

from pydense.core.compute.timing import Timer
from pydense.core.compute.tolerances import QR_ALGORITHM, SVD
from pydense.core.exceptions import ValidationError
from pydense.core.result import Result
from pydense.linalg.cholesky import cholesky_decomp
from pydense.linalg.design import DecompositionDesign
from pydense.linalg.eigen import eigenvectors_for, qr_iterate
from pydense.linalg.solution import DecompositionParams
from pydense.linalg.svd import svd_init
from pydense.linalg.triangular import lu_decomp, qr_decomp
from pydense.matrix.ops import diagonal


Method = Literal['qr', 'lu', 'cholesky', 'eig', 'svd']

METHODS: tuple[str, ...] = ('qr', 'lu', 'cholesky', 'eig', 'svd')


class CPUDecompositionBackend:
    """
    CPU backend for every decomposition method.

    Implements the Backend protocol for DecompositionDesign -> DecompositionParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_dense'

    def solve(
        self,
        design: DecompositionDesign,
        *,
        method: Method,
        strict: bool = False,
        vectors: bool = False,
        max_iter: int | None = None,
        tol: float | None = None,
        svd_max_iter: int | None = None,
    ) -> Result[DecompositionParams]:
        """
        Decompose the design matrix.

        Args:
            design: Validated decomposition design
            method: One of 'qr', 'lu', 'cholesky', 'eig', 'svd'
            strict: LU/Cholesky raise on a zero pivot / non-positive radicand
            vectors: For 'eig', also compute eigenvectors
            max_iter: Iteration cap for 'eig' (QR algorithm) or 'svd'
            tol: Convergence threshold for 'eig'
            svd_max_iter: SVD sweep cap used for each eigenvector

        Returns:
            Result containing DecompositionParams

        Raises:
            ValidationError: If method is unknown
            DimensionError: If the matrix is not square
            SingularMatrixError: QR of a singular matrix, or strict LU
            NotSymmetricError: Cholesky of a non-symmetric matrix
            NotPositiveDefiniteError: Strict Cholesky of a non-SPD matrix
        """
        if method not in METHODS:
            raise ValidationError(
                f"method: expected one of {', '.join(METHODS)}, got {method!r}"
            )

        timer = Timer()
        timer.start()

        matrix = design.matrix
        info: dict[str, Any] = {
            'method': method,
            'shape': design.shape,
            'dtype': str(design.dtype),
        }
        warnings: list[str] = []

        if method == 'qr':
            with timer.section('factorize'):
                q, r = qr_decomp(matrix)
            params = DecompositionParams(q=q.to_numpy(), r=r.to_numpy())

        elif method == 'lu':
            with timer.section('factorize'):
                lower, upper = lu_decomp(matrix, strict=strict)
            params = DecompositionParams(lower=lower.to_numpy(), upper=upper.to_numpy())

        elif method == 'cholesky':
            with timer.section('factorize'):
                lower = cholesky_decomp(matrix, strict=strict)
            params = DecompositionParams(lower=lower.to_numpy())

        elif method == 'eig':
            cap = QR_ALGORITHM.max_iter if max_iter is None else max_iter
            threshold = QR_ALGORITHM.tol if tol is None else tol

            with timer.section('qr_algorithm'):
                iterate, iterations, converged = qr_iterate(
                    matrix, max_iter=cap, tol=threshold
                )
                values = diagonal(iterate)

            info.update(iterations=iterations, converged=converged)
            if not converged:
                warnings.append(
                    f"QR algorithm did not converge in {cap} iterations; "
                    f"eigenvalues may be inaccurate (complex pair or close eigenvalues)"
                )

            eigenvectors = None
            if vectors:
                svd_cap = SVD.max_iter if svd_max_iter is None else svd_max_iter
                info['svd_max_iter'] = svd_cap
                with timer.section('eigenvectors'):
                    vecs = eigenvectors_for(
                        matrix,
                        values,
                        svd_max_iter=svd_cap,
                    )
                eigenvectors = vecs.to_numpy()

            params = DecompositionParams(
                eigenvalues=values.to_numpy(),
                eigenvectors=eigenvectors,
            )

        else:
            cap = SVD.max_iter if max_iter is None else max_iter
            with timer.section('svd_sweeps'):
                decomposition = svd_init(matrix, max_iter=cap)

            info.update(
                iterations=decomposition.iterations,
                converged=decomposition.converged,
            )
            params = DecompositionParams(
                left=decomposition.left.to_numpy(),
                right=decomposition.right.to_numpy(),
                singular=decomposition.singular.to_numpy(),
            )

        timer.stop()

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )
