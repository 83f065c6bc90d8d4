"""
Decomposition solution types.

Contains the factor payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pydense.core.result import Result

if TYPE_CHECKING:
    from pydense.linalg.design import DecompositionDesign


@dataclass(frozen=True)
class DecompositionParams:
    """
    Factor payload for a decomposition.

    Only the fields belonging to the method that ran are set:
        qr       -> q, r
        lu       -> lower, upper
        cholesky -> lower
        eig      -> eigenvalues (and eigenvectors when requested)
        svd      -> left, right, singular
    """
    q: NDArray[np.floating[Any]] | None = None
    r: NDArray[np.floating[Any]] | None = None
    lower: NDArray[np.floating[Any]] | None = None
    upper: NDArray[np.floating[Any]] | None = None
    eigenvalues: NDArray[np.floating[Any]] | None = None
    eigenvectors: NDArray[np.floating[Any]] | None = None
    left: NDArray[np.floating[Any]] | None = None
    right: NDArray[np.floating[Any]] | None = None
    singular: NDArray[np.floating[Any]] | None = None


@dataclass
class DecompositionSolution:
    """
    User-facing decomposition results.

    Wraps the backend Result and exposes the factors as NumPy arrays.
    Asking for a factor the method does not produce raises AttributeError.
    """
    _result: Result[DecompositionParams]
    _design: 'DecompositionDesign'

    def _factor(self, name: str) -> NDArray[np.floating[Any]]:
        value = getattr(self._result.params, name)
        if value is None:
            raise AttributeError(
                f"'{name}' is not produced by method {self.method!r}"
            )
        return value

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def q(self) -> NDArray[np.floating[Any]]:
        return self._factor('q')

    @property
    def r(self) -> NDArray[np.floating[Any]]:
        return self._factor('r')

    @property
    def lower(self) -> NDArray[np.floating[Any]]:
        """L of LU (unit diagonal) or of Cholesky."""
        return self._factor('lower')

    @property
    def upper(self) -> NDArray[np.floating[Any]]:
        return self._factor('upper')

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]]:
        return self._factor('eigenvalues')

    @property
    def eigenvectors(self) -> NDArray[np.floating[Any]]:
        """Unit eigenvectors as columns, in eigenvalue order."""
        return self._factor('eigenvectors')

    @property
    def left(self) -> NDArray[np.floating[Any]]:
        return self._factor('left')

    @property
    def right(self) -> NDArray[np.floating[Any]]:
        """Right singular vectors as rows (V transposed)."""
        return self._factor('right')

    @property
    def singular(self) -> NDArray[np.floating[Any]]:
        return self._factor('singular')

    @property
    def converged(self) -> bool:
        return self._result.converged

    @property
    def iterations(self) -> int | None:
        return self._result.info.get('iterations')

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def reconstruct(self) -> NDArray[np.floating[Any]]:
        """
        Multiply the factors back together.

        Not available for 'eig', whose eigenvector matrix may be singular.
        """
        method = self.method
        if method == 'qr':
            return self.q @ self.r
        if method == 'lu':
            return self.lower @ self.upper
        if method == 'cholesky':
            return self.lower @ self.lower.T
        if method == 'svd':
            return (self.left * self.singular) @ self.right
        raise AttributeError(f"reconstruct() is not defined for method {method!r}")

    def summary(self) -> str:
        """Plain-text summary of the run."""
        rows, cols = self._design.shape
        lines = [
            "Decomposition Results",
            "=" * 60,
            f"Method: {self.method}",
            f"Input: {rows}x{cols} ({self._design.dtype})",
        ]

        if 'iterations' in self.info:
            status = "converged" if self.converged else "iteration cap reached"
            lines.append(f"Iterations: {self.iterations} ({status})")

        if self._result.params.eigenvalues is not None:
            lines.append("")
            lines.append("Eigenvalues:")
            for i, value in enumerate(self.eigenvalues):
                lines.append(f"  λ[{i}]: {value:14.6f}")

        if self._result.params.singular is not None:
            lines.append("")
            lines.append("Singular values:")
            for i, value in enumerate(self.singular):
                lines.append(f"  σ[{i}]: {value:14.6f}")

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        rows, cols = self._design.shape
        return (
            f"DecompositionSolution(method={self.method!r}, shape=({rows}, {cols}), "
            f"converged={self.converged})"
        )
