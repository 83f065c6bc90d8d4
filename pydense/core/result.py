"""
Generic result container for PyDense solver runs.

The array-level solvers (qr, lu, cholesky, eig, svd) wrap their factors in
a standardized envelope so timing, convergence diagnostics and non-fatal
warnings travel with the numbers instead of being printed or logged.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, converged, iterations)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a result can be shared without copying
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a decomposition.

    Type Parameters:
        P: The factor payload type

    Attributes:
        params: Factors produced by the decomposition
        info: Structured metadata (method, convergence, shapes)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Direct factorization (no convergence notion)
        >>> Result(
        ...     params=DecompositionParams(q=q, r=r),
        ...     info={'method': 'qr', 'shape': (3, 3)},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_dense'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=DecompositionParams(eigenvalues=values),
        ...     info={'method': 'eig', 'converged': True, 'iterations': 23},
        ...     timing={'total_seconds': 0.02, 'qr_algorithm': 0.02},
        ...     backend_name='cpu_dense'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

    @property
    def converged(self) -> bool:
        """Convergence flag from info; direct methods always report True."""
        return bool(self.info.get('converged', True))
