"""
Tolerances and iteration caps for the dense solvers.

Defines the numerical thresholds every algorithm in PyDense relies on:
- Pivot tolerance: smallest magnitude accepted as a pivot in elimination
- All-close tier: element-wise |a - b| <= atol + rtol * |b| comparison
- Iteration settings for the QR eigenvalue algorithm and the SVD

The defaults are the values the engine has always used; every solver also
accepts per-call overrides (max_iter=, tol=) so these constants are never
the only way to tune a run.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


@dataclass(frozen=True)
class IterationSettings:
    """Iteration cap and convergence threshold for an iterative solver."""
    max_iter: int
    tol: float | None
    name: str
    description: str


# Magnitude a candidate must exceed to be accepted as a pivot
PIVOT_TOLERANCE: float = 1e-10

# Gram-Schmidt: a residual shorter than this fraction of its original column
# is treated as linearly dependent and replaced by a completing direction
DEPENDENCE_TOLERANCE: float = 1e-10

# Element-wise comparison used by all_close and the symmetry check
ALL_CLOSE = ToleranceTier(
    rtol=1e-5,
    atol=1e-8,
    name='all_close',
    description='Element-wise closeness: |a - b| <= 1e-8 + 1e-5 * |b|',
)

# Test-suite tiers: float64 results vs reference implementations
CPU_FP64 = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='cpu_fp64',
    description='Double precision, matches LAPACK references closely',
)

# float32 storage loses roughly eight significant digits
CPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='cpu_fp32',
    description='Single precision, relaxed for float32 storage',
)

# Shift-free QR algorithm: A <- RQ until the strictly lower part vanishes
QR_ALGORITHM = IterationSettings(
    max_iter=500,
    tol=1e-10,
    name='qr_algorithm',
    description='Stop once every strictly-lower entry is below tol or after max_iter sweeps',
)

# Alternating QR SVD: stops early only when diag(S) is all-close to zero
SVD = IterationSettings(
    max_iter=100,
    tol=None,
    name='svd',
    description='Stop once diag(S) is all-close to zero or after max_iter sweeps',
)


def select_tolerance(dtype_name: str) -> ToleranceTier:
    """Select the test tolerance tier for a given element type."""
    if '32' in dtype_name:
        return CPU_FP32
    return CPU_FP64
