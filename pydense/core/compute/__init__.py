"""
Shared compute infrastructure for PyDense.

Submodules:
    precision: Element-type configuration and machine constants
    tolerances: Pivot tolerance, all-close tier, iteration caps
    timing: Execution timing utilities
"""

from pydense.core.compute.precision import (
    DEFAULT_DTYPE,
    SUPPORTED_DTYPES,
    machine_epsilon,
    resolve_dtype,
)
from pydense.core.compute.tolerances import (
    ALL_CLOSE,
    DEPENDENCE_TOLERANCE,
    PIVOT_TOLERANCE,
    QR_ALGORITHM,
    SVD,
    IterationSettings,
    ToleranceTier,
)
from pydense.core.compute.timing import Timer, timed

__all__ = [
    # Precision
    "DEFAULT_DTYPE",
    "SUPPORTED_DTYPES",
    "machine_epsilon",
    "resolve_dtype",
    # Tolerances
    "ALL_CLOSE",
    "DEPENDENCE_TOLERANCE",
    "PIVOT_TOLERANCE",
    "QR_ALGORITHM",
    "SVD",
    "IterationSettings",
    "ToleranceTier",
    # Timing
    "Timer",
    "timed",
]
