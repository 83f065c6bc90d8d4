"""
Decomposition backends.

Available backends:
    CPUDecompositionBackend: CPU reference implementation of every method
"""

from pydense.linalg.backends.cpu import CPUDecompositionBackend

__all__ = [
    "CPUDecompositionBackend",
]
