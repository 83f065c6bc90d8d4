"""
Decomposition Design.

The validated input of an array-level solve: a finite, non-empty, 2-D
real matrix. Whether a particular method also needs it square (all of
them) or symmetric (Cholesky) is checked by the algorithm itself, so the
error names the operation that refused it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike

from pydense.core.validation import check_array, check_finite, check_nonempty
from pydense.matrix.storage import Matrix


@dataclass(frozen=True)
class DecompositionDesign:
    """
    Input specification for a decomposition.

    Immutable after construction; the wrapped Matrix is a private copy.

    Construction:
        DecompositionDesign.from_array([[4, 1], [1, 3]])
        DecompositionDesign.from_array(arr, dtype=np.float32)
        DecompositionDesign.from_matrix(m)
    """
    _matrix: Matrix

    @classmethod
    def from_array(cls, data: ArrayLike, dtype: Any = None) -> DecompositionDesign:
        """Build a Design from any 2-D array-like."""
        arr = check_array(data, 'data')
        check_finite(arr, 'data')
        matrix = Matrix.from_numpy(arr, dtype=dtype)
        check_nonempty(matrix, 'data')
        return cls(_matrix=matrix)

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> DecompositionDesign:
        """Build a Design from an existing Matrix (copied)."""
        check_finite(matrix.data, 'matrix')
        check_nonempty(matrix, 'matrix')
        return cls(_matrix=matrix.copy())

    # === Properties ===

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def rows(self) -> int:
        return self._matrix.rows

    @property
    def cols(self) -> int:
        return self._matrix.cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._matrix.shape

    @property
    def dtype(self) -> np.dtype:
        return self._matrix.dtype

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols
