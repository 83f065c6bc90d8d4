"""
Dense matrix and vector storage.

A Matrix is a flat, C-contiguous, row-major buffer plus its dimensions:
element (i, j) lives at ``data[i * cols + j]``. Every producing operation
in PyDense allocates a new Matrix; only the primitives in
``pydense.matrix.primitives`` mutate one in place, and they say so.

``Matrix.grid`` exposes the same buffer as a (rows, cols) view so the
primitives can use NumPy row/column slicing without copying.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydense.core.compute.precision import resolve_dtype
from pydense.core.exceptions import DimensionError
from pydense.core.validation import (
    check_2d,
    check_array,
    check_dimensions,
    check_ndim,
)


class Matrix:
    """
    Row-major dense matrix backed by a flat NumPy buffer.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        data: 1-D array of rows * cols elements
    """

    __slots__ = ('rows', 'cols', 'data')

    def __init__(self, rows: int, cols: int, dtype: Any = None):
        check_dimensions(rows, cols, 'Matrix')
        self.rows = int(rows)
        self.cols = int(cols)
        self.data: NDArray[np.floating[Any]] = np.zeros(
            self.rows * self.cols, dtype=resolve_dtype(dtype)
        )

    @classmethod
    def init(cls, rows: int, cols: int, dtype: Any = None) -> Matrix:
        """Allocate a zero-filled rows x cols matrix."""
        return cls(rows, cols, dtype=dtype)

    @classmethod
    def from_numpy(cls, array: ArrayLike, dtype: Any = None) -> Matrix:
        """
        Build a Matrix from a 2-D array-like, copying its elements.

        If ``dtype`` is None, float32 input stays float32 and every other
        numeric input becomes float64.
        """
        arr = check_array(array, 'array')
        check_2d(arr, 'array')
        if dtype is None and arr.dtype != np.float32:
            dtype = np.float64
        out = cls(arr.shape[0], arr.shape[1], dtype=dtype if dtype is not None else arr.dtype)
        out.data[:] = arr.ravel()
        return out

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]], dtype: Any = None) -> Matrix:
        """Build a Matrix from a nested sequence of rows."""
        return cls.from_numpy(rows, dtype=dtype)

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def size(self) -> int:
        """Number of elements (rows * cols)."""
        return self.rows * self.cols

    @property
    def grid(self) -> NDArray[np.floating[Any]]:
        """Writable (rows, cols) view onto ``data``."""
        return self.data.reshape(self.rows, self.cols)

    def get_at(self, row: int, col: int) -> float:
        """
        Element at (row, col).

        No bounds check is made beyond NumPy's flat indexing: an
        out-of-range column silently reads into the next row.
        """
        return float(self.data[row * self.cols + col])

    def set_at(self, row: int, col: int, value: float) -> None:
        """Overwrite element (row, col). Same bounds contract as get_at."""
        self.data[row * self.cols + col] = value

    def set_elements(self, values: Iterable[float] | ArrayLike) -> None:
        """
        Copy ``rows * cols`` values into the buffer in row-major order.

        Raises:
            DimensionError: If the number of values differs from size
        """
        flat = np.asarray(values, dtype=self.data.dtype).ravel()
        if flat.size != self.size:
            raise DimensionError(
                f"values: expected {self.size} elements for a "
                f"{self.rows}x{self.cols} matrix, got {flat.size}"
            )
        self.data[:] = flat

    def fill(self, value: float) -> None:
        """Set every element to ``value``."""
        self.data.fill(value)

    def copy(self) -> Matrix:
        """Deep copy with the same dimensions and dtype."""
        out = Matrix(self.rows, self.cols, dtype=self.data.dtype)
        out.data[:] = self.data
        return out

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Return a (rows, cols) copy of the elements."""
        return self.grid.copy()

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, dtype={self.data.dtype})"


class Vector:
    """
    Dense vector backed by a flat NumPy buffer.

    Used standalone and as a materialized column or diagonal of a Matrix.

    Attributes:
        size: Number of elements
        data: 1-D array of ``size`` elements
    """

    __slots__ = ('size', 'data')

    def __init__(self, size: int, dtype: Any = None):
        if size < 0:
            raise DimensionError(f"Vector: size must be non-negative, got {size}")
        self.size = int(size)
        self.data: NDArray[np.floating[Any]] = np.zeros(self.size, dtype=resolve_dtype(dtype))

    @classmethod
    def from_values(cls, values: ArrayLike, dtype: Any = None) -> Vector:
        """Build a Vector from a 1-D array-like, copying its elements."""
        arr = check_array(values, 'values')
        check_ndim(arr, 1, 'values')
        if dtype is None and arr.dtype != np.float32:
            dtype = np.float64
        out = cls(arr.shape[0], dtype=dtype if dtype is not None else arr.dtype)
        out.data[:] = arr
        return out

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    def get(self, index: int) -> float:
        """Element at ``index``; out-of-range reads return 0.0."""
        if index < 0 or index >= self.size:
            return 0.0
        return float(self.data[index])

    def set(self, index: int, value: float) -> None:
        """Overwrite element ``index``; out-of-range writes are ignored."""
        if index < 0 or index >= self.size:
            return
        self.data[index] = value

    def set_elements(self, values: Iterable[float] | ArrayLike) -> None:
        """
        Copy ``size`` values into the buffer.

        Raises:
            DimensionError: If the number of values differs from size
        """
        flat = np.asarray(values, dtype=self.data.dtype).ravel()
        if flat.size != self.size:
            raise DimensionError(
                f"values: expected {self.size} elements, got {flat.size}"
            )
        self.data[:] = flat

    def copy(self) -> Vector:
        out = Vector(self.size, dtype=self.data.dtype)
        out.data[:] = self.data
        return out

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        return self.data.copy()

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"Vector(size={self.size}, dtype={self.data.dtype})"
