"""
Binary layout of matrices and vectors for the socket transport.

The transport copies values verbatim, in host byte order:

    Matrix: {rows: uint32}{cols: uint32}{rows * cols raw elements}
    Vector: {size: uint32}{size raw elements}

This is not a portable wire format: both ends must share endianness and
element type. The element type is not transmitted, so the reader passes
the dtype it expects.
"""

from __future__ import annotations

import struct
from typing import Any
import numpy as np

from pydense.core.compute.precision import resolve_dtype
from pydense.core.exceptions import ValidationError
from pydense.matrix.storage import Matrix, Vector

# Native byte order, standard sizes, no padding
_MATRIX_HEADER = struct.Struct('=II')
_VECTOR_HEADER = struct.Struct('=I')


def pack_matrix(matrix: Matrix) -> bytes:
    """Header followed by the raw row-major buffer."""
    return _MATRIX_HEADER.pack(matrix.rows, matrix.cols) + matrix.data.tobytes()


def pack_vector(vector: Vector) -> bytes:
    return _VECTOR_HEADER.pack(vector.size) + vector.data.tobytes()


def _read_elements(
    buffer: bytes,
    offset: int,
    count: int,
    dtype: np.dtype,
    what: str,
) -> np.ndarray:
    nbytes = count * dtype.itemsize
    end = offset + nbytes
    if end > len(buffer):
        raise ValidationError(
            f"{what}: truncated buffer, need {nbytes} element bytes at offset "
            f"{offset}, have {len(buffer) - offset}"
        )
    return np.frombuffer(buffer, dtype=dtype, count=count, offset=offset)


def unpack_matrix(
    buffer: bytes,
    offset: int = 0,
    dtype: Any = None,
) -> tuple[Matrix, int]:
    """
    Read one matrix starting at ``offset``.

    Returns:
        (matrix, next_offset) so consecutive records can be read in turn

    Raises:
        ValidationError: If the buffer is shorter than the record
    """
    dt = resolve_dtype(dtype)
    if offset + _MATRIX_HEADER.size > len(buffer):
        raise ValidationError(f"matrix: truncated header at offset {offset}")
    rows, cols = _MATRIX_HEADER.unpack_from(buffer, offset)
    offset += _MATRIX_HEADER.size

    elements = _read_elements(buffer, offset, rows * cols, dt, 'matrix')
    out = Matrix(rows, cols, dtype=dt)
    out.data[:] = elements
    return out, offset + rows * cols * dt.itemsize


def unpack_vector(
    buffer: bytes,
    offset: int = 0,
    dtype: Any = None,
) -> tuple[Vector, int]:
    """
    Read one vector starting at ``offset``.

    Returns:
        (vector, next_offset)

    Raises:
        ValidationError: If the buffer is shorter than the record
    """
    dt = resolve_dtype(dtype)
    if offset + _VECTOR_HEADER.size > len(buffer):
        raise ValidationError(f"vector: truncated header at offset {offset}")
    (size,) = _VECTOR_HEADER.unpack_from(buffer, offset)
    offset += _VECTOR_HEADER.size

    elements = _read_elements(buffer, offset, size, dt, 'vector')
    out = Vector(size, dtype=dt)
    out.data[:] = elements
    return out, offset + size * dt.itemsize
