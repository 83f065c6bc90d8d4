"""
Batched application of a matrix operation.

A stack of matrices, either a 3-D array of shape (k, rows, cols) or any
sequence of Matrix objects, is processed slice by slice: the operation is
called once per slice and the k results are returned in order. This is
how a tensor of matrices gets decomposed, one independent problem per
slice.

Slices are independent, so a failure on one slice (say, a singular
matrix handed to inverse) propagates immediately with the slice index in
the message; no partial list is returned.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, TypeVar
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydense.core.exceptions import PyDenseError
from pydense.core.validation import check_array, check_ndim
from pydense.matrix.storage import Matrix, Vector

T = TypeVar('T')


def _slices(stack: ArrayLike | Sequence[Matrix], dtype: Any) -> list[Matrix]:
    if isinstance(stack, (list, tuple)) and all(isinstance(m, Matrix) for m in stack):
        return list(stack)

    arr = check_array(stack, 'stack')
    check_ndim(arr, 3, 'stack')
    return [Matrix.from_numpy(arr[k], dtype=dtype) for k in range(arr.shape[0])]


def batched_apply(
    operation: Callable[[Matrix], T],
    stack: ArrayLike | Sequence[Matrix],
    dtype: Any = None,
) -> list[T]:
    """
    Apply ``operation`` to every matrix in ``stack``.

    Args:
        operation: Any function taking a Matrix, e.g. ``determinant``,
            ``inverse`` or ``lambda m: svd_init(m, max_iter=50)``
        stack: 3-D array-like (k, rows, cols) or a sequence of Matrix
        dtype: Element type for slices built from an array

    Returns:
        List of the k results, in slice order

    Raises:
        DimensionError: If an array stack is not 3-D
        PyDenseError: Re-raised from the failing slice, same type, with
            the slice index prepended to the message
    """
    results: list[T] = []
    for index, matrix in enumerate(_slices(stack, dtype)):
        try:
            results.append(operation(matrix))
        except PyDenseError as e:
            e.args = (f"slice {index}: {e}",) + e.args[1:]
            raise
    return results


def stack_results(results: Sequence[Matrix | Vector | float]) -> NDArray[np.floating[Any]]:
    """
    Stack per-slice results into one array.

    Matrices become (k, rows, cols), vectors (k, size), scalars (k,).
    """
    return np.stack([
        r.to_numpy() if isinstance(r, (Matrix, Vector)) else np.asarray(r)
        for r in results
    ])
