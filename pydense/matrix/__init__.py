"""
Dense matrix storage and the primitives the solvers mutate.

Public API:
    Matrix, Vector            - flat row-major storage
    primitives                - in-place row/column operations
    ops                       - allocation, products, slicing, norms
    serialization             - host-order binary layout
"""

from pydense.matrix.storage import Matrix, Vector
from pydense.matrix.primitives import (
    NOT_FOUND,
    add_row,
    col_copy,
    col_div,
    col_sub,
    dot_cols,
    find_pivot,
    multiply_row,
    swap_rows,
    vector_length,
)
from pydense.matrix.ops import (
    add,
    all_close,
    append,
    diagonal,
    frobenius,
    from_vector,
    full,
    identity,
    matmul,
    max_abs,
    normalize,
    ones,
    scalar_mul,
    slice_matrix,
    sub,
    trace,
    transpose,
    tril,
    triu,
    vector_all_close,
    vector_norm,
    vector_scale,
    vector_zeros,
    zeros,
    zeros_like,
)
from pydense.matrix.serialization import (
    pack_matrix,
    pack_vector,
    unpack_matrix,
    unpack_vector,
)

__all__ = [
    "Matrix",
    "Vector",
    # Primitives
    "NOT_FOUND",
    "add_row",
    "col_copy",
    "col_div",
    "col_sub",
    "dot_cols",
    "find_pivot",
    "multiply_row",
    "swap_rows",
    "vector_length",
    # Operations
    "add",
    "all_close",
    "append",
    "diagonal",
    "frobenius",
    "from_vector",
    "full",
    "identity",
    "matmul",
    "max_abs",
    "normalize",
    "ones",
    "scalar_mul",
    "slice_matrix",
    "sub",
    "trace",
    "transpose",
    "tril",
    "triu",
    "vector_all_close",
    "vector_norm",
    "vector_scale",
    "vector_zeros",
    "zeros",
    "zeros_like",
    # Serialization
    "pack_matrix",
    "pack_vector",
    "unpack_matrix",
    "unpack_vector",
]
