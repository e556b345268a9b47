"""
Dense matrix decompositions and property checks.

These share the Matrix/Vector model of the solver: every function takes
an array-like, validates it, and returns fresh NumPy arrays.

Public API:
    gram_schmidt_qr(A) -> QRResult(Q, R)
    matrix_rank(A), columns_linearly_independent(A)
    cholesky(A) -> L, cholesky_solve(L, b)
    lu_decompose(A) -> LUResult(L, U), lu_solve(lu, b)
    determinant(A), is_symmetric(A), is_positive_definite(A)
    scale_row_matrix, add_row_multiple_matrix, swap_rows_matrix
"""

from pyechelon.decompositions._gram_schmidt import (
    QRResult,
    gram_schmidt_qr,
    matrix_rank,
    columns_linearly_independent,
)
from pyechelon.decompositions._cholesky import (
    LUResult,
    cholesky,
    cholesky_solve,
    lu_decompose,
    lu_solve,
)
from pyechelon.decompositions._checks import (
    determinant,
    is_symmetric,
    is_positive_definite,
    leading_minors,
)
from pyechelon.decompositions._elementary import (
    scale_row_matrix,
    add_row_multiple_matrix,
    swap_rows_matrix,
)

__all__ = [
    # QR / rank
    "QRResult",
    "gram_schmidt_qr",
    "matrix_rank",
    "columns_linearly_independent",
    # Factorizations
    "LUResult",
    "cholesky",
    "lu_decompose",
    "lu_solve",
    "cholesky_solve",
    # Checks
    "determinant",
    "is_symmetric",
    "is_positive_definite",
    "leading_minors",
    # Elementary matrices
    "scale_row_matrix",
    "add_row_multiple_matrix",
    "swap_rows_matrix",
]
