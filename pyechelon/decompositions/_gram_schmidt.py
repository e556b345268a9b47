"""
QR decomposition by Gram-Schmidt orthogonalization, and a linear
independence test built on row reduction.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.compute.tolerances import CPU_FP64, zero_tolerance
from pyechelon.core.exceptions import SingularMatrixError
from pyechelon.core.validation import check_array, check_2d, check_finite, check_not_empty
from pyechelon.echelon import find_pivot, to_row_echelon


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Matrix with orthonormal columns (m x n)
        R: Upper triangular matrix (n x n) with positive diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]


def gram_schmidt_qr(A: ArrayLike) -> QRResult:
    """
    QR decomposition of a full column rank matrix.

    Columns are orthogonalized in order (modified Gram-Schmidt: each
    projection uses the partially reduced vector), so A = Q @ R with
    Q[:, j] spanning the same space as A[:, :j+1].

    Args:
        A: Matrix to decompose (m x n), m >= n, linearly independent columns

    Returns:
        QRResult with Q (m x n) and R (n x n)

    Raises:
        SingularMatrixError: If a column is (numerically) a combination of
            the previous ones
    """
    M = check_array(A, 'A')
    check_2d(M, 'A')
    check_not_empty(M, 'A')
    check_finite(M, 'A')

    m, n = M.shape
    tol = zero_tolerance(M, CPU_FP64) * max(m, n)
    Q = np.zeros((m, n), dtype=np.float64)
    R = np.zeros((n, n), dtype=np.float64)

    for j in range(n):
        v = M[:, j].copy()
        for i in range(j):
            R[i, j] = Q[:, i] @ v
            v -= R[i, j] * Q[:, i]

        norm = float(np.linalg.norm(v))
        if norm <= tol:
            raise SingularMatrixError(
                f"Column {j} of A is linearly dependent on columns 0..{j - 1}; "
                f"QR requires full column rank",
                matrix_name='A',
                rank=j,
                expected_rank=n,
            )
        R[j, j] = norm
        Q[:, j] = v / norm

    return QRResult(Q=Q, R=R)


def matrix_rank(A: ArrayLike, *, tol: float | None = None) -> int:
    """
    Rank as the number of nonzero rows after forward elimination.

    Args:
        A: Matrix (m x n)
        tol: Absolute zero threshold; default scales the cpu_fp64 tier by
            the largest |entry|

    Returns:
        Number of pivots
    """
    M = check_array(A, 'A')
    check_2d(M, 'A')
    check_finite(M, 'A')
    if tol is None:
        tol = zero_tolerance(M, CPU_FP64)
    ref = to_row_echelon(M, tol=tol)
    return sum(1 for row in ref if find_pivot(row, tol) is not None)


def columns_linearly_independent(A: ArrayLike, *, tol: float | None = None) -> bool:
    """True if the columns of A are linearly independent (rank == n)."""
    M = check_array(A, 'A')
    check_2d(M, 'A')
    return matrix_rank(M, tol=tol) == M.shape[1]
