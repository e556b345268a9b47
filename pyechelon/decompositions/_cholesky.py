"""
Cholesky and LU factorizations of symmetric positive-definite matrices.

Both are the textbook loops with no pivoting, so they require a symmetric
positive-definite input and refuse anything else up front.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.exceptions import (
    DimensionError,
    NotPositiveDefiniteError,
    ValidationError,
)
from pyechelon.core.validation import check_array, check_1d, check_finite
from pyechelon.decompositions._checks import (
    as_square,
    is_symmetric,
    first_nonpositive_minor,
)


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition.

    Attributes:
        L: Unit lower triangular matrix (n x n)
        U: Upper triangular matrix (n x n)
    """
    L: NDArray[np.floating[Any]]
    U: NDArray[np.floating[Any]]


def cholesky(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Cholesky factor L of a symmetric positive-definite matrix, A = L @ L.T.

    Args:
        A: Symmetric positive-definite matrix (n x n)

    Returns:
        Lower triangular L with positive diagonal

    Raises:
        ValidationError: If A is not symmetric
        NotPositiveDefiniteError: If a diagonal step is not positive
    """
    M = _require_symmetric(A)
    n = M.shape[0]
    L = np.zeros((n, n), dtype=np.float64)

    for i in range(n):
        for j in range(i + 1):
            s = L[i, :j] @ L[j, :j]
            if i == j:
                d = M[i, i] - s
                if d <= 0:
                    raise NotPositiveDefiniteError(
                        f"A is not positive definite: leading minor of size {i + 1} "
                        f"is not positive (pivot {d:.6g})",
                        matrix_name='A',
                        minor_index=i + 1,
                    )
                L[i, i] = np.sqrt(d)
            else:
                L[i, j] = (M[i, j] - s) / L[j, j]

    return L


def lu_decompose(A: ArrayLike) -> LUResult:
    """
    Doolittle LU decomposition of a symmetric positive-definite matrix.

    Args:
        A: Symmetric positive-definite matrix (n x n)

    Returns:
        LUResult with unit lower triangular L and upper triangular U,
        A = L @ U

    Raises:
        ValidationError: If A is not symmetric
        NotPositiveDefiniteError: If a leading principal minor is not positive
    """
    M = _require_symmetric(A)
    k = first_nonpositive_minor(M)
    if k is not None:
        raise NotPositiveDefiniteError(
            f"A is not positive definite: leading principal minor of size {k} "
            f"is not positive",
            matrix_name='A',
            minor_index=k,
        )

    n = M.shape[0]
    L = np.eye(n)
    U = np.zeros((n, n), dtype=np.float64)

    for k in range(n):
        for i in range(k + 1):
            U[i, k] = M[i, k] - L[i, :i] @ U[:i, k]
        for i in range(k + 1, n):
            L[i, k] = (M[i, k] - L[i, :k] @ U[:k, k]) / U[k, k]

    return LUResult(L=L, U=U)


def _require_symmetric(A: ArrayLike) -> NDArray[np.floating[Any]]:
    M = as_square(A)
    if not is_symmetric(M):
        raise ValidationError("A: matrix is not symmetric")
    return M


def lu_solve(lu: LUResult, b: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b from an LU factorization.

    Solves L y = b by forward substitution, then U x = y by back
    substitution.

    Raises:
        DimensionError: If b does not have one entry per row of A
    """
    from scipy.linalg import solve_triangular

    b_arr = _rhs(b, lu.L.shape[0])
    y = solve_triangular(lu.L, b_arr, lower=True, unit_diagonal=True)
    return solve_triangular(lu.U, y, lower=False)


def cholesky_solve(L: ArrayLike, b: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b from the Cholesky factor L of A.

    Solves L y = b, then L.T x = y.

    Raises:
        DimensionError: If b does not have one entry per row of A
    """
    from scipy.linalg import solve_triangular

    L_arr = as_square(L, 'L')
    b_arr = _rhs(b, L_arr.shape[0])
    y = solve_triangular(L_arr, b_arr, lower=True)
    return solve_triangular(L_arr.T, y, lower=False)


def _rhs(b: ArrayLike, n: int) -> NDArray[np.floating[Any]]:
    b_arr = check_array(b, 'b')
    check_1d(b_arr, 'b')
    check_finite(b_arr, 'b')
    if b_arr.shape[0] != n:
        raise DimensionError(f"b: expected length {n}, got {b_arr.shape[0]}")
    return b_arr
