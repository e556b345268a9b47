"""
Matrix property checks: symmetry, positive definiteness, determinant.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.compute.tolerances import VERIFY
from pyechelon.core.validation import check_array, check_finite, check_square


def as_square(A: ArrayLike, name: str = 'A') -> NDArray[np.floating[Any]]:
    """Validated float64 copy of a finite square matrix."""
    M = check_array(A, name)
    check_square(M, name)
    check_finite(M, name)
    return M


def is_symmetric(A: ArrayLike, *, atol: float = VERIFY.atol) -> bool:
    """True if A equals its transpose within atol."""
    M = as_square(A)
    return bool(np.allclose(M, M.T, rtol=0.0, atol=atol))


def determinant(A: ArrayLike) -> float:
    """
    Determinant by cofactor expansion along the first row.

    Exact in structure but O(n!) in cost; meant for small matrices and as
    a cross-check of LAPACK results. Use numpy.linalg.det for anything
    beyond a handful of rows.
    """
    M = as_square(A)
    if M.shape[0] == 0:
        return 1.0
    return _cofactor_det(M)


def _cofactor_det(M: NDArray[np.floating[Any]]) -> float:
    n = M.shape[0]
    if n == 1:
        return float(M[0, 0])
    if n == 2:
        return float(M[0, 0] * M[1, 1] - M[0, 1] * M[1, 0])

    det = 0.0
    for j in range(n):
        if M[0, j] == 0.0:
            continue
        minor = np.delete(M[1:], j, axis=1)
        sign = 1.0 if j % 2 == 0 else -1.0
        det += sign * M[0, j] * _cofactor_det(minor)
    return det


def leading_minors(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """Determinants of the k x k leading principal submatrices, k = 1..n."""
    M = as_square(A)
    n = M.shape[0]
    return np.array([np.linalg.det(M[:k, :k]) for k in range(1, n + 1)])


def first_nonpositive_minor(A: ArrayLike) -> int | None:
    """Size k of the first leading principal minor <= 0, or None if all are positive."""
    minors = leading_minors(A)
    bad = np.flatnonzero(minors <= 0)
    if bad.size == 0:
        return None
    return int(bad[0]) + 1


def is_positive_definite(A: ArrayLike) -> bool:
    """
    Sylvester's criterion: symmetric and every leading principal minor > 0.
    """
    M = as_square(A)
    if not is_symmetric(M):
        return False
    return first_nonpositive_minor(M) is None
