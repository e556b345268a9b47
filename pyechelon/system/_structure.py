"""
Column structure of a reduced augmented matrix.

Reads pivot and free columns off an RREF matrix and detects rows that
make the system inconsistent.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.exceptions import InconsistentSystemError
from pyechelon.core.validation import check_array, check_augmented
from pyechelon.echelon import find_pivot
from pyechelon.system._common import ColumnClassification


def classify_columns(rref: ArrayLike, *, tol: float = 0.0) -> ColumnClassification:
    """
    Split the coefficient columns of an RREF matrix into pivot and free.

    Each row's first coefficient entry with |value| > tol is that row's
    pivot. Rows without one contribute nothing. The right-hand side column
    is never a pivot: a row ``0 ... 0 | c`` owns no pivot, and is reported
    by find_inconsistent_rows() instead.

    Args:
        rref: Augmented matrix in reduced row echelon form (m x n+1)
        tol: Absolute threshold under which entries count as zero

    Returns:
        ColumnClassification for the n coefficient columns
    """
    M = _as_augmented(rref)
    coefficients = M[:, :-1]
    n = coefficients.shape[1]

    pivot_columns: list[int] = []
    pivot_rows: list[int] = []
    for i, row in enumerate(coefficients):
        col = find_pivot(row, tol)
        if col is not None:
            pivot_columns.append(col)
            pivot_rows.append(i)

    taken = set(pivot_columns)
    non_pivot_columns = tuple(j for j in range(n) if j not in taken)

    return ColumnClassification(
        pivot_columns=tuple(pivot_columns),
        pivot_rows=tuple(pivot_rows),
        non_pivot_columns=non_pivot_columns,
        n_columns=n,
    )


def find_inconsistent_rows(rref: ArrayLike, *, tol: float = 0.0) -> tuple[int, ...]:
    """Indices of rows whose coefficients are all zero but whose right-hand side is not."""
    M = _as_augmented(rref)
    zero_coefficients = np.all(np.abs(M[:, :-1]) <= tol, axis=1)
    nonzero_rhs = np.abs(M[:, -1]) > tol
    return tuple(int(i) for i in np.flatnonzero(zero_coefficients & nonzero_rhs))


def check_consistent(rref: ArrayLike, *, tol: float = 0.0) -> None:
    """
    Raise if the reduced system has no solution.

    Raises:
        InconsistentSystemError: If any row reads ``0 ... 0 | c`` with c != 0.
            The offending row indices are in the ``rows`` attribute.
    """
    rows = find_inconsistent_rows(rref, tol=tol)
    if rows:
        M = np.asarray(rref, dtype=np.float64)
        details = ", ".join(f"row {i}: 0 = {M[i, -1]:.6g}" for i in rows)
        raise InconsistentSystemError(
            f"System is inconsistent, no solution exists ({details})",
            rows=rows,
        )


def _as_augmented(rref: ArrayLike) -> NDArray[np.floating[Any]]:
    M = check_array(rref, 'rref')
    check_augmented(M, 'rref')
    return M
