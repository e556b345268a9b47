"""
Gauss-Jordan elimination without row exchanges.

Forward pass (row echelon form) and backward pass (reduced row echelon
form) over a dense matrix, usually an augmented matrix [A | b].

Pivot rule:
    The pivot of a row is its FIRST entry whose magnitude exceeds `tol`,
    scanning left to right. It is not the largest-magnitude entry of the
    column, and rows are never swapped, so zero rows stay where they are.
    This keeps the pivot columns, and therefore the null-space basis,
    identical to a hand computation. It is not a stability-aware solver:
    on ill-conditioned input a small leading entry becomes the pivot.

Both passes work on a private copy and return it; the argument is never
modified.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.exceptions import SingularPivotError, ValidationError
from pyechelon.core.validation import check_array, check_2d


def find_pivot(row: NDArray[np.floating[Any]], tol: float = 0.0) -> int | None:
    """
    Column index of the first entry with |value| > tol, or None.

    With tol=0.0 this is exactly "first nonzero entry".
    """
    nonzero = np.flatnonzero(np.abs(row) > tol)
    if nonzero.size == 0:
        return None
    return int(nonzero[0])


def to_row_echelon(matrix: ArrayLike, *, tol: float = 0.0) -> NDArray[np.floating[Any]]:
    """
    Reduce a matrix to row echelon form by forward elimination.

    For each row i from the top:
        1. Snap entries with |value| <= tol to zero and find the pivot
           (first remaining nonzero). A row with no pivot is skipped.
        2. Divide the row by its pivot so the pivot becomes 1.
        3. For every row j > i, subtract row_j[pivot] * row_i.

    Args:
        matrix: Matrix to reduce (m x n)
        tol: Absolute threshold under which entries count as zero

    Returns:
        New matrix in row echelon form: every nonzero row leads with 1 and
        every entry below a pivot is 0. Row order is unchanged.

    Raises:
        ValidationError: If matrix is not numeric or tol is negative
        DimensionError: If matrix is not 2D
        SingularPivotError: If dividing by the pivot overflows
    """
    M = _working_copy(matrix, tol)
    m = M.shape[0]

    for i in range(m):
        _snap(M[i], tol)
        pivot_col = find_pivot(M[i], tol)
        if pivot_col is None:
            continue

        pivot = M[i, pivot_col]
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            normalized = M[i] / pivot
        if not np.all(np.isfinite(normalized)):
            raise SingularPivotError(
                f"Row {i}: pivot {pivot!r} in column {pivot_col} is effectively "
                f"zero; dividing by it does not give finite values",
                row=i,
                column=pivot_col,
                pivot=float(pivot),
            )
        M[i] = normalized
        # Exact 1 so later scans and read-offs see a clean pivot
        M[i, pivot_col] = 1.0

        for j in range(i + 1, m):
            factor = M[j, pivot_col]
            if factor != 0.0:
                M[j] -= factor * M[i]
                M[j, pivot_col] = 0.0

    return M


def to_reduced_row_echelon(matrix: ArrayLike, *, tol: float = 0.0) -> NDArray[np.floating[Any]]:
    """
    Reduce a row echelon matrix to reduced row echelon form.

    For each row i from the bottom, find its pivot (zero rows are skipped)
    and subtract row_j[pivot] * row_i from every row j < i.

    The input must already be in row echelon form with pivots equal to 1,
    as produced by to_row_echelon(). Applying this function to its own
    output returns an identical matrix.

    Args:
        matrix: Matrix in row echelon form (m x n)
        tol: Absolute threshold under which entries count as zero

    Returns:
        New matrix in which each pivot column holds a 1 in its pivot row
        and 0 in every other row.

    Raises:
        ValidationError: If matrix is not numeric, tol is negative, or a
            pivot is not 1 (input not in row echelon form)
        DimensionError: If matrix is not 2D
    """
    M = _working_copy(matrix, tol)
    m = M.shape[0]

    for i in range(m - 1, -1, -1):
        _snap(M[i], tol)
        pivot_col = find_pivot(M[i], tol)
        if pivot_col is None:
            continue

        if not np.isclose(M[i, pivot_col], 1.0):
            raise ValidationError(
                f"matrix: row {i} has pivot {M[i, pivot_col]!r} in column "
                f"{pivot_col}, expected 1 (input is not in row echelon form)"
            )

        for j in range(i - 1, -1, -1):
            factor = M[j, pivot_col]
            if factor != 0.0:
                M[j] -= factor * M[i]
                M[j, pivot_col] = 0.0

    return M


def _working_copy(matrix: ArrayLike, tol: float) -> NDArray[np.floating[Any]]:
    """Validated float64 copy of matrix."""
    if tol < 0:
        raise ValidationError(f"tol: must be non-negative, got {tol}")
    M = check_array(matrix, 'matrix')
    check_2d(M, 'matrix')
    return M


def _snap(row: NDArray[np.floating[Any]], tol: float) -> None:
    """Zero out entries of row (in place) with |value| <= tol."""
    if tol > 0:
        row[np.abs(row) <= tol] = 0.0
