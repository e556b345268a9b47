"""
Solution set assembly from a reduced augmented matrix.

Given RREF [R | c] and its column classification, the solution set of
the original system is

    x = p + t_1 * n_1 + ... + t_k * n_k

where p sets every free variable to 0 and reads each pivot variable off
the right-hand side, and n_k activates free column k and sets each pivot
variable to minus that row's coefficient on the free column.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.exceptions import DimensionError
from pyechelon.core.validation import check_array, check_augmented
from pyechelon.system._common import ColumnClassification, SolutionSetParams


def particular_solution(
    rref: NDArray[np.floating[Any]],
    classification: ColumnClassification,
) -> NDArray[np.floating[Any]]:
    """Pivot variables from the right-hand side, free variables 0."""
    p = np.zeros(classification.n_columns, dtype=np.float64)
    for row, col in classification.pivots():
        p[col] = rref[row, -1]
    return p


def null_space_basis(
    rref: NDArray[np.floating[Any]],
    classification: ColumnClassification,
) -> NDArray[np.floating[Any]]:
    """One basis vector of {x : Ax = 0} per free column, stacked as rows."""
    n = classification.n_columns
    basis = np.zeros((classification.n_free, n), dtype=np.float64)
    for k, free_col in enumerate(classification.non_pivot_columns):
        basis[k, free_col] = 1.0
        for row, col in classification.pivots():
            basis[k, col] = -rref[row, free_col]
    return basis


def assemble(
    rref: ArrayLike,
    classification: ColumnClassification,
    inconsistent_rows: tuple[int, ...] = (),
) -> SolutionSetParams:
    """
    Combine an RREF matrix and its classification into a solution set.

    Args:
        rref: Augmented matrix in reduced row echelon form (m x n+1)
        classification: Output of classify_columns() for the same matrix
        inconsistent_rows: Rows already found to be ``0 ... 0 | c``;
            recorded on the payload, not checked here

    Returns:
        SolutionSetParams with the particular solution and null-space basis

    Raises:
        DimensionError: If the classification does not match the matrix shape
    """
    M = check_array(rref, 'rref')
    check_augmented(M, 'rref')

    m, cols = M.shape
    if classification.n_columns != cols - 1:
        raise DimensionError(
            f"classification covers {classification.n_columns} columns, "
            f"rref has {cols - 1} coefficient columns"
        )
    if classification.pivot_rows and max(classification.pivot_rows) >= m:
        raise DimensionError(
            f"classification refers to row {max(classification.pivot_rows)}, "
            f"rref has {m} rows"
        )

    return SolutionSetParams(
        particular_solution=particular_solution(M, classification),
        null_space_basis=null_space_basis(M, classification),
        classification=classification,
        rref=M,
        inconsistent_rows=tuple(inconsistent_rows),
    )
