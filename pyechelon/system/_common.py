"""
Common types for linear system solving.

Defines ColumnClassification (pivot / free split of an RREF matrix) and
SolutionSetParams (the payload produced by backends).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class ColumnClassification:
    """
    Pivot (basic) and non-pivot (free) columns of a reduced augmented matrix.

    Attributes
    ----------
    pivot_columns : tuple of int
        Pivot column of each nonzero row, in row order.
    pivot_rows : tuple of int
        Row owning each pivot; ``pivot_rows[k]`` holds ``pivot_columns[k]``.
        Zero rows own no pivot, so this skips them.
    non_pivot_columns : tuple of int
        Coefficient columns with no pivot, ascending. One free variable each.
    n_columns : int
        Number of coefficient columns (the augmented column excluded).
    """
    pivot_columns: tuple[int, ...]
    pivot_rows: tuple[int, ...]
    non_pivot_columns: tuple[int, ...]
    n_columns: int

    def __post_init__(self):
        if len(self.pivot_columns) != len(self.pivot_rows):
            raise ValueError(
                f"pivot_columns ({len(self.pivot_columns)}) and pivot_rows "
                f"({len(self.pivot_rows)}) must have the same length"
            )
        pivots = set(self.pivot_columns)
        free = set(self.non_pivot_columns)
        if pivots & free:
            raise ValueError(
                f"Columns {sorted(pivots & free)} are both pivot and free"
            )
        if pivots | free != set(range(self.n_columns)):
            raise ValueError(
                f"Pivot and free columns must cover range({self.n_columns}), "
                f"got pivots={self.pivot_columns}, free={self.non_pivot_columns}"
            )

    @property
    def rank(self) -> int:
        """Number of pivots."""
        return len(self.pivot_columns)

    @property
    def n_free(self) -> int:
        """Number of free variables."""
        return len(self.non_pivot_columns)

    def pivots(self) -> list[tuple[int, int]]:
        """(row, column) pairs for every pivot, in row order."""
        return list(zip(self.pivot_rows, self.pivot_columns))


@dataclass(frozen=True)
class SolutionSetParams:
    """
    Parameter payload for a solved linear system.

    The solution set is ``{p + sum_k t_k * N[k] : t_k real}``.

    Attributes
    ----------
    particular_solution : ndarray, shape (n,)
        Solution with every free variable set to 0.
    null_space_basis : ndarray, shape (n_free, n)
        One basis vector per free column, in ascending free-column order.
    classification : ColumnClassification
        Pivot and free columns the vectors were read from.
    rref : ndarray, shape (m, n + 1)
        The reduced augmented matrix.
    inconsistent_rows : tuple of int
        Rows of the form ``0 ... 0 | c`` with ``c != 0``. Empty when the
        system is consistent.
    """
    particular_solution: NDArray[np.floating[Any]]
    null_space_basis: NDArray[np.floating[Any]]
    classification: ColumnClassification
    rref: NDArray[np.floating[Any]]
    inconsistent_rows: tuple[int, ...] = ()

    @property
    def is_consistent(self) -> bool:
        return not self.inconsistent_rows
