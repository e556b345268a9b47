"""
Linear system solution types.

Contains the user-facing solution wrapper. The parameter payload lives in
_common.py so backends can build it without importing this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.exceptions import DimensionError
from pyechelon.core.result import Result
from pyechelon.echelon import format_matrix, format_vector
from pyechelon.system._common import ColumnClassification, SolutionSetParams

if TYPE_CHECKING:
    from pyechelon.system.design import LinearSystemDesign


@dataclass
class LinearSystemSolution:
    """
    User-facing solution set of Ax = b.

    Wraps the backend Result and provides accessors for the particular
    solution, the null-space basis and the column structure, plus text
    rendering of the general solution.
    """
    _result: Result[SolutionSetParams]
    _design: 'LinearSystemDesign'

    @property
    def particular_solution(self) -> NDArray[np.floating[Any]]:
        return self._result.params.particular_solution

    @property
    def null_space_basis(self) -> NDArray[np.floating[Any]]:
        """Basis of {x : Ax = 0}, one row per free variable."""
        return self._result.params.null_space_basis

    @property
    def classification(self) -> ColumnClassification:
        return self._result.params.classification

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return self.classification.pivot_columns

    @property
    def non_pivot_columns(self) -> tuple[int, ...]:
        return self.classification.non_pivot_columns

    @property
    def rank(self) -> int:
        return self.classification.rank

    @property
    def n_free(self) -> int:
        return self.classification.n_free

    @property
    def is_unique(self) -> bool:
        """True when there are no free variables."""
        return self.n_free == 0

    @property
    def is_consistent(self) -> bool:
        return self._result.params.is_consistent

    @property
    def rref(self) -> NDArray[np.floating[Any]]:
        """Reduced augmented matrix [R | c]."""
        return self._result.params.rref

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def evaluate(self, t: ArrayLike | None = None) -> NDArray[np.floating[Any]]:
        """
        Point of the solution set for free-variable values t.

        Computes p + t @ N. With t=None every free variable is 0, which
        returns a copy of the particular solution.

        Raises:
            DimensionError: If t does not have one value per free variable
        """
        p = self.particular_solution
        if t is None:
            return p.copy()
        t_arr = np.atleast_1d(np.asarray(t, dtype=np.float64))
        if t_arr.shape != (self.n_free,):
            raise DimensionError(
                f"t: expected {self.n_free} free-variable values, got shape {t_arr.shape}"
            )
        return p + t_arr @ self.null_space_basis

    def residual(self, t: ArrayLike | None = None) -> NDArray[np.floating[Any]]:
        """A @ x - b for x = evaluate(t)."""
        return self._design.residual(self.evaluate(t))

    def general_solution(self, precision: int = 2) -> str:
        """
        Parametric form of the solution set.

        Free variables are named after their column (1-based), e.g.

            x = [1.00, 2.00, 0.00] + x3 * [0.00, -1.00, 1.00]
        """
        text = "x = " + format_vector(self.particular_solution, precision)
        for col, vector in zip(self.non_pivot_columns, self.null_space_basis):
            text += f" + x{col + 1} * {format_vector(vector, precision)}"
        return text

    def summary(self, precision: int = 4) -> str:
        """Generate a plain-text report of the solution set."""
        pivots = ", ".join(f"x{c + 1}" for c in self.pivot_columns) or "none"
        free = ", ".join(f"x{c + 1}" for c in self.non_pivot_columns) or "none"
        lines = [
            "Linear System Solution",
            "=" * 60,
            f"Equations: {self._design.n_equations}",
            f"Unknowns: {self._design.n_unknowns}",
            f"Rank: {self.rank}",
            f"Pivot variables: {pivots}",
            f"Free variables: {free}",
            "",
            "Reduced row echelon form:",
            format_matrix(self.rref, precision, augmented=True),
            "",
            f"Particular solution: {format_vector(self.particular_solution, precision)}",
        ]
        if self.is_unique:
            lines.append("Null space: {0} (solution is unique)")
        else:
            lines.append("Null space basis:")
            for col, vector in zip(self.non_pivot_columns, self.null_space_basis):
                lines.append(f"  x{col + 1}: {format_vector(vector, precision)}")
        lines.append("")
        lines.append(self.general_solution(precision))
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(rank={self.rank}, n_free={self.n_free}, "
            f"backend={self.backend_name!r})"
        )
