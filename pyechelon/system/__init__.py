"""
Linear systems Ax = b.

Public API:
    solve(A, b, ...) -> LinearSystemSolution

The solve() function handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

The pipeline stages are also exposed for inspection:
    classify_columns(rref) -> ColumnClassification
    assemble(rref, classification) -> SolutionSetParams
    find_inconsistent_rows(rref) / check_consistent(rref)

Example:
    >>> from pyechelon.system import solve
    >>> sol = solve([[1, 1, 1], [2, 1, 1]], [3, 4])
    >>> print(sol.general_solution())
    >>> print(sol.summary())
"""

from pyechelon.system._common import ColumnClassification, SolutionSetParams
from pyechelon.system._structure import (
    classify_columns,
    find_inconsistent_rows,
    check_consistent,
)
from pyechelon.system._assemble import assemble
from pyechelon.system.design import LinearSystemDesign
from pyechelon.system.solution import LinearSystemSolution
from pyechelon.system.solvers import solve, solve_linear_system

__all__ = [
    "solve",
    "solve_linear_system",
    "classify_columns",
    "find_inconsistent_rows",
    "check_consistent",
    "assemble",
    "ColumnClassification",
    "SolutionSetParams",
    "LinearSystemDesign",
    "LinearSystemSolution",
]
