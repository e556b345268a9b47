"""
Solver dispatch for linear systems.

This module provides the solve() function (public API) and backend selection.
"""

from __future__ import annotations

from typing import Literal
import numpy as np
from numpy.typing import ArrayLike

from pyechelon.core.compute.tolerances import (
    ToleranceTier,
    select_tolerance,
    zero_tolerance,
)
from pyechelon.core.exceptions import ValidationError
from pyechelon.core.protocols import Backend
from pyechelon.system._common import SolutionSetParams
from pyechelon.system.design import LinearSystemDesign
from pyechelon.system.solution import LinearSystemSolution
from pyechelon.system.backends.cpu import CPUEchelonBackend


BackendChoice = Literal['auto', 'cpu', 'cpu_gauss_jordan']


def solve(
    A: ArrayLike | LinearSystemDesign,
    b: ArrayLike | None = None,
    *,
    tol: float | str | ToleranceTier | None = None,
    check_consistency: bool = True,
    backend: BackendChoice = 'cpu',
) -> LinearSystemSolution:
    """
    Solve Ax = b and describe the complete solution set.

    The augmented matrix [A | b] is reduced to row echelon form, then to
    reduced row echelon form; pivot and free columns are read off and the
    solution set is returned as

        x = p + t_1 * n_1 + ... + t_k * n_k,    t_i real

    with one null-space basis vector n_i per free variable.

    Pivots are the first nonzero entry of each row (no partial pivoting,
    no row exchanges). This fixes which variables are free, but it is not
    numerically robust for ill-conditioned A.

    Args:
        A: Coefficient matrix (m x n), or a prebuilt LinearSystemDesign
        b: Right-hand side (m,). Required unless A is a design.
        tol: How entries are judged to be zero:
            - None: the literal rule, only exact zeros count as zero
            - float: absolute threshold, used as-is (0.0 = exact rule)
            - str or ToleranceTier: that tier, scaled by the largest |entry|
            tol='cpu_fp64' absorbs round-off left by dependent rows, but it
            also erases genuine entries far smaller than the largest one.
        check_consistency: If True (default), raise InconsistentSystemError
            when no solution exists. If False, return anyway with a warning.
        backend: 'cpu' (default), 'auto' or 'cpu_gauss_jordan'.

    Returns:
        LinearSystemSolution with particular solution, null-space basis,
        column classification and summary methods.

    Raises:
        ValidationError: If inputs are not finite real arrays
        DimensionError: If A and b have inconsistent dimensions
        SingularPivotError: If elimination meets an unusable pivot
        InconsistentSystemError: If the system has no solution

    Example:
        >>> from pyechelon import solve
        >>> sol = solve([[1, 1, 1], [2, 1, 1]], [3, 4])
        >>> sol.particular_solution
        array([1., 2., 0.])
        >>> sol.non_pivot_columns
        (2,)
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(A, LinearSystemDesign):
        if b is not None:
            raise ValueError("b must be None when A is a LinearSystemDesign")
        design = A
    else:
        if b is None:
            raise ValueError("b required when A is an array")
        design = LinearSystemDesign.from_arrays(A, b)

    # === Resolve tolerance ===
    abs_tol = _resolve_tolerance(tol, design)

    # === Select Backend ===
    backend_impl = _get_backend(backend, abs_tol, check_consistency)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return LinearSystemSolution(_result=result, _design=design)


# Spelled-out alias for callers that prefer it
solve_linear_system = solve


def _resolve_tolerance(
    tol: float | str | ToleranceTier | None,
    design: LinearSystemDesign,
) -> float:
    """Turn the user's tol argument into an absolute threshold."""
    if tol is None:
        return 0.0
    if isinstance(tol, ToleranceTier):
        tier = tol
    elif isinstance(tol, str):
        tier = select_tolerance(tol)
    else:
        value = float(tol)
        if not np.isfinite(value) or value < 0:
            raise ValidationError(f"tol: must be a finite non-negative number, got {tol!r}")
        return value
    return zero_tolerance(design.augmented(), tier)


def _get_backend(
    choice: BackendChoice,
    tol: float,
    check_consistency: bool,
) -> Backend[LinearSystemDesign, SolutionSetParams]:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_gauss_jordan'):
        return CPUEchelonBackend(tol=tol, check_consistency=check_consistency)
    raise ValidationError(
        f"Unknown backend: {choice!r}. Use 'cpu' or 'auto'."
    )
