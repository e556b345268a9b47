"""
CPU reference backend for linear systems.

Runs the Gauss-Jordan pipeline with NumPy:
    augment -> row echelon -> reduced row echelon -> classify -> assemble
"""

from typing import Any
import warnings

from pyechelon.core.result import Result
from pyechelon.core.compute.timing import Timer
from pyechelon.echelon import to_row_echelon, to_reduced_row_echelon
from pyechelon.system._assemble import assemble
from pyechelon.system._common import SolutionSetParams
from pyechelon.system._structure import (
    classify_columns,
    check_consistent,
    find_inconsistent_rows,
)
from pyechelon.system.design import LinearSystemDesign


class CPUEchelonBackend:
    """
    CPU backend using first-nonzero Gauss-Jordan elimination.

    Implements the Backend protocol for LinearSystemDesign -> SolutionSetParams.

    Args:
        tol: Absolute threshold under which entries count as zero
        check_consistency: If True, an inconsistent system raises
            InconsistentSystemError. If False, the solution set is still
            assembled and a RuntimeWarning is emitted and recorded on the
            result. Elimination pivots the 0 = c row on the right-hand-side
            column, which clears b from the other rows, so the returned
            particular solution is not meaningful.
    """

    def __init__(self, tol: float = 0.0, check_consistency: bool = True):
        self._tol = tol
        self._check_consistency = check_consistency

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: LinearSystemDesign) -> Result[SolutionSetParams]:
        """
        Solve Ax = b by row reduction.

        Args:
            design: Validated linear system design

        Returns:
            Result containing SolutionSetParams

        Raises:
            SingularPivotError: If a pivot cannot be divided by
            InconsistentSystemError: If the system has no solution and
                check_consistency is enabled
        """
        timer = Timer()
        timer.start()
        tol = self._tol

        with timer.section('augment'):
            aug = design.augmented()

        with timer.section('row_echelon'):
            ref = to_row_echelon(aug, tol=tol)

        with timer.section('reduced_row_echelon'):
            rref = to_reduced_row_echelon(ref, tol=tol)

        with timer.section('classify'):
            inconsistent = find_inconsistent_rows(rref, tol=tol)
            if inconsistent and self._check_consistency:
                check_consistent(rref, tol=tol)
            classification = classify_columns(rref, tol=tol)

        with timer.section('assemble'):
            params = assemble(rref, classification, inconsistent_rows=inconsistent)

        timer.stop()

        result_warnings: list[str] = []
        if inconsistent:
            msg = (
                f"System is inconsistent (rows {list(inconsistent)} read 0 = c); "
                f"the particular solution is not meaningful"
            )
            warnings.warn(msg, RuntimeWarning, stacklevel=3)
            result_warnings.append(msg)

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'pivoting': 'first_nonzero',
            'rank': classification.rank,
            'n_free': classification.n_free,
            'tol': tol,
            'pivot_columns': classification.pivot_columns,
            'inconsistent_rows': inconsistent,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(result_warnings),
        )
