"""
Tests for forward and backward elimination.

Covers:
    - Pivot selection (first nonzero, not largest magnitude)
    - Pivot normalization and zeros below / above pivots
    - Zero rows skipped and left in place
    - RREF idempotence
    - SingularPivotError on unusable pivots
    - Tolerance snapping of round-off residue
"""

import numpy as np
import pytest

from pyechelon.core.exceptions import SingularPivotError, ValidationError
from pyechelon.echelon import (
    augment,
    find_pivot,
    to_reduced_row_echelon,
    to_row_echelon,
)


TOL = 1e-9


def _leading_entries(M, tol=TOL):
    """(row, col, value) of each nonzero row's first nonzero entry."""
    out = []
    for i, row in enumerate(M):
        col = find_pivot(row, tol)
        if col is not None:
            out.append((i, col, row[col]))
    return out


# ═══════════════════════════════════════════════════════════════════════
# find_pivot
# ═══════════════════════════════════════════════════════════════════════


class TestFindPivot:

    def test_first_nonzero(self):
        assert find_pivot(np.array([0.0, 0.0, 3.0, 7.0])) == 2

    def test_not_largest_magnitude(self):
        assert find_pivot(np.array([0.001, 1000.0])) == 0

    def test_zero_row(self):
        assert find_pivot(np.zeros(4)) is None

    def test_tolerance(self):
        assert find_pivot(np.array([1e-15, 2.0]), tol=1e-12) == 1


# ═══════════════════════════════════════════════════════════════════════
# Forward pass
# ═══════════════════════════════════════════════════════════════════════


class TestRowEchelon:

    def test_worked_example(self):
        ref = to_row_echelon(augment([[1, 1, 1], [2, 1, 1]], [3, 4]))
        np.testing.assert_allclose(ref, [[1, 1, 1, 3], [0, 1, 1, 2]])

    def test_pivots_are_one(self, rng):
        M = rng.standard_normal((4, 6))
        ref = to_row_echelon(M)
        for _, _, value in _leading_entries(ref):
            assert value == pytest.approx(1.0, abs=TOL)

    def test_zeros_below_pivots(self, rng):
        M = rng.standard_normal((5, 5))
        ref = to_row_echelon(M)
        for i, col, _ in _leading_entries(ref):
            np.testing.assert_allclose(ref[i + 1:, col], 0.0, atol=TOL)

    def test_zero_row_skipped_in_place(self):
        M = [[0, 0, 0], [1, 2, 3]]
        ref = to_row_echelon(M)
        np.testing.assert_array_equal(ref, [[0, 0, 0], [1, 2, 3]])

    def test_no_row_exchange(self):
        # First row pivots in column 1; the second row is not moved above it
        ref = to_row_echelon([[0, 2, 4], [3, 6, 9]])
        np.testing.assert_allclose(ref, [[0, 1, 2], [1, 0, -1]])

    def test_dependent_row_becomes_zero(self):
        ref = to_row_echelon([[1, 2, 3], [2, 4, 6]])
        np.testing.assert_allclose(ref[1], [0, 0, 0])

    def test_input_not_mutated(self):
        M = np.array([[2.0, 4.0], [1.0, 3.0]])
        to_row_echelon(M)
        np.testing.assert_array_equal(M, [[2.0, 4.0], [1.0, 3.0]])

    def test_singular_pivot(self):
        with pytest.raises(SingularPivotError) as exc_info:
            to_row_echelon([[5e-324, 1.0]])
        assert exc_info.value.row == 0
        assert exc_info.value.column == 0

    def test_tolerance_snaps_residue(self):
        ref = to_row_echelon([[1e-20, 2.0, 4.0]], tol=1e-12)
        np.testing.assert_array_equal(ref, [[0.0, 1.0, 2.0]])

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValidationError, match="tol"):
            to_row_echelon(np.eye(2), tol=-1.0)


# ═══════════════════════════════════════════════════════════════════════
# Backward pass
# ═══════════════════════════════════════════════════════════════════════


class TestReducedRowEchelon:

    def test_worked_example(self):
        ref = to_row_echelon(augment([[1, 5, 1], [2, 11, 5]], [10, 11]))
        rref = to_reduced_row_echelon(ref)
        np.testing.assert_allclose(rref, [[1, 0, -14, 55], [0, 1, 3, -9]])

    def test_pivot_columns_are_unit_vectors(self, rng):
        M = rng.standard_normal((4, 6))
        rref = to_reduced_row_echelon(to_row_echelon(M))
        for i, col, _ in _leading_entries(rref):
            expected = np.zeros(M.shape[0])
            expected[i] = 1.0
            np.testing.assert_allclose(rref[:, col], expected, atol=TOL)

    def test_idempotent(self, rng):
        M = rng.standard_normal((4, 5))
        M[2] = M[0] + M[1]
        rref = to_reduced_row_echelon(to_row_echelon(M, tol=1e-12), tol=1e-12)
        again = to_reduced_row_echelon(rref, tol=1e-12)
        np.testing.assert_array_equal(again, rref)

    def test_square_nonsingular_gives_identity(self, square_system):
        A, b, x = square_system
        rref = to_reduced_row_echelon(to_row_echelon(augment(A, b)))
        np.testing.assert_allclose(rref[:, :-1], np.eye(3), atol=TOL)
        np.testing.assert_allclose(rref[:, -1], x, atol=TOL)

    def test_rejects_non_echelon_input(self):
        with pytest.raises(ValidationError, match="row echelon form"):
            to_reduced_row_echelon([[2.0, 1.0], [0.0, 3.0]])

    def test_input_not_mutated(self):
        ref = np.array([[1.0, 2.0, 3.0], [0.0, 1.0, 4.0]])
        to_reduced_row_echelon(ref)
        np.testing.assert_array_equal(ref, [[1.0, 2.0, 3.0], [0.0, 1.0, 4.0]])
