"""
Tests for input validation utilities.
"""

import numpy as np
import pytest

from pyechelon.core.exceptions import DimensionError, ValidationError
from pyechelon.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_augmented,
    check_consistent_length,
    check_finite,
    check_not_empty,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a float64 copy and rejects non-numeric data."""

    def test_nested_list_to_float_array(self):
        result = check_array([[1, 2], [3, 4]], "A")
        assert result.dtype == np.float64
        assert result.shape == (2, 2)

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0])
        result = check_array(arr, "b")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_rejects_ragged_rows(self):
        with pytest.raises(ValidationError, match="A"):
            check_array([[1, 2], [3]], "A")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "b")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3], "b")


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "b")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "b")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 1.0]), "b")


class TestShapeChecks:

    def test_check_1d_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "b")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "A")

    def test_check_not_empty(self):
        with pytest.raises(DimensionError, match="empty"):
            check_not_empty(np.zeros((0, 3)), "A")

    def test_check_square(self):
        check_square(np.eye(3), "A")
        with pytest.raises(DimensionError, match="square"):
            check_square(np.zeros((2, 3)), "A")

    def test_check_augmented_needs_two_columns(self):
        with pytest.raises(DimensionError, match="augmented"):
            check_augmented(np.zeros((2, 1)), "rref")


class TestCheckConsistentLength:

    def test_matching_lengths(self):
        check_consistent_length(np.zeros((3, 2)), np.zeros(3), names=("A", "b"))

    def test_mismatch_reports_both(self):
        with pytest.raises(DimensionError, match="A=3, b=2"):
            check_consistent_length(np.zeros((3, 2)), np.zeros(2), names=("A", "b"))

    def test_names_must_match(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("A",))
