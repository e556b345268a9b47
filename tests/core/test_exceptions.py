"""
Tests for PyEchelon exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyEchelonError)
    - Diagnostic attributes on SingularPivotError, InconsistentSystemError,
      SingularMatrixError, NotPositiveDefiniteError
    - Default attribute values (None / empty for optional attributes)
"""

import pytest

from pyechelon.core.exceptions import (
    DimensionError,
    InconsistentSystemError,
    NotPositiveDefiniteError,
    NumericalError,
    PyEchelonError,
    SingularMatrixError,
    SingularPivotError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyEchelonError."""

    def test_validation_error_is_pyechelon_error(self):
        with pytest.raises(PyEchelonError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_singular_pivot_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularPivotError("zero pivot")

    def test_inconsistent_system_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise InconsistentSystemError("no solution")

    def test_singular_matrix_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_not_positive_definite_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise NotPositiveDefiniteError("not PD")

    def test_numerical_errors_are_not_validation_errors(self):
        err = InconsistentSystemError("no solution")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSingularPivotError:

    def test_all_attributes(self):
        err = SingularPivotError("pivot underflow", row=2, column=1, pivot=5e-324)
        assert str(err) == "pivot underflow"
        assert err.row == 2
        assert err.column == 1
        assert err.pivot == 5e-324

    def test_defaults_are_none(self):
        err = SingularPivotError("pivot underflow")
        assert err.row is None
        assert err.column is None
        assert err.pivot is None


class TestInconsistentSystemError:

    def test_rows_attribute(self):
        err = InconsistentSystemError("no solution", rows=[1, 3])
        assert err.rows == (1, 3)

    def test_rows_default_empty(self):
        assert InconsistentSystemError("no solution").rows == ()

    def test_catchable_with_attributes(self):
        with pytest.raises(InconsistentSystemError) as exc_info:
            raise InconsistentSystemError("no solution", rows=(1,))
        assert exc_info.value.rows == (1,)


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "dependent columns", matrix_name="A", rank=2, expected_rank=3
        )
        assert err.matrix_name == "A"
        assert err.rank == 2
        assert err.expected_rank == 3

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.rank is None
        assert err.expected_rank is None


class TestNotPositiveDefiniteError:

    def test_all_attributes(self):
        err = NotPositiveDefiniteError("not PD", matrix_name="A", minor_index=2)
        assert str(err) == "not PD"
        assert err.matrix_name == "A"
        assert err.minor_index == 2

    def test_defaults_are_none(self):
        err = NotPositiveDefiniteError("not PD")
        assert err.matrix_name is None
        assert err.minor_index is None
