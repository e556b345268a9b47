"""
Exception hierarchy for PyEchelon.

All exceptions inherit from PyEchelonError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyEchelonError(Exception):
    """Base exception for all PyEchelon errors."""
    pass


class ValidationError(PyEchelonError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes (e.g. A has 3 rows
    but b has 2 entries).
    """
    pass


class NumericalError(PyEchelonError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularPivotError(NumericalError):
    """
    Forward elimination met a pivot that cannot be divided by.

    The pivot scan found an entry that is nonzero as stored, but dividing
    the row by it does not produce finite values (the entry is effectively
    zero).

    Attributes:
        row: Index of the row being normalized
        column: Column index of the offending pivot
        pivot: The pivot value itself
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        column: int | None = None,
        pivot: float | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.column = column
        self.pivot = pivot


class InconsistentSystemError(NumericalError):
    """
    The linear system has no solution.

    Raised when the reduced augmented matrix contains a row of the form
    ``0 0 ... 0 | c`` with ``c != 0``.

    Attributes:
        rows: Indices of the inconsistent rows in the reduced matrix
    """

    def __init__(self, message: str, rows: tuple[int, ...] = ()):
        super().__init__(message)
        self.rows = tuple(rows)


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or has linearly dependent columns.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Numerical rank, if computed
        expected_rank: Expected rank
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised when an operation requires a positive definite matrix
    (Cholesky, unpivoted LU) but the matrix fails this requirement.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        minor_index: Size of the first leading principal minor that is
            not positive, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        minor_index: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.minor_index = minor_index
