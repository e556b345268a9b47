"""
Core infrastructure for PyEchelon.

This module provides shared abstractions and utilities used by the
domain-specific submodules (echelon, system, decompositions).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pyechelon.core.protocols import Backend
from pyechelon.core.result import Result
from pyechelon.core.exceptions import (
    PyEchelonError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularPivotError,
    InconsistentSystemError,
    SingularMatrixError,
    NotPositiveDefiniteError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyEchelonError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularPivotError",
    "InconsistentSystemError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
]
