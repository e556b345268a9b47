"""
Row reduction of augmented matrices.

Public API:
    augment(A, b) -> [A | b]
    to_row_echelon(M) -> REF of M
    to_reduced_row_echelon(REF) -> RREF
    find_pivot(row) -> first nonzero column or None
    format_matrix(M) / format_vector(v) -> plain-text rendering

Every function returns a new array and leaves its arguments untouched.

Example:
    >>> from pyechelon.echelon import augment, to_row_echelon, to_reduced_row_echelon
    >>> aug = augment([[1, 1, 1], [2, 1, 1]], [3, 4])
    >>> rref = to_reduced_row_echelon(to_row_echelon(aug))
"""

from pyechelon.echelon._augment import augment
from pyechelon.echelon._eliminate import (
    find_pivot,
    to_row_echelon,
    to_reduced_row_echelon,
)
from pyechelon.echelon._format import format_matrix, format_vector

__all__ = [
    "augment",
    "find_pivot",
    "to_row_echelon",
    "to_reduced_row_echelon",
    "format_matrix",
    "format_vector",
]
