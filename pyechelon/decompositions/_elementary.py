"""
Elementary row-operation matrices.

Left-multiplying a matrix by one of these applies the row operation:

    scale_row_matrix(n, i, c) @ A         row i scaled by c
    add_row_multiple_matrix(n, t, s, c) @ A   row t += c * row s
    swap_rows_matrix(n, i, j) @ A         rows i and j exchanged
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyechelon.core.exceptions import ValidationError


def scale_row_matrix(size: int, row: int, scalar: float) -> NDArray[np.floating[Any]]:
    """Identity with entry (row, row) replaced by scalar (scalar != 0)."""
    _check_index(size, row, 'row')
    if scalar == 0 or not np.isfinite(scalar):
        raise ValidationError(
            f"scalar: must be finite and nonzero for an invertible row scaling, got {scalar}"
        )
    E = np.eye(size)
    E[row, row] = scalar
    return E


def add_row_multiple_matrix(
    size: int,
    target: int,
    source: int,
    multiplier: float,
) -> NDArray[np.floating[Any]]:
    """Identity with entry (target, source) set to multiplier."""
    _check_index(size, target, 'target')
    _check_index(size, source, 'source')
    if target == source:
        raise ValidationError(
            f"target and source must differ, got {target}; use scale_row_matrix instead"
        )
    E = np.eye(size)
    E[target, source] = multiplier
    return E


def swap_rows_matrix(size: int, row1: int, row2: int) -> NDArray[np.floating[Any]]:
    """Identity with rows row1 and row2 exchanged."""
    _check_index(size, row1, 'row1')
    _check_index(size, row2, 'row2')
    E = np.eye(size)
    E[[row1, row2]] = E[[row2, row1]]
    return E


def _check_index(size: int, index: int, name: str) -> None:
    if size < 1:
        raise ValidationError(f"size: must be at least 1, got {size}")
    if not 0 <= index < size:
        raise ValidationError(f"{name}: index {index} out of range for size {size}")
