"""
Augmented matrix construction.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.validation import (
    check_array,
    check_1d,
    check_2d,
    check_consistent_length,
)


def augment(A: ArrayLike, b: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Build the augmented matrix [A | b].

    Row i of the result is A[i] followed by b[i]. Neither input is
    modified; the result is a new array.

    Args:
        A: Coefficient matrix (m x n)
        b: Right-hand side, length m. An (m, 1) column is accepted.

    Returns:
        Augmented matrix (m x n+1)

    Raises:
        ValidationError: If inputs are not real numeric arrays
        DimensionError: If A is not 2D, b is not 1D, or row counts differ
    """
    A_arr = check_array(A, 'A')
    b_arr = check_array(b, 'b')

    if b_arr.ndim == 2 and b_arr.shape[1] == 1:
        b_arr = b_arr.ravel()

    check_2d(A_arr, 'A')
    check_1d(b_arr, 'b')
    check_consistent_length(A_arr, b_arr, names=('A', 'b'))

    return np.column_stack([A_arr, b_arr])
