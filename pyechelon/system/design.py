"""
Linear system design.

Design holds the validated coefficient matrix A and right-hand side b of
a system Ax = b. It is the boundary object: everything downstream trusts
its shapes and values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_1d,
    check_consistent_length,
    check_not_empty,
)
from pyechelon.echelon import augment


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Linear system Ax = b, validated and frozen.

    Immutable after construction. A and b are private float64 copies, so
    callers may keep mutating their own arrays without affecting a solve.

    Construction:
        LinearSystemDesign.from_arrays(A, b)
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _m: int
    _n: int

    @classmethod
    def from_arrays(cls, A: ArrayLike, b: ArrayLike) -> LinearSystemDesign:
        """Build Design directly from array-likes (nested lists are fine)."""
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')
        return cls.build(A_arr, b_arr)

    @classmethod
    def build(cls, A: NDArray, b: NDArray) -> LinearSystemDesign:
        """Internal builder with validation."""
        # Column vector b is accepted as (m, 1)
        if b.ndim == 2 and b.shape[1] == 1:
            b = b.ravel()

        check_2d(A, 'A')
        check_1d(b, 'b')
        check_not_empty(A, 'A')
        check_finite(A, 'A')
        check_finite(b, 'b')
        check_consistent_length(A, b, names=('A', 'b'))

        A = np.array(A, dtype=np.float64, copy=True)
        b = np.array(b, dtype=np.float64, copy=True)
        A.flags.writeable = False
        b.flags.writeable = False

        m, n = A.shape
        return cls(_A=A, _b=b, _m=m, _n=n)

    # === Properties ===

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (m x n), read-only."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (m,), read-only."""
        return self._b

    @property
    def n_equations(self) -> int:
        """Number of equations (rows of A)."""
        return self._m

    @property
    def n_unknowns(self) -> int:
        """Number of unknowns (columns of A)."""
        return self._n

    def augmented(self) -> NDArray[np.floating[Any]]:
        """Fresh augmented matrix [A | b]."""
        return augment(self._A, self._b)

    def residual(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Compute A @ x - b."""
        return self._A @ np.asarray(x, dtype=np.float64) - self._b
