"""
Tolerance tiers for elimination and verification.

Defines how "zero" is decided during pivot scans and how closely results
must satisfy A @ x = b when checked:
- EXACT: the literal first-nonzero rule, no snapping
- CPU_FP64: double precision with round-off residue treated as zero
- VERIFY: comparison tolerance for residual checks

Used by the solver, the test suite and the decomposition kernels.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance settings for zero detection and numerical comparison."""
    zero_tol: float
    rtol: float
    atol: float
    name: str
    description: str


# Default for solve(): any stored nonzero is a pivot candidate
EXACT = ToleranceTier(
    zero_tol=0.0,
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='No snapping, every stored nonzero counts',
)

# Opt-in for solve(): relative to the largest entry of [A | b]
CPU_FP64 = ToleranceTier(
    zero_tol=1e-12,
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, round-off residue treated as zero',
)

# Checking A @ x against b
VERIFY = ToleranceTier(
    zero_tol=1e-9,
    rtol=1e-9,
    atol=1e-9,
    name='verify',
    description='Residual checks for solutions and factorizations',
)

TIERS = {tier.name: tier for tier in (EXACT, CPU_FP64, VERIFY)}


def select_tolerance(name: str = 'cpu_fp64') -> ToleranceTier:
    """Look up a tolerance tier by name."""
    try:
        return TIERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown tolerance tier: {name!r}. Available: {sorted(TIERS)}"
        ) from None


def zero_tolerance(
    matrix: NDArray[np.floating[Any]],
    tier: ToleranceTier = CPU_FP64,
) -> float:
    """
    Absolute zero threshold for a matrix under a tier.

    The tier's zero_tol is scaled by the largest absolute entry, so that
    the same tier works for systems of any magnitude. An all-zero or
    empty matrix gets a threshold of 0.0.
    """
    if matrix.size == 0:
        return 0.0
    scale = float(np.max(np.abs(matrix)))
    return tier.zero_tol * scale
