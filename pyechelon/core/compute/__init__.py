"""
Shared compute infrastructure for PyEchelon.

Submodules:
    timing: Execution timing utilities
    tolerances: Zero-detection and comparison tolerance tiers
"""

from pyechelon.core.compute.timing import Timer, timed
from pyechelon.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    CPU_FP64,
    VERIFY,
    select_tolerance,
    zero_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "CPU_FP64",
    "VERIFY",
    "select_tolerance",
    "zero_tolerance",
]
