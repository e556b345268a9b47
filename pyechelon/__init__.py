"""
PyEchelon: row reduction and complete solution sets for linear systems.

Solves Ax = b over dense real matrices by reducing [A | b] to row echelon
and reduced row echelon form, then describes every solution as a
particular solution plus a null-space basis.

Submodules:
    echelon: Augmentation and Gauss-Jordan elimination
    system: Column classification, solution assembly, solve()
    decompositions: QR (Gram-Schmidt), Cholesky, LU, determinant
    core: Exceptions, validation, result envelope, tolerances
"""

__version__ = "0.1.0"

from pyechelon import echelon
from pyechelon import system
from pyechelon import decompositions
from pyechelon.system import solve, solve_linear_system

__all__ = [
    "__version__",
    "echelon",
    "system",
    "decompositions",
    "solve",
    "solve_linear_system",
]
