"""
Linear system backends.

Available backends:
    CPUEchelonBackend: CPU reference implementation (Gauss-Jordan, no row exchanges)
"""

from pyechelon.system.backends.cpu import CPUEchelonBackend

__all__ = [
    "CPUEchelonBackend",
]
