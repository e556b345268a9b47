"""
Plain-text rendering of matrices and vectors.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike


def format_vector(vector: ArrayLike, precision: int = 2) -> str:
    """Render a vector as ``[v1, v2, ...]`` with fixed precision."""
    values = np.asarray(vector, dtype=np.float64).ravel()
    return "[" + ", ".join(_fmt(v, precision) for v in values) + "]"


def format_matrix(matrix: ArrayLike, precision: int = 2, augmented: bool = False) -> str:
    """
    Render a matrix one row per line, entries separated by tabs.

    Args:
        matrix: 2D array-like
        precision: Digits after the decimal point
        augmented: If True, insert a ``|`` before the last column

    Returns:
        Multi-line string (no trailing newline)
    """
    M = np.atleast_2d(np.asarray(matrix, dtype=np.float64))
    lines = []
    for row in M:
        cells = [_fmt(v, precision) for v in row]
        if augmented and len(cells) > 1:
            cells.insert(len(cells) - 1, "|")
        lines.append("\t".join(cells))
    return "\n".join(lines)


def _fmt(value: Any, precision: int) -> str:
    # Avoid printing "-0.00"
    text = f"{float(value):.{precision}f}"
    if text.startswith("-") and float(text) == 0.0:
        text = text[1:]
    return text
