"""Random numbers, symmetric test matrices and plain-text formatting of arrays."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

__all__ = ["random_number", "format_vector", "format_matrix", "set_data_symmetric"]

DISPLAY_THRESHOLD = 1e-10


def _rng(rng: np.random.Generator | None) -> np.random.Generator:
    return np.random.default_rng() if rng is None else rng


def random_number(rng: np.random.Generator | None = None) -> float:
    """Return a pseudo-random number in ``[0, 1)``."""
    return float(_rng(rng).random())


def format_vector(label: str, vector: ArrayLike) -> str:
    """Render a label line followed by the entries as ``%10g`` each."""
    entries = "".join("%10g " % value for value in np.asarray(vector, dtype=float).ravel())
    return f"{label}\n{entries}\n"


def format_matrix(rows: int, matrix: ArrayLike, label: str) -> str:
    """Render the first ``rows`` rows of a matrix, tab separated.

    Entries not above 1e-10 are shown as 0.
    """
    data = np.atleast_2d(np.asarray(matrix, dtype=float))
    lines = [f"\n{label}\n"]
    for row in data[:rows]:
        lines.append(
            "".join(
                "%10g\t" % (value if value > DISPLAY_THRESHOLD else 0.0) for value in row
            )
            + "\n"
        )
    return "".join(lines)


def set_data_symmetric(size: int, rng: np.random.Generator | None = None) -> np.ndarray:
    """Return a ``size`` x ``size`` symmetric matrix of random numbers in ``[0, 1)``."""
    if size < 0:
        raise ValueError("size must not be negative")
    generator = _rng(rng)
    matrix = np.empty((size, size))
    for row in range(size):
        matrix[row, row] = random_number(generator)
        for col in range(row + 1, size):
            value = random_number(generator)
            matrix[row, col] = value
            matrix[col, row] = value
    return matrix