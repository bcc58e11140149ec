"""QR decomposition by modified Gram-Schmidt orthogonalisation and its uses."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

__all__ = ["gs_decomp", "backsub", "gs_solve", "gs_inverse", "format_matrix"]


def gs_decomp(a: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    """Decompose an n x m matrix (n >= m) into Q (n x m, orthonormal columns) and R (m x m, upper triangular).

    The input is not modified.
    """
    q = np.array(a, dtype=float, copy=True)
    if q.ndim != 2:
        raise ValueError("gs_decomp expects a two-dimensional matrix")
    cols = q.shape[1]
    r = np.zeros((cols, cols))
    for i in range(cols):
        norm = np.linalg.norm(q[:, i])
        r[i, i] = norm
        q[:, i] = q[:, i] / norm
        # Project the current direction out of every column to the right.
        projections = q[:, i] @ q[:, i + 1:]
        r[i, i + 1:] = projections
        q[:, i + 1:] -= np.outer(q[:, i], projections)
    return q, r


def backsub(r: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Solve the upper triangular system ``r @ x = b`` by back substitution."""
    r = np.asarray(r, dtype=float)
    x = np.array(b, dtype=float, copy=True)
    if x.ndim != 1:
        raise ValueError("backsub expects a one-dimensional right-hand side")
    size = x.shape[0]
    if r.ndim != 2 or r.shape[0] < size or r.shape[1] < size:
        raise ValueError("matrix is too small for the right-hand side")
    for i in reversed(range(size)):
        x[i] = (x[i] - r[i, i + 1:size] @ x[i + 1:]) / r[i, i]
    return x


def gs_solve(q: ArrayLike, r: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Solve ``q @ r @ x = b`` by applying ``q.T`` to ``b`` and back-substituting."""
    q = np.asarray(q, dtype=float)
    b = np.asarray(b, dtype=float)
    return backsub(r, q.T @ b)


def gs_inverse(q: ArrayLike, r: ArrayLike) -> np.ndarray:
    """Return the inverse of ``q @ r``, computed as ``inv(r) @ q.T``."""
    q = np.asarray(q, dtype=float)
    r = np.asarray(r, dtype=float)
    rows, cols = r.shape
    r_inverse = np.column_stack([backsub(r, unit) for unit in np.eye(rows)[:cols]])
    return r_inverse @ q.T


def format_matrix(a: ArrayLike) -> str:
    """Render a matrix one row per line, each entry as ``%0.3g`` followed by a space."""
    matrix = np.atleast_2d(np.asarray(a, dtype=float))
    return "".join(
        "".join("%0.3g " % value for value in row) + "\n" for row in matrix
    )