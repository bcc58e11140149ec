"""Newton's method for systems of equations with a numerical Jacobian."""

from __future__ import annotations

import math
import sys
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike

from numlab.gramschmidt import gs_decomp, gs_solve

__all__ = ["newton_method"]

MAX_ITERATIONS = 100_000
STEP = math.sqrt(sys.float_info.epsilon)
MIN_SCALE = 0.02

VectorFunction = Callable[[np.ndarray], ArrayLike]


def _evaluate(function: VectorFunction, x: np.ndarray) -> np.ndarray:
    return np.asarray(function(x.copy()), dtype=float)


def _jacobian(function: VectorFunction, x: np.ndarray, fx: np.ndarray) -> np.ndarray:
    columns = []
    for i in range(x.shape[0]):
        shifted = x.copy()
        shifted[i] += STEP
        columns.append((_evaluate(function, shifted) - fx) / STEP)
    return np.column_stack(columns)


def newton_method(
    function: VectorFunction, start: ArrayLike, tolerance: float
) -> np.ndarray:
    """Find a root of ``function`` starting from ``start``.

    Uses a forward-difference Jacobian, a Gram-Schmidt QR solve and a
    back-tracking line search. Stops when the norm of the function value is
    at most ``tolerance`` or the Newton step becomes negligible.

    Raises RuntimeError after too many iterations.
    """
    x = np.array(start, dtype=float, copy=True)
    fx = _evaluate(function, x)
    iterations = 0

    while np.linalg.norm(fx) > tolerance:
        iterations += 1
        if iterations >= MAX_ITERATIONS:
            raise RuntimeError("newton_method did not converge")

        q, r = gs_decomp(_jacobian(function, x, fx))
        solution = gs_solve(q, r, -fx)

        current_norm = np.linalg.norm(fx)
        scale = 2.0
        while True:
            scale /= 2
            next_x = x + scale * solution
            next_fx = _evaluate(function, next_x)
            if not (
                np.linalg.norm(next_fx) >= (1 - scale / 2) * current_norm
                and scale >= MIN_SCALE
            ):
                break

        x, fx = next_x, next_fx
        if np.linalg.norm(solution) < STEP:
            break

    return x