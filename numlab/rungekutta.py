"""Embedded midpoint/Euler Runge-Kutta stepper with an adaptive step-size driver."""

from __future__ import annotations

import math
from typing import Callable, TextIO

import numpy as np
from numpy.typing import ArrayLike

__all__ = ["rk_step12", "rk_driver"]

RightHandSide = Callable[[float, np.ndarray], ArrayLike]


def rk_step12(
    function: RightHandSide, t: float, y: ArrayLike, step: float
) -> tuple[np.ndarray, np.ndarray]:
    """Advance ``y' = function(t, y)`` by one midpoint step of size ``step``.

    Returns the new value and an error estimate from the difference between
    the Euler and midpoint slopes.
    """
    y = np.asarray(y, dtype=float)
    k0 = np.asarray(function(t, y.copy()), dtype=float)
    k12 = np.asarray(function(t + 0.5 * step, y + 0.5 * k0 * step), dtype=float)
    y_next = y + k12 * step
    error = (k0 - k12) * step / 2
    return y_next, error


def _write_row(output: TextIO, position: float, values: np.ndarray) -> None:
    fields = ["%.5g \t" % position]
    fields.extend("%.5g \t" % value for value in values)
    fields.append("%g\n" % (position * math.exp(-position)))
    output.write("".join(fields))


def rk_driver(
    function: RightHandSide,
    left: float,
    y_left: ArrayLike,
    right: float,
    step: float,
    absolute_accuracy: float,
    relative_accuracy: float,
    output: TextIO | None = None,
) -> np.ndarray:
    """Integrate ``y' = function(t, y)`` from ``left`` to ``right`` with adaptive steps.

    Every step first tries ``step`` (clipped to the interval) and shrinks it
    until the error estimate is within the tolerance. If ``output`` is given,
    a line with the position, the solution components and ``t*exp(-t)`` is
    written before each step. Returns the solution at ``right``.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    current = np.array(y_left, dtype=float, copy=True)
    result = current.copy()
    span = right - left
    position = left

    while position < right:
        if output is not None:
            _write_row(output, position, current)

        trial = step
        if position + trial > right:
            trial = right - position
        while True:
            y_next, y_error = rk_step12(function, position, current, trial)
            error = float(np.linalg.norm(y_error))
            tolerance = (
                float(np.linalg.norm(y_next)) * relative_accuracy + absolute_accuracy
            ) * math.sqrt(trial / span)
            accepted = trial
            if error <= tolerance:
                break
            trial *= (tolerance / error) ** 0.25 * 0.95

        current = y_next
        result = y_next
        position += accepted

    return result.copy()