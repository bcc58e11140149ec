"""Quasi-Newton minimisation with a rank-1 update and the downhill simplex method."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike

__all__ = [
    "QuasiNewtonResult",
    "numerical_gradient",
    "quasi_newton_method",
    "simplex_reflection",
    "simplex_expansion",
    "simplex_contraction",
    "simplex_reduction",
    "simplex_distance",
    "simplex_size",
    "simplex_update",
    "simplex_initiate",
    "downhill_simplex",
]

STEP_EPSILON = 2.22045e-10
MAX_STEPS = 10_000
ARMIJO_FACTOR = 0.01
UPDATE_THRESHOLD = 1e-12

Function = Callable[[np.ndarray], float]


@dataclass
class QuasiNewtonResult:
    """Outcome of :func:`quasi_newton_method`."""

    point: np.ndarray
    value: float
    steps: int
    scales: int
    resets: int
    reason: str


def numerical_gradient(function: Function, point: ArrayLike) -> np.ndarray:
    """Forward-difference gradient of ``function`` at ``point``.

    Each component is stepped by a relative amount (absolute near zero).
    """
    x = np.array(point, dtype=float, copy=True)
    value = function(x.copy())
    gradient = np.empty_like(x)
    for i, component in enumerate(x):
        step = STEP_EPSILON if abs(component) < STEP_EPSILON else abs(component) * STEP_EPSILON
        shifted = x.copy()
        shifted[i] = component + step
        gradient[i] = (function(shifted) - value) / step
    return gradient


def quasi_newton_method(
    function: Function, start: ArrayLike, tolerance: float
) -> QuasiNewtonResult:
    """Minimise ``function`` from ``start``.

    Uses a numerical gradient, back-tracking line search and a symmetric
    rank-1 update of the inverse Hessian. Stops when the gradient norm falls
    below ``tolerance``, the step becomes negligible, or after 10000 steps.
    """
    x = np.array(start, dtype=float, copy=True)
    dimension = x.shape[0]
    inverse_hessian = np.eye(dimension)
    gradient = numerical_gradient(function, x)
    value = function(x.copy())
    steps = scales = resets = 0
    reason = "maximum number of steps reached"

    while steps < MAX_STEPS:
        steps += 1
        newton_step = -inverse_hessian @ gradient
        if np.linalg.norm(newton_step) < STEP_EPSILON * np.linalg.norm(x):
            reason = "|dx| < step size * |x|"
            break
        if np.linalg.norm(gradient) < tolerance:
            reason = "|grad| < accuracy"
            break

        scale = 1.0
        while True:
            next_x = x + newton_step
            next_value = function(next_x.copy())
            if next_value < value + ARMIJO_FACTOR * float(newton_step @ gradient):
                scales += 1
                break
            if scale < STEP_EPSILON:
                resets += 1
                inverse_hessian = np.eye(dimension)
                break
            scale *= 0.5
            newton_step = newton_step * 0.5

        next_gradient = numerical_gradient(function, next_x)
        y = next_gradient - gradient
        u = newton_step - inverse_hessian @ y
        uy = float(u @ y)
        if abs(uy) > UPDATE_THRESHOLD:
            # Only the upper triangle of u u^T enters the update.
            inverse_hessian = inverse_hessian + np.triu(np.outer(u, u)) / uy

        x = next_x
        gradient = next_gradient
        value = next_value

    return QuasiNewtonResult(
        point=x, value=float(value), steps=steps, scales=scales, resets=resets, reason=reason
    )


def simplex_reflection(highest: ArrayLike, centroid: ArrayLike) -> np.ndarray:
    """Reflect the highest point through the centroid."""
    return 2 * np.asarray(centroid, dtype=float) - np.asarray(highest, dtype=float)


def simplex_expansion(highest: ArrayLike, centroid: ArrayLike) -> np.ndarray:
    """Reflect the highest point through the centroid at double distance."""
    return 3 * np.asarray(centroid, dtype=float) - 2 * np.asarray(highest, dtype=float)


def simplex_contraction(highest: ArrayLike, centroid: ArrayLike) -> np.ndarray:
    """Midpoint of the highest point and the centroid."""
    return 0.5 * np.asarray(centroid, dtype=float) + 0.5 * np.asarray(highest, dtype=float)


def _as_simplex(simplex: ArrayLike) -> np.ndarray:
    points = np.array(simplex, dtype=float, copy=True)
    if points.ndim != 2 or points.shape[0] != points.shape[1] + 1:
        raise ValueError("a simplex in d dimensions needs d + 1 points of d coordinates")
    return points


def simplex_reduction(simplex: ArrayLike, low_index: int) -> np.ndarray:
    """Move every vertex halfway towards the vertex ``low_index``."""
    points = _as_simplex(simplex)
    low = points[low_index].copy()
    reduced = 0.5 * (points + low)
    reduced[low_index] = low
    return reduced


def simplex_distance(first: ArrayLike, second: ArrayLike) -> float:
    """Euclidean distance between two points."""
    return float(np.linalg.norm(np.asarray(second, dtype=float) - np.asarray(first, dtype=float)))


def simplex_size(simplex: ArrayLike) -> float:
    """Largest distance from the first vertex to any other vertex."""
    points = _as_simplex(simplex)
    return max((simplex_distance(points[0], p) for p in points[1:]), default=0.0)


def simplex_update(
    simplex: ArrayLike, values: ArrayLike
) -> tuple[int, int, np.ndarray]:
    """Return the indices of the highest and lowest vertex and the centroid of the others."""
    points = _as_simplex(simplex)
    values = np.asarray(values, dtype=float)
    high = low = 0
    for i, value in enumerate(values[1:], start=1):
        if value > values[high]:
            high = i
        if value < values[low]:
            low = i
    dimension = points.shape[1]
    centroid = (points.sum(axis=0) - points[high]) / dimension
    return high, low, centroid


def simplex_initiate(
    function: Function, simplex: ArrayLike
) -> tuple[np.ndarray, int, int, np.ndarray]:
    """Evaluate ``function`` at every vertex; return values, high, low and centroid."""
    points = _as_simplex(simplex)
    values = np.array([function(p.copy()) for p in points], dtype=float)
    high, low, centroid = simplex_update(points, values)
    return values, high, low, centroid


def downhill_simplex(
    function: Function, simplex: ArrayLike, size_goal: float
) -> tuple[np.ndarray, int]:
    """Minimise ``function`` by the downhill simplex method.

    Iterates until the simplex size drops to ``size_goal``. Returns the final
    simplex and the number of steps taken.
    """
    points = _as_simplex(simplex)
    values, high, low, centroid = simplex_initiate(function, points)
    steps = 0

    while simplex_size(points) > size_goal:
        high, low, centroid = simplex_update(points, values)

        reflected = simplex_reflection(points[high], centroid)
        reflected_value = function(reflected.copy())
        if reflected_value < values[low]:
            expanded = simplex_expansion(points[high], centroid)
            expanded_value = function(expanded.copy())
            if expanded_value < reflected_value:
                points[high], values[high] = expanded, expanded_value
            else:
                points[high], values[high] = reflected, reflected_value
        elif reflected_value < values[high]:
            points[high], values[high] = reflected, reflected_value
        else:
            contracted = simplex_contraction(points[high], centroid)
            contracted_value = function(contracted.copy())
            if contracted_value < values[high]:
                points[high], values[high] = contracted, contracted_value
            else:
                points = simplex_reduction(points, low)
                values, high, low, centroid = simplex_initiate(function, points)
        steps += 1

    return points, steps