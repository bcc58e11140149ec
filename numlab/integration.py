"""Recursive adaptive quadrature with open nodes, Clenshaw-Curtis and infinite limits."""

from __future__ import annotations

import math
from typing import Callable

__all__ = ["adapt", "open_quad", "integrate"]

MAX_RECURSIONS = 1_000_000

Integrand = Callable[[float], float]


def _adapt24(
    function: Integrand,
    left: float,
    right: float,
    absolute_accuracy: float,
    relative_accuracy: float,
    f2: float,
    f3: float,
    depth: int,
) -> tuple[float, float]:
    if depth >= MAX_RECURSIONS:
        raise RuntimeError("too many recursions in adaptive integration")
    width = right - left
    f1 = function(left + width / 6)
    f4 = function(left + 5 * width / 6)
    higher = (2 * f1 + f2 + f3 + 2 * f4) * width / 6
    lower = (f1 + f2 + f3 + f4) * width / 4
    tolerance = absolute_accuracy + relative_accuracy * abs(higher)
    error = abs(higher - lower)
    if error < tolerance:
        return higher, error

    middle = (left + right) / 2
    sub_accuracy = absolute_accuracy / math.sqrt(2.0)
    value_left, error_left = _adapt24(
        function, left, middle, sub_accuracy, relative_accuracy, f1, f2, depth + 1
    )
    value_right, error_right = _adapt24(
        function, middle, right, sub_accuracy, relative_accuracy, f3, f4, depth + 1
    )
    return value_left + value_right, error_left + error_right


def adapt(
    function: Integrand,
    left: float,
    right: float,
    absolute_accuracy: float,
    relative_accuracy: float,
) -> tuple[float, float]:
    """Integrate ``function`` over ``[left, right]`` with an open 4-point adaptive rule.

    Returns the integral and the accumulated error estimate. The endpoints are
    never evaluated.
    """
    width = right - left
    f2 = function(left + 2 * width / 6)
    f3 = function(left + 4 * width / 6)
    return _adapt24(function, left, right, absolute_accuracy, relative_accuracy, f2, f3, 0)


def open_quad(
    function: Integrand,
    left: float,
    right: float,
    absolute_accuracy: float,
    relative_accuracy: float,
) -> tuple[float, float]:
    """Integrate ``function`` using the Clenshaw-Curtis variable transformation.

    Suited to integrable singularities at the endpoints.
    """
    half_width = (right - left) / 2
    centre = (left + right) / 2

    def transformed(angle: float) -> float:
        return half_width * function(centre + half_width * math.cos(angle)) * math.sin(angle)

    return adapt(transformed, 0.0, math.pi, absolute_accuracy, relative_accuracy)


def integrate(
    function: Integrand,
    left: float,
    right: float,
    absolute_accuracy: float,
    relative_accuracy: float,
) -> tuple[float, float]:
    """Integrate ``function`` over ``[left, right]``; either limit may be infinite.

    Returns the integral and the accumulated error estimate.
    """
    if math.isinf(left):
        if math.isinf(right):
            def both(t: float) -> float:
                return function(t / (1 - t * t)) * (1 + t * t) / (1 - t * t) ** 2

            return adapt(both, -1.0, 1.0, absolute_accuracy, relative_accuracy)

        def lower_infinite(t: float) -> float:
            return function(right + t / (1 + t)) / (1 + t) ** 2

        return adapt(lower_infinite, -1.0, 0.0, absolute_accuracy, relative_accuracy)

    if math.isinf(right):
        def upper_infinite(t: float) -> float:
            return function(left + t / (1 - t)) / (1 - t) ** 2

        return adapt(upper_infinite, 0.0, 1.0, absolute_accuracy, relative_accuracy)

    return adapt(function, left, right, absolute_accuracy, relative_accuracy)