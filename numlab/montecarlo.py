"""Plain, quasi-random and stratified Monte Carlo integration."""

from __future__ import annotations

import math
from typing import Callable, Iterator

import numpy as np
from numpy.typing import ArrayLike

__all__ = [
    "Lattice",
    "random_point",
    "van_der_corput",
    "halton_first",
    "halton_second",
    "halton_point_first",
    "halton_point_second",
    "plain_monte_carlo",
    "quasi_monte_carlo",
    "stratified_monte_carlo",
]

FIRST_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43)
SECOND_BASES = (3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53)

Integrand = Callable[[np.ndarray], float]


def _bounds(lower: ArrayLike, upper: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    low = np.atleast_1d(np.asarray(lower, dtype=float))
    high = np.atleast_1d(np.asarray(upper, dtype=float))
    if low.shape != high.shape or low.ndim != 1:
        raise ValueError("lower and upper bounds must be vectors of equal length")
    return low, high


def _rng(rng: np.random.Generator | None) -> np.random.Generator:
    return np.random.default_rng() if rng is None else rng


def random_point(
    lower: ArrayLike, upper: ArrayLike, rng: np.random.Generator | None = None
) -> np.ndarray:
    """Return a uniformly distributed point in the box ``[lower, upper]``."""
    low, high = _bounds(lower, upper)
    return low + _rng(rng).random(low.shape[0]) * (high - low)


def van_der_corput(i: int, base: int) -> float:
    """The ``i``-th element of the van der Corput sequence in ``base``."""
    if base < 2:
        raise ValueError("base must be at least 2")
    value = 0.0
    factor = 1.0 / base
    while i > 0:
        i, digit = divmod(i, base)
        value += digit * factor
        factor /= base
    return value


def _halton(i: int, dimension: int, bases: tuple[int, ...]) -> np.ndarray:
    if dimension > len(bases):
        raise ValueError(f"dimension must not exceed {len(bases)}")
    return np.array([van_der_corput(i + 1, base) for base in bases[:dimension]])


def halton_first(i: int, dimension: int) -> np.ndarray:
    """Point ``i`` of the Halton sequence on bases 2, 3, 5, ... (at most 14 dimensions)."""
    return _halton(i, dimension, FIRST_BASES)


def halton_second(i: int, dimension: int) -> np.ndarray:
    """Point ``i`` of the Halton sequence on bases 3, 5, 7, ... (at most 15 dimensions)."""
    return _halton(i, dimension, SECOND_BASES)


def halton_point_first(i: int, lower: ArrayLike, upper: ArrayLike) -> np.ndarray:
    """Point ``i`` of the first Halton sequence scaled into ``[lower, upper]``."""
    low, high = _bounds(lower, upper)
    return low + (high - low) * halton_first(i, low.shape[0])


def halton_point_second(i: int, lower: ArrayLike, upper: ArrayLike) -> np.ndarray:
    """Point ``i`` of the second Halton sequence scaled into ``[lower, upper]``."""
    low, high = _bounds(lower, upper)
    return low + (high - low) * halton_second(i, low.shape[0])


def _volume(low: np.ndarray, high: np.ndarray) -> float:
    return float(np.prod(high - low))


def plain_monte_carlo(
    function: Integrand,
    lower: ArrayLike,
    upper: ArrayLike,
    points: int,
    rng: np.random.Generator | None = None,
) -> tuple[float, float]:
    """Estimate the integral of ``function`` over a box with pseudo-random points.

    Returns the estimate and its statistical error.
    """
    if points < 1:
        raise ValueError("points must be at least 1")
    low, high = _bounds(lower, upper)
    volume = _volume(low, high)
    generator = _rng(rng)
    total = 0.0
    total_squared = 0.0
    for _ in range(points):
        value = function(random_point(low, high, generator))
        total += value
        total_squared += value * value
    average = total / points
    variance = max(total_squared / points - average * average, 0.0)
    return average * volume, math.sqrt(variance / points) * volume


def quasi_monte_carlo(
    function: Integrand, lower: ArrayLike, upper: ArrayLike, points: int
) -> tuple[float, float]:
    """Estimate the integral of ``function`` with two interleaved Halton sequences.

    Half of the points come from each sequence; pairs where either value is
    infinite are skipped. The error is estimated from the difference of the
    two partial sums.
    """
    if points < 1:
        raise ValueError("points must be at least 1")
    low, high = _bounds(lower, upper)
    volume = _volume(low, high)
    sum_first = 0.0
    sum_second = 0.0
    for i in range(points // 2):
        first = function(halton_point_first(i, low, high))
        second = function(halton_point_second(i, low, high))
        if not math.isinf(first) and not math.isinf(second):
            sum_first += first
            sum_second += second
    average = (sum_first + sum_second) / points
    return volume * average, volume * abs(sum_first - sum_second) / points


def stratified_monte_carlo(
    function: Integrand,
    lower: ArrayLike,
    upper: ArrayLike,
    absolute_accuracy: float,
    relative_accuracy: float,
    number_of_recalls: int = 0,
    mean_recalls: float = 0.0,
    rng: np.random.Generator | None = None,
) -> float:
    """Estimate the integral of ``function`` by recursive stratified sampling.

    The box is split in half along the axis where the two halves' averages
    differ most, until the estimate agrees with the inherited mean within
    the requested accuracy.
    """
    low, high = _bounds(lower, upper)
    generator = _rng(rng)
    dimension = low.shape[0]
    points = 16 * dimension
    volume = _volume(low, high)
    middle = (low + high) / 2

    total = 0.0
    sum_left = np.zeros(dimension)
    sum_right = np.zeros(dimension)
    count_left = np.zeros(dimension, dtype=int)
    count_right = np.zeros(dimension, dtype=int)
    for _ in range(points):
        point = random_point(low, high, generator)
        value = function(point)
        total += value
        right = point > middle
        sum_right[right] += value
        count_right[right] += 1
        sum_left[~right] += value
        count_left[~right] += 1

    average = total / points
    average_left = np.divide(sum_left, count_left, out=np.zeros(dimension), where=count_left > 0)
    average_right = np.divide(sum_right, count_right, out=np.zeros(dimension), where=count_right > 0)

    split = 0
    max_variance = 0.0
    for axis, variance in enumerate(np.abs(average_right - average_left)):
        if variance > max_variance:
            max_variance = variance
            split = axis

    result = (
        (average * points + mean_recalls * number_of_recalls)
        / (points + number_of_recalls)
        * volume
    )
    error = volume * abs(mean_recalls - average)
    tolerance = absolute_accuracy + relative_accuracy * abs(result)
    if error < tolerance:
        return result

    upper_left = high.copy()
    upper_left[split] = middle[split]
    lower_right = low.copy()
    lower_right[split] = middle[split]
    sub_accuracy = absolute_accuracy / math.sqrt(2)

    result_left = stratified_monte_carlo(
        function, low, upper_left, sub_accuracy, relative_accuracy,
        int(count_left[split]), float(average_left[split]), generator,
    )
    result_right = stratified_monte_carlo(
        function, lower_right, high, sub_accuracy, relative_accuracy,
        int(count_right[split]), float(average_right[split]), generator,
    )
    return result_left + result_right


class Lattice:
    """Additive-recurrence lattice generator of points in the unit cube."""

    def __init__(self, dimension: int) -> None:
        if dimension < 1:
            raise ValueError("dimension must be at least 1")
        self.dimension = dimension
        self._count = 0
        alpha = math.sqrt(math.pi + 1)
        self._alpha = np.full(dimension, alpha - math.floor(alpha))

    def next(self) -> np.ndarray:
        """Return the next lattice point."""
        self._count += 1
        values = self._count * self._alpha
        return values - np.floor(values)

    def __iter__(self) -> Iterator[np.ndarray]:
        return self

    def __next__(self) -> np.ndarray:
        return self.next()