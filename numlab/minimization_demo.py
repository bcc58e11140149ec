"""Minimisation exercises: test functions and a Breit-Wigner fit to Higgs data."""

from __future__ import annotations

import argparse
import sys

import numpy as np
from numpy.typing import ArrayLike

from numlab.datafile import read_table
from numlab.minimization import QuasiNewtonResult, quasi_newton_method

__all__ = [
    "simplex_test_function",
    "rosenbrock_valley",
    "himmelblau",
    "breit_wigner",
    "deviation_function",
    "main",
]

TOLERANCE = 1e-5
NUMBER_OF_DATA_POINTS = 30
MEASURED_MASS = 125.3


def simplex_test_function(values: ArrayLike) -> float:
    """``(x-6)^2 + (y-13)^2 + 1`` where both x and y are taken from the first coordinate."""
    x = float(values[0])
    y = float(values[0])
    return (x - 6) ** 2 + (y - 13) ** 2 + 1


def rosenbrock_valley(values: ArrayLike) -> float:
    """Rosenbrock's valley function, minimal at (1, 1)."""
    x, y = float(values[0]), float(values[1])
    return (1 - x) ** 2 + 100 * (y - x * x) ** 2


def himmelblau(values: ArrayLike) -> float:
    """Himmelblau's function, with four minima of value zero."""
    x, y = float(values[0]), float(values[1])
    return (x * x + y - 11) ** 2 + (x + y * y - 7) ** 2


def breit_wigner(mass: float, width: float, scale: float, energy: float) -> float:
    """Breit-Wigner resonance cross section at ``energy``."""
    return scale / ((energy - mass) ** 2 + width * width / 4)


def deviation_function(
    values: ArrayLike,
    energies: ArrayLike,
    cross_sections: ArrayLike,
    errors: ArrayLike,
) -> float:
    """Chi-square of a Breit-Wigner with parameters ``(mass, width, scale)`` against data."""
    mass, width, scale = (float(v) for v in values[:3])
    return float(
        sum(
            (breit_wigner(mass, width, scale, e) - s) ** 2 / d**2
            for e, s, d in zip(energies, cross_sections, errors)
        )
    )


def _report(result: QuasiNewtonResult) -> None:
    print(f"Quasi_newton_method: {result.reason}", file=sys.stderr)
    print(
        "Quasi_newton_method: \n amount of steps = %i \n amount of scales = %i, \n"
        " amount of matrix resets = %i \n  f(x) = %.1e\n"
        % (result.steps, result.scales, result.resets, result.value),
        file=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Minimise the test functions and fit a Breit-Wigner curve to Higgs data."""
    parser = argparse.ArgumentParser(description="Quasi-Newton minimisation exercises.")
    parser.add_argument("--data", default="higgsData.txt", help="energy, cross section, error table")
    parser.add_argument("--output", default="higgsFit.txt", help="file for the fitted curve")
    args = parser.parse_args(argv)

    print(
        "A: quasi-Newton minimization with numerical gradient, back-tracking "
        "linesearch, rank-1 update\n"
    )

    print("Testing minimization routine on Rosenbrock's valley function")
    start = (0.0, 0.0)
    print("Initial value (x,y): (%g,%g)" % start)
    result = quasi_newton_method(rosenbrock_valley, start, TOLERANCE)
    _report(result)
    print("Found minimum (x,y): (%g,%g)" % tuple(result.point))
    print("Actual minimum is parabola including (1,1)\n")

    print("Testing minimization routine on Himmelblau's function")
    minimum_x, minimum_y = 3.0, 2.0
    start = (minimum_x - 0.2, minimum_y - 0.2)
    print("Initial value (x,y): (%g,%g)" % start)
    result = quasi_newton_method(himmelblau, start, TOLERANCE)
    _report(result)
    print("Found minimum (x,y): (%g,%g)" % tuple(result.point))
    print(
        "Actual minima are four points (x,y): (%g, %g), (-3.78, -3.28), "
        "(-2.80, 3.13), (3.58, -1.84)\n" % (minimum_x, minimum_y)
    )

    print("B: Higgs discovery\n")
    energies, cross_sections, errors = read_table(args.data, 3, NUMBER_OF_DATA_POINTS)
    print("energy E[GeV], cross section σ(E), error δσ ")
    for row in zip(energies, cross_sections, errors):
        print("%g \t %g \t %g" % row)

    initial = (MEASURED_MASS + 1.2, 2.8, 8.0)
    result = quasi_newton_method(
        lambda p: deviation_function(p, energies, cross_sections, errors),
        initial,
        TOLERANCE,
    )
    _report(result)
    mass, width, scale = (float(v) for v in result.point)
    print("Initial value (m, Γ, A): (%g, %g, %g) " % initial)
    print("Found Minima (m, Γ, A): (%g, %g, %g) \n" % (mass, width, scale))

    with open(args.output, "w", encoding="utf-8") as out:
        for energy, cross, error in zip(energies, cross_sections, errors):
            fitted = breit_wigner(mass, width, scale, energy)
            out.write("%g \t %g \t %g \t %g \n" % (energy, cross, error, fitted))

    print("Fit can be seen in file higgsFit.png\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())