"""Root-finding exercises: test systems and the hydrogen ground state by shooting."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

import numpy as np
from numpy.typing import ArrayLike

from numlab.roots import newton_method
from numlab.rungekutta import rk_driver

__all__ = [
    "rosenbrock_gradient",
    "test_function",
    "schrodinger",
    "wavefunction",
    "wavefunction_bound",
    "main",
]

TOLERANCE = 1e-5
EXACT_ENERGY = -0.5
UNBOUND_START = -3.0
BOUND_START = -1.0


def rosenbrock_gradient(values: ArrayLike) -> np.ndarray:
    """Gradient of Rosenbrock's valley function."""
    x, y = float(values[0]), float(values[1])
    return np.array([
        2 * (-1) * (1 - x) + (-2 * x) * 2 * 100 * (y - x * x),
        2 * 100 * (y - x * x),
    ])


def test_function(values: ArrayLike) -> np.ndarray:
    """Gradient of ``(x-4)^2 + (y-9)^2`` scaled componentwise by x and y."""
    x, y = float(values[0]), float(values[1])
    return np.array([2 * x * (x - 4), 2 * y * (y - 9)])


def schrodinger(r: float, y: ArrayLike, energy: float) -> np.ndarray:
    """Radial hydrogen s-wave equation ``f'' = -2 (1/r + E) f`` as a first-order system."""
    return np.array([y[1], -2 * (1.0 / r + energy) * y[0]])


def _shoot(energy: float, left: float, right: float, accuracy: float, output=None) -> np.ndarray:
    start = (left - left * left, 1 - 2 * left)
    return rk_driver(
        lambda r, y: schrodinger(r, y, energy),
        left, start, right, (right - left) / 10, accuracy, accuracy, output,
    )


def wavefunction(energy: float, max_point: float) -> float:
    """Radial wavefunction at ``max_point`` for the given energy."""
    return float(_shoot(energy, 1e-3, max_point, 1e-3)[0])


def wavefunction_bound(energy: float, max_point: float) -> float:
    """Mismatch at ``max_point`` against the decaying bound-state asymptote ``r e^{-kr}``."""
    value = float(_shoot(energy, 1e-5, max_point, 1e-5)[0])
    if energy > 0:
        return math.nan
    return value - max_point * math.exp(-math.sqrt(-2 * energy) * max_point)


def _energy(function, start: float, max_point: float) -> float:
    root = newton_method(lambda e: [function(float(e[0]), max_point)], [start], TOLERANCE)
    return float(root[0])


def main(argv: list[str] | None = None) -> int:
    """Run the root-finding exercises and write the ODE and convergence tables."""
    parser = argparse.ArgumentParser(description="Newton root-finding exercises.")
    parser.add_argument("ode_output", nargs="?", default="hydrogenData.txt",
                        help="file for the hydrogen wavefunction")
    parser.add_argument("--convergence", type=Path, default=Path("convergenceData.txt"))
    parser.add_argument("--max-radius", type=float, default=8.0,
                        help="largest r_max in the convergence study")
    args = parser.parse_args(argv)

    print("A: Newton's method with numerical Jacobian and back-tracking linesearch \n")
    print("Testing routine on function (x-4)^2+(y-9)^2+1\n")
    start = (3.0, 7.0)
    print("Initial guess (x,y): (%g,%g)" % start)
    found = newton_method(test_function, start, TOLERANCE)
    print("Found minimum (x,y): (%g,%g)" % tuple(found))
    print("Actual minimum is (4,9) ")
    print("Tolerance used was %g\n" % TOLERANCE)

    print("Testing routine on Rosenbrock valley function \n")
    start = (0.5, 0.5)
    print("Initial guess (x,y): (%g,%g)" % start)
    found = newton_method(rosenbrock_gradient, start, TOLERANCE)
    print("Found minimum (x,y): (%g,%g)" % tuple(found))
    print("Actual minimum is (1,1) ")
    print("Tolerance used was %g\n" % TOLERANCE)

    print("B: Bound state of hydrogen atom \n")
    max_point = 8.0
    energy = _energy(wavefunction, UNBOUND_START, max_point)
    bound_energy = _energy(wavefunction_bound, BOUND_START, 0.5)
    print("Unbound energy found using root-finding: %g" % energy)

    print("Solving ODE with found energy: ")
    with open(args.ode_output, "w", encoding="utf-8") as out:
        _shoot(energy, 1e-3, max_point, 1e-3, out)
    print("Result plotted in hydrogenPlot.png\n")

    print("C: Better boundary condition for hydrogen atom problem\n")
    print("Bound energy found using root-finding: %g \n" % bound_energy)
    print("Investigating convergence of energy minimum as function of r_max \n")
    with open(args.convergence, "w", encoding="utf-8") as out:
        radius = 0.1
        while radius <= args.max_radius:
            energy = _energy(wavefunction, UNBOUND_START, radius)
            bound_energy = _energy(wavefunction_bound, BOUND_START, radius)
            out.write("%g \t %g \t %g \n" % (
                radius, abs(energy - EXACT_ENERGY), abs(bound_energy - EXACT_ENERGY)))
            radius += 0.1
    print("Convergence results can be seen in convergencePlot.png \n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())