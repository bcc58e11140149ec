"""Monte Carlo exercises: plain and quasi-random integration and error scaling."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

import numpy as np
from numpy.typing import ArrayLike

from numlab.montecarlo import plain_monte_carlo, quasi_monte_carlo

__all__ = ["debug_function", "dmitri_function", "main"]

EXACT_DEBUG = 1.8856180831641
EXACT_DMITRI = 1.3932039296856768591842462603255
DEFAULT_POINTS = 1_000_000
DEFAULT_REPS = 500
DEFAULT_STEP = 100

_DMITRI_TEXT = (
    "∫_0^π dx/π ∫_0^π dy/π ∫_0^π  dz/π [1-cos(x)cos(y)cos(z)]^{-1} = Γ(1/4)4/(4π3)"
)


def debug_function(x: ArrayLike) -> float:
    """Square root of the first coordinate."""
    return math.sqrt(x[0])


def dmitri_function(x: ArrayLike) -> float:
    """``1 / (π³ (1 - cos x cos y cos z))``."""
    return 1 / (math.pi**3 * (1 - math.cos(x[0]) * math.cos(x[1]) * math.cos(x[2])))


def _report(estimate: float, exact: float, error: float, label: str) -> None:
    print("Estimate: %g" % estimate)
    print("Error: %g" % abs(estimate - exact))
    print("%s: %g\n" % (label, error))


def main(argv: list[str] | None = None) -> int:
    """Run the Monte Carlo exercises and write the error-scaling table."""
    parser = argparse.ArgumentParser(description="Monte Carlo integration exercises.")
    parser.add_argument("--points", type=int, default=DEFAULT_POINTS, help="sample points")
    parser.add_argument("--reps", type=int, default=DEFAULT_REPS, help="error-scaling repetitions")
    parser.add_argument("--step", type=int, default=DEFAULT_STEP, help="points added per repetition")
    parser.add_argument("--output", type=Path, default=Path("errorScaling.txt"))
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = np.random.default_rng(args.seed)

    print("\nA: Plain Monte Carlo Integration \n")
    print("Testing the plain Monte Carlo routine on √(x) from 0 to 2 ")
    print("Exact value of integral is %g" % EXACT_DEBUG)
    result, error = plain_monte_carlo(debug_function, [0.0], [2.0], args.points, rng)
    print("Numerical estimate using Monte Carlo: ")
    _report(result, EXACT_DEBUG, error, "Error estimate from monte carlo")

    lower = [0.0, 0.0, 0.0]
    upper = [math.pi, math.pi, math.pi]
    print("Testing the plain Monte Carlo routine on " + _DMITRI_TEXT)
    print("Exact value of integral is %g" % EXACT_DMITRI)
    result, error = plain_monte_carlo(dmitri_function, lower, upper, args.points, rng)
    print("Numerical estimate using Monte Carlo: ")
    _report(result, EXACT_DMITRI, error, "Error estimate from monte carlo")

    print("B: Quasi Monte Carlo Integration\n")
    result, error = quasi_monte_carlo(dmitri_function, lower, upper, args.points)
    print("Testing the quasi Monte Carlo routine on " + _DMITRI_TEXT)
    print("Numerical estimate using quasi Monte Carlo: ")
    _report(result, EXACT_DMITRI, error, "Error estimate from monte carlo quasi")

    print("Test error scaling of quasi- vs pseudo-random ")
    print("Result in errorScaling.png \n")
    with open(args.output, "w", encoding="utf-8") as out:
        for rep in range(1, args.reps + 1):
            points = rep * args.step
            _, plain_error = plain_monte_carlo(dmitri_function, lower, upper, points, rng)
            _, quasi_error = quasi_monte_carlo(dmitri_function, lower, upper, points)
            out.write("%i \t %g \t %g \n" % (points, plain_error, quasi_error))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())