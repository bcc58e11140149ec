"""Adaptive integration exercises on test integrals with known values."""

from __future__ import annotations

import argparse
import math
from typing import Callable

from numlab.integration import adapt, integrate, open_quad

__all__ = ["format_test_result", "main"]

ABSOLUTE_ACCURACY = 1e-3
RELATIVE_ACCURACY = 1e-3


class _Counted:
    """Wraps a function and counts its evaluations."""

    def __init__(self, function: Callable[[float], float]) -> None:
        self.function = function
        self.calls = 0

    def __call__(self, x: float) -> float:
        self.calls += 1
        return self.function(x)


def format_test_result(
    label: str,
    value: float,
    exact: float,
    absolute_accuracy: float,
    relative_accuracy: float,
    error: float,
    calls: int,
) -> str:
    """Render an integration result against its exact value."""
    return (
        "%s: %g\n" % (label, value)
        + "Error goal: %.25g \n" % (absolute_accuracy + abs(exact) * relative_accuracy)
        + "Actual error: %.25g \n" % abs(value - exact)
        + "Error estimate: %.25g \n" % error
        + "Function calls: %i \n" % calls
    )


def _run(method, label: str, function, left: float, right: float, exact: float) -> None:
    counted = _Counted(function)
    value, error = method(counted, left, right, ABSOLUTE_ACCURACY, RELATIVE_ACCURACY)
    print(
        format_test_result(
            label, value, exact, ABSOLUTE_ACCURACY, RELATIVE_ACCURACY, error, counted.calls
        ),
        end="",
    )


def main(argv: list[str] | None = None) -> int:
    """Run the integration exercises and print the results."""
    parser = argparse.ArgumentParser(description="Adaptive integration exercises.")
    parser.parse_args(argv)

    def sqrt_function(x: float) -> float:
        return math.sqrt(x)

    def circle_function(x: float) -> float:
        return math.sqrt(1 - x * x) * 4

    def inverse_sqrt(x: float) -> float:
        return 1 / math.sqrt(x)

    def log_over_sqrt(x: float) -> float:
        return math.log(x) / math.sqrt(x)

    def gaussian(x: float) -> float:
        return math.exp(-x * x)

    def lorentzian(x: float) -> float:
        return 1 / (x * x + 1)

    plain = "Result of numerical integration"
    with_cc = "Result of numerical integration with Clenshaw-Curtis"
    without_cc = "Result of numerical integration without Clenshaw-Curtis"
    infinite = "Result of infinite limit numerical integration"

    print("A: Test recursive adaptive integrator: \n")
    print("Testing integrator on ∫_0^1 dx √(x) = 2/3 \n")
    _run(integrate, plain, sqrt_function, 0.0, 1.0, 2.0 / 3.0)

    print("\nTesting integrator on ∫_0^1 dx 4√(1-x²) = π \n")
    _run(integrate, plain, circle_function, 0.0, 1.0, math.pi)
    print()

    print("B: Test open quadrature with Clenshaw-Curtis variable transformation\n")
    for text, function, exact in (
        ("∫_0^1 dx 1/√(x) = 2", inverse_sqrt, 2.0),
        ("∫_0^1 dx ln(x)/√(x) = -4", log_over_sqrt, -4.0),
        ("∫_0^1 dx 4√(1-x²) = π", circle_function, math.pi),
    ):
        print("Testing Clenshaw-Curtis on %s \n" % text)
        _run(open_quad, with_cc, function, 0.0, 1.0, exact)
        print()
        _run(adapt, without_cc, function, 0.0, 1.0, exact)
        print()

    print("C: Infinite Limit \n")
    print("Testing infinite limits on ∫_-inf^inf dx exp(-x²) = √π \n")
    _run(integrate, infinite, gaussian, -math.inf, math.inf, math.sqrt(math.pi))
    print()

    print("Testing infinite limits on ∫_0^inf dx 1/(1+x²) = π/2 \n")
    _run(integrate, infinite, lorentzian, 0.0, math.inf, math.pi / 2)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())