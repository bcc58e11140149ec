"""Fit a small neural network to cosine data and tabulate its output."""

from __future__ import annotations

import argparse
import math
import sys

from numlab.datafile import read_table
from numlab.neuralnetwork import NeuralNetwork

__all__ = ["negative_sin", "main"]

NEURONS = 5
NUMBER_OF_DATA_POINTS = 20
LOWER_LIMIT = 0.0
UPPER_LIMIT = 11.0
STEPS_PER_UNIT = 8


def negative_sin(x: float) -> float:
    """Derivative of the cosine."""
    return -math.sin(x)


def main(argv: list[str] | None = None) -> int:
    """Train a cosine-activated network on a data file and write its predictions."""
    parser = argparse.ArgumentParser(description="Neural network fit of tabulated data.")
    parser.add_argument("data", help="file of x and y columns")
    parser.add_argument("output", help="file for the network predictions")
    args = parser.parse_args(argv)

    print("A: Construct simple artificial neural network\n")
    xs, ys = read_table(args.data, 2, NUMBER_OF_DATA_POINTS)

    print("Initialize neural network with %d neurons, one hidden layer \n" % NEURONS)
    network = NeuralNetwork(NEURONS, math.cos, negative_sin, math.sin)

    print("Training network: \n")
    result = network.train(xs, ys)
    print(
        "Quasi_newton_method: %s, steps = %i, f(x) = %.1e"
        % (result.reason, result.steps, result.value),
        file=sys.stderr,
    )

    count = int((UPPER_LIMIT - LOWER_LIMIT) * STEPS_PER_UNIT) + 1
    with open(args.output, "w", encoding="utf-8") as out:
        for k in range(count):
            x = LOWER_LIMIT + k / STEPS_PER_UNIT
            out.write(
                "%10g %10g %10g %10g %10g %10g %10g\n"
                % (
                    x,
                    network.response(x),
                    math.cos(x),
                    network.response_derivative(x),
                    -math.sin(x),
                    network.response_integral(0.0, x),
                    math.sin(x),
                )
            )

    print("Part A and B:\n")
    print(
        "Network predicted form of cos(x) and its derivative + antiderivative "
        "can be seen in file networkPrediction.png\n"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())