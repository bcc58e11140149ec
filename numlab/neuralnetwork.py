"""A single-hidden-layer neural network fitted with quasi-Newton minimisation."""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import ArrayLike

from numlab.minimization import QuasiNewtonResult, quasi_newton_method

__all__ = ["NeuralNetwork"]

PARAMETERS_PER_NEURON = 3
TRAINING_TOLERANCE = 1e-5
INITIAL_SHIFT = 1.0
INITIAL_SCALE = 1.0
INITIAL_WEIGHT = 1.000001

Activation = Callable[[float], float]


class NeuralNetwork:
    """Network whose output is ``sum(w * f((x - a) / b))`` over its neurons.

    ``parameters`` holds ``(a, b, w)`` — shift, scale and weight — for each
    neuron in turn. ``derivative`` and ``antiderivative`` are the derivative
    and an antiderivative of the activation ``f``.
    """

    def __init__(
        self,
        neurons: int,
        activation: Activation,
        derivative: Activation,
        antiderivative: Activation,
    ) -> None:
        if neurons < 1:
            raise ValueError("a network needs at least one neuron")
        self.neurons = neurons
        self.activation = activation
        self.derivative = derivative
        self.antiderivative = antiderivative
        self.parameters = self._initial_parameters()

    def _initial_parameters(self) -> np.ndarray:
        return np.tile([INITIAL_SHIFT, INITIAL_SCALE, INITIAL_WEIGHT], self.neurons)

    def _neurons(self, parameters: np.ndarray) -> np.ndarray:
        return np.asarray(parameters, dtype=float).reshape(
            self.neurons, PARAMETERS_PER_NEURON
        )

    def _response(self, parameters: np.ndarray, x: float) -> float:
        return sum(
            self.activation((x - shift) / scale) * weight
            for shift, scale, weight in self._neurons(parameters)
        )

    def response(self, x: float) -> float:
        """Network output at ``x``."""
        return float(self._response(self.parameters, x))

    def response_derivative(self, x: float) -> float:
        """Derivative of the network output at ``x``."""
        return float(
            sum(
                self.derivative((x - shift) / scale) * weight / scale
                for shift, scale, weight in self._neurons(self.parameters)
            )
        )

    def response_integral(self, right_point: float, left_point: float) -> float:
        """Integral of the network output from ``right_point`` to ``left_point``."""
        total = 0.0
        for shift, scale, weight in self._neurons(self.parameters):
            total += self.antiderivative((left_point - shift) / scale) * weight * scale
            total -= self.antiderivative((right_point - shift) / scale) * weight * scale
        return float(total)

    def train(self, inputs: ArrayLike, labels: ArrayLike) -> QuasiNewtonResult:
        """Fit the parameters to ``labels`` at ``inputs`` by least squares.

        Training always starts from the default parameters. Returns the
        minimiser's result; the fitted parameters are stored on the network.
        """
        xs = np.asarray(inputs, dtype=float).ravel()
        ys = np.asarray(labels, dtype=float).ravel()
        if xs.shape != ys.shape:
            raise ValueError("inputs and labels must have the same length")

        def cost(parameters: np.ndarray) -> float:
            return float(
                sum((self._response(parameters, x) - y) ** 2 for x, y in zip(xs, ys))
            )

        result = quasi_newton_method(cost, self._initial_parameters(), TRAINING_TOLERANCE)
        self.parameters = result.point.copy()
        return result