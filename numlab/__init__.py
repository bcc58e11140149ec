"""Numerical methods: Gram-Schmidt QR, minimisation, Monte Carlo and adaptive integration, root finding, Runge-Kutta and a small neural network."""

__version__ = "0.1.0"