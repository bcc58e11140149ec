import math

import numpy as np
import pytest

from numlab.roots import newton_method


def rosenbrock_gradient(values):
    x, y = values
    return [
        2 * (-1) * (1 - x) + (-2 * x) * 2 * 100 * (y - x * x),
        2 * 100 * (y - x * x),
    ]


def test_square_root_of_two():
    root = newton_method(lambda v: [v[0] ** 2 - 2], [1.0], 1e-8)
    assert root[0] == pytest.approx(math.sqrt(2), abs=1e-6)


def test_linear_system():
    a = np.array([[3.0, 1.0], [1.0, 2.0]])
    b = np.array([9.0, 8.0])
    root = newton_method(lambda v: a @ v - b, [0.0, 0.0], 1e-8)
    np.testing.assert_allclose(a @ root, b, atol=1e-6)


def test_rosenbrock_gradient_root():
    root = newton_method(rosenbrock_gradient, [0.5, 0.5], 1e-5)
    np.testing.assert_allclose(root, [1.0, 1.0], atol=1e-3)


def test_residual_within_tolerance():
    def f(v):
        return [2 * v[0] * (v[0] - 4), 2 * v[1] * (v[1] - 9)]

    root = newton_method(f, [3.0, 7.0], 1e-5)
    assert np.linalg.norm(f(root)) <= 1e-5


def test_start_already_a_root_is_returned_unchanged():
    root = newton_method(lambda v: [v[0] - 5.0], [5.0], 1e-8)
    assert list(root) == [5.0]


def test_start_is_not_modified():
    start = np.array([1.0])
    newton_method(lambda v: [v[0] ** 2 - 2], start, 1e-8)
    assert start[0] == 1.0