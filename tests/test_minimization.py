import numpy as np
import pytest

from numlab.minimization import (
    QuasiNewtonResult,
    downhill_simplex,
    numerical_gradient,
    quasi_newton_method,
    simplex_contraction,
    simplex_distance,
    simplex_expansion,
    simplex_initiate,
    simplex_reduction,
    simplex_reflection,
    simplex_size,
    simplex_update,
)


def _shifted_quadratic(v):
    return (v[0] - 6) ** 2 + (v[1] - 13) ** 2 + 1


def test_numerical_gradient_of_linear_function():
    coefficients = np.array([2.0, -3.0, 0.5])
    gradient = numerical_gradient(lambda v: float(coefficients @ v), [1.0, 4.0, -2.0])
    np.testing.assert_allclose(gradient, coefficients, rtol=1e-4)


def test_numerical_gradient_vanishes_at_minimum():
    gradient = numerical_gradient(_shifted_quadratic, [6.0, 13.0])
    assert np.linalg.norm(gradient) < 1e-5


def test_numerical_gradient_does_not_modify_point():
    point = np.array([1.0, 2.0])
    numerical_gradient(_shifted_quadratic, point)
    np.testing.assert_array_equal(point, [1.0, 2.0])


def test_quasi_newton_finds_quadratic_minimum():
    start = [0.0, 0.0]
    result = quasi_newton_method(_shifted_quadratic, start, 1e-5)
    assert isinstance(result, QuasiNewtonResult)
    np.testing.assert_allclose(result.point, [6.0, 13.0], atol=1e-3)
    assert result.value == pytest.approx(_shifted_quadratic(result.point))
    assert start == [0.0, 0.0]
    assert 1 <= result.steps <= 10_000


def test_quasi_newton_three_dimensions():
    target = np.array([1.5, -2.0, 0.75])
    result = quasi_newton_method(lambda v: float(np.sum((v - target) ** 2)), [0.0, 0.0, 0.0], 1e-6)
    np.testing.assert_allclose(result.point, target, atol=1e-3)


def test_quasi_newton_starting_at_minimum_stops_immediately():
    result = quasi_newton_method(_shifted_quadratic, [6.0, 13.0], 1e-5)
    assert result.steps == 1
    np.testing.assert_array_equal(result.point, [6.0, 13.0])
    assert result.reason in {"|dx| < step size * |x|", "|grad| < accuracy"}


def test_reflection_is_mirror_through_centroid():
    highest = np.array([1.0, 5.0])
    centroid = np.array([-2.0, 3.0])
    reflected = simplex_reflection(highest, centroid)
    np.testing.assert_allclose((reflected + highest) / 2, centroid)


def test_expansion_goes_twice_as_far():
    highest = np.array([1.0, 5.0])
    centroid = np.array([-2.0, 3.0])
    expanded = simplex_expansion(highest, centroid)
    np.testing.assert_allclose(expanded - centroid, 2 * (centroid - highest))


def test_contraction_is_midpoint():
    highest = np.array([1.0, 5.0])
    centroid = np.array([-2.0, 3.0])
    contracted = simplex_contraction(highest, centroid)
    assert simplex_distance(contracted, highest) == pytest.approx(simplex_distance(contracted, centroid))
    assert simplex_distance(contracted, highest) == pytest.approx(0.5 * simplex_distance(highest, centroid))


def test_distance_pythagorean():
    assert simplex_distance([0.0, 0.0], [3.0, 4.0]) == pytest.approx(5.0)
    assert simplex_distance([2.5, -1.0], [2.5, -1.0]) == 0.0


def test_size_is_largest_distance_from_first_vertex():
    assert simplex_size([[0.0, 0.0], [3.0, 4.0], [1.0, 0.0]]) == pytest.approx(5.0)


def test_size_rejects_wrong_shape():
    with pytest.raises(ValueError):
        simplex_size([[0.0, 0.0], [1.0, 1.0]])


def test_reduction_halves_distances_to_low_vertex():
    simplex = np.array([[4.0, 10.0], [2.0, 2.0], [-3.0, 1.0]])
    reduced = simplex_reduction(simplex, 1)
    np.testing.assert_array_equal(reduced[1], simplex[1])
    for i in (0, 2):
        assert simplex_distance(reduced[i], simplex[1]) == pytest.approx(
            0.5 * simplex_distance(simplex[i], simplex[1])
        )
    np.testing.assert_array_equal(simplex[0], [4.0, 10.0])


def test_update_finds_high_low_and_centroid():
    simplex = np.array([[4.0, 10.0], [2.0, 2.0], [-3.0, 1.0]])
    high, low, centroid = simplex_update(simplex, [3.0, 1.0, 2.0])
    assert (high, low) == (0, 1)
    np.testing.assert_allclose(centroid, simplex[[1, 2]].mean(axis=0))


def test_update_ties_choose_first_vertex():
    simplex = np.array([[4.0, 10.0], [2.0, 2.0], [-3.0, 1.0]])
    high, low, _ = simplex_update(simplex, [1.0, 1.0, 1.0])
    assert (high, low) == (0, 0)


def test_initiate_evaluates_every_vertex():
    simplex = np.array([[4.0, 10.0], [2.0, 2.0], [-3.0, 1.0]])
    values, high, low, _ = simplex_initiate(_shifted_quadratic, simplex)
    assert list(values) == [_shifted_quadratic(p) for p in simplex]
    assert values[high] == max(values)
    assert values[low] == min(values)


def test_downhill_simplex_finds_minimum():
    simplex = [[4.0, 10.0], [2.0, 2.0], [-3.0, 1.0]]
    result, steps = downhill_simplex(_shifted_quadratic, simplex, 1e-5)
    assert steps > 0
    assert simplex_size(result) <= 1e-5
    for vertex in result:
        np.testing.assert_allclose(vertex, [6.0, 13.0], atol=1e-3)
    assert simplex[0] == [4.0, 10.0]


def test_downhill_simplex_already_small_takes_no_steps():
    simplex = [[6.0, 13.0], [6.0, 13.0], [6.0, 13.0]]
    result, steps = downhill_simplex(_shifted_quadratic, simplex, 1e-5)
    assert steps == 0
    np.testing.assert_array_equal(result, simplex)