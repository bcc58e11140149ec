import pytest

from numlab.timing import CLOCKS_PER_SEC, diff_clock


def test_one_second_of_ticks_gives_ten():
    assert diff_clock(CLOCKS_PER_SEC, 0) == pytest.approx(10.0)


def test_equal_stamps_give_zero():
    assert diff_clock(12345, 12345) == 0.0


def test_sign_follows_argument_order():
    forward = diff_clock(5000, 2000)
    backward = diff_clock(2000, 5000)
    assert forward > 0
    assert backward == pytest.approx(-forward)


def test_linear_in_tick_difference():
    assert diff_clock(3 * CLOCKS_PER_SEC, 0) == pytest.approx(3 * diff_clock(CLOCKS_PER_SEC, 0))


def test_depends_only_on_difference():
    assert diff_clock(7000, 1000) == pytest.approx(diff_clock(106000, 100000))