import pytest

from chartkit.format import format_tick_with_step


@pytest.mark.parametrize(
    ("value", "step", "expected"),
    [(0.0, 2.0, "0"), (10.0, 2.0, "10"), (2.0, 2.0, "2")],
)
def test_formats_integer_steps_without_decimals(value, step, expected):
    assert format_tick_with_step(value, step) == expected


@pytest.mark.parametrize(
    ("value", "step", "expected"),
    [(2.5, 2.5, "2.5"), (5.0, 2.5, "5.0"), (0.25, 0.25, "0.25")],
)
def test_formats_fractional_steps_consistently(value, step, expected):
    assert format_tick_with_step(value, step) == expected


def test_normalizes_negative_zero():
    assert format_tick_with_step(-0.0, 2.0) == "0"
    assert format_tick_with_step(-0.0, 0.2) == "0.0"


def test_zero_step_gives_no_decimals():
    assert format_tick_with_step(3.0, 0.0) == "3"


def test_float_noise_in_step_is_tolerated():
    assert format_tick_with_step(0.30000000000000004, 0.1 + 0.2) == "0.3"


def test_small_negative_rounds_to_plain_zero():
    assert format_tick_with_step(-0.001, 0.1) == "0.0"


def test_non_finite_values():
    assert format_tick_with_step(float("inf"), 1.0) == "inf"
    assert format_tick_with_step(float("-inf"), 1.0) == "-inf"
    assert format_tick_with_step(float("nan"), 1.0) == "NaN"