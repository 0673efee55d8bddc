import random

import pytest

from viper_engine.rng import RAND_MAX, random_float, random_int


def test_no_argument_range():
    random.seed(7)
    values = [random_int() for _ in range(500)]
    assert all(0 <= v <= RAND_MAX for v in values)


def test_single_argument_is_exclusive_upper_bound():
    random.seed(3)
    values = {random_int(256) for _ in range(5000)}
    assert all(0 <= v < 256 for v in values)
    assert 0 in values


def test_two_arguments_are_inclusive():
    random.seed(11)
    values = {random_int(3, 5) for _ in range(500)}
    assert values == {3, 4, 5}


def test_equal_bounds_return_that_value():
    assert {random_int(4, 4) for _ in range(20)} == {4}


def test_random_float_range():
    random.seed(5)
    values = [random_float() for _ in range(1000)]
    assert all(0.0 <= v <= 1.0 for v in values)


def test_seeded_sequences_repeat():
    random.seed(1)
    first = [random_int(100) for _ in range(20)] + [random_float()]
    random.seed(1)
    second = [random_int(100) for _ in range(20)] + [random_float()]
    assert first == second


@pytest.mark.parametrize("bound", [0, -5])
def test_non_positive_bound_raises(bound):
    with pytest.raises(ValueError):
        random_int(bound)


def test_reversed_bounds_raise():
    with pytest.raises(ValueError):
        random_int(5, 3)


def test_high_without_low_raises():
    with pytest.raises(TypeError):
        random_int(high=5)