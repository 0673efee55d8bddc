"""Pseudo-random number helpers built on the standard random module."""

import random

RAND_MAX = 32767


def random_int(low=None, high=None):
    """Return a random integer.

    With no arguments the result lies in ``[0, RAND_MAX]``; with one
    argument ``n`` it lies in ``[0, n)``; with two it lies in
    ``[low, high]``, both ends included.
    """
    if low is None and high is None:
        return random.randint(0, RAND_MAX)
    if low is None:
        raise TypeError("low is required when high is given")
    if high is None:
        if low <= 0:
            raise ValueError("upper bound must be positive")
        return random.randrange(low)
    if high < low:
        raise ValueError("high must not be less than low")
    return random.randint(low, high)


def random_float():
    """Return a random float in ``[0.0, 1.0]``, both ends included."""
    return random.randint(0, RAND_MAX) / RAND_MAX