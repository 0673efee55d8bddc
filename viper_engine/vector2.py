"""Two-component vector with component-wise arithmetic."""

import math
import numbers
import operator
from dataclasses import dataclass


def _components(other):
    if isinstance(other, Vector2):
        return other.x, other.y
    if isinstance(other, numbers.Real):
        return other, other
    return None


@dataclass
class Vector2:
    """A mutable 2D vector; operators accept another vector or a scalar."""

    x: float = 0.0
    y: float = 0.0

    def __getitem__(self, index):
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"Vector2 index out of range: {index!r}")

    def __setitem__(self, index, value):
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        else:
            raise IndexError(f"Vector2 index out of range: {index!r}")

    def __iter__(self):
        yield self.x
        yield self.y

    def _combine(self, other, op):
        parts = _components(other)
        if parts is None:
            return NotImplemented
        return Vector2(op(self.x, parts[0]), op(self.y, parts[1]))

    def _apply(self, other, op):
        parts = _components(other)
        if parts is None:
            return NotImplemented
        self.x = op(self.x, parts[0])
        self.y = op(self.y, parts[1])
        return self

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __iadd__(self, other):
        return self._apply(other, operator.add)

    def __isub__(self, other):
        return self._apply(other, operator.sub)

    def __imul__(self, other):
        return self._apply(other, operator.mul)

    def __itruediv__(self, other):
        return self._apply(other, operator.truediv)

    def length_sqr(self):
        """Squared magnitude of the vector."""
        return self.x * self.x + self.y * self.y

    def length(self):
        """Magnitude of the vector."""
        return math.sqrt(self.length_sqr())