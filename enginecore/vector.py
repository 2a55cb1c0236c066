"""A three-dimensional position or direction."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

_EPSILON = 1.0e-9


@dataclass(eq=False)
class Vector:
    """A mutable 3D vector supporting arithmetic with vectors and scalars."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Real):
            return Vector(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, Real):
            return self + other
        return NotImplemented

    def __iadd__(self, other):
        if isinstance(other, Vector):
            self.x += other.x
            self.y += other.y
            self.z += other.z
        elif isinstance(other, Real):
            self.x += other
            self.y += other
            self.z += other
        else:
            return NotImplemented
        return self

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Real):
            return Vector(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, Real):
            return Vector(other - self.x, other - self.y, other - self.z)
        return NotImplemented

    def __isub__(self, other):
        if isinstance(other, Vector):
            self.x -= other.x
            self.y -= other.y
            self.z -= other.z
        elif isinstance(other, Real):
            self.x -= other
            self.y -= other
            self.z -= other
        else:
            return NotImplemented
        return self

    def __neg__(self):
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, Real):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __imul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        self.x *= other
        self.y *= other
        self.z *= other
        return self

    def __truediv__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        _check_divisor(other)
        return Vector(self.x / other, self.y / other, self.z / other)

    def __itruediv__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        _check_divisor(other)
        self.x /= other
        self.y /= other
        self.z /= other
        return self

    def length(self):
        """The Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self):
        """Scale to unit length in place and return the previous length."""
        length = self.length()
        _check_divisor(length)
        self /= length
        return length

    def normalized(self):
        """Return a unit-length copy."""
        length = self.length()
        _check_divisor(length)
        return Vector(self.x / length, self.y / length, self.z / length)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None


def _check_divisor(value):
    if abs(value) <= _EPSILON:
        raise ZeroDivisionError("Can't divide by zero")


def dot(lhs, rhs):
    """The dot product of two vectors."""
    return lhs.x * rhs.x + lhs.y * rhs.y + lhs.z * rhs.z


def cross(lhs, rhs):
    """The right-handed cross product of two vectors."""
    return Vector(
        lhs.y * rhs.z - lhs.z * rhs.y,
        lhs.z * rhs.x - lhs.x * rhs.z,
        lhs.x * rhs.y - lhs.y * rhs.x,
    )