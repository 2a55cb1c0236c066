"""Quaternions representing rotations and orientations."""

from __future__ import annotations

import math

from .vector import Vector

_EPSILON = 1.0e-9


class Quaternion:
    """A rotation; the default value is the identity."""

    __slots__ = ("w", "x", "y", "z")

    def __init__(self, w=1.0, x=0.0, y=0.0, z=0.0):
        self.w = float(w)
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_axis_angle(cls, angle, axis):
        """A right-handed rotation of ``angle`` radians around a unit ``axis``."""
        theta_half = angle * 0.5
        sin_theta_half = math.sin(theta_half)
        return cls(
            math.cos(theta_half),
            axis.x * sin_theta_half,
            axis.y * sin_theta_half,
            axis.z * sin_theta_half,
        )

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return Quaternion(
                self.w * other.w - (self.x * other.x + self.y * other.y + self.z * other.z),
                self.w * other.x + self.x * other.w + (self.y * other.z - self.z * other.y),
                self.w * other.y + self.y * other.w + (self.z * other.x - self.x * other.z),
                self.w * other.z + self.z * other.w + (self.x * other.y - self.y * other.x),
            )
        if isinstance(other, Vector):
            factor_quaternion = 2.0 * (self.x * other.x + self.y * other.y + self.z * other.z)
            factor_cross = 2.0 * self.w
            factor_vector = factor_cross * self.w - 1.0
            return Vector(
                factor_vector * other.x
                + factor_quaternion * self.x
                + factor_cross * (self.y * other.z - self.z * other.y),
                factor_vector * other.y
                + factor_quaternion * self.y
                + factor_cross * (self.z * other.x - self.x * other.z),
                factor_vector * other.z
                + factor_quaternion * self.z
                + factor_cross * (self.x * other.y - self.y * other.x),
            )
        return NotImplemented

    def invert(self):
        """Invert in place (conjugate; exact for unit quaternions)."""
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z

    def inverse(self):
        """Return the inverse (conjugate)."""
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def _length(self):
        length = math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)
        if length <= _EPSILON:
            raise ZeroDivisionError("Can't divide by zero")
        return length

    def normalize(self):
        """Scale to unit length in place."""
        reciprocal = 1.0 / self._length()
        self.w *= reciprocal
        self.x *= reciprocal
        self.y *= reciprocal
        self.z *= reciprocal

    def normalized(self):
        """Return a unit-length copy."""
        reciprocal = 1.0 / self._length()
        return Quaternion(
            self.w * reciprocal, self.x * reciprocal, self.y * reciprocal, self.z * reciprocal
        )

    def forward_direction(self):
        """The rotated forward (negative z) direction."""
        _2x = self.x + self.x
        _2y = self.y + self.y
        _2xx = self.x * _2x
        _2xz = _2x * self.z
        _2xw = _2x * self.w
        _2yy = _2y * self.y
        _2yz = _2y * self.z
        _2yw = _2y * self.w
        return Vector(-_2xz - _2yw, -_2yz + _2xw, -1.0 + _2xx + _2yy)

    def __iter__(self):
        yield self.w
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return (
            self.w == other.w and self.x == other.x and self.y == other.y and self.z == other.z
        )

    __hash__ = None

    def __repr__(self):
        return f"Quaternion(w={self.w!r}, x={self.x!r}, y={self.y!r}, z={self.z!r})"


def dot(lhs, rhs):
    """The four-component dot product of two quaternions."""
    return lhs.w * rhs.w + lhs.x * rhs.x + lhs.y * rhs.y + lhs.z * rhs.z