"""4x4 transformation matrices stored in column-major order.

The first three columns are the right, up and back directions and the last
column is the translation, so all sixteen floats can be handed to a shader
unchanged.
"""

from __future__ import annotations

import math
from enum import Enum

from .quaternion import Quaternion
from .vector import Vector

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


class GraphicsApi(Enum):
    """The graphics API whose clip-space depth convention a projection targets."""

    D3D = "d3d"
    GL = "gl"


class Transform:
    """An immutable 4x4 matrix; the default value is the identity."""

    __slots__ = ("_e",)

    def __init__(self, elements=_IDENTITY):
        values = tuple(float(value) for value in elements)
        if len(values) != 16:
            raise ValueError(f"a transform needs 16 elements, not {len(values)}")
        self._e = values

    def _at(self, row, column):
        return self._e[column * 4 + row]

    @classmethod
    def from_rotation_translation(cls, rotation=None, translation=None):
        """Build a transform from a unit quaternion and a translation vector."""
        q = rotation if rotation is not None else Quaternion()
        t = translation if translation is not None else Vector()
        _2x = q.x + q.x
        _2y = q.y + q.y
        _2z = q.z + q.z
        _2xx = q.x * _2x
        _2xy = _2x * q.y
        _2xz = _2x * q.z
        _2xw = _2x * q.w
        _2yy = _2y * q.y
        _2yz = _2y * q.z
        _2yw = _2y * q.w
        _2zz = _2z * q.z
        _2zw = _2z * q.w
        return cls((
            1.0 - _2yy - _2zz, _2xy + _2zw, _2xz - _2yw, 0.0,
            _2xy - _2zw, 1.0 - _2xx - _2zz, _2yz + _2xw, 0.0,
            _2xz + _2yw, _2yz - _2xw, 1.0 - _2xx - _2yy, 0.0,
            t.x, t.y, t.z, 1.0,
        ))

    def __mul__(self, other):
        if isinstance(other, Vector):
            a = self._at
            return Vector(
                a(0, 0) * other.x + a(0, 1) * other.y + a(0, 2) * other.z + a(0, 3),
                a(1, 0) * other.x + a(1, 1) * other.y + a(1, 2) * other.z + a(1, 3),
                a(2, 0) * other.x + a(2, 1) * other.y + a(2, 2) * other.z + a(2, 3),
            )
        if isinstance(other, Transform):
            return Transform(
                sum(self._at(row, k) * other._at(k, column) for k in range(4))
                for column in range(4)
                for row in range(4)
            )
        return NotImplemented

    @classmethod
    def concatenate_affine(cls, next_transform, first_transform):
        """Multiply two affine transforms, cheaper than general multiplication."""
        n = next_transform._at
        f = first_transform._at
        elements = []
        for column in range(4):
            for row in range(3):
                value = sum(n(row, k) * f(k, column) for k in range(3))
                if column == 3:
                    value += n(row, 3)
                elements.append(value)
            elements.append(1.0 if column == 3 else 0.0)
        return cls(elements)

    @property
    def elements(self):
        """The sixteen floats in column-major order."""
        return self._e

    def _column(self, column):
        return Vector(*self._e[column * 4:column * 4 + 3])

    @property
    def right_direction(self):
        return self._column(0)

    @property
    def up_direction(self):
        return self._column(1)

    @property
    def back_direction(self):
        return self._column(2)

    @property
    def translation(self):
        return self._column(3)

    @classmethod
    def create_world_to_camera(cls, camera_orientation, camera_position):
        """The inverse of a camera's rotation-and-translation transform."""
        return cls.create_world_to_camera_from_transform(
            cls.from_rotation_translation(camera_orientation, camera_position)
        )

    @classmethod
    def create_world_to_camera_from_transform(cls, local_camera_to_world):
        """Invert a transform that holds only rotation and translation."""
        m = local_camera_to_world._at
        return cls((
            m(0, 0), m(0, 1), m(0, 2), 0.0,
            m(1, 0), m(1, 1), m(1, 2), 0.0,
            m(2, 0), m(2, 1), m(2, 2), 0.0,
            -(m(0, 3) * m(0, 0)) - (m(1, 3) * m(1, 0)) - (m(2, 3) * m(2, 0)),
            -(m(0, 3) * m(0, 1)) - (m(1, 3) * m(1, 1)) - (m(2, 3) * m(2, 1)),
            -(m(0, 3) * m(0, 2)) - (m(1, 3) * m(1, 2)) - (m(2, 3) * m(2, 2)),
            1.0,
        ))

    @classmethod
    def create_camera_to_projected_perspective(
        cls, vertical_fov, aspect_ratio, z_near, z_far, api=GraphicsApi.D3D
    ):
        """A perspective projection for the given API's depth range."""
        y_scale = 1.0 / math.tan(vertical_fov * 0.5)
        x_scale = y_scale / aspect_ratio
        api = GraphicsApi(api)
        if api is GraphicsApi.D3D:
            z_scale = z_far / (z_near - z_far)
            z_z = z_scale
            z_w = z_near * z_scale
        else:
            z_scale = 1.0 / (z_near - z_far)
            z_z = (z_near + z_far) * z_scale
            z_w = (2.0 * z_near * z_far) * z_scale
        return cls((
            x_scale, 0.0, 0.0, 0.0,
            0.0, y_scale, 0.0, 0.0,
            0.0, 0.0, z_z, -1.0,
            0.0, 0.0, z_w, 0.0,
        ))

    def __eq__(self, other):
        if not isinstance(other, Transform):
            return NotImplemented
        return self._e == other._e

    def __hash__(self):
        return hash(self._e)

    def __repr__(self):
        return f"Transform({list(self._e)!r})"