"""The kinematic state of a rigid body in 3D space."""

from __future__ import annotations

from dataclasses import dataclass, field

from .matrix import Transform
from .quaternion import Quaternion
from .vector import Vector


@dataclass
class RigidBodyState:
    """Position, velocity, acceleration and a spin around a local axis."""

    position: Vector = field(default_factory=Vector)
    velocity: Vector = field(default_factory=Vector)
    acceleration: Vector = field(default_factory=Vector)
    orientation: Quaternion = field(default_factory=Quaternion)
    angular_velocity_axis_local: Vector = field(default_factory=lambda: Vector(0.0, 1.0, 0.0))
    angular_speed: float = 0.0

    def update(self, seconds):
        """Integrate the state forward by ``seconds``."""
        self.position = self.position + self.velocity * seconds
        self.velocity = self.velocity + self.acceleration * seconds
        rotation = Quaternion.from_axis_angle(
            self.angular_speed * seconds, self.angular_velocity_axis_local
        )
        self.orientation = self.orientation * rotation
        self.orientation.normalize()

    def predict_future_position(self, seconds):
        """Extrapolate the position using the current velocity."""
        return self.position + self.velocity * seconds

    def predict_future_orientation(self, seconds):
        """Extrapolate the orientation using the current spin."""
        rotation = Quaternion.from_axis_angle(
            self.angular_speed * seconds, self.angular_velocity_axis_local
        )
        return (self.orientation * rotation).normalized()

    def predict_future_transform(self, seconds):
        """The local-to-world transform extrapolated by ``seconds``."""
        return Transform.from_rotation_translation(
            self.predict_future_orientation(seconds), self.predict_future_position(seconds)
        )