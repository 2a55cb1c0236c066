"""Byte layouts of the data sent to the GPU: constant buffers and vertices."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from .matrix import Transform

_MATRIX_FORMAT = "<16f"
_FRAME_FORMAT = "<16f16f4f"
_VERTEX_FORMAT = "<3f"

FRAME_CONSTANTS_SIZE = struct.calcsize(_FRAME_FORMAT)
DRAW_CALL_CONSTANTS_SIZE = struct.calcsize(_MATRIX_FORMAT)
MESH_VERTEX_SIZE = struct.calcsize(_VERTEX_FORMAT)


@dataclass
class FrameConstants:
    """Data that is constant for every frame."""

    transform_world_to_camera: Transform = field(default_factory=Transform)
    transform_camera_to_projected: Transform = field(default_factory=Transform)
    elapsed_seconds_system_time: float = 0.0
    elapsed_seconds_simulation_time: float = 0.0

    def pack(self):
        """The bytes of the buffer, padded to a multiple of four floats."""
        return struct.pack(
            _FRAME_FORMAT,
            *self.transform_world_to_camera.elements,
            *self.transform_camera_to_projected.elements,
            self.elapsed_seconds_system_time,
            self.elapsed_seconds_simulation_time,
            0.0,
            0.0,
        )


@dataclass
class DrawCallConstants:
    """Data that is constant for a single draw call."""

    transform_local_to_world: Transform = field(default_factory=Transform)

    def pack(self):
        return struct.pack(_MATRIX_FORMAT, *self.transform_local_to_world.elements)


@dataclass
class MeshVertex:
    """A mesh vertex: a position of three floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def pack(self):
        return struct.pack(_VERTEX_FORMAT, self.x, self.y, self.z)


def pack_vertices(vertices):
    """Pack mesh vertices one after another into a vertex buffer."""
    return b"".join(vertex.pack() for vertex in vertices)