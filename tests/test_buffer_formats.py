import struct

from enginecore.buffer_formats import (
    DrawCallConstants,
    FrameConstants,
    MeshVertex,
    pack_vertices,
)
from enginecore.matrix import Transform
from enginecore.quaternion import Quaternion
from enginecore.vector import Vector


def _sample_transform():
    return Transform.from_rotation_translation(
        Quaternion.from_axis_angle(0.5, Vector(0.0, 1.0, 0.0)), Vector(1.0, 2.0, 3.0)
    )


def test_frame_constants_size():
    assert len(FrameConstants().pack()) == 144


def test_draw_call_constants_size():
    assert len(DrawCallConstants().pack()) == 64


def test_mesh_vertex_size():
    assert len(MeshVertex(1.0, 2.0, 3.0).pack()) == 12


def test_frame_constants_layout():
    world_to_camera = _sample_transform()
    frame = FrameConstants(
        transform_world_to_camera=world_to_camera,
        elapsed_seconds_system_time=1.5,
        elapsed_seconds_simulation_time=0.25,
    )
    values = struct.unpack("<36f", frame.pack())
    assert values[:16] == struct.unpack("<16f", struct.pack("<16f", *world_to_camera.elements))
    assert values[16:32] == Transform().elements
    assert values[32:] == (1.5, 0.25, 0.0, 0.0)


def test_draw_call_translation_is_last_column():
    constants = DrawCallConstants(
        Transform.from_rotation_translation(Quaternion(), Vector(7.0, 8.0, 9.0))
    )
    values = struct.unpack("<16f", constants.pack())
    assert values[12:] == (7.0, 8.0, 9.0, 1.0)


def test_mesh_vertex_round_trip():
    vertex = MeshVertex(0.5, -1.25, 4.0)
    assert struct.unpack("<3f", vertex.pack()) == (0.5, -1.25, 4.0)


def test_pack_vertices_concatenates_in_order():
    vertices = [MeshVertex(0.0, 0.0, 0.0), MeshVertex(1.0, 0.0, 0.0), MeshVertex(0.0, 1.0, 0.0)]
    packed = pack_vertices(vertices)
    assert packed == b"".join(v.pack() for v in vertices)
    assert struct.unpack("<9f", packed)[3:6] == (1.0, 0.0, 0.0)


def test_pack_vertices_empty():
    assert pack_vertices([]) == b""