# enginecore

Core building blocks for a small 3D game engine, in plain Python with no
third-party dependencies.

## What is inside

- `enginecore.results`: packed 32-bit result codes. `Result` holds a success
  flag, a `System`, a severity (see `Severity`) and a 16-bit id; it is truthy
  on success and exposes `is_success`, `system`, `severity` and `value`.
  Ready-made results include `SUCCESS`, `FAILURE`, `INVALID_FILE`,
  `FILE_DOESNT_EXIST`, `OUT_OF_MEMORY`, `TIME_OUT` and `UNDEFINED`.
  `ResultError` is an exception that carries a `Result`.
- `enginecore.scope_guard`: `ScopeGuard` and `MutableScopeGuard`, context
  managers that call a function when the `with` block is left, whether or not
  an exception was raised. The mutable guard can be switched off with
  `disable()`.
- `enginecore.functions`: `convert_degrees_to_radians`,
  `convert_float_to_half` (returns the 16-bit pattern, truncating the
  significand), `convert_horizontal_fov_to_vertical`, `round_up_to_multiple`
  and `round_up_to_multiple_power_of_2`. The rounding functions raise
  `ValueError` for negative values, non-positive multiples, or (for the
  second) a multiple that is not a power of two.
- `enginecore.vector`: the mutable `Vector` type with arithmetic against
  vectors and scalars, `length`, `normalize` (in place, returns the old
  length), `normalized`, and the `dot` and `cross` helpers. Dividing by a
  value too close to zero raises `ZeroDivisionError`.
- `enginecore.quaternion`: `Quaternion` rotations (identity by default),
  built with `from_axis_angle`, multiplied with quaternions or vectors, with
  `invert`/`inverse`, `normalize`/`normalized`, `forward_direction` and a
  module-level `dot`.
- `enginecore.matrix`: the immutable, column-major 4x4 `Transform`, with
  `from_rotation_translation`, multiplication by vectors and transforms,
  `concatenate_affine`, the `right_direction`, `up_direction`,
  `back_direction` and `translation` columns, `create_world_to_camera`,
  `create_world_to_camera_from_transform`, and
  `create_camera_to_projected_perspective` for either `GraphicsApi.D3D`
  (the default) or `GraphicsApi.GL`.
- `enginecore.rigid_body`: `RigidBodyState`, which integrates position,
  velocity and orientation with `update` and extrapolates with
  `predict_future_position`, `predict_future_orientation` and
  `predict_future_transform`.
- `enginecore.buffer_formats`: `FrameConstants`, `DrawCallConstants` and
  `MeshVertex`, whose `pack()` produces little-endian float layouts for
  shader constant and vertex buffers, and `pack_vertices` to join vertices
  into one buffer.
- `enginecore.platform`: `copy_file`, `create_directory_if_it_doesnt_exist`,
  `does_file_exist`, `get_files_in_directory`, `get_environment_variable`,
  `get_last_write_time` (nanoseconds since the epoch),
  `invalidate_last_write_time`, `load_binary_file` and `write_binary_file`.
  Failures raise `PlatformError`, whose `result` is `FILE_DOESNT_EXIST`,
  `FAILURE` or `ENVIRONMENT_VARIABLE_DOESNT_EXIST`.
- `enginecore.clock`: a tick counter built on the high-resolution
  performance counter. Call `initialize()` before
  `convert_ticks_to_seconds`, `convert_seconds_to_ticks` or
  `convert_rate_per_second_to_rate_per_tick`; they raise `RuntimeError`
  otherwise. `clean_up()` resets it.

## Example

```python
import math

from enginecore.matrix import Transform
from enginecore.quaternion import Quaternion
from enginecore.rigid_body import RigidBodyState
from enginecore.vector import Vector

body = RigidBodyState()
body.velocity = Vector(1.0, 0.0, 0.0)
body.angular_speed = math.pi / 2
body.update(1.0)

local_to_world = body.predict_future_transform(0.5)
point = local_to_world * Vector(0.0, 0.0, -1.0)

camera = Transform.create_world_to_camera(
    Quaternion.from_axis_angle(0.0, Vector(0.0, 1.0, 0.0)),
    Vector(0.0, 0.0, 10.0),
)
```

## What it does not do

The package is a library of building blocks only. It has no log-file
writer, no renderer, window or input handling, and no command-line
program; the buffer formats produce bytes but nothing here sends them to a
GPU.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```