import math
import struct

import pytest

from enginecore.functions import (
    PI,
    convert_degrees_to_radians,
    convert_float_to_half,
    convert_horizontal_fov_to_vertical,
    round_up_to_multiple,
    round_up_to_multiple_power_of_2,
)


def _half_to_float(bits):
    return struct.unpack("<e", struct.pack("<H", bits))[0]


def test_pi_is_close_to_math_pi():
    assert convert_degrees_to_radians(180.0) == pytest.approx(math.pi, abs=1e-6)
    assert PI == pytest.approx(math.pi, abs=1e-6)


def test_degrees_to_radians_half_turn_is_pi():
    assert convert_degrees_to_radians(180.0) == pytest.approx(PI)


def test_degrees_to_radians_is_linear():
    assert convert_degrees_to_radians(360.0) == pytest.approx(2 * convert_degrees_to_radians(180.0))
    assert convert_degrees_to_radians(0.0) == 0.0


def test_half_of_one():
    assert convert_float_to_half(1.0) == 0x3C00


@pytest.mark.parametrize("value", [0.5, 2.0, 1024.0, 65504.0, 2.0**-14, 3.0 * 2.0**-20, 2.0**-24])
def test_half_round_trip_exact_values(value):
    assert _half_to_float(convert_float_to_half(value)) == value


@pytest.mark.parametrize("value", [-(2.0**-24), -(2.0**-15), -3.0 * 2.0**-20])
def test_negative_subnormals_keep_sign(value):
    assert _half_to_float(convert_float_to_half(value)) == value


def test_negative_normal_drops_sign():
    assert convert_float_to_half(-1.0) == convert_float_to_half(1.0)


@pytest.mark.parametrize("value", [0.1, 3.14159, 1000.3, 0.0007])
def test_half_truncates_towards_zero(value):
    converted = _half_to_float(convert_float_to_half(value))
    assert converted <= value
    assert value - converted < value * 2.0**-9


def test_half_zero_and_tiny_values():
    assert convert_float_to_half(0.0) == 0
    assert convert_float_to_half(1e-10) == 0
    assert convert_float_to_half(-1e-10) == 0x8000


def test_half_infinities_and_overflow():
    assert convert_float_to_half(math.inf) == 0x7C00
    assert convert_float_to_half(1e6) == 0x7C00
    assert convert_float_to_half(1e300) == 0x7C00
    assert convert_float_to_half(-math.inf) == 0x7C00 | 0x8000


def test_half_quiet_nan():
    assert convert_float_to_half(math.nan) == 0x200


def test_fov_with_square_aspect_is_unchanged():
    assert convert_horizontal_fov_to_vertical(1.2, 1.0) == pytest.approx(1.2)


def test_fov_wide_aspect_shrinks_vertical():
    assert convert_horizontal_fov_to_vertical(1.2, 16 / 9) < 1.2


@pytest.mark.parametrize("aspect", [0.5, 4 / 3, 16 / 9])
def test_fov_round_trip(aspect):
    vertical = convert_horizontal_fov_to_vertical(1.0, aspect)
    assert convert_horizontal_fov_to_vertical(vertical, 1 / aspect) == pytest.approx(1.0)


@pytest.mark.parametrize("value", [0, 1, 5, 16, 17, 100, 255, 1023])
@pytest.mark.parametrize("multiple", [1, 3, 7, 16, 100])
def test_round_up_to_multiple_invariants(value, multiple):
    result = round_up_to_multiple(value, multiple)
    assert result % multiple == 0
    assert value <= result < value + multiple


@pytest.mark.parametrize("value", [0, 1, 5, 16, 17, 100, 255, 1023])
@pytest.mark.parametrize("multiple", [1, 2, 4, 16, 256])
def test_power_of_2_matches_general(value, multiple):
    assert round_up_to_multiple_power_of_2(value, multiple) == round_up_to_multiple(value, multiple)


def test_round_up_keeps_exact_multiples():
    assert round_up_to_multiple(48, 16) == 48
    assert round_up_to_multiple_power_of_2(48, 16) == 48


def test_round_up_rejects_zero_multiple():
    with pytest.raises(ValueError):
        round_up_to_multiple(5, 0)
    with pytest.raises(ValueError):
        round_up_to_multiple_power_of_2(5, 0)


def test_round_up_rejects_negative_value():
    with pytest.raises(ValueError):
        round_up_to_multiple(-1, 4)


def test_power_of_2_rejects_other_multiples():
    with pytest.raises(ValueError):
        round_up_to_multiple_power_of_2(5, 6)