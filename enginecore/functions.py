"""Scalar math helpers: angle conversion, half floats and rounding."""

from __future__ import annotations

import math
import struct

# The single-precision value closest to pi.
PI = float.fromhex("0x1.921fb6p+1")

_MAX_HALF_VALUE_FLOAT = 0x477FE000
_MIN_NORMAL_HALF_VALUE_FLOAT = 0x38800000
_MIN_SUBNORMAL_HALF_VALUE_FLOAT = 0x33800000
_INFINITY_HALF = 0x7C00


def convert_degrees_to_radians(degrees):
    """Convert an angle in degrees to radians."""
    return degrees * (PI / 180.0)


def _float32_bits(value):
    try:
        packed = struct.pack("<f", value)
    except OverflowError:
        packed = struct.pack("<f", math.copysign(math.inf, value))
    return struct.unpack("<I", packed)[0]


def convert_float_to_half(value):
    """Return the 16-bit pattern of ``value`` as a half-precision float.

    The significand is truncated. The sign bit is kept for zero, subnormal,
    infinite and NaN results but not for normal values.
    """
    bits = _float32_bits(value)
    sign_half = ((bits & 0x80000000) >> 16) & 0xFFFF
    exponent_float = bits & 0x7F800000
    significand_float = bits & 0x7FFFFF
    absolute_value = bits & 0x7FFFFFFF

    if absolute_value <= _MAX_HALF_VALUE_FLOAT:
        if absolute_value >= _MIN_NORMAL_HALF_VALUE_FLOAT:
            # Rebias the exponent from 127 to 15 and truncate the significand.
            return ((absolute_value >> 13) - 0x1C000) & 0xFFFF
        if absolute_value < _MIN_SUBNORMAL_HALF_VALUE_FLOAT:
            return sign_half
        explicit_significand = significand_float | 0x800000
        shift = (127 - (exponent_float >> 23)) - 1
        significand_half = (explicit_significand >> shift) & 0xFFFF
        return sign_half | significand_half

    is_nan = exponent_float == 0x7F800000 and significand_float != 0
    if not is_nan:
        return sign_half | _INFINITY_HALF
    is_quiet_half = 0x200 if significand_float & 0x400000 else 0
    payload_half = significand_float & 0x1FF
    return sign_half | is_quiet_half | payload_half


def convert_horizontal_fov_to_vertical(horizontal_fov, aspect_ratio):
    """Convert a horizontal field of view (radians) to a vertical one.

    ``aspect_ratio`` is width / height.
    """
    return 2.0 * math.atan(math.tan(horizontal_fov * 0.5) / aspect_ratio)


def _check_unsigned(value, multiple):
    if value < 0:
        raise ValueError("The value must not be negative")
    if multiple == 0:
        raise ValueError("Zero isn't a valid multiple")
    if multiple < 0:
        raise ValueError("The multiple must be positive")


def round_up_to_multiple(value, multiple):
    """Round a non-negative integer up to the next multiple of ``multiple``."""
    _check_unsigned(value, multiple)
    return ((value + multiple - 1) // multiple) * multiple


def round_up_to_multiple_power_of_2(value, multiple):
    """Round up to a multiple that must be a power of two."""
    _check_unsigned(value, multiple)
    non_leading_bits = multiple - 1
    if multiple & non_leading_bits:
        raise ValueError("The multiple must be a power-of-2")
    return (value + non_leading_bits) & ~non_leading_bits