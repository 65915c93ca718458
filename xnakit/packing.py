"""Packing of normalized and integer values into bit fields, and small packed vector types."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

from .geometry import Vector3, Vector4

_U32_MAX = 0xFFFFFFFF


def _f32(value: float) -> float:
    """Round a float to single precision."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _round_half_away(value: float) -> float:
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


def _to_u32(value: float) -> int:
    """Saturating float to unsigned 32-bit conversion; NaN becomes zero."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(value)


def clamp_and_round(value: float, minimum: float, maximum: float) -> float:
    """Clamp ``value`` to the range and round it half away from zero; NaN gives 0."""
    if math.isnan(value):
        return 0.0
    if math.isinf(value):
        return float(minimum) if value < 0 else float(maximum)
    if value < minimum:
        return float(minimum)
    if value > maximum:
        return float(maximum)
    return _round_half_away(value)


def unpack_snorm(bitmask: int, value: int) -> float:
    """Read a signed normalized value stored under ``bitmask``."""
    bitmask &= _U32_MAX
    value &= _U32_MAX
    half = ((bitmask + 1) & _U32_MAX) >> 1
    if value & half:
        if value & bitmask == half:
            return -1.0
        raw = (value | (~bitmask & _U32_MAX)) & _U32_MAX
    else:
        raw = value & bitmask
    return _f32(_f32(float(raw)) / _f32(float(bitmask >> 1)))


def pack_snorm(bitmask: int, value: float) -> int:
    """Store a signed normalized value under ``bitmask``; negative results saturate to zero."""
    limit = _f32(float(bitmask >> 1))
    scaled = _f32(value * limit)
    return _to_u32(clamp_and_round(scaled, -limit, limit)) & bitmask


def unpack_unorm(bitmask: int, value: int) -> float:
    """Read an unsigned normalized value stored under ``bitmask``."""
    return _f32((value & bitmask) / bitmask)


def pack_unorm(bitmask: float, value: float) -> int:
    """Store an unsigned normalized value scaled by ``bitmask``."""
    scaled = _f32(value * bitmask)
    return _to_u32(clamp_and_round(scaled, 0.0, bitmask))


def pack_signed(bitmask: int, value: float) -> int:
    """Store a signed integer value under ``bitmask``; negative results saturate to zero."""
    limit = _f32(float(bitmask >> 1))
    return _to_u32(clamp_and_round(value, -limit - 1.0, limit)) & bitmask


def pack_unsigned(bitmask: float, value: float) -> int:
    """Store an unsigned integer value clamped to ``bitmask``."""
    return _to_u32(clamp_and_round(value, 0.0, bitmask))


@dataclass(frozen=True)
class Alpha8:
    """A single 8-bit alpha channel."""

    packed_value: int = 0

    @classmethod
    def from_alpha(cls, alpha: float) -> "Alpha8":
        return cls(pack_unorm(255.0, alpha) & 0xFF)

    def to_vector4(self) -> Vector4:
        return Vector4(0.0, 0.0, 0.0, unpack_unorm(0xFF, self.packed_value))


@dataclass(frozen=True)
class Bgr565:
    """A colour packed into 16 bits: 5 bits x, 6 bits y, 5 bits z."""

    packed_value: int = 0

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> "Bgr565":
        packed = pack_unorm(31.0, x) << 11 | pack_unorm(63.0, y) << 5 | pack_unorm(31.0, z)
        return cls(packed & 0xFFFF)

    @classmethod
    def from_vector3(cls, vector: Vector3) -> "Bgr565":
        return cls.from_xyz(vector.x, vector.y, vector.z)

    def to_vector3(self) -> Vector3:
        packed = self.packed_value
        return Vector3(
            unpack_unorm(31, packed >> 11),
            unpack_unorm(63, packed >> 5),
            unpack_unorm(31, packed),
        )

    def to_vector4(self) -> Vector4:
        vector = self.to_vector3()
        return Vector4(vector.x, vector.y, vector.z, 1.0)