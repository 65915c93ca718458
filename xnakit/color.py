"""A 32-bit packed RGBA colour."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ArgumentError
from .geometry import Vector3, Vector4
from .packing import pack_unorm, unpack_unorm

_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF


def _wrap_i32(value: int) -> int:
    value &= _U32
    return value - 2**32 if value >= 2**31 else value


def clamp_to_byte(value: int) -> int:
    """Clamp to 0..255, reading ``value`` as unsigned 64-bit so negatives saturate high."""
    return min(value & _U64, 255)


def _pack_floats(x: float, y: float, z: float, w: float) -> int:
    return (
        pack_unorm(255.0, x)
        | pack_unorm(255.0, y) << 8
        | pack_unorm(255.0, z) << 16
        | pack_unorm(255.0, w) << 24
    ) & _U32


_NAMED = {
    "transparent": 0,
    "alice_blue": 4294965488,
    "antique_white": 4292340730,
    "aqua": 4294967040,
    "aquamarine": 4292149119,
    "azure": 4294967280,
    "beige": 4292670965,
    "bisque": 4291093759,
    "black": 4278190080,
    "blanched_almond": 4291685375,
    "blue": 4294901760,
    "blue_violet": 4293012362,
    "brown": 4280953509,
    "burly_wood": 4287084766,
    "cadet_blue": 4288716383,
    "chartreuse": 4278255487,
    "chocolate": 4280183250,
    "coral": 4283465727,
    "cornflower_blue": 4293760356,
    "cornsilk": 4292671743,
    "crimson": 4282127580,
    "cyan": 4294967040,
    "dark_blue": 4287299584,
    "dark_cyan": 4287335168,
    "dark_goldenrod": 4278945464,
    "dark_gray": 4289309097,
    "dark_green": 4278215680,
    "dark_khaki": 4285249469,
    "dark_magenta": 4287299723,
    "dark_olive_green": 4281297749,
    "dark_orange": 4278226175,
    "dark_orchid": 4291572377,
    "dark_red": 4278190219,
    "dark_salmon": 4286224105,
    "dark_sea_green": 4287347855,
    "dark_slate_blue": 4287315272,
    "dark_slate_gray": 4283387695,
    "dark_turquoise": 4291939840,
    "dark_violet": 4292018324,
    "deep_pink": 4287829247,
    "deep_sky_blue": 4294950656,
    "dim_gray": 4285098345,
    "dodger_blue": 4294938654,
    "firebrick": 4280427186,
    "floral_white": 4293982975,
    "forest_green": 4280453922,
    "fuchsia": 4294902015,
    "gainsboro": 4292664540,
    "ghost_white": 4294965496,
    "gold": 4278245375,
    "goldenrod": 4280329690,
    "gray": 4286611584,
    "green": 4278222848,
    "green_yellow": 4281335725,
    "honeydew": 4293984240,
    "hot_pink": 4290013695,
    "indian_red": 4284243149,
    "indigo": 4286709835,
    "ivory": 4293984255,
    "khaki": 4287424240,
    "lavender": 4294633190,
    "lavender_blush": 4294308095,
    "lawn_green": 4278254716,
    "lemon_chiffon": 4291689215,
    "light_blue": 4293318829,
    "light_coral": 4286611696,
    "light_cyan": 4294967264,
    "light_goldenrod_yellow": 4292016890,
    "light_green": 4287688336,
    "light_gray": 4292072403,
    "light_pink": 4290885375,
    "light_salmon": 4286226687,
    "light_sea_green": 4289376800,
    "light_sky_blue": 4294626951,
    "light_slate_gray": 4288252023,
    "light_steel_blue": 4292789424,
    "light_yellow": 4292935679,
    "lime": 4278255360,
    "lime_green": 4281519410,
    "linen": 4293325050,
    "magenta": 4294902015,
    "maroon": 4278190208,
    "medium_aquamarine": 4289383782,
    "medium_blue": 4291624960,
    "medium_orchid": 4292040122,
    "medium_purple": 4292571283,
    "medium_sea_green": 4285641532,
    "medium_slate_blue": 4293814395,
    "medium_spring_green": 4288346624,
    "medium_turquoise": 4291613000,
    "medium_violet_red": 4286911943,
    "midnight_blue": 4285536537,
    "mint_cream": 4294639605,
    "misty_rose": 4292994303,
    "moccasin": 4290110719,
    "navajo_white": 4289584895,
    "navy": 4286578688,
    "old_lace": 4293326333,
    "olive": 4278222976,
    "olive_drab": 4280520299,
    "orange": 4278232575,
    "orange_red": 4278207999,
    "orchid": 4292243674,
    "pale_goldenrod": 4289390830,
    "pale_green": 4288215960,
    "pale_turquoise": 4293848751,
    "pale_violet_red": 4287852763,
    "papaya_whip": 4292210687,
    "peach_puff": 4290370303,
    "peru": 4282353101,
    "pink": 4291543295,
    "plum": 4292714717,
    "powder_blue": 4293320880,
    "purple": 4286578816,
    "red": 4278190335,
    "rosy_brown": 4287598524,
    "royal_blue": 4292962625,
    "saddle_brown": 4279453067,
    "salmon": 4285694202,
    "sandy_brown": 4284523764,
    "sea_green": 4283927342,
    "sea_shell": 4293850623,
    "sienna": 4281160352,
    "silver": 4290822336,
    "sky_blue": 4293643911,
    "slate_blue": 4291648106,
    "slate_gray": 4287660144,
    "snow": 4294638335,
    "spring_green": 4286578432,
    "steel_blue": 4290019910,
    "tan": 4287411410,
    "teal": 4286611456,
    "thistle": 4292394968,
    "tomato": 4282868735,
    "turquoise": 4291878976,
    "violet": 4293821166,
    "wheat": 4289978101,
    "white": 0xFFFFFFFF,
    "white_smoke": 4294309365,
    "yellow": 4278255615,
    "yellow_green": 4281519514,
}


@dataclass(frozen=True)
class Color:
    """A colour packed as 0xAABBGGRR in a 32-bit value."""

    packed_value: int = 0

    # --- construction ---------------------------------------------------

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Build an opaque colour from byte channels, clamping out-of-range values."""
        if (r | g | b) & -256:
            r, g, b = clamp_to_byte(r), clamp_to_byte(g), clamp_to_byte(b)
        return cls((r | g << 8 | b << 16 | 0xFF000000) & _U32)

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> "Color":
        """Build a colour from byte channels, clamping out-of-range values."""
        if (r | g | b | a) & -256:
            r, g, b, a = (clamp_to_byte(v) for v in (r, g, b, a))
        return cls((r | g << 8 | b << 16 | a << 24) & _U32)

    @classmethod
    def from_float_rgb(cls, r: float, g: float, b: float) -> "Color":
        return cls(_pack_floats(r, g, b, 1.0))

    @classmethod
    def from_float_rgba(cls, r: float, g: float, b: float, a: float) -> "Color":
        return cls(_pack_floats(r, g, b, a))

    @classmethod
    def from_vector3(cls, vector: Vector3) -> "Color":
        return cls(_pack_floats(vector.x, vector.y, vector.z, 1.0))

    @classmethod
    def from_vector4(cls, vector: Vector4) -> "Color":
        return cls(_pack_floats(vector.x, vector.y, vector.z, vector.w))

    @classmethod
    def from_non_premultiplied(cls, vector: Vector4) -> "Color":
        """Build a premultiplied colour from straight-alpha float channels."""
        w = vector.w
        return cls(_pack_floats(vector.x * w, vector.y * w, vector.z * w, w))

    @classmethod
    def from_non_premultiplied_rgba(cls, r: int, g: int, b: int, a: int) -> "Color":
        """Build a premultiplied colour from straight-alpha byte channels."""

        def premultiply(channel: int) -> int:
            return clamp_to_byte((_wrap_i32(channel * a) & _U64) // 255)

        packed = premultiply(r) | premultiply(g) << 8 | premultiply(b) << 16 | clamp_to_byte(a) << 24
        return cls(packed & _U32)

    @classmethod
    def named(cls, name: str) -> "Color":
        """Return a predefined colour by its snake_case name, e.g. ``cornflower_blue``."""
        try:
            return cls(_NAMED[name.lower()])
        except KeyError:
            raise ArgumentError(f"Unknown color name: {name}") from None

    # --- channels -------------------------------------------------------

    @property
    def r(self) -> int:
        return self.packed_value & 0xFF

    @property
    def g(self) -> int:
        return (self.packed_value >> 8) & 0xFF

    @property
    def b(self) -> int:
        return (self.packed_value >> 16) & 0xFF

    @property
    def a(self) -> int:
        return (self.packed_value >> 24) & 0xFF

    def with_r(self, value: int) -> "Color":
        return Color((self.packed_value & 0xFFFFFF00) | (value & 0xFF))

    def with_g(self, value: int) -> "Color":
        return Color((self.packed_value & 0xFFFF00FF) | (value & 0xFF) << 8)

    def with_b(self, value: int) -> "Color":
        return Color((self.packed_value & 0xFF00FFFF) | (value & 0xFF) << 16)

    def with_a(self, value: int) -> "Color":
        return Color((self.packed_value & 0x00FFFFFF) | (value & 0xFF) << 24)

    def to_vector4(self) -> Vector4:
        packed = self.packed_value
        return Vector4(
            unpack_unorm(0xFF, packed),
            unpack_unorm(0xFF, packed >> 8),
            unpack_unorm(0xFF, packed >> 16),
            unpack_unorm(0xFF, packed >> 24),
        )

    # --- operations -----------------------------------------------------

    @classmethod
    def lerp(cls, value1: "Color", value2: "Color", amount: float) -> "Color":
        """Interpolate each channel between two colours in 16.16 fixed point."""
        step = _wrap_i32(pack_unorm(65536.0, amount))

        def mix(c1: int, c2: int) -> int:
            return c1 + ((c2 - c1) * step >> 16)

        packed = (
            mix(value1.r, value2.r)
            | mix(value1.g, value2.g) << 8
            | mix(value1.b, value2.b) << 16
            | mix(value1.a, value2.a) << 24
        )
        return cls(packed & _U32)

    @classmethod
    def multiply(cls, value: "Color", scale: float) -> "Color":
        """Scale a colour by a fixed-point factor, saturating each channel at 255."""
        scaled = scale * 65536.0
        if scaled >= 0.0:
            factor = int(scale) if scaled <= 16777215.0 else 16777215
        else:
            factor = 0

        def apply(channel: int) -> int:
            return min(((channel * factor) & _U32) >> 16, 255)

        packed = (
            apply(value.packed_value)
            | apply(value.r) << 8
            | apply(value.g) << 16
            | apply(value.a) << 24
        )
        return cls(packed & _U32)