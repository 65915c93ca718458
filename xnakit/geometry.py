"""Points, rectangles, vectors and other basic geometric value types."""

from __future__ import annotations

from dataclasses import dataclass, field


def _div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@dataclass(frozen=True)
class Point:
    """An integer point."""

    x: int = 0
    y: int = 0

    @classmethod
    def zero(cls) -> "Point":
        return cls(0, 0)


@dataclass
class Rectangle:
    """An integer rectangle defined by its top-left corner and size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_ltrb(cls, left: int, top: int, right: int, bottom: int) -> "Rectangle":
        return cls(left, top, right - left, bottom - top)

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)

    @property
    def center(self) -> Point:
        return Point(self.x + _div(self.width, 2), self.y + _div(self.height, 2))

    @property
    def is_empty(self) -> bool:
        return self.x == 0 and self.y == 0 and self.width == 0 and self.height == 0

    def offset(self, x: int, y: int) -> None:
        """Move the rectangle in place."""
        self.x += x
        self.y += y

    def inflate(self, horizontal_amount: int, vertical_amount: int) -> None:
        """Grow the rectangle in place by the given amount on every side."""
        self.x -= horizontal_amount
        self.y -= vertical_amount
        self.width += horizontal_amount * 2
        self.height += vertical_amount * 2

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def contains_rectangle(self, value: "Rectangle") -> bool:
        return (
            self.x <= value.x
            and value.x + value.width <= self.x + self.width
            and self.y <= value.y
            and value.y + value.height <= self.y + self.height
        )

    def intersects(self, value: "Rectangle") -> bool:
        return (
            value.x < self.x + self.width
            and self.x < value.x + value.width
            and value.y < self.y + self.height
            and self.y < value.y + value.height
        )

    @classmethod
    def intersect(cls, value1: "Rectangle", value2: "Rectangle") -> "Rectangle":
        left = max(value1.x, value2.x)
        top = max(value1.y, value2.y)
        right = min(value1.right, value2.right)
        bottom = min(value1.bottom, value2.bottom)
        if right > left and bottom > top:
            return cls(left, top, right - left, bottom - top)
        return cls(0, 0, 0, 0)

    @classmethod
    def union(cls, value1: "Rectangle", value2: "Rectangle") -> "Rectangle":
        """Combine two rectangles; the width is taken as the far right edge."""
        left = min(value1.x, value2.x)
        top = min(value1.y, value2.y)
        right = max(value1.right, value2.right)
        bottom = max(value1.bottom, value2.bottom)
        return cls(left, top, right, bottom - top)


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> "Vector2":
        return cls()

    @classmethod
    def one(cls) -> "Vector2":
        return cls(1.0, 1.0)

    @classmethod
    def unit_x(cls) -> "Vector2":
        return cls(1.0, 0.0)

    @classmethod
    def unit_y(cls) -> "Vector2":
        return cls(0.0, 1.0)


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector3":
        return cls()

    @classmethod
    def one(cls) -> "Vector3":
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def unit_x(cls) -> "Vector3":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> "Vector3":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> "Vector3":
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def up(cls) -> "Vector3":
        return cls.unit_y()

    @classmethod
    def down(cls) -> "Vector3":
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def right(cls) -> "Vector3":
        return cls.unit_x()

    @classmethod
    def left(cls) -> "Vector3":
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def forward(cls) -> "Vector3":
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def backward(cls) -> "Vector3":
        return cls.unit_z()


@dataclass(frozen=True)
class Vector4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def zero(cls) -> "Vector4":
        return cls()

    @classmethod
    def one(cls) -> "Vector4":
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def unit_x(cls) -> "Vector4":
        return cls(1.0, 0.0, 0.0, 1.0)

    @classmethod
    def unit_y(cls) -> "Vector4":
        return cls(0.0, 1.0, 0.0, 1.0)

    @classmethod
    def unit_z(cls) -> "Vector4":
        return cls(0.0, 0.0, 1.0, 1.0)

    @classmethod
    def unit_w(cls) -> "Vector4":
        return cls(0.0, 0.0, 1.0, 1.0)


@dataclass(frozen=True)
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass(frozen=True)
class Matrix:
    """A 4x4 matrix stored as sixteen named elements."""

    m11: float = 0.0
    m12: float = 0.0
    m13: float = 0.0
    m14: float = 0.0
    m21: float = 0.0
    m22: float = 0.0
    m23: float = 0.0
    m24: float = 0.0
    m31: float = 0.0
    m32: float = 0.0
    m33: float = 0.0
    m34: float = 0.0
    m41: float = 0.0
    m42: float = 0.0
    m43: float = 0.0
    m44: float = 0.0


@dataclass(frozen=True)
class Ray:
    position: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class Plane:
    normal: Vector3 = field(default_factory=Vector3)
    d: float = 0.0


@dataclass(frozen=True)
class BoundingSphere:
    center: Vector3 = field(default_factory=Vector3)
    radius: float = 0.0


@dataclass(frozen=True)
class BoundingBox:
    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)