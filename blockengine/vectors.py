"""Scalar helpers, 2D/3D/4D vectors and an axis-aligned rectangle."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, TypeVar, Union

PI = math.pi
TWO_PI = PI * 2.0
PI_OVER_2 = PI / 2.0
INFINITY = math.inf
NEG_INFINITY = -math.inf

_T = TypeVar("_T")
Number = Union[int, float]


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 180.0 / PI


def near_zero(val: float, epsilon: float = 0.001) -> bool:
    """Return True when ``val`` lies within ``epsilon`` of zero."""
    return abs(val) <= epsilon


def clamp(value: _T, lower: _T, upper: _T) -> _T:
    """Clamp ``value`` into the range ``[lower, upper]``."""
    raised = value if not value < lower else lower
    if lower > value:
        raised = lower
    return raised if raised < upper else upper


def lerp(a: float, b: float, f: float) -> float:
    """Linear interpolation from ``a`` to ``b`` by ``f``."""
    return a + f * (b - a)


def cot(angle: float) -> float:
    """Cotangent of ``angle`` (radians)."""
    return 1.0 / math.tan(angle)


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vector2"]
    UNIT_X: ClassVar["Vector2"]
    UNIT_Y: ClassVar["Vector2"]
    NEG_UNIT_X: ClassVar["Vector2"]
    NEG_UNIT_Y: ClassVar["Vector2"]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector2, Number]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vector2:
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def length_sq(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sq())

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; raises ZeroDivisionError for zero."""
        length = self.length()
        return Vector2(self.x / length, self.y / length)

    @staticmethod
    def dot(a: Vector2, b: Vector2) -> float:
        """Dot product of ``a`` and ``b``."""
        return a.x * b.x + a.y * b.y

    @staticmethod
    def lerp(a: Vector2, b: Vector2, f: float) -> Vector2:
        """Interpolate from ``a`` to ``b`` by ``f``."""
        return a + f * (b - a)

    @staticmethod
    def reflect(v: Vector2, n: Vector2) -> Vector2:
        """Reflect ``v`` about the normalized vector ``n``."""
        return v - 2.0 * Vector2.dot(v, n) * n


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.UNIT_X = Vector2(1.0, 0.0)
Vector2.UNIT_Y = Vector2(0.0, 1.0)
Vector2.NEG_UNIT_X = Vector2(-1.0, 0.0)
Vector2.NEG_UNIT_Y = Vector2(0.0, -1.0)


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar["Vector3"]
    UNIT_X: ClassVar["Vector3"]
    UNIT_Y: ClassVar["Vector3"]
    UNIT_Z: ClassVar["Vector3"]
    NEG_UNIT_X: ClassVar["Vector3"]
    NEG_UNIT_Y: ClassVar["Vector3"]
    NEG_UNIT_Z: ClassVar["Vector3"]
    INFINITY: ClassVar["Vector3"]
    NEG_INFINITY: ClassVar["Vector3"]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vector3, Number]) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vector3:
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def length_sq(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sq())

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; raises ZeroDivisionError for zero."""
        length = self.length()
        return Vector3(self.x / length, self.y / length, self.z / length)

    @staticmethod
    def dot(a: Vector3, b: Vector3) -> float:
        """Dot product of ``a`` and ``b``."""
        return a.x * b.x + a.y * b.y + a.z * b.z

    @staticmethod
    def cross(a: Vector3, b: Vector3) -> Vector3:
        """Cross product ``a x b``."""
        return Vector3(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )

    @staticmethod
    def lerp(a: Vector3, b: Vector3, f: float) -> Vector3:
        """Interpolate from ``a`` to ``b`` by ``f``."""
        return a + f * (b - a)

    @staticmethod
    def reflect(v: Vector3, n: Vector3) -> Vector3:
        """Reflect ``v`` about the normalized vector ``n``."""
        return v - 2.0 * Vector3.dot(v, n) * n


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.UNIT_X = Vector3(1.0, 0.0, 0.0)
Vector3.UNIT_Y = Vector3(0.0, 1.0, 0.0)
Vector3.UNIT_Z = Vector3(0.0, 0.0, 1.0)
Vector3.NEG_UNIT_X = Vector3(-1.0, 0.0, 0.0)
Vector3.NEG_UNIT_Y = Vector3(0.0, -1.0, 0.0)
Vector3.NEG_UNIT_Z = Vector3(0.0, 0.0, -1.0)
Vector3.INFINITY = Vector3(INFINITY, INFINITY, INFINITY)
Vector3.NEG_INFINITY = Vector3(NEG_INFINITY, NEG_INFINITY, NEG_INFINITY)


@dataclass(frozen=True)
class Vector4:
    """Immutable 4D vector, used for colors and rectangles."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def center(self) -> Vector2:
        """Centre point of the rectangle."""
        return Vector2(self.left + self.width / 2.0, self.top + self.height / 2.0)