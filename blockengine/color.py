"""RGBA colour with 8-bit channels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator

from blockengine.vectors import Vector3, Vector4, clamp, lerp


def _to_channel(value: float) -> int:
    """Truncate towards zero and clamp into the 0..255 channel range."""
    return clamp(int(value), 0, 255)


@dataclass(frozen=True)
class Color:
    """Immutable RGBA colour; every channel is an integer in 0..255."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    LIGHT_YELLOW: ClassVar["Color"]
    LIGHT_BLUE: ClassVar["Color"]
    LIGHT_PINK: ClassVar["Color"]
    LIGHT_GREEN: ClassVar["Color"]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"channel {name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range 0..255: {value}")

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    def __mul__(self, scale: float) -> Color:
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Color.multiply(self, scale)

    @staticmethod
    def from_int(value: int) -> Color:
        """Unpack a 32-bit integer laid out as 0xAABBGGRR."""
        return Color(
            value & 0xFF,
            (value >> 8) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 24) & 0xFF,
        )

    @staticmethod
    def lerp(value1: Color, value2: Color, amount: float) -> Color:
        """Interpolate each channel from ``value1`` to ``value2``."""
        return Color(
            *(_to_channel(lerp(c1, c2, amount)) for c1, c2 in zip(value1, value2))
        )

    @staticmethod
    def multiply(value: Color, scale: float) -> Color:
        """Scale every channel, alpha included, by ``scale``."""
        return Color(*(_to_channel(channel * scale) for channel in value))

    def to_vector3(self) -> Vector3:
        """RGB channels as a vector."""
        return Vector3(float(self.r), float(self.g), float(self.b))

    def to_vector4(self) -> Vector4:
        """RGBA channels as a vector."""
        return Vector4(float(self.r), float(self.g), float(self.b), float(self.a))


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.YELLOW = Color(255, 255, 0)
Color.LIGHT_YELLOW = Color(255, 255, 225)
Color.LIGHT_BLUE = Color(170, 217, 230)
Color.LIGHT_PINK = Color(255, 180, 200)
Color.LIGHT_GREEN = Color(142, 240, 142)