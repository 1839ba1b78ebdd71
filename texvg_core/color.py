from __future__ import annotations

from dataclasses import dataclass
import numbers
from typing import Any, Protocol, Union, runtime_checkable


MAX_CHANNEL = 0xFFFF

RGBA64 = tuple[int, int, int, int]


@runtime_checkable
class Color(Protocol):
    """Anything that reports alpha-premultiplied 16-bit channels."""

    def rgba(self) -> RGBA64:
        ...


ColorLike = Union[Color, tuple[int, int, int], tuple[int, int, int, int], None]


@dataclass(frozen=True)
class RGBA:
    """8-bit alpha-premultiplied color."""

    r: int
    g: int
    b: int
    a: int = 255

    def rgba(self) -> RGBA64:
        return (self.r * 0x101, self.g * 0x101, self.b * 0x101, self.a * 0x101)


@dataclass(frozen=True)
class NRGBA:
    """8-bit color with straight (non-premultiplied) alpha."""

    r: int
    g: int
    b: int
    a: int = 255

    def rgba(self) -> RGBA64:
        a = self.a * 0x101
        return (
            self.r * 0x101 * a // MAX_CHANNEL,
            self.g * 0x101 * a // MAX_CHANNEL,
            self.b * 0x101 * a // MAX_CHANNEL,
            a,
        )


@dataclass(frozen=True)
class Gray:
    y: int

    def rgba(self) -> RGBA64:
        v = self.y * 0x101
        return (v, v, v, MAX_CHANNEL)


BLACK = Gray(0)
WHITE = Gray(255)
TRANSPARENT = RGBA(0, 0, 0, 0)


def to_rgba64(color: Any) -> RGBA64:
    if color is None:
        return BLACK.rgba()
    if isinstance(color, tuple):
        if len(color) not in (3, 4):
            raise TypeError(f"color tuple must have 3 or 4 channels, got {len(color)}")
        for channel in color:
            if isinstance(channel, bool) or not isinstance(channel, numbers.Integral):
                raise TypeError(f"color channels must be ints, got {channel!r} in {color!r}")
            if not 0 <= channel <= 255:
                raise ValueError(f"color channel {channel} out of range 0..255 in {color!r}")
        return NRGBA(*(int(c) for c in color)).rgba()
    if isinstance(color, Color):
        r, g, b, a = color.rgba()
        return (int(r), int(g), int(b), int(a))
    raise TypeError(f"unsupported color value: {color!r}")
