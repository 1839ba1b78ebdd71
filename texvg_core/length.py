from __future__ import annotations

from dataclasses import dataclass
import re
from typing import TypeAlias


Length: TypeAlias = float

POINT: Length = 1.0
INCH: Length = 72.0
CENTIMETER: Length = INCH / 2.54
MILLIMETER: Length = CENTIMETER / 10.0

_UNITS: dict[str, Length] = {
    "pt": POINT,
    "in": INCH,
    "inch": INCH,
    "cm": CENTIMETER,
    "mm": MILLIMETER,
}
_LENGTH_RE = re.compile(r"^([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([a-zA-Z]*)$")


def points(value: float) -> Length:
    return float(value) * POINT


def inches(value: float) -> Length:
    return float(value) * INCH


def centimeters(value: float) -> Length:
    return float(value) * CENTIMETER


def millimeters(value: float) -> Length:
    return float(value) * MILLIMETER


def parse_length(text: str) -> Length:
    """Parse `"<number><unit>"` into points. A bare number is already in points."""
    match = _LENGTH_RE.match(text.strip())
    if match is None:
        raise ValueError(f"invalid length: {text!r}")
    number, unit = match.groups()
    unit = unit.lower()
    if unit == "":
        return float(number)
    scale = _UNITS.get(unit)
    if scale is None:
        raise ValueError(f"unknown length unit {unit!r} in {text!r}")
    return float(number) * scale


@dataclass(frozen=True)
class Point:
    x: Length
    y: Length

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)
