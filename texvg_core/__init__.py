from .canvas import Canvas, initialize
from .color import BLACK, NRGBA, RGBA, TRANSPARENT, WHITE, Color, Gray, to_rgba64
from .font import Font, MonospaceFont, TrueTypeFont
from .length import CENTIMETER, INCH, MILLIMETER, POINT, Length, Point, parse_length
from .path import Path, PathComponent, PathComponentKind, rectangle

__all__ = [
    "BLACK",
    "CENTIMETER",
    "Canvas",
    "Color",
    "Font",
    "Gray",
    "INCH",
    "Length",
    "MILLIMETER",
    "MonospaceFont",
    "NRGBA",
    "POINT",
    "Path",
    "PathComponent",
    "PathComponentKind",
    "Point",
    "RGBA",
    "TRANSPARENT",
    "TrueTypeFont",
    "WHITE",
    "initialize",
    "parse_length",
    "rectangle",
    "to_rgba64",
]
