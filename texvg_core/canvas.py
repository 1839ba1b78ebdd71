from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from texvg_core.color import BLACK, ColorLike
from texvg_core.font import Font
from texvg_core.length import Length
from texvg_core.path import Path


class Canvas(ABC):
    """Drawing primitives a plotting front end issues against a backend."""

    @abstractmethod
    def size(self) -> tuple[Length, Length]:
        raise NotImplementedError

    @abstractmethod
    def set_line_width(self, width: Length) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_line_dash(self, pattern: Sequence[Length], offset: Length) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_color(self, color: ColorLike) -> None:
        raise NotImplementedError

    @abstractmethod
    def rotate(self, rad: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def translate(self, x: Length, y: Length) -> None:
        raise NotImplementedError

    @abstractmethod
    def scale(self, sx: float, sy: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def push(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def pop(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def stroke(self, path: Path) -> None:
        raise NotImplementedError

    @abstractmethod
    def fill(self, path: Path) -> None:
        raise NotImplementedError

    @abstractmethod
    def fill_string(self, font: Font, x: Length, y: Length, text: str) -> None:
        raise NotImplementedError


def initialize(canvas: Canvas) -> None:
    """Put a freshly built canvas into the state front ends expect."""
    canvas.set_line_dash((), 0.0)
    canvas.set_line_width(1.0)
    canvas.set_color(BLACK)
