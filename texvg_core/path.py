from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, overload

import numpy as np

from texvg_core.length import Length, Point


class PathComponentKind(Enum):
    MOVE = "move"
    LINE = "line"
    ARC = "arc"
    CLOSE = "close"


@dataclass(frozen=True)
class PathComponent:
    """One atomic path instruction.

    `pos` is the end point for move/line and the center for arc. Arc `start`
    and `angle` are in radians; `angle` is the signed sweep from `start`.
    """

    kind: PathComponentKind
    pos: Point = Point(0.0, 0.0)
    radius: Length = 0.0
    start: float = 0.0
    angle: float = 0.0


@dataclass(frozen=True)
class Path:
    components: tuple[PathComponent, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[PathComponent]:
        return iter(self.components)

    @overload
    def __getitem__(self, index: int) -> PathComponent: ...

    @overload
    def __getitem__(self, index: slice) -> Path: ...

    def __getitem__(self, index: int | slice) -> PathComponent | Path:
        if isinstance(index, slice):
            return Path(self.components[index])
        return self.components[index]

    def _extend(self, comp: PathComponent) -> Path:
        return Path(self.components + (comp,))

    def move(self, pt: Point) -> Path:
        return self._extend(PathComponent(PathComponentKind.MOVE, pos=pt))

    def line(self, pt: Point) -> Path:
        return self._extend(PathComponent(PathComponentKind.LINE, pos=pt))

    def arc(self, center: Point, radius: Length, start: float, angle: float) -> Path:
        return self._extend(
            PathComponent(PathComponentKind.ARC, pos=center, radius=radius, start=start, angle=angle)
        )

    def close(self) -> Path:
        return self._extend(PathComponent(PathComponentKind.CLOSE))

    @classmethod
    def from_xy(cls, xs: Any, ys: Any) -> Path:
        """Polyline through the given coordinates: one move, then lines."""
        x_arr = np.asarray(xs, dtype=np.float64).reshape(-1)
        y_arr = np.asarray(ys, dtype=np.float64).reshape(-1)
        if x_arr.shape != y_arr.shape:
            raise ValueError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
        comps: list[PathComponent] = []
        for i, (x, y) in enumerate(zip(x_arr.tolist(), y_arr.tolist())):
            kind = PathComponentKind.MOVE if i == 0 else PathComponentKind.LINE
            comps.append(PathComponent(kind, pos=Point(x, y)))
        return cls(tuple(comps))


def rectangle(x0: Length, y0: Length, x1: Length, y1: Length) -> Path:
    return (
        Path()
        .move(Point(x0, y0))
        .line(Point(x1, y0))
        .line(Point(x1, y1))
        .line(Point(x0, y1))
        .line(Point(x0, y0))
        .close()
    )
