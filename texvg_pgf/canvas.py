from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
import io
import logging
from pathlib import Path as FilePath
from typing import BinaryIO, Iterator, Sequence

from texvg_core.canvas import Canvas, initialize
from texvg_core.color import ColorLike, MAX_CHANNEL, to_rgba64
from texvg_core.font import Font
from texvg_core.length import Length
from texvg_core.path import Path, PathComponentKind

from .document import DocumentTemplate
from .errors import ScopeUnderflowError, TexWriteError, UnsupportedPathComponentError
from .format import degrees, fmt_num


LOGGER = logging.getLogger(__name__)

PICTURE_BEGIN = "\\begin{pgfpicture}"
PICTURE_END = "\\end{pgfpicture}\n"
INDENT = "  "


@dataclass(frozen=True)
class Context:
    """Graphics state saved by one level of push/pop."""

    color: ColorLike = None
    dash: tuple[Length, ...] = ()
    dash_offset: Length = 0.0
    line_width: Length = 0.0


class TexCanvas(Canvas):
    """Canvas translating drawing primitives into PGF statements.

    Statements accumulate in memory; `write_to` drains them to a binary sink,
    optionally wrapped in a standalone LaTeX document.
    """

    def __init__(
        self,
        width: Length,
        height: Length,
        *,
        document: bool = False,
        template: DocumentTemplate | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.document = document
        self.template = template if template is not None else DocumentTemplate()
        self._buf = io.StringIO()
        self._stack: list[Context] = []
        self._flushed = False
        if not document:
            for line in self.template.comment_block():
                self._wtex(line)
        self._wtex("")
        self._wtex(PICTURE_BEGIN)
        self._stack.append(Context())
        initialize(self)

    @classmethod
    def new(cls, width: Length, height: Length) -> "TexCanvas":
        return cls(width, height, document=False)

    @classmethod
    def new_document(cls, width: Length, height: Length) -> "TexCanvas":
        """Canvas whose output compiles on its own, e.g. with pdflatex."""
        return cls(width, height, document=True)

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def context(self) -> Context:
        return self._stack[-1]

    def size(self) -> tuple[Length, Length]:
        return (self.width, self.height)

    def set_line_width(self, width: Length) -> None:
        self._stack[-1] = replace(self.context, line_width=width)

    def set_line_dash(self, pattern: Sequence[Length], offset: Length) -> None:
        self._stack[-1] = replace(self.context, dash=tuple(pattern), dash_offset=offset)

    def set_color(self, color: ColorLike) -> None:
        self._stack[-1] = replace(self.context, color=color)

    def rotate(self, rad: float) -> None:
        self._wtex(f"\\pgftransformrotate{{{fmt_num(degrees(rad))}}}")

    def translate(self, x: Length, y: Length) -> None:
        self._wtex(f"\\pgftransformshift{{{_point(x, y)}}}")

    def scale(self, sx: float, sy: float) -> None:
        self._wtex(f"\\pgftransformxscale{{{fmt_num(sx)}}}")
        self._wtex(f"\\pgftransformyscale{{{fmt_num(sy)}}}")

    def push(self) -> None:
        self._wtex("\\begin{pgfscope}")
        self._stack.append(self.context)

    def pop(self) -> None:
        if len(self._stack) <= 1:
            raise ScopeUnderflowError()
        self._stack.pop()
        self._wtex("\\end{pgfscope}")
        self._wtex("")

    @contextmanager
    def scope(self) -> Iterator["TexCanvas"]:
        self.push()
        try:
            yield self
        finally:
            self.pop()

    def stroke(self, path: Path) -> None:
        # A non-positive width means the caller wants no visible stroke.
        if self.context.line_width <= 0:
            return
        self._wstyle()
        self._wpath(path)
        self._wtex("\\pgfusepath{stroke}")
        self._wtex("")

    def fill(self, path: Path) -> None:
        self._wstyle()
        self._wpath(path)
        self._wtex("\\pgfusepath{fill, stroke}")
        self._wtex("")

    def fill_string(self, font: Font, x: Length, y: Length, text: str) -> None:
        """Draw `text` centered on `x`. The text is LaTeX and is not escaped."""
        self._wcolor()
        x += 0.5 * font.width(text)
        self._wtex(f"\\pgftext[base,at={{{_point(x, y)}}}]{{{text}}}")

    def write_to(self, sink: BinaryIO) -> int:
        """Drain the picture into `sink` and return the number of bytes written.

        Raises TexWriteError, carrying the bytes accepted so far, on the first
        failure from the sink.
        """
        if self._flushed:
            LOGGER.warning("canvas already written; closing statements will be emitted again")
        self._flushed = True
        written = 0
        chunks: list[str] = []
        if self.document:
            chunks.append(self.template.header())
        chunks.append(self._buf.getvalue())
        self._buf = io.StringIO()
        chunks.append(PICTURE_END)
        if self.document:
            chunks.append(self.template.footer())
        for chunk in chunks:
            written = _write_all(sink, chunk.encode("utf-8"), written)
        flush = getattr(sink, "flush", None)
        if flush is not None:
            try:
                flush()
            except (OSError, ValueError) as exc:
                raise TexWriteError(written, exc) from exc
        return written

    def save(self, path: str | FilePath) -> int:
        with open(path, "wb") as f:
            return self.write_to(f)

    def _indent(self) -> str:
        return INDENT * len(self._stack)

    def _wtex(self, statement: str) -> None:
        self._buf.write(self._indent() + statement + "\n")

    def _wstyle(self) -> None:
        self._wdash()
        self._wline_width()
        self._wcolor()

    def _wdash(self) -> None:
        ctx = self.context
        if not ctx.dash:
            return
        lengths = "".join(f"{{{fmt_num(d)}pt}}" for d in ctx.dash)
        self._wtex(f"\\pgfsetdash{{{lengths}}}{{{fmt_num(ctx.dash_offset)}pt}}")

    def _wline_width(self) -> None:
        self._wtex(f"\\pgfsetlinewidth{{{fmt_num(self.context.line_width)}pt}}")

    def _wcolor(self) -> None:
        r, g, b, a = to_rgba64(self.context.color)
        if a == 0:
            red = green = blue = 0.0
        else:
            # Undo premultiplication and scale into [0, 1].
            alpha = 255.0 / a
            red = r * alpha / 255.0
            green = g * alpha / 255.0
            blue = b * alpha / 255.0
        self._wtex(f"\\color[rgb]{{{fmt_num(red)},{fmt_num(green)},{fmt_num(blue)}}}")
        # PGF has no combined opacity, so stroke and fill are set separately.
        opacity = a / MAX_CHANNEL
        self._wtex(f"\\pgfsetstrokeopacity{{{fmt_num(opacity)}}}")
        self._wtex(f"\\pgfsetfillopacity{{{fmt_num(opacity)}}}")

    def _wpath(self, path: Path) -> None:
        for comp in path:
            if comp.kind is PathComponentKind.MOVE:
                self._wtex(f"\\pgfpathmoveto{{{_point(comp.pos.x, comp.pos.y)}}}")
            elif comp.kind is PathComponentKind.LINE:
                self._wtex(f"\\pgflineto{{{_point(comp.pos.x, comp.pos.y)}}}")
            elif comp.kind is PathComponentKind.ARC:
                start = fmt_num(degrees(comp.start))
                angle = fmt_num(degrees(comp.angle))
                self._wtex(f"\\pgfpatharc{{{start}}}{{{angle}}}{{{fmt_num(comp.radius)}pt}}")
            elif comp.kind is PathComponentKind.CLOSE:
                self._wtex("% path-close")
            else:
                raise UnsupportedPathComponentError(comp.kind)


def _point(x: Length, y: Length) -> str:
    return f"\\pgfpoint{{{fmt_num(x)}pt}}{{{fmt_num(y)}pt}}"


def _write_all(sink: BinaryIO, data: bytes, written: int) -> int:
    view = memoryview(data)
    while view:
        try:
            n = sink.write(view)
        except (OSError, ValueError) as exc:
            raise TexWriteError(written, exc) from exc
        if n is None:
            n = len(view)
        if n <= 0:
            raise TexWriteError(written, OSError("short write"))
        written += n
        view = view[n:]
    return written
