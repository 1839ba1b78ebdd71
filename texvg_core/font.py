from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
from pathlib import Path
from typing import Protocol

from PIL import ImageFont

from texvg_core.length import Length


LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_NAME = "DejaVu Sans"
# Fonts are rasterized at this pixel size and widths scaled linearly from it.
_MEASURE_SIZE = 100
FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/System/Library/Fonts/Supplemental"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)
FONT_SUFFIXES = (".ttf", ".otf", ".ttc")
FALLBACK_PATTERNS = (
    "dejavusans",
    "liberationsans",
    "helvetica",
    "arial",
)


class Font(Protocol):
    """Font metrics provider: advance width of a string, in points."""

    def width(self, text: str) -> Length:
        ...


@dataclass(frozen=True)
class MonospaceFont:
    size: Length
    advance_ratio: float = 0.6

    def width(self, text: str) -> Length:
        return len(text) * self.size * self.advance_ratio


@dataclass(frozen=True)
class TrueTypeFont:
    name: str = DEFAULT_FONT_NAME
    size: Length = 12.0

    def width(self, text: str) -> Length:
        if not text:
            return 0.0
        font = _load_font(self.name)
        return float(font.getlength(text)) * self.size / _MEASURE_SIZE


@lru_cache(maxsize=64)
def _load_font(name: str) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    font_path = resolve_font_path(name)
    if font_path is not None:
        try:
            return ImageFont.truetype(str(font_path), size=_MEASURE_SIZE)
        except OSError as exc:
            LOGGER.warning("cannot read font file %s (%s); measuring with the Pillow default font", font_path, exc)
            return ImageFont.load_default(size=_MEASURE_SIZE)
    LOGGER.warning("no font file found for %r; measuring with the Pillow default font", name)
    return ImageFont.load_default(size=_MEASURE_SIZE)


def _system_font_files() -> list[Path]:
    files: list[Path] = []
    for base in FONT_DIRS:
        if base.exists():
            files.extend(sorted(p for p in base.rglob("*") if p.suffix.lower() in FONT_SUFFIXES))
    return files


def resolve_font_path(name: str) -> Path | None:
    """Find a font file for `name`, trying the fallback families in order.

    For each family an exact file-stem match beats a partial one.
    """
    files = _system_font_files()
    keys = [f.stem.lower().replace(" ", "") for f in files]
    families = (name.strip() or DEFAULT_FONT_NAME,) + FALLBACK_PATTERNS
    for family in families:
        wanted = family.lower().replace(" ", "")
        best: Path | None = None
        for path, key in zip(files, keys):
            if key == wanted:
                return path
            if best is None and wanted in key:
                best = path
        if best is not None:
            return best
    return None
