from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path

import numpy as np

from texvg_core import INCH, NRGBA, Path as VgPath, Point, TrueTypeFont, parse_length, rectangle
from texvg_core.font import DEFAULT_FONT_NAME, Font
from texvg_pgf import DocumentTemplate, TexCanvas


PLOT_MARGIN = 36.0
SERIES_COLOR = (62, 149, 255, 255)
GRID_COLOR = NRGBA(160, 160, 160, 128)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="texvg")
    parser.add_argument("--log-level", default="WARNING", help="Root logger level (DEBUG, INFO, WARNING, ...).")
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Draw a demo picture exercising every primitive.")
    _add_output_args(demo)

    plot = sub.add_parser("plot", help="Draw a line plot of numeric columns read from a text file.")
    plot.add_argument("data", type=Path)
    _add_output_args(plot)
    plot.add_argument("--column", type=int, default=None, help="Y column; x is the row index when only one column is used.")
    plot.add_argument("--x-column", type=int, default=None)
    plot.add_argument("--delimiter", default=None, help="Column delimiter. Default: any whitespace.")
    plot.add_argument("--skip-rows", type=int, default=0)
    plot.add_argument("--title", default=None, help="LaTeX text drawn above the plot.")
    plot.add_argument("--line-width", type=parse_length, default=1.0)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    canvas = TexCanvas(args.width, args.height, document=args.document, template=DocumentTemplate.from_env())
    font = TrueTypeFont(args.font, args.font_size)

    if args.command == "demo":
        draw_demo(canvas, font)
    elif args.command == "plot":
        data = np.loadtxt(args.data, delimiter=args.delimiter, skiprows=args.skip_rows, ndmin=2)
        ys = data[:, args.column if args.column is not None else -1]
        if args.x_column is not None:
            xs = data[:, args.x_column]
        else:
            xs = np.arange(ys.size, dtype=np.float64)
        draw_line_plot(canvas, font, xs, ys, title=args.title, line_width=args.line_width)
    else:
        raise RuntimeError(f"unsupported command: {args.command}")

    written = canvas.save(args.output)
    print(f"wrote {written} bytes to {args.output}")


def _add_output_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("output", type=Path)
    p.add_argument("--width", type=parse_length, default=4 * INCH, help="Picture width, e.g. 4in, 10cm, 288pt.")
    p.add_argument("--height", type=parse_length, default=3 * INCH)
    p.add_argument("--document", action="store_true", help="Wrap the picture in a standalone LaTeX document.")
    p.add_argument("--font", default=DEFAULT_FONT_NAME, help="Font used to measure label widths.")
    p.add_argument("--font-size", type=float, default=10.0)


def draw_demo(canvas: TexCanvas, font: Font) -> None:
    w, h = canvas.size()
    canvas.stroke(rectangle(0.0, 0.0, w, h))

    with canvas.scope():
        canvas.set_color(GRID_COLOR)
        canvas.set_line_width(0.5)
        canvas.set_line_dash((2.0, 2.0), 0.0)
        for i in range(1, 4):
            x = w * i / 4.0
            y = h * i / 4.0
            canvas.stroke(VgPath().move(Point(x, 0.0)).line(Point(x, h)))
            canvas.stroke(VgPath().move(Point(0.0, y)).line(Point(w, y)))

    with canvas.scope():
        canvas.set_color(NRGBA(255, 170, 70, 200))
        radius = min(w, h) / 6.0
        center = Point(w / 2.0, h / 2.0)
        disc = VgPath().move(center + Point(radius, 0.0)).arc(center, radius, 0.0, 2.0 * math.pi).close()
        canvas.fill(disc)

    with canvas.scope():
        canvas.translate(w / 2.0, h / 2.0)
        canvas.rotate(math.pi / 12.0)
        canvas.scale(1.5, 1.5)
        text = "$y = \\sin(x)$"
        canvas.fill_string(font, -0.5 * font.width(text), 0.0, text)


def draw_line_plot(
    canvas: TexCanvas,
    font: Font,
    xs: np.ndarray,
    ys: np.ndarray,
    *,
    title: str | None = None,
    line_width: float = 1.0,
) -> None:
    mask = np.isfinite(xs) & np.isfinite(ys)
    if not np.any(mask):
        raise ValueError("series contains no finite points")
    xs = xs[mask]
    ys = ys[mask]

    w, h = canvas.size()
    x0, y0 = PLOT_MARGIN, PLOT_MARGIN
    plot_w = max(1.0, w - 2.0 * PLOT_MARGIN)
    plot_h = max(1.0, h - 2.0 * PLOT_MARGIN)
    xmin, xmax = float(xs.min()), float(xs.max())
    ymin, ymax = float(ys.min()), float(ys.max())
    xspan = xmax - xmin if xmax > xmin else 1.0
    yspan = ymax - ymin if ymax > ymin else 1.0

    canvas.stroke(rectangle(x0, y0, x0 + plot_w, y0 + plot_h))

    with canvas.scope():
        canvas.set_color(SERIES_COLOR)
        canvas.set_line_width(line_width)
        px = x0 + (xs - xmin) / xspan * plot_w
        py = y0 + (ys - ymin) / yspan * plot_h
        canvas.stroke(VgPath.from_xy(px, py))

    label_y = y0 - 12.0
    for value, x in ((xmin, x0), (xmax, x0 + plot_w)):
        label = f"{value:g}"
        canvas.fill_string(font, x - 0.5 * font.width(label), label_y, label)
    for value, y in ((ymin, y0), (ymax, y0 + plot_h)):
        label = f"{value:g}"
        canvas.fill_string(font, x0 - font.width(label) - 4.0, y, label)
    if title:
        canvas.fill_string(font, x0 + plot_w / 2.0 - 0.5 * font.width(title), y0 + plot_h + 6.0, title)


if __name__ == "__main__":
    main()
