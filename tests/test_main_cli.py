from __future__ import annotations

import contextlib
import io
import math
from pathlib import Path
import tempfile
import unittest

import numpy as np

import main as cli
from texvg_core import MonospaceFont
from texvg_pgf import TexCanvas, fmt_num
from texvg_pgf.format import degrees


class CommandLineTests(unittest.TestCase):
    def test_demo_writes_standalone_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "demo.tex"
            stdout = io.StringIO()
            with contextlib.redirect_stdout(stdout):
                cli.main(["demo", str(out), "--document", "--width", "10cm", "--height", "6cm"])
            text = out.read_text(encoding="utf-8")
        self.assertTrue(text.startswith("%%%%%% generated by texvg %%%%%%\n"))
        self.assertTrue(text.endswith("\\end{pgfpicture}\n\\end{document}\n"))
        self.assertEqual(text.count("\\begin{pgfscope}"), text.count("\\end{pgfscope}"))
        self.assertIn("\\pgfpatharc{0}{360}", text)
        self.assertIn(f"\\pgftransformrotate{{{fmt_num(degrees(math.pi / 12.0))}}}\n", text)
        self.assertIn("wrote", stdout.getvalue())

    def test_plot_reads_columns(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            data = Path(tmp) / "data.csv"
            data.write_text("0,1\n1,4\n2,9\n", encoding="utf-8")
            out = Path(tmp) / "plot.tex"
            with contextlib.redirect_stdout(io.StringIO()):
                cli.main(["plot", str(data), str(out), "--delimiter", ",", "--x-column", "0", "--column", "1", "--title", "squares"])
            text = out.read_text(encoding="utf-8")
        self.assertTrue(text.startswith("%% texvg created for LaTeX/pgf\n"))
        self.assertEqual(text.count("\\pgfpathmoveto"), 2)
        self.assertIn("]{squares}", text)

    def test_draw_line_plot_maps_data_into_plot_area(self) -> None:
        canvas = TexCanvas.new_document(172.0, 172.0)
        xs = np.asarray([0.0, 1.0, np.nan, 2.0])
        ys = np.asarray([0.0, 1.0, 5.0, 2.0])
        cli.draw_line_plot(canvas, MonospaceFont(10.0), xs, ys)
        out = io.BytesIO()
        canvas.write_to(out)
        text = out.getvalue().decode("utf-8")
        self.assertIn("\\pgfpathmoveto{\\pgfpoint{36pt}{36pt}}", text)
        self.assertIn("\\pgflineto{\\pgfpoint{86pt}{86pt}}", text)
        self.assertIn("\\pgflineto{\\pgfpoint{136pt}{136pt}}", text)

    def test_draw_line_plot_rejects_all_nan(self) -> None:
        canvas = TexCanvas(100.0, 100.0)
        with self.assertRaises(ValueError):
            cli.draw_line_plot(canvas, MonospaceFont(10.0), np.asarray([np.nan]), np.asarray([1.0]))


if __name__ == "__main__":
    unittest.main()
