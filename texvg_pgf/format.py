from __future__ import annotations

import math


DEG_PER_RADIAN = 180.0 / math.pi


def fmt_num(value: float) -> str:
    """Shortest round-trip decimal; integral values lose their trailing `.0`."""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def degrees(rad: float) -> float:
    return rad * DEG_PER_RADIAN
