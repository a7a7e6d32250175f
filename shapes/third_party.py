from __future__ import annotations

import numpy as np


def fmt_number(v: float) -> str:
    """
    Default float formatting: 10.0 -> "10", 2.5 -> "2.5".
    """
    return format(float(v), "g")


class ThirdPartyTriangle:
    """
    Stand-alone triangle renderer with its own interface (render, not draw).
    Knows nothing about Shape; Triangle adapts it.
    """
    def __init__(self, x1: float = 0, y1: float = 0,
                 x2: float = 0, y2: float = 0,
                 x3: float = 0, y3: float = 0):
        self.vertices = np.array([[x1, y1], [x2, y2], [x3, y3]], dtype=float)

    def render(self) -> str:
        parts = " ".join(f"({fmt_number(x)},{fmt_number(y)})" for x, y in self.vertices)
        return f"Third-Party Triangle {parts}"
