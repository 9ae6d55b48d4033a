"""
Moreland's Msh color space, a polar form of CIELAB.

K. Moreland. Diverging Color Maps for Scientific Visualization. In Proc.
5th Int. Symp. Visual Computing, pp. 92-103, 2009.
"""
import math
from typing import Tuple

from boundednumbers.functions import clamp


def lab_to_msh(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """CIELAB to (M, s, h): magnitude, angle from the L axis, hue angle."""
    m = math.sqrt(l * l + a * a + b * b)
    s = math.acos(clamp(l / m, -1.0, 1.0)) if m > 0 else 0.0
    h = math.atan2(b, a)
    return m, s, h

def msh_to_lab(m: float, s: float, h: float) -> Tuple[float, float, float]:
    """(M, s, h) to CIELAB."""
    return m * math.cos(s), m * math.sin(s) * math.cos(h), m * math.sin(s) * math.sin(h)
