"""
Moreland diverging color maps.

K. Moreland. Diverging Color Maps for Scientific Visualization. In Proc.
5th Int. Symp. Visual Computing, pp. 92-103, 2009.

The two end colors are interpolated in Msh. When both ends are saturated
and far apart in hue, the path passes through an unsaturated (near white)
midpoint so the map diverges instead of sweeping through other hues.
"""
from __future__ import annotations

import math
from typing import List

import numpy as np

from ..conversions.cielab import xyz_to_lab
from ..conversions.msh import lab_to_msh, msh_to_lab
from ..conversions.polar import hue_difference
from ..conversions.gamut import lab_to_srgb_bytes, srgb_bytes_to_xyz
from ..types.color_types import ByteTriplet, Triplet, triplet_to_array
from .common import ColorMapResult
from .params import MorelandParams

Msh = Triplet

SATURATED = 0.05
MIN_MIDPOINT_MAGNITUDE = 88.0


def byte_triplet_to_msh(color: ByteTriplet) -> Msh:
    xyz = srgb_bytes_to_xyz(triplet_to_array(color))
    return lab_to_msh(*xyz_to_lab(*xyz))


def adjust_hue(saturated: Msh, unsaturated_m: float) -> float:
    """
    Hue to give an unsaturated color interpolated against ``saturated``.

    The hue is spun away from the saturated color's hue by an amount that
    grows with the difference in magnitude, which keeps the lightness
    change along the path perceptually smooth.
    """
    m, s, h = saturated
    if m >= unsaturated_m:
        return h
    spin = s * math.sqrt(unsaturated_m ** 2 - m ** 2) / (m * math.sin(s))
    if h > -math.pi / 3:
        return h + spin
    return h - spin


def interpolate_msh(msh0: Msh, msh1: Msh, t: float) -> Msh:
    """Msh color at fraction t between two end colors."""
    m0, s0, h0 = msh0
    m1, s1, h1 = msh1
    if s0 > SATURATED and s1 > SATURATED and hue_difference(h0, h1) > math.pi / 3:
        mid = max(m0, m1, MIN_MIDPOINT_MAGNITUDE)
        if t < 0.5:
            m1, s1, h1 = mid, 0.0, 0.0
            t = 2.0 * t
        else:
            m0, s0, h0 = mid, 0.0, 0.0
            t = 2.0 * t - 1.0
    if s0 < SATURATED and s1 > SATURATED:
        h0 = adjust_hue((m1, s1, h1), m0)
    elif s1 < SATURATED and s0 > SATURATED:
        h1 = adjust_hue((m0, s0, h0), m1)
    return (
        (1.0 - t) * m0 + t * m1,
        (1.0 - t) * s0 + t * s1,
        (1.0 - t) * h0 + t * h1,
    )


def generate_moreland(n: int, params: MorelandParams) -> ColorMapResult:
    msh0 = byte_triplet_to_msh(params.color0)
    msh1 = byte_triplet_to_msh(params.color1)
    lab: List[Triplet] = []
    for i in range(n):
        t = i / (n - 1)
        lab.append(msh_to_lab(*interpolate_msh(msh0, msh1, t)))
    rgb_bytes, clipped = lab_to_srgb_bytes(np.array(lab))
    return ColorMapResult.from_bytes(rgb_bytes, clipped)
