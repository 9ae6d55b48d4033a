"""
Brewer-like color maps.

M. Wijffelaars, R. Vliegen, J.J. van Wijk, E.-J. van der Linden. Generating
color palettes using intuitive parameters. Computer Graphics Forum 27(3),
pp. 743-750, 2008.

All geometry lives in CIELUV. A sequential map follows a curve made of two
quadratic Bézier segments from black through the most saturated color of the
chosen hue to a (possibly warm-tinted) white; colors are picked on that curve
at lightness values given by the contrast/brightness law.
"""
from __future__ import annotations

import math
from bisect import bisect_right
from typing import List, Tuple

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp

from ..conversions.xyz import SRGB_TO_XYZ, linear_rgb_to_xyz
from ..conversions.cieluv import xyz_to_luv, D65_U, D65_V
from ..conversions.polar import normalize_hue, luv_to_lch
from ..conversions.gamut import luv_to_srgb_bytes, lch_luv_to_srgb_bytes
from .common import ColorMapResult, unit_steps, spread_hues
from .params import BrewerSequentialParams, BrewerDivergingParams, BrewerQualitativeParams

Segment = Tuple[NDArray, NDArray, NDArray]

WHITE_LUV = np.array([100.0, 0.0, 0.0])
BLACK_LUV = np.zeros(3)
YELLOW_LUV = np.array(xyz_to_luv(*linear_rgb_to_xyz(1.0, 1.0, 0.0)))

# Cube corners in order of increasing LUV hue, red first
_CORNERS = ((1, 0, 0), (1, 1, 0), (0, 1, 0), (0, 1, 1), (0, 0, 1), (1, 0, 1))
_CORNER_HUES = [luv_to_lch(*xyz_to_luv(*linear_rgb_to_xyz(*c)))[2] for c in _CORNERS]

# (varying, zero, one) channel indices of the cube edge leaving each corner
_EDGES = (
    (1, 2, 0),  # red -> yellow
    (0, 2, 1),  # yellow -> green
    (2, 0, 1),  # green -> cyan
    (1, 0, 2),  # cyan -> blue
    (0, 1, 2),  # blue -> magenta
    (2, 1, 0),  # magenta -> red
)


def most_saturated_color(hue: float) -> NDArray:
    """
    The most saturated sRGB color with the given CIELUV hue, as LUV (L, u, v).

    That color lies on the cube edge between the primary and secondary
    colors bracketing the hue: one channel is 0, one is 1 and the third
    follows from requiring the (u', v') offset from the white point to point
    along the hue direction.
    """
    hue = normalize_hue(hue)
    varying, _, one = _EDGES[bisect_right(_CORNER_HUES, hue) - 1]

    alpha = -math.sin(hue)
    beta = math.cos(hue)
    t = alpha * D65_U + beta * D65_V

    def q(ch: int) -> float:
        m = SRGB_TO_XYZ[:, ch]
        return t * (m[0] + 15 * m[1] + 3 * m[2]) - (4 * alpha * m[0] + 9 * beta * m[1])

    rgb = [0.0, 0.0, 0.0]
    rgb[one] = 1.0
    q_varying = q(varying)
    rgb[varying] = clamp(-q(one) / q_varying, 0.0, 1.0) if q_varying != 0 else 0.0
    return np.array(xyz_to_luv(*linear_rgb_to_xyz(*rgb)))


def max_chroma(l: float, hue: float) -> float:
    """
    Approximate largest in-gamut LUV chroma for lightness l and a hue.

    The gamut slice of one hue is approximated by the triangle through
    black, the most saturated color and white.
    """
    l_sat, c_sat, _ = luv_to_lch(*most_saturated_color(hue))
    l = clamp(l, 0.0, 100.0)
    if l <= l_sat:
        return c_sat * l / l_sat
    return c_sat * (100.0 - l) / (100.0 - l_sat)


def brewer_lightness(x, contrast: float, brightness: float):
    """Lightness law of the Brewer-like maps; x in [0, 1], 1 is the light end."""
    return 125.0 - 125.0 * 0.2 ** ((1.0 - contrast) * brightness + x * contrast)


def color_curve(hue: float, saturation: float, warmth: float) -> Tuple[Segment, Segment]:
    """The two Bézier segments (dark half, light half) for one hue."""
    p0 = BLACK_LUV
    p1 = most_saturated_color(hue)
    p2 = (1.0 - warmth) * WHITE_LUV + warmth * YELLOW_LUV
    q0 = (1.0 - saturation) * p0 + saturation * p1
    q2 = (1.0 - saturation) * p2 + saturation * p1
    q1 = 0.5 * (q0 + q2)
    return (p0, q0, q1), (q1, q2, p2)


def _bezier(segment: Segment, t: float) -> NDArray:
    b0, b1, b2 = segment
    return (1 - t) ** 2 * b0 + 2 * (1 - t) * t * b1 + t ** 2 * b2


def _bezier_parameter(a: float, b: float, c: float, l: float) -> float:
    """Parameter in [0, 1] at which B(t) = (1-t)^2 a + 2(1-t)t b + t^2 c equals l."""
    denom = a - 2 * b + c
    if abs(denom) < 1e-9:
        if abs(b - a) < 1e-12:
            return 0.0
        return clamp((l - a) / (2 * (b - a)), 0.0, 1.0)
    root = math.sqrt(max(b * b - a * c + denom * l, 0.0))
    candidates = ((a - b + root) / denom, (a - b - root) / denom)
    best = min(candidates, key=lambda t: abs(t - clamp(t, 0.0, 1.0)))
    return clamp(best, 0.0, 1.0)


def curve_point(curve: Tuple[Segment, Segment], l: float) -> NDArray:
    """The LUV point of the curve with lightness l."""
    dark, light = curve
    segment = dark if l <= dark[2][0] else light
    t = _bezier_parameter(segment[0][0], segment[1][0], segment[2][0], l)
    return _bezier(segment, t)


def generate_brewer_sequential(n: int, params: BrewerSequentialParams) -> ColorMapResult:
    """Single-hue map from light (index 0) to dark (index n - 1)."""
    curve = color_curve(params.hue, params.saturation, params.warmth)
    lightness = brewer_lightness(1.0 - unit_steps(n), params.contrast, params.brightness)
    luv = np.array([curve_point(curve, l) for l in lightness])
    rgb_bytes, clipped = luv_to_srgb_bytes(luv)
    return ColorMapResult.from_bytes(rgb_bytes, clipped)


def generate_brewer_diverging(n: int, params: BrewerDivergingParams) -> ColorMapResult:
    """
    Two sequential branches, dark at both ends and meeting at the light center.

    Samples k and n - 1 - k share lightness and chroma (the smaller of the
    two branch chromas); the center of an odd-sized map is neutral gray.
    """
    curves = [
        color_curve(h, params.saturation, params.warmth)
        for h in (params.hue, params.hue + params.divergence)
    ]
    center = (n - 1) / 2.0
    lch: List[Tuple[float, float, float]] = []
    for i in range(n):
        x = 1.0 - abs(i - center) / center
        l = float(brewer_lightness(x, params.contrast, params.brightness))
        (l0, c0, h0), (l1, c1, h1) = (luv_to_lch(*curve_point(curve, l)) for curve in curves)
        c = min(c0, c1)
        if i < center:
            lch.append((l0, c, h0))
        elif i > center:
            lch.append((l1, c, h1))
        else:
            lch.append((l, 0.0, 0.0))
    rgb_bytes, clipped = lch_luv_to_srgb_bytes(np.array(lch))
    return ColorMapResult.from_bytes(rgb_bytes, clipped)


def generate_brewer_qualitative(n: int, params: BrewerQualitativeParams) -> ColorMapResult:
    """
    n hues spread over the divergence arc at one lightness and one chroma.

    The chroma is the saturation fraction of the smallest in-gamut chroma
    among the chosen hues, so no hue stands out.
    """
    l = float(brewer_lightness(0.5, params.contrast, params.brightness))
    hues = spread_hues(params.hue, params.divergence, n)
    c = params.saturation * min(max_chroma(l, h) for h in hues)
    lch = np.stack([np.full(n, l), np.full(n, c), hues], axis=-1)
    rgb_bytes, clipped = lch_luv_to_srgb_bytes(lch)
    return ColorMapResult.from_bytes(rgb_bytes, clipped)
