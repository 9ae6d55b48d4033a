"""
Perceptually uniform color maps.

Every map here is a straight walk through CIELUV LCh: along the lightness
axis, along the saturation axis (s = C / L) or around the hue circle, with
equal steps per index.
"""
from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..conversions.cieluv import D65_U, D65_V
from ..conversions.polar import normalize_hue, luv_chroma
from ..conversions.gamut import lch_luv_to_srgb_bytes
from ..types.color_types import TWO_PI
from .common import (
    ColorMapResult,
    unit_steps,
    spread_hues,
    diverging_positions,
    diverging_hues,
)
from .params import (
    PUSequentialLightnessParams,
    PUSequentialSaturationParams,
    PUSequentialRainbowParams,
    PUSequentialBlackBodyParams,
    PUDivergingLightnessParams,
    PUDivergingSaturationParams,
    PUQualitativeHueParams,
)


def lightness_ramp(t: NDArray, lightness_range: float) -> NDArray:
    """Lightness centered on 50 spanning ``lightness_range`` * 100 as t goes 0 -> 1."""
    return 100.0 * (0.5 + lightness_range * (t - 0.5))


def _to_result(l: NDArray, s: NDArray, h: NDArray) -> ColorMapResult:
    l, s, h = np.broadcast_arrays(l, s, h)
    lch = np.stack([l, luv_chroma(l, s), h], axis=-1)
    rgb_bytes, clipped = lch_luv_to_srgb_bytes(lch)
    return ColorMapResult.from_bytes(rgb_bytes, clipped)


def planckian_uv(temperature: NDArray) -> Tuple[NDArray, NDArray]:
    """
    CIE 1976 (u', v') of a black body radiator.

    Uses Krystek's rational approximation of the Planckian locus in the
    CIE 1960 UCS (accurate for 1000 K to 15000 K; smooth outside).
    """
    t = np.asarray(temperature, dtype=float)
    u = (0.860117757 + 1.54118254e-4 * t + 1.28641212e-7 * t ** 2) / (
        1.0 + 8.42420235e-4 * t + 7.08145163e-7 * t ** 2)
    v = (0.317398726 + 4.22806245e-5 * t + 4.20481691e-8 * t ** 2) / (
        1.0 - 2.89741816e-5 * t + 1.61456053e-7 * t ** 2)
    return u, 1.5 * v


def generate_pu_sequential_lightness(n: int, params: PUSequentialLightnessParams) -> ColorMapResult:
    """Fixed hue and saturation, lightness rising with the index."""
    t = unit_steps(n)
    return _to_result(
        lightness_ramp(t, params.lightness_range),
        params.saturation,
        normalize_hue(params.hue),
    )


def generate_pu_sequential_saturation(n: int, params: PUSequentialSaturationParams) -> ColorMapResult:
    """Fixed hue and lightness, saturation rising with the index."""
    t = unit_steps(n)
    r = params.saturation_range
    return _to_result(
        100.0 * params.lightness,
        params.saturation * (1.0 - r + r * t),
        normalize_hue(params.hue),
    )


def generate_pu_sequential_rainbow(n: int, params: PUSequentialRainbowParams) -> ColorMapResult:
    """Hue cycles ``rotations`` times while lightness rises monotonically."""
    t = unit_steps(n)
    return _to_result(
        lightness_ramp(t, params.lightness_range),
        params.saturation,
        normalize_hue(params.hue + TWO_PI * params.rotations * t),
    )


def generate_pu_sequential_blackbody(n: int, params: PUSequentialBlackBodyParams) -> ColorMapResult:
    """
    Black body colors for temperatures stepping over the range.

    Hue and saturation follow the Planckian locus as seen from the D65 white
    point; ``saturation`` scales the locus saturation and lightness rises
    from 0 to 100.
    """
    t = unit_steps(n)
    up, vp = planckian_uv(params.temperature + params.temperature_range * t)
    du, dv = up - D65_U, vp - D65_V
    locus_saturation = 13.0 * np.hypot(du, dv)
    return _to_result(
        100.0 * t,
        params.saturation * locus_saturation,
        normalize_hue(np.arctan2(dv, du)),
    )


def generate_pu_diverging_lightness(n: int, params: PUDivergingLightnessParams) -> ColorMapResult:
    """Dark colored ends, lightness rising and saturation fading toward a neutral center."""
    t = diverging_positions(n)
    return _to_result(
        lightness_ramp(t, params.lightness_range),
        params.saturation * (1.0 - t),
        diverging_hues(n, params.hue, params.divergence),
    )


def generate_pu_diverging_saturation(n: int, params: PUDivergingSaturationParams) -> ColorMapResult:
    """Fixed lightness, saturation falling toward the center (to zero for a full range)."""
    t = diverging_positions(n)
    return _to_result(
        100.0 * params.lightness,
        params.saturation * (1.0 - params.saturation_range * t),
        diverging_hues(n, params.hue, params.divergence),
    )


def generate_pu_qualitative_hue(n: int, params: PUQualitativeHueParams) -> ColorMapResult:
    """Evenly spaced hues at one lightness and saturation."""
    return _to_result(
        100.0 * params.lightness,
        params.saturation,
        spread_hues(params.hue, params.divergence, n),
    )
