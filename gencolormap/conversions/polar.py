"""Polar (lightness, chroma, hue) forms shared by CIELAB and CIELUV."""
import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from boundednumbers.functions import cyclic_wrap_float

from ..types.color_types import TWO_PI


def normalize_hue(h):
    """Wrap a hue angle (radians, scalar or array) into [0, 2π)."""
    wrapped = cyclic_wrap_float(h, 0.0, TWO_PI)
    # tiny negative angles round up to exactly 2π
    if isinstance(wrapped, np.ndarray):
        return np.where(wrapped >= TWO_PI, 0.0, wrapped)
    return 0.0 if wrapped >= TWO_PI else wrapped

def hue_difference(h0: float, h1: float) -> float:
    """Unsigned angular distance between two hues, in [0, π]."""
    d = abs(h0 - h1) % TWO_PI
    return min(d, TWO_PI - d)


def cartesian_to_polar(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """(L, a, b) or (L, u, v) to (L, C, h) with h in [0, 2π)."""
    c = math.hypot(a, b)
    h = math.atan2(b, a)
    if h < 0.0:
        h += TWO_PI
    return l, c, h

def polar_to_cartesian(l: float, c: float, h: float) -> Tuple[float, float, float]:
    """(L, C, h) to (L, a, b) or (L, u, v)."""
    return l, c * math.cos(h), c * math.sin(h)

def np_cartesian_to_polar(lab: NDArray) -> NDArray:
    """Vectorized: (..., 3) cartesian array to (..., 3) polar array."""
    lab = np.asarray(lab, dtype=float)
    l, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    c = np.hypot(a, b)
    h = np.arctan2(b, a)
    h = np.where(h < 0.0, h + TWO_PI, h)
    return np.stack([l, c, h], axis=-1)

def np_polar_to_cartesian(lch: NDArray) -> NDArray:
    """Vectorized: (..., 3) polar array to (..., 3) cartesian array."""
    lch = np.asarray(lch, dtype=float)
    l, c, h = lch[..., 0], lch[..., 1], lch[..., 2]
    return np.stack([l, c * np.cos(h), c * np.sin(h)], axis=-1)


# CIELAB and CIELUV share the polar form
lab_to_lch = cartesian_to_polar
lch_to_lab = polar_to_cartesian
luv_to_lch = cartesian_to_polar
lch_to_luv = polar_to_cartesian
np_lab_to_lch = np_cartesian_to_polar
np_lch_to_lab = np_polar_to_cartesian
np_luv_to_lch = np_cartesian_to_polar
np_lch_to_luv = np_polar_to_cartesian


def luv_saturation(l, c):
    """CIELUV saturation s = C / L (black is treated as unsaturated)."""
    return c / np.maximum(l, 1e-8)

def luv_chroma(l, s):
    """CIELUV chroma for lightness ``l`` and saturation ``s``."""
    return s * l
