"""
CubeHelix color maps.

D. A. Green. A colour scheme for the display of astronomical intensity
images. Bulletin of the Astronomical Society of India 39, pp. 289-295, 2011.
"""
from __future__ import annotations

import numpy as np

from ..conversions.gamut import srgb_to_bytes
from ..types.color_types import TWO_PI
from .common import ColorMapResult, unit_steps
from .params import CubeHelixParams

# Deviation directions from the gray diagonal, rows are (cos, sin) weights
_HELIX_BASIS = np.array([
    [-0.14861, +1.78277],
    [-0.29227, -0.90649],
    [+1.97294, 0.0],
])


def generate_cubehelix(n: int, params: CubeHelixParams) -> ColorMapResult:
    """
    Helix around the gray diagonal of the RGB cube, dark to light.

    Brightness follows t ** gamma; the helix amplitude is
    saturation * lambda * (1 - lambda) / 2 so both ends are exactly black
    and white. The result is gamma-encoded RGB taken as sRGB.
    """
    t = unit_steps(n)
    lam = t ** params.gamma
    amp = params.saturation * lam * (1.0 - lam) / 2.0
    phi = params.hue + TWO_PI * params.rotations * t
    trig = np.stack([np.cos(phi), np.sin(phi)], axis=-1)
    rgb = lam[:, None] + amp[:, None] * (trig @ _HELIX_BASIS.T)
    rgb_bytes, clipped = srgb_to_bytes(rgb)
    return ColorMapResult.from_bytes(rgb_bytes, clipped)
