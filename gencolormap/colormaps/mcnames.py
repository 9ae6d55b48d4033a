"""
McNames color maps.

J. McNames. An effective color scale for simultaneous color and gray-scale
publications. IEEE Signal Processing Magazine 23(1), pp. 82-87, 2006.

A helix around the gray axis of the gamma-encoded RGB cube. The helix turns
in the plane perpendicular to the Rec. 601 luma weights, so the luma of
every sample equals its position t and the map prints as a clean gray ramp.
"""
from __future__ import annotations

import math

import numpy as np

from ..conversions.gamut import srgb_to_bytes
from ..types.color_types import TWO_PI
from .common import ColorMapResult, unit_steps
from .params import McNamesParams

LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])


def _helix_frame():
    w = LUMA_WEIGHTS / np.linalg.norm(LUMA_WEIGHTS)
    e1 = np.array([1.0, -1.0, 0.0])
    e1 = e1 - np.dot(e1, w) * w
    e1 = e1 / np.linalg.norm(e1)
    e2 = np.cross(w, e1)
    return w, e1, e2


def generate_mcnames(n: int, params: McNamesParams) -> ColorMapResult:
    """Dark to light, ``periods`` full turns of the helix across the map."""
    w, e1, e2 = _helix_frame()
    # distance from the gray axis to the cube faces, per unit of t
    slope = math.sqrt(1.0 - float(np.min(w)) ** 2)
    t = unit_steps(n)
    radius = np.minimum(t, 1.0 - t) / slope
    phi = TWO_PI * params.periods * t
    offset = radius[:, None] * (np.cos(phi)[:, None] * e1 + np.sin(phi)[:, None] * e2)
    rgb = t[:, None] + offset
    rgb_bytes, clipped = srgb_to_bytes(rgb)
    return ColorMapResult.from_bytes(rgb_bytes, clipped)
