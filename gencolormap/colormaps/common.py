"""Result type and index helpers shared by the color map generators."""
from __future__ import annotations
from typing import NamedTuple

import numpy as np
from numpy import ndarray as NDArray

from ..conversions.polar import normalize_hue
from ..types.color_types import TWO_PI


class ColorMapResult(NamedTuple):
    """
    A generated color map.

    ``colors`` is a read-only uint8 array of length 3n holding the samples
    as consecutive (r, g, b) triples; ``clipped`` counts the samples that had
    to be clamped into the sRGB cube.
    """
    colors: NDArray
    clipped: int

    @property
    def n(self) -> int:
        return len(self.colors) // 3

    @property
    def rgb(self) -> NDArray:
        """The samples as an (n, 3) view."""
        return self.colors.reshape(-1, 3)

    @classmethod
    def from_bytes(cls, rgb_bytes: NDArray, clipped: NDArray) -> ColorMapResult:
        colors = np.ascontiguousarray(rgb_bytes, dtype=np.uint8).reshape(-1)
        colors.setflags(write=False)
        return cls(colors, int(np.count_nonzero(clipped)))


def unit_steps(n: int) -> NDArray:
    """The interpolation fractions i / (n - 1) for i in [0, n)."""
    return np.linspace(0.0, 1.0, n, dtype=float)


def spread_hues(hue: float, divergence: float, n: int) -> NDArray:
    """
    n hues evenly spaced over an arc of width ``divergence`` starting at ``hue``.

    A full turn (or more) is split into n equal steps so that the first and
    the last hue do not coincide.
    """
    if divergence >= TWO_PI - 1e-6:
        step = TWO_PI / n
    else:
        step = divergence / (n - 1)
    return normalize_hue(hue + step * np.arange(n, dtype=float))


def diverging_positions(n: int) -> NDArray:
    """
    Position of each index relative to the center of a diverging map.

    0 at both ends, 1 at the center (reached only for odd n). Indices k and
    n - 1 - k get identical values.
    """
    i = np.arange(n)
    return 2.0 * np.minimum(i, n - 1 - i) / (n - 1)


def diverging_hues(n: int, hue: float, divergence: float) -> NDArray:
    """First half of the map gets ``hue``, second half ``hue + divergence``."""
    i = np.arange(n)
    h0 = normalize_hue(hue)
    h1 = normalize_hue(hue + divergence)
    return np.where(2 * i <= n - 1, h0, h1)
