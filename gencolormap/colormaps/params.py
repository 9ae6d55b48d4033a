"""
Parameter bags, one per color map family.

Angles are in radians, ratios are plain floats, temperatures are in Kelvin
and colors are sRGB byte triples. Values arrive resolved; see
``gencolormap.defaults`` for the default table and validation.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class BrewerSequentialParams:
    hue: float
    contrast: float
    saturation: float
    brightness: float
    warmth: float


@dataclass(frozen=True)
class BrewerDivergingParams:
    hue: float
    divergence: float
    contrast: float
    saturation: float
    brightness: float
    warmth: float


@dataclass(frozen=True)
class BrewerQualitativeParams:
    hue: float
    divergence: float
    contrast: float
    saturation: float
    brightness: float


@dataclass(frozen=True)
class PUSequentialLightnessParams:
    hue: float
    saturation: float
    lightness_range: float


@dataclass(frozen=True)
class PUSequentialSaturationParams:
    hue: float
    lightness: float
    saturation: float
    saturation_range: float


@dataclass(frozen=True)
class PUSequentialRainbowParams:
    hue: float
    rotations: float
    lightness_range: float
    saturation: float


@dataclass(frozen=True)
class PUSequentialBlackBodyParams:
    temperature: float
    temperature_range: float
    saturation: float


@dataclass(frozen=True)
class PUDivergingLightnessParams:
    hue: float
    divergence: float
    saturation: float
    lightness_range: float


@dataclass(frozen=True)
class PUDivergingSaturationParams:
    hue: float
    divergence: float
    lightness: float
    saturation: float
    saturation_range: float


@dataclass(frozen=True)
class PUQualitativeHueParams:
    hue: float
    divergence: float
    lightness: float
    saturation: float


@dataclass(frozen=True)
class CubeHelixParams:
    """``hue`` is the helix phase at the dark end (Green's start * 2π/3)."""
    hue: float
    rotations: float
    saturation: float
    gamma: float


@dataclass(frozen=True)
class MorelandParams:
    color0: Tuple[int, int, int]
    color1: Tuple[int, int, int]


@dataclass(frozen=True)
class McNamesParams:
    periods: float
