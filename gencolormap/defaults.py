"""
Default parameter tables and the resolver that layers overrides onto them.

Angles in the tables and in overrides are in degrees; the resolved
parameter dataclasses carry radians.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional, TypeVar, Union

from .types.map_type import MapType
from .types.color_types import is_byte_triplet
from .colormaps.assembly import GENERATORS, to_map_type

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEGREE_OPTIONS = frozenset({"hue", "divergence"})
COLOR_OPTIONS = frozenset({"color0", "color1"})
RANGE_OPTIONS = ("lightness_range", "saturation_range", "temperature_range")

BREWER_DEFAULT_CONTRAST = 0.88

# option domains; anything not listed (hues, rotations) takes any finite value
UNIT_OPTIONS = frozenset({
    "contrast", "brightness", "warmth", "lightness", "lightness_range", "saturation_range",
})
NON_NEGATIVE_OPTIONS = frozenset({"saturation", "temperature_range"})
POSITIVE_OPTIONS = frozenset({"gamma", "periods", "temperature"})

DEFAULTS: Dict[MapType, Dict[str, Any]] = {
    MapType.BREWER_SEQUENTIAL: {
        "hue": 0.0, "contrast": BREWER_DEFAULT_CONTRAST,
        "saturation": 0.6, "brightness": 0.75, "warmth": 0.15,
    },
    MapType.BREWER_DIVERGING: {
        "hue": 0.0, "divergence": 240.0, "contrast": BREWER_DEFAULT_CONTRAST,
        "saturation": 0.7, "brightness": 0.75, "warmth": 0.15,
    },
    MapType.BREWER_QUALITATIVE: {
        "hue": 0.0, "divergence": 240.0, "contrast": 0.5,
        "saturation": 0.5, "brightness": 0.8,
    },
    MapType.PU_SEQUENTIAL_LIGHTNESS: {
        "hue": 20.0, "saturation": 0.45, "lightness_range": 0.95,
    },
    MapType.PU_SEQUENTIAL_SATURATION: {
        "hue": 20.0, "lightness": 0.5, "saturation": 1.5, "saturation_range": 0.95,
    },
    MapType.PU_SEQUENTIAL_RAINBOW: {
        "hue": 0.0, "rotations": -1.5, "lightness_range": 0.95, "saturation": 1.2,
    },
    MapType.PU_SEQUENTIAL_BLACKBODY: {
        "temperature": 250.0, "temperature_range": 6000.0, "saturation": 1.0,
    },
    MapType.PU_DIVERGING_LIGHTNESS: {
        "hue": 20.0, "divergence": 240.0, "saturation": 1.2, "lightness_range": 0.7,
    },
    MapType.PU_DIVERGING_SATURATION: {
        "hue": 20.0, "divergence": 240.0, "lightness": 0.5,
        "saturation": 1.5, "saturation_range": 1.0,
    },
    MapType.PU_QUALITATIVE_HUE: {
        "hue": 0.0, "divergence": 300.0, "lightness": 0.55, "saturation": 0.6,
    },
    MapType.CUBEHELIX: {
        "hue": 60.0, "rotations": -1.5, "saturation": 1.2, "gamma": 1.0,
    },
    MapType.MORELAND: {
        "color0": (59, 76, 192), "color1": (180, 4, 38),
    },
    MapType.MCNAMES: {
        "periods": 2.0,
    },
}


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default


def brewer_contrast(n: int) -> float:
    """Default contrast of the sequential and diverging Brewer maps; lower for few colors."""
    if n <= 9:
        return min(BREWER_DEFAULT_CONTRAST, 0.34 + 0.06 * n)
    return BREWER_DEFAULT_CONTRAST


def defaults_for(map_type: Union[MapType, str], n: int) -> Dict[str, Any]:
    """The default option values (angles in degrees) of a family for n colors."""
    map_type = to_map_type(map_type)
    table = dict(DEFAULTS[map_type])
    if map_type in (MapType.BREWER_SEQUENTIAL, MapType.BREWER_DIVERGING):
        table["contrast"] = brewer_contrast(n)
    return table


def _resolve_range(table: Dict[str, Any], overrides: Dict[str, Any], map_type: MapType) -> None:
    # "range" is the generic name for the one range option a family uses
    value = overrides.pop("range", None)
    if value is None:
        return
    for name in RANGE_OPTIONS:
        if name in table:
            if overrides.get(name) is None:
                overrides[name] = value
            return
    raise ValueError(f"Option 'range' does not apply to {map_type.value}")


def _check_number(name: str, value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Option {name!r} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"Option {name!r} must be finite, got {value!r}")
    return number


def _check_domain(name: str, number: float) -> None:
    if name in UNIT_OPTIONS and not 0.0 <= number <= 1.0:
        raise ValueError(f"Option {name!r} must be in [0, 1], got {number}")
    if name in NON_NEGATIVE_OPTIONS and number < 0.0:
        raise ValueError(f"Option {name!r} must not be negative, got {number}")
    if name in POSITIVE_OPTIONS and number <= 0.0:
        raise ValueError(f"Option {name!r} must be positive, got {number}")


def resolve_params(map_type: Union[MapType, str], n: int, **overrides: Any):
    """
    Build the parameter dataclass of a family from defaults and overrides.

    Overrides that are None fall back to the default. Angles (hue,
    divergence) are given in degrees.

    Args:
        map_type: family, a MapType or its name
        n: number of colors, at least 2 (some defaults depend on it)
        **overrides: option values by field name, plus the generic "range"

    Returns:
        The family's parameter dataclass, angles in radians

    Raises:
        ValueError: n < 2, unknown family, option not used by the family,
            non-numeric, non-finite or out-of-range value, malformed color
    """
    map_type = to_map_type(map_type)
    if n < 2:
        raise ValueError(f"A color map needs at least 2 colors, got n={n}")

    table = defaults_for(map_type, n)
    overrides = dict(overrides)
    _resolve_range(table, overrides, map_type)

    unknown = sorted(k for k, v in overrides.items() if k not in table and v is not None)
    if unknown:
        raise ValueError(f"Option(s) {', '.join(unknown)} do not apply to {map_type.value}")

    values: Dict[str, Any] = {}
    for name, default in table.items():
        value = value_or_default(overrides.get(name), default)
        if name in COLOR_OPTIONS:
            if not is_byte_triplet(value):
                raise ValueError(f"Option {name!r} must be three integers in [0, 255], got {value!r}")
            values[name] = tuple(int(v) for v in value)
            continue
        number = _check_number(name, value)
        _check_domain(name, number)
        values[name] = math.radians(number) if name in DEGREE_OPTIONS else number

    params = GENERATORS[map_type][0](**values)
    logger.debug("resolved %s parameters: %s", map_type.value, params)
    return params
