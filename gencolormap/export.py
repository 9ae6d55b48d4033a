"""Serialization of generated color maps: CSV, JSON and binary PPM."""
from __future__ import annotations

import io
import json
from typing import Callable, Dict, Union

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from .types.map_type import OutputFormat


def _as_rgb(colors: NDArray) -> NDArray:
    arr = np.asarray(colors, dtype=np.uint8)
    if arr.size % 3 != 0:
        raise ValueError(f"expected 3n color bytes, got {arr.size}")
    return arr.reshape(-1, 3)


def to_csv(colors: NDArray) -> str:
    """One ``r, g, b`` line per color."""
    return "".join(f"{r}, {g}, {b}\n" for r, g, b in _as_rgb(colors).tolist())


def to_json(colors: NDArray) -> str:
    """A JSON object ``{"colormap": [[r, g, b], ...]}``."""
    return json.dumps({"colormap": _as_rgb(colors).tolist()}, indent=2) + "\n"


def to_ppm(colors: NDArray) -> bytes:
    """Binary PPM (P6) image, one pixel per color, n x 1."""
    rgb = _as_rgb(colors)
    image = Image.fromarray(np.array(rgb.reshape(1, -1, 3)))
    buffer = io.BytesIO()
    image.save(buffer, format="PPM")
    return buffer.getvalue()


SERIALIZERS: Dict[OutputFormat, Callable[[NDArray], Union[str, bytes]]] = {
    OutputFormat.CSV: to_csv,
    OutputFormat.JSON: to_json,
    OutputFormat.PPM: to_ppm,
}


def serialize(colors: NDArray, fmt: Union[OutputFormat, str]) -> Union[str, bytes]:
    try:
        fmt = OutputFormat(fmt)
    except ValueError:
        valid = ", ".join(f.value for f in OutputFormat)
        raise ValueError(f"Unknown output format: {fmt!r}. Expected one of: {valid}") from None
    return SERIALIZERS[fmt](colors)
