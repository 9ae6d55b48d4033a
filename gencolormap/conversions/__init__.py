"""
gencolormap Color Space Conversions
===================================

The color-space kernel behind every color map generator: conversions
between sRGB bytes, linear-light RGB, CIE XYZ, CIELAB, CIELUV and their
polar forms, plus the gamut-clipping policy.

Features
--------
- Standard piecewise sRGB transfer curve (not a plain 2.2 gamma)
- D65 reference white throughout
- Scalar functions for single colors
- Vectorized numpy functions (``np_`` prefix) over arrays of shape (..., 3)
- Hues in radians, normalized to [0, 2π)

Conversion Functions
-------------------

sRGB ↔ linear RGB:
    srgb_to_linear(c), linear_to_srgb(c)
    byte_to_linear(b), linear_to_byte(c)
    np_srgb_to_linear(c), np_linear_to_srgb(c), np_bytes_to_linear(b)

linear RGB ↔ XYZ:
    linear_rgb_to_xyz(r, g, b), xyz_to_linear_rgb(x, y, z)
    np_linear_rgb_to_xyz(rgb), np_xyz_to_linear_rgb(xyz)

XYZ ↔ CIELAB / CIELUV:
    xyz_to_lab, lab_to_xyz, np_xyz_to_lab, np_lab_to_xyz
    xyz_to_luv, luv_to_xyz, np_xyz_to_luv, np_luv_to_xyz

Polar forms:
    lab_to_lch, lch_to_lab, luv_to_lch, lch_to_luv (and np_ variants)
    lab_to_msh, msh_to_lab (Moreland)

Gamut:
    srgb_to_bytes(rgb) -> (bytes, clipped_mask)
    luv_to_srgb_bytes, lch_luv_to_srgb_bytes, lab_to_srgb_bytes, ...

Examples
--------
>>> from gencolormap.conversions import byte_to_linear, linear_rgb_to_xyz, xyz_to_lab
>>> r, g, b = (byte_to_linear(v) for v in (255, 128, 0))
>>> l, a, b_ = xyz_to_lab(*linear_rgb_to_xyz(r, g, b))
"""

from .srgb import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    byte_to_linear,
    linear_to_byte,
    np_bytes_to_linear,
)
from .xyz import (
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    np_linear_rgb_to_xyz,
    np_xyz_to_linear_rgb,
    D65_WHITE,
)
from .cielab import xyz_to_lab, lab_to_xyz, np_xyz_to_lab, np_lab_to_xyz
from .cieluv import xyz_to_luv, luv_to_xyz, np_xyz_to_luv, np_luv_to_xyz, D65_U, D65_V
from .polar import (
    normalize_hue,
    hue_difference,
    lab_to_lch,
    lch_to_lab,
    luv_to_lch,
    lch_to_luv,
    np_lab_to_lch,
    np_lch_to_lab,
    np_luv_to_lch,
    np_lch_to_luv,
    luv_saturation,
    luv_chroma,
)
from .msh import lab_to_msh, msh_to_lab
from .gamut import (
    srgb_to_bytes,
    linear_rgb_to_bytes,
    xyz_to_srgb_bytes,
    luv_to_srgb_bytes,
    lch_luv_to_srgb_bytes,
    lab_to_srgb_bytes,
    srgb_bytes_to_xyz,
)

__all__ = [
    # sRGB transfer curve
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'byte_to_linear',
    'linear_to_byte',
    'np_bytes_to_linear',

    # linear RGB ↔ XYZ
    'linear_rgb_to_xyz',
    'xyz_to_linear_rgb',
    'np_linear_rgb_to_xyz',
    'np_xyz_to_linear_rgb',
    'D65_WHITE',

    # CIELAB / CIELUV
    'xyz_to_lab',
    'lab_to_xyz',
    'np_xyz_to_lab',
    'np_lab_to_xyz',
    'xyz_to_luv',
    'luv_to_xyz',
    'np_xyz_to_luv',
    'np_luv_to_xyz',
    'D65_U',
    'D65_V',

    # Polar forms
    'normalize_hue',
    'hue_difference',
    'lab_to_lch',
    'lch_to_lab',
    'luv_to_lch',
    'lch_to_luv',
    'np_lab_to_lch',
    'np_lch_to_lab',
    'np_luv_to_lch',
    'np_lch_to_luv',
    'luv_saturation',
    'luv_chroma',
    'lab_to_msh',
    'msh_to_lab',

    # Gamut
    'srgb_to_bytes',
    'linear_rgb_to_bytes',
    'xyz_to_srgb_bytes',
    'luv_to_srgb_bytes',
    'lch_luv_to_srgb_bytes',
    'lab_to_srgb_bytes',
    'srgb_bytes_to_xyz',
]
