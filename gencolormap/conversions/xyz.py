"""Linear-light sRGB <-> CIE XYZ (D65)."""
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

# sRGB primaries, D65 white (IEC 61966-2-1)
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])
XYZ_TO_SRGB = np.linalg.inv(SRGB_TO_XYZ)

D65_X = 0.95047
D65_Y = 1.0
D65_Z = 1.08883
D65_WHITE = np.array([D65_X, D65_Y, D65_Z])


def linear_rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert linear-light RGB to CIE XYZ (Y of white = 1)."""
    x, y, z = SRGB_TO_XYZ @ np.array([r, g, b], dtype=float)
    return float(x), float(y), float(z)

def xyz_to_linear_rgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert CIE XYZ to linear-light RGB. The result may leave [0, 1]."""
    r, g, b = XYZ_TO_SRGB @ np.array([x, y, z], dtype=float)
    return float(r), float(g), float(b)

def np_linear_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """Vectorized: linear-light RGB array (..., 3) to XYZ array (..., 3)."""
    return np.asarray(rgb, dtype=float) @ SRGB_TO_XYZ.T

def np_xyz_to_linear_rgb(xyz: NDArray) -> NDArray:
    """Vectorized: XYZ array (..., 3) to linear-light RGB array (..., 3)."""
    return np.asarray(xyz, dtype=float) @ XYZ_TO_SRGB.T
