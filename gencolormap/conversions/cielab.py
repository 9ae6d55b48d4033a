"""CIE XYZ <-> CIELAB (D65 reference white)."""
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .xyz import D65_X, D65_Y, D65_Z, D65_WHITE

DELTA = 6 / 29


def _lab_f(t: float) -> float:
    if t > DELTA ** 3:
        return float(np.cbrt(t))
    return t / (3 * DELTA ** 2) + 4 / 29

def _lab_f_inv(t: float) -> float:
    if t > DELTA:
        return t ** 3
    return 3 * DELTA ** 2 * (t - 4 / 29)


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert CIE XYZ to CIELAB (L in [0, 100] for colors inside the gamut)."""
    fx = _lab_f(x / D65_X)
    fy = _lab_f(y / D65_Y)
    fz = _lab_f(z / D65_Z)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)

def lab_to_xyz(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert CIELAB to CIE XYZ."""
    fy = (l + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    return D65_X * _lab_f_inv(fx), D65_Y * _lab_f_inv(fy), D65_Z * _lab_f_inv(fz)


def np_xyz_to_lab(xyz: NDArray) -> NDArray:
    """Vectorized: XYZ array (..., 3) to CIELAB array (..., 3)."""
    t = np.asarray(xyz, dtype=float) / D65_WHITE
    f = np.where(t > DELTA ** 3, np.cbrt(t), t / (3 * DELTA ** 2) + 4 / 29)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)

def np_lab_to_xyz(lab: NDArray) -> NDArray:
    """Vectorized: CIELAB array (..., 3) to XYZ array (..., 3)."""
    lab = np.asarray(lab, dtype=float)
    fy = (lab[..., 0] + 16) / 116
    fx = fy + lab[..., 1] / 500
    fz = fy - lab[..., 2] / 200
    f = np.stack([fx, fy, fz], axis=-1)
    t = np.where(f > DELTA, f ** 3, 3 * DELTA ** 2 * (f - 4 / 29))
    return t * D65_WHITE
