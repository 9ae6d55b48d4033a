"""CIE XYZ <-> CIELUV (D65 reference white)."""
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .xyz import D65_X, D65_Y, D65_Z

# CIE constants in their exact rational form
EPSILON = 216 / 24389
KAPPA = 24389 / 27


def u_prime(x: float, y: float, z: float) -> float:
    d = x + 15 * y + 3 * z
    return 4 * x / d if d != 0 else 0.0

def v_prime(x: float, y: float, z: float) -> float:
    d = x + 15 * y + 3 * z
    return 9 * y / d if d != 0 else 0.0

D65_U = u_prime(D65_X, D65_Y, D65_Z)
D65_V = v_prime(D65_X, D65_Y, D65_Z)


def xyz_to_luv(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert CIE XYZ to CIELUV."""
    y_ratio = y / D65_Y
    if y_ratio <= EPSILON:
        l = KAPPA * y_ratio
    else:
        l = 116 * float(np.cbrt(y_ratio)) - 16
    if x + 15 * y + 3 * z == 0:
        return l, 0.0, 0.0
    u = 13 * l * (u_prime(x, y, z) - D65_U)
    v = 13 * l * (v_prime(x, y, z) - D65_V)
    return l, u, v

def luv_to_xyz(l: float, u: float, v: float) -> Tuple[float, float, float]:
    """Convert CIELUV to CIE XYZ. Non-positive lightness is black."""
    if l <= 0:
        return 0.0, 0.0, 0.0
    up = u / (13 * l) + D65_U
    vp = v / (13 * l) + D65_V
    if l > KAPPA * EPSILON:
        y = D65_Y * ((l + 16) / 116) ** 3
    else:
        y = D65_Y * l / KAPPA
    if vp == 0:
        return 0.0, y, 0.0
    x = y * 9 * up / (4 * vp)
    z = y * (12 - 3 * up - 20 * vp) / (4 * vp)
    return x, y, z


def np_xyz_to_luv(xyz: NDArray) -> NDArray:
    """Vectorized: XYZ array (..., 3) to CIELUV array (..., 3)."""
    xyz = np.asarray(xyz, dtype=float)
    x, y, z = xyz[..., 0], xyz[..., 1], xyz[..., 2]
    y_ratio = y / D65_Y
    l = np.where(y_ratio <= EPSILON, KAPPA * y_ratio, 116 * np.cbrt(y_ratio) - 16)
    d = x + 15 * y + 3 * z
    nonzero = d != 0
    safe_d = np.where(nonzero, d, 1.0)
    u = np.where(nonzero, 13 * l * (4 * x / safe_d - D65_U), 0.0)
    v = np.where(nonzero, 13 * l * (9 * y / safe_d - D65_V), 0.0)
    return np.stack([l, u, v], axis=-1)

def np_luv_to_xyz(luv: NDArray) -> NDArray:
    """Vectorized: CIELUV array (..., 3) to XYZ array (..., 3)."""
    luv = np.asarray(luv, dtype=float)
    l, u, v = luv[..., 0], luv[..., 1], luv[..., 2]
    lit = l > 0
    safe_l = np.where(lit, l, 1.0)
    up = u / (13 * safe_l) + D65_U
    vp = v / (13 * safe_l) + D65_V
    y = np.where(
        l > KAPPA * EPSILON,
        D65_Y * ((l + 16) / 116) ** 3,
        D65_Y * l / KAPPA,
    )
    valid = lit & (vp != 0)
    safe_vp = np.where(valid, vp, 1.0)
    x = np.where(valid, y * 9 * up / (4 * safe_vp), 0.0)
    z = np.where(valid, y * (12 - 3 * up - 20 * safe_vp) / (4 * safe_vp), 0.0)
    y = np.where(lit, y, 0.0)
    return np.stack([x, y, z], axis=-1)
