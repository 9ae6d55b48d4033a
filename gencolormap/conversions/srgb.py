import numpy as np
from numpy import ndarray as NDArray
# No dependencies


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4

def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1/2.4)) - 0.055

def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    result = np.where(
        c <= 0.04045,
        c / 12.92,
        ((np.maximum(c, 0.04045) + 0.055) / 1.055) ** 2.4
    )
    return result

def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    # the power branch is evaluated everywhere by np.where; keep it real
    result = np.where(
        c <= 0.0031308,
        12.92 * c,
        1.055 * (np.maximum(c, 0.0031308) ** (1/2.4)) - 0.055
    )
    return result


def byte_to_linear(b: int) -> float:
    """Convert an 8-bit sRGB channel value to linear-light RGB (0..1)."""
    return srgb_to_linear(b / 255.0)

def linear_to_byte(c: float) -> int:
    """
    Convert linear-light RGB (0..1) to an 8-bit sRGB channel value.

    Out-of-range input is clamped; use the gamut helpers when the clip
    has to be counted.
    """
    v = round(linear_to_srgb(c) * 255.0)
    return min(max(v, 0), 255)

def np_bytes_to_linear(b: NDArray) -> NDArray:
    """Vectorized: Convert 8-bit sRGB channel values to linear-light RGB."""
    return np_srgb_to_linear(np.asarray(b, dtype=float) / 255.0)
