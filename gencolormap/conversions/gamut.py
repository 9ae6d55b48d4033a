"""
Conversion to sRGB bytes with the single gamut-clipping policy.

A sample is clipped iff at least one channel, after rounding to the
nearest byte value, lies outside [0, 255]. The clamped bytes are always
returned; clipping is counted, never raised.
"""
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .srgb import np_linear_to_srgb, np_bytes_to_linear
from .xyz import np_xyz_to_linear_rgb, np_linear_rgb_to_xyz
from .cieluv import np_luv_to_xyz
from .cielab import np_lab_to_xyz
from .polar import np_lch_to_luv


def srgb_to_bytes(rgb: NDArray) -> Tuple[NDArray, NDArray]:
    """
    Quantize nonlinear sRGB values (nominally 0..1) to bytes.

    Args:
        rgb: array of shape (..., 3)

    Returns:
        (bytes, clipped) where bytes is a uint8 array of shape (..., 3) and
        clipped is a bool array of shape (...) flagging clamped samples.
    """
    scaled = np.round(np.asarray(rgb, dtype=float) * 255.0)
    clipped = np.any((scaled < 0.0) | (scaled > 255.0), axis=-1)
    return np.clip(scaled, 0, 255).astype(np.uint8), clipped

def linear_rgb_to_bytes(rgb: NDArray) -> Tuple[NDArray, NDArray]:
    """Quantize linear-light RGB values to sRGB bytes, see srgb_to_bytes."""
    return srgb_to_bytes(np_linear_to_srgb(rgb))

def xyz_to_srgb_bytes(xyz: NDArray) -> Tuple[NDArray, NDArray]:
    return linear_rgb_to_bytes(np_xyz_to_linear_rgb(xyz))

def luv_to_srgb_bytes(luv: NDArray) -> Tuple[NDArray, NDArray]:
    return xyz_to_srgb_bytes(np_luv_to_xyz(luv))

def lch_luv_to_srgb_bytes(lch: NDArray) -> Tuple[NDArray, NDArray]:
    return luv_to_srgb_bytes(np_lch_to_luv(lch))

def lab_to_srgb_bytes(lab: NDArray) -> Tuple[NDArray, NDArray]:
    return xyz_to_srgb_bytes(np_lab_to_xyz(lab))

def srgb_bytes_to_xyz(rgb_bytes: NDArray) -> NDArray:
    """sRGB bytes (..., 3) to CIE XYZ (..., 3)."""
    return np_linear_rgb_to_xyz(np_bytes_to_linear(rgb_bytes))
