from __future__ import annotations
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Triplet = Tuple[float, float, float]
ByteTriplet = Tuple[int, int, int]

TWO_PI = 2.0 * np.pi


def triplet_to_array(value: Union[Triplet, ndarray]) -> np.ndarray:
    """
    Convert a color triplet to a float numpy array.

    Args:
        value: Tuple of three numbers, or an array whose last axis has length 3

    Returns:
        numpy array representation
    """
    arr = np.asarray(value, dtype=float)
    if arr.shape[-1] != 3:
        raise ValueError(f"expected last dimension 3, got shape {arr.shape}")
    return arr


def is_byte_triplet(value: object) -> bool:
    """Check whether a value is a sequence of three integers in [0, 255]."""
    try:
        items = tuple(value)  # type: ignore[arg-type]
    except TypeError:
        return False
    return len(items) == 3 and all(
        isinstance(v, (int, np.integer)) and 0 <= v <= 255 for v in items
    )
