from .map_type import MapType, OutputFormat
from .color_types import (
    Triplet,
    ByteTriplet,
    TWO_PI,
    triplet_to_array,
    is_byte_triplet,
)

__all__ = [
    "MapType",
    "OutputFormat",
    "Triplet",
    "ByteTriplet",
    "TWO_PI",
    "triplet_to_array",
    "is_byte_triplet",
]
