# No dependencies
from enum import Enum


class MapType(str, Enum):
    BREWER_SEQUENTIAL = "brewer-sequential"
    BREWER_DIVERGING = "brewer-diverging"
    BREWER_QUALITATIVE = "brewer-qualitative"
    PU_SEQUENTIAL_LIGHTNESS = "pusequential-lightness"
    PU_SEQUENTIAL_SATURATION = "pusequential-saturation"
    PU_SEQUENTIAL_RAINBOW = "pusequential-rainbow"
    PU_SEQUENTIAL_BLACKBODY = "pusequential-blackbody"
    PU_DIVERGING_LIGHTNESS = "pudiverging-lightness"
    PU_DIVERGING_SATURATION = "pudiverging-saturation"
    PU_QUALITATIVE_HUE = "puqualitative-hue"
    CUBEHELIX = "cubehelix"
    MORELAND = "moreland"
    MCNAMES = "mcnames"


class OutputFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    PPM = "ppm"

