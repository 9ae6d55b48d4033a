"""
gencolormap Color Map Generators
================================

Thirteen generators, each a pure function ``(n, params) -> ColorMapResult``:

Brewer-like (Wijffelaars et al. 2008):
    generate_brewer_sequential, generate_brewer_diverging,
    generate_brewer_qualitative

Perceptually uniform (CIELUV):
    generate_pu_sequential_lightness, generate_pu_sequential_saturation,
    generate_pu_sequential_rainbow, generate_pu_sequential_blackbody,
    generate_pu_diverging_lightness, generate_pu_diverging_saturation,
    generate_pu_qualitative_hue

Others:
    generate_cubehelix (Green 2011), generate_moreland (Moreland 2009),
    generate_mcnames (McNames 2006)

``generate(map_type, n, params)`` dispatches on a MapType.
"""

from .common import ColorMapResult
from .params import (
    BrewerSequentialParams,
    BrewerDivergingParams,
    BrewerQualitativeParams,
    PUSequentialLightnessParams,
    PUSequentialSaturationParams,
    PUSequentialRainbowParams,
    PUSequentialBlackBodyParams,
    PUDivergingLightnessParams,
    PUDivergingSaturationParams,
    PUQualitativeHueParams,
    CubeHelixParams,
    MorelandParams,
    McNamesParams,
)
from .brewer import (
    generate_brewer_sequential,
    generate_brewer_diverging,
    generate_brewer_qualitative,
    most_saturated_color,
    max_chroma,
)
from .perceptual import (
    generate_pu_sequential_lightness,
    generate_pu_sequential_saturation,
    generate_pu_sequential_rainbow,
    generate_pu_sequential_blackbody,
    generate_pu_diverging_lightness,
    generate_pu_diverging_saturation,
    generate_pu_qualitative_hue,
)
from .cubehelix import generate_cubehelix
from .moreland import generate_moreland
from .mcnames import generate_mcnames
from .assembly import GENERATORS, generate

__all__ = [
    'ColorMapResult',
    'generate',
    'GENERATORS',

    # Parameters
    'BrewerSequentialParams',
    'BrewerDivergingParams',
    'BrewerQualitativeParams',
    'PUSequentialLightnessParams',
    'PUSequentialSaturationParams',
    'PUSequentialRainbowParams',
    'PUSequentialBlackBodyParams',
    'PUDivergingLightnessParams',
    'PUDivergingSaturationParams',
    'PUQualitativeHueParams',
    'CubeHelixParams',
    'MorelandParams',
    'McNamesParams',

    # Generators
    'generate_brewer_sequential',
    'generate_brewer_diverging',
    'generate_brewer_qualitative',
    'generate_pu_sequential_lightness',
    'generate_pu_sequential_saturation',
    'generate_pu_sequential_rainbow',
    'generate_pu_sequential_blackbody',
    'generate_pu_diverging_lightness',
    'generate_pu_diverging_saturation',
    'generate_pu_qualitative_hue',
    'generate_cubehelix',
    'generate_moreland',
    'generate_mcnames',
    'most_saturated_color',
    'max_chroma',
]
