"""gencolormap: perceptually motivated color map generation."""

__version__ = "1.1.0"

from .types import MapType, OutputFormat
from .colormaps import (
    ColorMapResult,
    generate,
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
    generate_brewer_sequential,
    generate_brewer_diverging,
    generate_brewer_qualitative,
    generate_pu_sequential_lightness,
    generate_pu_sequential_saturation,
    generate_pu_sequential_rainbow,
    generate_pu_sequential_blackbody,
    generate_pu_diverging_lightness,
    generate_pu_diverging_saturation,
    generate_pu_qualitative_hue,
    generate_cubehelix,
    generate_moreland,
    generate_mcnames,
)
from .defaults import resolve_params, defaults_for
from .export import to_csv, to_json, to_ppm, serialize
from .conversions import (
    srgb_to_linear,
    linear_to_srgb,
    byte_to_linear,
    linear_to_byte,
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    xyz_to_lab,
    lab_to_xyz,
    xyz_to_luv,
    luv_to_xyz,
    lab_to_lch,
    lch_to_lab,
    luv_to_lch,
    lch_to_luv,
    normalize_hue,
)

__all__ = [
    '__version__',
    'MapType',
    'OutputFormat',
    'ColorMapResult',
    'generate',
    'resolve_params',
    'defaults_for',

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

    # Serializers
    'to_csv',
    'to_json',
    'to_ppm',
    'serialize',

    # Conversions
    'srgb_to_linear',
    'linear_to_srgb',
    'byte_to_linear',
    'linear_to_byte',
    'linear_rgb_to_xyz',
    'xyz_to_linear_rgb',
    'xyz_to_lab',
    'lab_to_xyz',
    'xyz_to_luv',
    'luv_to_xyz',
    'lab_to_lch',
    'lch_to_lab',
    'luv_to_lch',
    'lch_to_luv',
    'normalize_hue',
]
