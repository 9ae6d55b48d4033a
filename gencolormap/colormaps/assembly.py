import logging
from typing import Callable, Dict, Tuple, Type, Union

from ..types.map_type import MapType
from .common import ColorMapResult
from .brewer import (
    generate_brewer_sequential,
    generate_brewer_diverging,
    generate_brewer_qualitative,
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

logger = logging.getLogger(__name__)

GENERATORS: Dict[MapType, Tuple[Type, Callable[..., ColorMapResult]]] = {
    MapType.BREWER_SEQUENTIAL: (BrewerSequentialParams, generate_brewer_sequential),
    MapType.BREWER_DIVERGING: (BrewerDivergingParams, generate_brewer_diverging),
    MapType.BREWER_QUALITATIVE: (BrewerQualitativeParams, generate_brewer_qualitative),
    MapType.PU_SEQUENTIAL_LIGHTNESS: (PUSequentialLightnessParams, generate_pu_sequential_lightness),
    MapType.PU_SEQUENTIAL_SATURATION: (PUSequentialSaturationParams, generate_pu_sequential_saturation),
    MapType.PU_SEQUENTIAL_RAINBOW: (PUSequentialRainbowParams, generate_pu_sequential_rainbow),
    MapType.PU_SEQUENTIAL_BLACKBODY: (PUSequentialBlackBodyParams, generate_pu_sequential_blackbody),
    MapType.PU_DIVERGING_LIGHTNESS: (PUDivergingLightnessParams, generate_pu_diverging_lightness),
    MapType.PU_DIVERGING_SATURATION: (PUDivergingSaturationParams, generate_pu_diverging_saturation),
    MapType.PU_QUALITATIVE_HUE: (PUQualitativeHueParams, generate_pu_qualitative_hue),
    MapType.CUBEHELIX: (CubeHelixParams, generate_cubehelix),
    MapType.MORELAND: (MorelandParams, generate_moreland),
    MapType.MCNAMES: (McNamesParams, generate_mcnames),
}


def to_map_type(map_type: Union[MapType, str]) -> MapType:
    """Accept a MapType or its command line name."""
    try:
        return MapType(map_type)
    except ValueError:
        valid = ", ".join(m.value for m in MapType)
        raise ValueError(f"Unknown color map type: {map_type!r}. Expected one of: {valid}") from None


def generate(map_type: Union[MapType, str], n: int, params) -> ColorMapResult:
    """
    Generate a color map of n samples.

    Args:
        map_type: family to generate, a MapType or its name (e.g. "cubehelix")
        n: number of samples, at least 2
        params: the parameter dataclass of that family

    Returns:
        ColorMapResult holding 3n bytes and the number of clipped samples

    Raises:
        ValueError: unknown map type or n < 2
        TypeError: params of the wrong family
    """
    map_type = to_map_type(map_type)
    if n < 2:
        raise ValueError(f"A color map needs at least 2 colors, got n={n}")
    params_class, generator = GENERATORS[map_type]
    if not isinstance(params, params_class):
        raise TypeError(
            f"{map_type.value} expects {params_class.__name__}, got {type(params).__name__}"
        )
    result = generator(n, params)
    logger.debug("generated %s map: n=%d, clipped=%d", map_type.value, n, result.clipped)
    return result
