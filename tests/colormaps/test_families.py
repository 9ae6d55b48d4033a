import numpy as np
import pytest

from gencolormap.colormaps import generate, ColorMapResult

sizes = [2, 3, 5, 16, 256]


@pytest.mark.parametrize("n", sizes)
def test_output_shape_and_clip_bounds(map_type, default_params, n):
    result = generate(map_type, n, default_params(map_type, n))
    assert isinstance(result, ColorMapResult)
    assert result.colors.dtype == np.uint8
    assert result.colors.shape == (3 * n,)
    assert result.n == n
    assert result.rgb.shape == (n, 3)
    assert 0 <= result.clipped <= n

def test_result_unpacks(map_type, default_params):
    colors, clipped = generate(map_type, 8, default_params(map_type, 8))
    assert len(colors) == 24
    assert isinstance(clipped, int)

def test_colors_are_read_only(map_type, default_params):
    result = generate(map_type, 4, default_params(map_type, 4))
    with pytest.raises(ValueError):
        result.colors[0] = 1

def test_deterministic(map_type, default_params):
    params = default_params(map_type, 33)
    first = generate(map_type, 33, params)
    second = generate(map_type, 33, params)
    assert np.array_equal(first.colors, second.colors)
    assert first.clipped == second.clipped

def test_map_type_accepts_names(map_type, default_params):
    params = default_params(map_type, 6)
    by_enum = generate(map_type, 6, params)
    by_name = generate(map_type.value, 6, params)
    assert np.array_equal(by_enum.colors, by_name.colors)
