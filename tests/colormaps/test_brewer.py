import math

import numpy as np
import pytest

from gencolormap.colormaps.brewer import (
    most_saturated_color,
    max_chroma,
    brewer_lightness,
    color_curve,
    curve_point,
    generate_brewer_sequential,
    generate_brewer_diverging,
    generate_brewer_qualitative,
)
from gencolormap.conversions.cieluv import np_luv_to_xyz
from gencolormap.conversions.xyz import np_xyz_to_linear_rgb
from gencolormap.conversions.polar import luv_to_lch
from gencolormap.defaults import resolve_params
from lightness import lab_lightness, luv_lch

hues = np.linspace(0.0, 2 * math.pi, 37)[:-1]


def _hue_distance(h0, h1):
    diff = np.abs(np.asarray(h0) - h1) % (2 * math.pi)
    return np.minimum(diff, 2 * math.pi - diff)


@pytest.mark.parametrize("hue", hues)
def test_most_saturated_color_has_requested_hue(hue):
    luv = most_saturated_color(hue)
    _, c, h = luv_to_lch(*luv)
    assert c > 0
    diff = abs(h - hue) % (2 * math.pi)
    assert min(diff, 2 * math.pi - diff) < 1e-6

@pytest.mark.parametrize("hue", hues)
def test_most_saturated_color_lies_on_cube_surface(hue):
    rgb = np_xyz_to_linear_rgb(np_luv_to_xyz(most_saturated_color(hue)))
    assert abs(rgb.min()) < 1e-6
    assert abs(rgb.max() - 1.0) < 1e-6

def test_max_chroma_triangle():
    hue = 0.5
    l_sat, c_sat, _ = luv_to_lch(*most_saturated_color(hue))
    assert max_chroma(0.0, hue) == 0.0
    assert abs(max_chroma(100.0, hue)) < 1e-9
    assert abs(max_chroma(l_sat, hue) - c_sat) < 1e-9
    assert max_chroma(l_sat / 2, hue) == pytest.approx(c_sat / 2)

def test_lightness_law():
    assert brewer_lightness(0.0, 0.0, 0.0) == pytest.approx(0.0)
    # more contrast spreads the two ends further apart
    low = brewer_lightness(1.0, 0.3, 0.75) - brewer_lightness(0.0, 0.3, 0.75)
    high = brewer_lightness(1.0, 0.9, 0.75) - brewer_lightness(0.0, 0.9, 0.75)
    assert high > low > 0

def test_curve_point_hits_lightness():
    curve = color_curve(1.0, 0.6, 0.15)
    for l in np.linspace(0.0, 99.0, 34):
        assert curve_point(curve, l)[0] == pytest.approx(l, abs=1e-6)

def test_sequential_darkness_increases():
    n = 5
    result = generate_brewer_sequential(n, resolve_params("brewer-sequential", n))
    l = lab_lightness(result.rgb)
    assert np.all(np.diff(l) < 0)

def test_sequential_light_end_is_less_saturated():
    result = generate_brewer_sequential(9, resolve_params("brewer-sequential", 9))
    lch = luv_lch(result.rgb)
    assert lch[0, 1] < lch[4, 1]

def test_sequential_warmth_tints_light_end_toward_yellow():
    n = 7
    cold = generate_brewer_sequential(n, resolve_params("brewer-sequential", n, hue=240, warmth=0.0))
    warm = generate_brewer_sequential(n, resolve_params("brewer-sequential", n, hue=240, warmth=0.6))
    # yellow lowers blue relative to red at the light end
    cold_r, _, cold_b = cold.rgb[0].astype(int)
    warm_r, _, warm_b = warm.rgb[0].astype(int)
    assert warm_b - warm_r < cold_b - cold_r

@pytest.mark.parametrize("n", [4, 7, 11])
def test_diverging_symmetric_lightness(n):
    result = generate_brewer_diverging(n, resolve_params("brewer-diverging", n))
    l = lab_lightness(result.rgb)
    assert np.allclose(l, l[::-1], atol=1.5)
    # dark ends, light middle
    assert l[0] < l[n // 2] and l[-1] < l[n // 2]

@pytest.mark.parametrize("n", [3, 9, 255])
def test_diverging_odd_center_is_neutral(n):
    result = generate_brewer_diverging(n, resolve_params("brewer-diverging", n))
    r, g, b = result.rgb[n // 2].astype(int)
    assert max(r, g, b) - min(r, g, b) <= 1

@pytest.mark.parametrize("n", [9, 11, 256])
def test_diverging_symmetric_chroma(n):
    result = generate_brewer_diverging(n, resolve_params("brewer-diverging", n))
    lch = luv_lch(result.rgb)
    assert np.allclose(lch[:, 1], lch[::-1, 1], atol=1.5)

def test_diverging_branch_hues():
    n = 9
    params = resolve_params("brewer-diverging", n)
    lch = luv_lch(generate_brewer_diverging(n, params).rgb)
    assert _hue_distance(lch[1, 2], params.hue) < 0.05
    assert _hue_distance(lch[-2, 2], params.hue + params.divergence) < 0.05

def test_qualitative_equal_lightness_distinct_hues():
    n = 8
    result = generate_brewer_qualitative(n, resolve_params("brewer-qualitative", n))
    lch = luv_lch(result.rgb)
    assert np.ptp(lch[:, 0]) < 1.5
    assert len({tuple(c) for c in result.rgb.tolist()}) == n
    assert result.clipped == 0
