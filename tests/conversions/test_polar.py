import math

import numpy as np

from gencolormap.conversions.polar import (
    normalize_hue,
    hue_difference,
    lab_to_lch,
    lch_to_lab,
    np_luv_to_lch,
    np_lch_to_luv,
    luv_saturation,
    luv_chroma,
)
from gencolormap.conversions.msh import lab_to_msh, msh_to_lab

TWO_PI = 2.0 * math.pi
tolerance = 1e-9


def test_normalize_hue_range():
    for h in np.linspace(-20.0, 20.0, 401):
        wrapped = normalize_hue(float(h))
        assert 0.0 <= wrapped < TWO_PI
        assert abs(math.sin(wrapped) - math.sin(h)) < 1e-9
        assert abs(math.cos(wrapped) - math.cos(h)) < 1e-9

def test_normalize_hue_array():
    raw = np.array([-math.pi, -1.0, 3 * math.pi, 7.0])
    hues = normalize_hue(raw)
    assert np.all(hues >= 0.0) and np.all(hues < TWO_PI)
    assert np.allclose(np.cos(hues), np.cos(raw))
    assert np.allclose(np.sin(hues), np.sin(raw))
    assert np.allclose(hues[[1, 3]], [TWO_PI - 1.0, 7.0 - TWO_PI])

def test_normalize_hue_tiny_negative():
    assert normalize_hue(-1e-20) == 0.0
    assert normalize_hue(TWO_PI) == 0.0
    hues = normalize_hue(np.array([-1e-20, -1e-17, TWO_PI]))
    assert np.all(hues >= 0.0) and np.all(hues < TWO_PI)

def test_hue_difference():
    assert abs(hue_difference(0.1, TWO_PI - 0.1) - 0.2) < tolerance
    assert abs(hue_difference(0.0, math.pi) - math.pi) < tolerance
    assert abs(hue_difference(-math.pi / 2, math.pi / 2) - math.pi) < tolerance

def test_lch_round_trip():
    for lab in [(50.0, 20.0, -30.0), (75.0, -40.0, 10.0), (10.0, 0.0, 0.0)]:
        l, c, h = lab_to_lch(*lab)
        assert 0.0 <= h < TWO_PI
        assert abs(c - math.hypot(lab[1], lab[2])) < tolerance
        assert np.allclose(lch_to_lab(l, c, h), lab, atol=tolerance)

def test_numpy_lch_round_trip():
    rng = np.random.default_rng(3)
    luv = np.column_stack([rng.random(100) * 100, rng.normal(0, 50, 100), rng.normal(0, 50, 100)])
    lch = np_luv_to_lch(luv)
    assert np.all(lch[:, 2] >= 0.0) and np.all(lch[:, 2] < TWO_PI)
    assert np.allclose(np_lch_to_luv(lch), luv, atol=1e-9)

def test_luv_saturation_and_chroma_are_inverse():
    assert abs(luv_saturation(50.0, luv_chroma(50.0, 1.2)) - 1.2) < tolerance
    assert luv_saturation(0.0, 0.0) == 0.0

def test_msh_round_trip():
    for lab in [(50.0, 20.0, -30.0), (88.0, 0.0, 0.0), (30.0, 60.0, 60.0)]:
        m, s, h = lab_to_msh(*lab)
        assert abs(m - math.sqrt(sum(v * v for v in lab))) < tolerance
        assert np.allclose(msh_to_lab(m, s, h), lab, atol=1e-9)

def test_msh_gray_is_unsaturated():
    m, s, _ = lab_to_msh(60.0, 0.0, 0.0)
    assert abs(m - 60.0) < tolerance
    assert s == 0.0
    assert lab_to_msh(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
