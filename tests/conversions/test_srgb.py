import numpy as np
import pytest

from gencolormap.conversions.srgb import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    byte_to_linear,
    linear_to_byte,
    np_bytes_to_linear,
)

tolerance = 1e-12


def test_byte_round_trip_is_exact():
    for b in range(256):
        assert linear_to_byte(byte_to_linear(b)) == b

def test_endpoints():
    assert srgb_to_linear(0.0) == 0.0
    assert linear_to_srgb(0.0) == 0.0
    assert abs(srgb_to_linear(1.0) - 1.0) < tolerance
    assert abs(linear_to_srgb(1.0) - 1.0) < tolerance

def test_linear_segment():
    # below the threshold the curve is a plain scale
    assert abs(srgb_to_linear(0.04) - 0.04 / 12.92) < tolerance
    assert abs(linear_to_srgb(0.003) - 0.003 * 12.92) < tolerance

def test_mid_gray():
    # sRGB 0.5 is about 21.4% linear light, not 25% as a 2.0 gamma would give
    assert srgb_to_linear(0.5) == pytest.approx(0.2140411, abs=1e-6)

def test_curve_is_continuous_at_thresholds():
    below = srgb_to_linear(0.04045)
    above = srgb_to_linear(0.04045 + 1e-9)
    assert abs(below - above) < 1e-6
    below = linear_to_srgb(0.0031308)
    above = linear_to_srgb(0.0031308 + 1e-9)
    assert abs(below - above) < 1e-6

def test_numpy_matches_scalar():
    values = np.linspace(0.0, 1.0, 101)
    expected_lin = np.array([srgb_to_linear(v) for v in values])
    expected_enc = np.array([linear_to_srgb(v) for v in values])
    assert np.allclose(np_srgb_to_linear(values), expected_lin, atol=tolerance)
    assert np.allclose(np_linear_to_srgb(values), expected_enc, atol=tolerance)

def test_numpy_bytes_round_trip():
    b = np.arange(256)
    encoded = np.round(np_linear_to_srgb(np_bytes_to_linear(b)) * 255.0)
    assert np.array_equal(encoded.astype(int), b)

def test_linear_to_byte_clamps():
    assert linear_to_byte(-0.5) == 0
    assert linear_to_byte(2.0) == 255
