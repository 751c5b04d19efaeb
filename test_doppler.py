"""
Tests for the Doppler filter generator.
"""

import numpy as np
import pytest
from scipy.special import j0

from pyfirdes import (
    DOPPLER_WINDOW_BETA,
    InvalidParameterError,
    fir_design_doppler,
    kaiser_window,
)


def test_fir_design_doppler_center_tap():
    # J0(0) = 1 and the window peaks at 1 on the center tap
    assert fir_design_doppler(21, 0.1, 0.0, 0.0)[10] == pytest.approx(1.5)
    assert fir_design_doppler(21, 0.1, 1.0, 0.0)[10] == pytest.approx(2.25)


def test_fir_design_doppler_taps():
    n, fd, K, theta = 33, 0.05, 2.0, 0.7
    t = np.arange(n) - (n - 1) / 2
    expected = (1.5 * j0(np.abs(2 * np.pi * fd * t))
                + 1.5 * K / (K + 1) * np.cos(2 * np.pi * fd * t * np.cos(theta))
                ) * kaiser_window(n, DOPPLER_WINDOW_BETA)

    h = fir_design_doppler(n, fd, K, theta)

    assert h.dtype == np.float32
    np.testing.assert_allclose(h, expected, rtol=1e-5, atol=1e-6)
    np.testing.assert_allclose(h, h[::-1], atol=1e-6)


def test_fir_design_doppler_no_range_checks():
    h = fir_design_doppler(16, 0.7, -0.5, 3.0)
    assert np.all(np.isfinite(h))

    # K = -1 divides by zero; taps degrade to non-finite values
    h = fir_design_doppler(9, 0.1, -1.0, 0.0)
    assert len(h) == 9
    assert not np.all(np.isfinite(h))


def test_fir_design_doppler_buffer():
    out = np.full(20, 9.0, dtype=np.float32)
    assert fir_design_doppler(17, 0.1, 0.5, 0.0, out=out) is out
    np.testing.assert_array_equal(out[17:], 9.0)


def test_fir_design_doppler_zero_length():
    assert len(fir_design_doppler(0, 0.1, 0.0, 0.0)) == 0

    out = np.full(4, 9.0, dtype=np.float32)
    assert fir_design_doppler(0, 0.1, 0.0, 0.0, out=out) is out
    np.testing.assert_array_equal(out, 9.0)

    with pytest.raises(InvalidParameterError):
        fir_design_doppler(-1, 0.1, 0.0, 0.0)
