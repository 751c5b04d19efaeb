"""
Tests for frequency response verification.
"""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from pyfirdes import InvalidParameterError, fir_kaiser_window, verify_filter_response


def test_kaiser_design_meets_stopband():
    h = fir_kaiser_window(61, 0.4, 60.0)

    results = verify_filter_response(h, 0.4, transition=0.2, target_stopband_db=50.0)

    assert results['meets_stopband']
    assert results['stopband_atten_db'] >= 50.0
    assert results['passband_ripple_db'] < 0.1
    assert results['dc_gain'] == pytest.approx(np.sum(h.astype(np.float64)), rel=1e-6)


def test_unreachable_target():
    h = fir_kaiser_window(31, 0.4, 40.0)
    results = verify_filter_response(h, 0.4, transition=0.2, target_stopband_db=200.0)
    assert not results['meets_stopband']


def test_no_target():
    results = verify_filter_response(fir_kaiser_window(31, 0.5, 60.0), 0.5)
    assert 'meets_stopband' not in results


def test_plot(monkeypatch):
    shown = []
    monkeypatch.setattr(plt, "show", lambda: shown.append(True))

    verify_filter_response(fir_kaiser_window(31, 0.5, 60.0), 0.5,
                           target_stopband_db=40.0, plot=True)

    assert shown == [True]
    plt.close('all')


@pytest.mark.parametrize("h, fc, transition", [([], 0.5, 0.1), ([1.0], 0.0, 0.1),
                                               ([1.0], 1.0, 0.1), ([1.0], 0.5, 0.0)])
def test_invalid(h, fc, transition):
    with pytest.raises(InvalidParameterError):
        verify_filter_response(h, fc, transition=transition)
