"""
Tests for the root-Nyquist optimizer.
"""

import logging

import numpy as np
import pytest

from pyfirdes import (
    ConvergenceError,
    InvalidParameterError,
    RootNyquistOptimizer,
    filter_isi,
    fir_design_optim_root_nyquist,
)


def test_generate_improves_on_prototype(caplog):
    k, m = 4, 3
    opt = RootNyquistOptimizer(2 * k * m + 1, k, 60.0)

    with caplog.at_level(logging.INFO):
        h, meta = opt.generate()

    assert len(h) == 25
    assert h.dtype == np.float32
    assert np.sum(h.astype(np.float64) ** 2) == pytest.approx(1.0, rel=1e-5)
    np.testing.assert_allclose(h, h[::-1], atol=1e-6)

    assert meta['m'] == m
    assert meta['prototype_fc'] == pytest.approx(0.25)
    assert 0.125 <= meta['optimized_fc'] <= 0.375
    assert meta['evaluations'] >= 1
    assert meta['isi'].mse <= meta['prototype_isi'].mse * (1 + 1e-6) + 1e-12
    assert meta['isi'].max < 0.5
    assert "Optimization complete" in caplog.text


def test_generate_isi_matches_output():
    h, meta = RootNyquistOptimizer(33, 2, 40.0).generate()
    isi = filter_isi(h, 2, 8)
    assert isi.mse == pytest.approx(meta['isi'].mse, rel=1e-3, abs=1e-9)


def test_functional_wrapper_buffer():
    out = np.full(30, -1.0)
    h = fir_design_optim_root_nyquist(25, 4, -60.0, out=out)

    assert h is out
    np.testing.assert_array_equal(out[25:], -1.0)
    np.testing.assert_allclose(
        out[:25], RootNyquistOptimizer(25, 4, 60.0).generate()[0], atol=1e-6)


@pytest.mark.parametrize("n, k", [(25, 1), (24, 4), (5, 4), (1, 2)])
def test_invalid_length(n, k):
    with pytest.raises(InvalidParameterError):
        RootNyquistOptimizer(n, k, 60.0)


def test_invalid_search_options():
    with pytest.raises(InvalidParameterError):
        RootNyquistOptimizer(25, 4, 60.0, xatol=0.0)
    with pytest.raises(InvalidParameterError):
        RootNyquistOptimizer(25, 4, 60.0, maxiter=0)


def test_search_exhausted():
    with pytest.raises(ConvergenceError):
        RootNyquistOptimizer(25, 4, 60.0, maxiter=1).generate()
