#!/usr/bin/env python3
"""
Doppler Fading Filter Generator
===============================

Shaping filter for a Rice-fading channel: a diffuse (Bessel J0) scatter
component plus a line-of-sight cosine, tapered by a fixed Kaiser window.
"""

import logging
from typing import Optional

import numpy as np
from scipy.special import j0 as bessel_j0

from ._buffers import output_buffer
from .exceptions import InvalidParameterError
from .firdes import kaiser_window

log = logging.getLogger(__name__)

DOPPLER_WINDOW_BETA = 4.0


def fir_design_doppler(
    n: int,
    fd: float,
    K: float,
    theta: float,
    out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Design an FIR Doppler filter.

    `fd` and `K` are not range checked: values outside 0 < fd < 0.5 or
    K >= 0 still give finite (if physically meaningless) taps.

    Parameters
    ----------
    n : int
        Filter length
    fd : float
        Normalized Doppler frequency (0 < fd < 0.5)
    K : float
        Rice fading factor (K >= 0)
    theta : float
        Line-of-sight component angle of arrival (radians)
    out : np.ndarray, optional
        Caller-owned buffer; exactly its first n entries are overwritten

    Returns
    -------
    np.ndarray
        `out`, or a new float32 array when no buffer was given
    """
    if n < 0:
        raise InvalidParameterError(f"Filter length must be non-negative, got {n}")

    h = output_buffer(out, n)
    if n == 0:
        return h
    log.debug("Doppler design: n=%d fd=%.4f K=%.3f theta=%.4f", n, fd, K, theta)

    t = np.arange(n, dtype=np.float64) - (n - 1) / 2

    # diffuse component
    J = 1.5 * bessel_j0(np.abs(2 * np.pi * fd * t))

    # Rice-K component
    with np.errstate(divide="ignore", invalid="ignore"):
        r = np.float64(1.5 * K) / (K + 1) * np.cos(2 * np.pi * fd * t * np.cos(theta))

    w = kaiser_window(n, DOPPLER_WINDOW_BETA, 0.0)

    h[:n] = (J + r) * w
    return h
