#!/usr/bin/env python3
"""
Windowed-Sinc FIR Design – Kaiser Window
========================================

Closed-form lowpass design from high-level parameters:

- Filter length estimate from transition bandwidth and attenuation
- Kaiser β from the sidelobe suppression level (Vaidyanathan's approximation)
- Kaiser window with a fractional sample offset
- Windowed-sinc lowpass prototype with optional fractional delay

Frequencies are normalized to Nyquist (1.0), attenuation is in dB.
"""

import logging
import math
from typing import Optional

import numpy as np
from scipy.special import i0 as bessel_i0

from ._buffers import output_buffer
from .exceptions import InvalidParameterError

log = logging.getLogger(__name__)


def estimate_req_filter_len(b: float, slsl: float) -> int:
    """
    Estimate the filter length needed for a transition width and attenuation.

    Parameters
    ----------
    b : float
        Transition bandwidth, 0 < b <= 0.5
    slsl : float
        Sidelobe suppression level in dB, > 0

    Returns
    -------
    int
        Required number of taps (at least 2)
    """
    if not 0.0 < b <= 0.5:
        raise InvalidParameterError(f"Invalid transition bandwidth: {b}")
    if not slsl > 0.0 or not math.isfinite(slsl):
        raise InvalidParameterError(f"Invalid sidelobe suppression level: {slsl}")

    if slsl < 8:
        return 2

    # half rounds away from zero
    return int(math.floor((slsl - 8) / (14 * b) + 0.5))


def kaiser_beta_slsl(slsl: float) -> float:
    """
    Return the Kaiser window β for a sidelobe suppression level.

    From P.P. Vaidyanathan, "Multirate Systems and Filter Banks". The sign of
    `slsl` is ignored.
    """
    slsl = abs(slsl)
    if slsl > 50.0:
        return 0.1102 * (slsl - 8.7)
    elif slsl > 21.0:
        return 0.5842 * (slsl - 21) ** 0.4 + 0.07886 * (slsl - 21)
    return 0.0


def kaiser_window(n: int, beta: float, mu: float = 0.0) -> np.ndarray:
    """
    Return an n-point Kaiser window shifted by a fractional sample offset.

    Parameters
    ----------
    n : int
        Window length
    beta : float
        Shape parameter, >= 0
    mu : float
        Fractional sample offset in [-0.5, 0.5]

    Returns
    -------
    np.ndarray
        Window samples (float64)
    """
    if n <= 0:
        raise InvalidParameterError("Window length must be greater than zero")
    if beta < 0:
        raise InvalidParameterError(f"Kaiser beta must be non-negative, got {beta}")
    if not -0.5 <= mu <= 0.5:
        raise InvalidParameterError(f"mu ({mu:.4e}) out of range [-0.5, 0.5]")

    t = np.arange(n, dtype=np.float64) - (n - 1) / 2 + mu
    # |r| <= 1 for every tap since |t| <= n/2
    r = 2 * t / n
    return bessel_i0(beta * np.sqrt(np.clip(1 - r**2, 0.0, None))) / bessel_i0(beta)


def fir_kaiser_window(
    n: int,
    fc: float,
    slsl: float,
    mu: float = 0.0,
    out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Design a lowpass FIR filter using a Kaiser window.

    Parameters
    ----------
    n : int
        Filter length
    fc : float
        Cutoff frequency in [0, 1]
    slsl : float
        Sidelobe suppression level (dB attenuation)
    mu : float
        Fractional sample offset in [-0.5, 0.5]
    out : np.ndarray, optional
        Caller-owned buffer; exactly its first n entries are overwritten

    Returns
    -------
    np.ndarray
        `out`, or a new float32 array when no buffer was given
    """
    if not -0.5 <= mu <= 0.5:
        raise InvalidParameterError(f"mu ({mu:.4e}) out of range [-0.5, 0.5]")
    if not 0.0 <= fc <= 1.0:
        raise InvalidParameterError(
            f"Cutoff frequency ({fc:.4e}) out of range [0.0, 1.0]"
        )
    if n <= 0:
        raise InvalidParameterError("Filter length must be greater than zero")

    h = output_buffer(out, n)

    beta = kaiser_beta_slsl(slsl)
    log.debug("Kaiser design: n=%d fc=%.4f slsl=%.1f dB β=%.4f mu=%.3f",
              n, fc, slsl, beta, mu)

    t = np.arange(n, dtype=np.float64) - (n - 1) / 2 + mu

    # np.sinc is sin(πx)/(πx)
    h[:n] = np.sinc(fc * t) * kaiser_window(n, beta, mu)
    return h
