#!/usr/bin/env python3
"""
Filter analysis: auto-correlation and inter-symbol interference.
"""

import logging
from typing import NamedTuple, Optional

import numpy as np

from .exceptions import BufferSizeError, DegenerateInputError, InvalidParameterError

log = logging.getLogger(__name__)


class ISIResult(NamedTuple):
    """Inter-symbol interference of a filter at symbol-spaced lags."""
    mse: float
    max: float


def filter_autocorr(h: np.ndarray, lag: int, h_len: Optional[int] = None) -> float:
    """
    Compute the auto-correlation of a filter at a specific lag.

    Parameters
    ----------
    h : np.ndarray
        Filter coefficients
    lag : int
        Auto-correlation lag (samples); the sign is ignored
    h_len : int, optional
        Number of leading coefficients to use (default: all of `h`)

    Returns
    -------
    float
        r(lag), or 0.0 when the lag leaves no overlap
    """
    h = np.asarray(h, dtype=np.float64).reshape(-1)
    if h_len is None:
        h_len = len(h)
    elif h_len > len(h):
        raise BufferSizeError(f"Filter has {len(h)} taps, {h_len} requested")

    # auto-correlation is even symmetric
    lag = abs(int(lag))

    if lag >= h_len:
        return 0.0

    return float(np.dot(h[lag:h_len], h[:h_len - lag]))


def filter_isi(h: np.ndarray, k: int, m: int) -> ISIResult:
    """
    Compute inter-symbol interference (ISI), both MSE and maximum.

    Parameters
    ----------
    h : np.ndarray
        Filter coefficients, at least 2*k*m+1 taps (only those are read)
    k : int
        Over-sampling rate (samples/symbol)
    m : int
        Filter delay (symbols)

    Returns
    -------
    ISIResult
        Mean-squared and maximum ISI, normalized to the zero-lag
        auto-correlation
    """
    if k < 1:
        raise InvalidParameterError(f"Samples/symbol must be at least 1, got {k}")
    if m < 1:
        raise InvalidParameterError(f"Filter delay must be at least 1, got {m}")

    h = np.asarray(h, dtype=np.float64).reshape(-1)
    h_len = 2 * k * m + 1
    if len(h) < h_len:
        raise BufferSizeError(
            f"Filter has {len(h)} taps, 2*k*m+1 = {h_len} required"
        )

    rxx0 = filter_autocorr(h, 0, h_len)
    if rxx0 == 0.0 or not np.isfinite(rxx0):
        raise DegenerateInputError(
            f"Zero-lag auto-correlation is {rxx0}; cannot normalize ISI"
        )

    e = np.abs([filter_autocorr(h, i * k, h_len) / rxx0
                for i in range(1, 2 * m + 1)])

    result = ISIResult(mse=float(np.sum(e**2) / (2 * m)), max=float(np.max(e)))
    log.debug("ISI k=%d m=%d: mse=%.3e max=%.3e", k, m, result.mse, result.max)
    return result
