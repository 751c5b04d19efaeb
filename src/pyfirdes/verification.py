#!/usr/bin/env python3
"""
Verification tools for filter coefficients.
"""

import logging
from typing import Any, Dict, Optional

import matplotlib.pyplot as plt
import numpy as np
from scipy import signal

from .exceptions import InvalidParameterError

log = logging.getLogger(__name__)


def verify_filter_response(
    coefficients: np.ndarray,
    fc: float,
    transition: float = 0.1,
    target_stopband_db: Optional[float] = None,
    worN: int = 8192,
    plot: bool = False
) -> Dict[str, Any]:
    """
    Measure the frequency response of a lowpass design.

    Parameters
    ----------
    coefficients : np.ndarray
        Filter coefficients
    fc : float
        Cutoff frequency the filter was designed for (Nyquist = 1)
    transition : float
        Transition band width centered on `fc`, excluded from both bands
    target_stopband_db : float, optional
        Required stopband attenuation in dB
    worN : int
        Number of frequency points
    plot : bool
        Whether to plot the magnitude response

    Returns
    -------
    dict
        Verification results
    """
    h = np.asarray(coefficients, dtype=np.float64).reshape(-1)
    if len(h) == 0:
        raise InvalidParameterError("Cannot verify an empty filter")
    if not 0.0 < fc < 1.0:
        raise InvalidParameterError(f"Cutoff frequency ({fc}) out of range (0, 1)")
    if not 0.0 < transition < 1.0:
        raise InvalidParameterError(f"Transition width ({transition}) out of range (0, 1)")

    w, resp = signal.freqz(h, worN=worN)
    freq = w / np.pi
    mag = np.abs(resp)
    dc_gain = mag[0]
    ref = dc_gain if dc_gain > 0 else 1.0
    mag_db = 20 * np.log10(mag / ref + 1e-300)

    passband = mag_db[freq <= fc - transition / 2]
    stopband = mag_db[freq >= fc + transition / 2]

    ripple_db = float(np.ptp(passband)) if len(passband) > 0 else 0.0
    stopband_atten_db = float(-np.max(stopband)) if len(stopband) > 0 else np.inf

    results = {
        'dc_gain': float(dc_gain),
        'passband_ripple_db': ripple_db,
        'stopband_atten_db': stopband_atten_db,
    }
    if target_stopband_db is not None:
        results['meets_stopband'] = stopband_atten_db >= target_stopband_db

    log.info("Ripple %.4f dB, worst stop %.2f dB (fc=%.4f, transition=%.4f)",
             ripple_db, stopband_atten_db, fc, transition)
    if target_stopband_db is not None and not results['meets_stopband']:
        log.warning("Stopband %.2f dB below target %.2f dB",
                    stopband_atten_db, target_stopband_db)

    if plot:
        fig, ax = plt.subplots(figsize=(10, 6))
        ax.plot(freq, mag_db)
        ax.axvline(fc, color='g', linestyle='--', label=f'fc: {fc:.3f}')
        if target_stopband_db is not None:
            ax.axhline(-target_stopband_db, color='r', linestyle='--',
                       label=f'Target: -{target_stopband_db} dB')
        ax.set_xlabel('Normalized Frequency (×π rad/sample)')
        ax.set_ylabel('Magnitude (dB)')
        ax.set_title('Frequency Response')
        ax.grid(True, alpha=0.3)
        ax.legend()
        plt.tight_layout()
        plt.show()

    return results
