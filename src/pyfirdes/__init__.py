"""
Pyfirdes - FIR filter design and analysis.
"""

from .doppler_gen import DOPPLER_WINDOW_BETA, fir_design_doppler
from .exceptions import (
    BufferSizeError,
    ConvergenceError,
    DegenerateInputError,
    FilterDesignError,
    InvalidParameterError,
)
from .filter_analysis import ISIResult, filter_autocorr, filter_isi
from .filter_spec import DopplerFilterSpec, KaiserFilterSpec
from .firdes import (
    estimate_req_filter_len,
    fir_kaiser_window,
    kaiser_beta_slsl,
    kaiser_window,
)
from .root_nyquist_gen import RootNyquistOptimizer, fir_design_optim_root_nyquist
from .verification import verify_filter_response

__version__ = "0.1.0"
__all__ = [
    "estimate_req_filter_len",
    "kaiser_beta_slsl",
    "kaiser_window",
    "fir_kaiser_window",
    "fir_design_doppler",
    "DOPPLER_WINDOW_BETA",
    "RootNyquistOptimizer",
    "fir_design_optim_root_nyquist",
    "filter_autocorr",
    "filter_isi",
    "ISIResult",
    "verify_filter_response",
    "KaiserFilterSpec",
    "DopplerFilterSpec",
    "FilterDesignError",
    "InvalidParameterError",
    "BufferSizeError",
    "DegenerateInputError",
    "ConvergenceError",
]
