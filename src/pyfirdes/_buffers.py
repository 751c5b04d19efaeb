"""Caller-owned output buffers for the design routines."""

from typing import Optional

import numpy as np

from .exceptions import BufferSizeError

DEFAULT_DTYPE = np.float32


def output_buffer(out: Optional[np.ndarray], n: int) -> np.ndarray:
    """
    Return the array that receives `n` coefficients.

    A fresh float32 array is allocated when `out` is None. Otherwise `out`
    is checked before anything is written: it must be a 1-D ndarray with
    room for at least `n` elements. It is never resized.
    """
    if out is None:
        return np.empty(n, dtype=DEFAULT_DTYPE)

    if not isinstance(out, np.ndarray) or out.ndim != 1:
        raise BufferSizeError("Output buffer must be a 1-D numpy array")
    if len(out) < n:
        raise BufferSizeError(
            f"Output buffer holds {len(out)} elements, {n} required"
        )
    return out