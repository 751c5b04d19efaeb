"""Exceptions raised by filter design and analysis routines."""


class FilterDesignError(Exception):
    """Base exception for filter design errors."""

    pass


class InvalidParameterError(FilterDesignError, ValueError):
    """Raised when a scalar design parameter is out of range.

    This occurs when:
    - Transition bandwidth is outside (0, 0.5]
    - Sidelobe suppression level is not positive
    - Cutoff frequency is outside [0, 1]
    - Fractional sample offset is outside [-0.5, 0.5]
    - A zero-length filter is requested
    """

    pass


class BufferSizeError(InvalidParameterError):
    """Raised when a caller-supplied coefficient buffer cannot hold the result."""

    pass


class DegenerateInputError(FilterDesignError, ArithmeticError):
    """Raised when a coefficient vector cannot be analyzed.

    The zero-lag autocorrelation of an all-zero filter is zero, so ISI
    cannot be normalized against it.
    """

    pass


class ConvergenceError(FilterDesignError):
    """Raised when the root-Nyquist search fails to converge."""

    pass
