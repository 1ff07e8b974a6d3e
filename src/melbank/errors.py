"""Exception types raised by melbank."""

from __future__ import annotations


class MelbankError(Exception):
    """Base exception for all melbank errors."""


class InvalidParameterError(MelbankError, ValueError):
    """Raised when a sample rate, bin count, or array argument is unusable.

    Raised when:
        - ``sample_rate`` is not a finite positive number
        - the filterbank has fewer than two bins
        - a coefficient array has the wrong shape or dtype
        - a configuration value is out of range
    """
