"""Slaney Mel filterbank construction."""

from __future__ import annotations

import logging

import numpy as np

from ..errors import InvalidParameterError
from .filterbank import Filterbank
from .planner import SLANEY, SlaneyLayout, plan_edges
from .weights import bin_frequency_table, fill_triangular_weights, validate_sample_rate

LOGGER = logging.getLogger(__name__)


def _coeff_matrix(filterbank: Filterbank | np.ndarray) -> np.ndarray:
    if isinstance(filterbank, Filterbank):
        return filterbank.coeffs
    if not isinstance(filterbank, np.ndarray):
        raise InvalidParameterError(
            "filterbank must be a Filterbank or a 2-D NumPy array, "
            f"got {type(filterbank)!r}"
        )
    if filterbank.ndim != 2:
        raise InvalidParameterError(
            f"filterbank must be 2-D shaped (n_filters, n_bins), got {filterbank.shape}"
        )
    if not np.issubdtype(filterbank.dtype, np.floating):
        raise InvalidParameterError(
            f"filterbank dtype must be floating, got {filterbank.dtype}"
        )
    if not filterbank.flags.writeable:
        raise InvalidParameterError("filterbank array is read-only")
    return filterbank


def compute_mel_filterbank(
    filterbank: Filterbank | np.ndarray,
    sample_rate: float,
    freq_min: float | None = None,
    freq_max: float | None = None,
    *,
    layout: SlaneyLayout = SLANEY,
) -> None:
    """Fill ``filterbank`` in place with Slaney Mel triangles.

    Parameters
    ----------
    filterbank : Filterbank or ndarray
        Output shaped ``(n_filters, n_bins)``. It is zeroed, then one
        unit-area triangle is written per row.
    sample_rate : float
        Sample rate in Hz, must be positive.
    freq_min, freq_max : float, optional
        Reserved. The band layout is always the fixed Slaney one; passing
        either value logs a warning and has no effect on the output.
    layout : SlaneyLayout
        Layout constants, the standard 40-band layout by default.
    """
    weights = _coeff_matrix(filterbank)
    sample_rate = validate_sample_rate(sample_rate)
    n_filters, n_bins = weights.shape
    if n_bins < 2:
        raise InvalidParameterError(f"filterbank needs at least 2 bins, got {n_bins}")

    needed = layout.n_filters
    if needed > n_filters:
        LOGGER.warning(
            "not enough Mel filters, got %d but %d needed", n_filters, needed
        )

    edges = plan_edges(layout)
    if freq_min is not None or freq_max is not None:
        LOGGER.warning(
            "freq_min=%s and freq_max=%s are not applied; using the fixed "
            "Slaney layout spanning %.2f-%.2f Hz",
            freq_min,
            freq_max,
            edges.lower[0],
            edges.upper[-1],
        )

    bin_freqs = bin_frequency_table(sample_rate, n_bins)
    weights.fill(0.0)
    written = fill_triangular_weights(weights, edges, bin_freqs)
    if written < n_filters:
        LOGGER.info(
            "Filterbank has %d rows, rows %d-%d left empty",
            n_filters,
            written,
            n_filters - 1,
        )


def mel_filterbank(
    sample_rate: float,
    n_bins: int,
    n_filters: int = SLANEY.n_filters,
    *,
    freq_min: float | None = None,
    freq_max: float | None = None,
    dtype: np.dtype | type | str = np.float64,
) -> Filterbank:
    """Allocate a :class:`Filterbank` and fill it with Slaney Mel triangles."""
    fb = Filterbank(n_filters, n_bins, dtype=dtype)
    compute_mel_filterbank(fb, sample_rate, freq_min, freq_max)
    return fb
