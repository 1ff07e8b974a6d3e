"""Bin-frequency lookup and triangular weight filling."""

from __future__ import annotations

import math

import numpy as np

from ..errors import InvalidParameterError
from .planner import FilterEdges, triangle_heights


def validate_sample_rate(sample_rate: float) -> float:
    """Return ``sample_rate`` as float, rejecting non-finite or non-positive values."""
    try:
        value = float(sample_rate)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(
            f"sample_rate must be a number, got {sample_rate!r}"
        ) from exc
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameterError(f"sample_rate must be > 0, got {sample_rate!r}")
    return value


def bin_to_freq(bins, sample_rate: float, fft_size: int):
    """Convert bin indices to Hz; negative bins clamp to 0 Hz."""
    sample_rate = validate_sample_rate(sample_rate)
    if fft_size <= 0:
        raise InvalidParameterError(f"fft_size must be positive, got {fft_size}")
    step = sample_rate / fft_size
    return step * np.maximum(np.asarray(bins, dtype=np.float64), 0.0)


def freq_to_bin(freqs, sample_rate: float, fft_size: int):
    """Convert Hz to fractional bin indices; negative frequencies clamp to 0."""
    sample_rate = validate_sample_rate(sample_rate)
    if fft_size <= 0:
        raise InvalidParameterError(f"fft_size must be positive, got {fft_size}")
    step = sample_rate / fft_size
    return np.maximum(np.asarray(freqs, dtype=np.float64), 0.0) / step


def bin_frequency_table(sample_rate: float, n_bins: int) -> np.ndarray:
    """Hz value of each of ``n_bins`` bins.

    The bin count itself is used as the transform size, so bin ``b`` maps to
    ``b * sample_rate / n_bins``.
    """
    if n_bins < 2:
        raise InvalidParameterError(f"n_bins must be >= 2, got {n_bins}")
    return bin_to_freq(np.arange(n_bins), sample_rate, n_bins)


def _fill_row(
    row: np.ndarray,
    bin_freqs: np.ndarray,
    lower: float,
    center: float,
    upper: float,
    height: float,
) -> None:
    n_bins = bin_freqs.shape[0]
    last = n_bins - 1

    # first bin at or below the lower edge whose successor is above it
    bin_ = 0
    while bin_ < last:
        if bin_freqs[bin_] <= lower and bin_freqs[bin_ + 1] > lower:
            break
        bin_ += 1
    bin_ += 1

    rise_inc = height / (center - lower)
    while bin_ < last:
        row[bin_] = (bin_freqs[bin_] - lower) * rise_inc
        if bin_freqs[bin_ + 1] > center:
            break
        bin_ += 1
    bin_ += 1

    down_inc = height / (upper - center)
    while bin_ < last:
        row[bin_] += (upper - bin_freqs[bin_]) * down_inc
        if bin_freqs[bin_ + 1] > upper:
            break
        bin_ += 1


def fill_triangular_weights(
    weights: np.ndarray,
    edges: FilterEdges,
    bin_freqs: np.ndarray,
) -> int:
    """Write one triangle per row of ``weights`` in place.

    ``weights`` must already be zeroed. Only the first
    ``min(weights.shape[0], len(edges))`` rows are touched; the number of
    rows written is returned.
    """
    if weights.ndim != 2:
        raise InvalidParameterError(
            f"weights must be 2-D shaped (n_filters, n_bins), got {weights.shape}"
        )
    bin_freqs = np.asarray(bin_freqs, dtype=np.float64)
    if bin_freqs.ndim != 1 or bin_freqs.shape[0] != weights.shape[1]:
        raise InvalidParameterError(
            "bin_freqs length must match the number of bins: "
            f"got {bin_freqs.shape}, expected ({weights.shape[1]},)"
        )
    if bin_freqs.shape[0] < 2:
        raise InvalidParameterError(
            f"at least 2 bins are required, got {bin_freqs.shape[0]}"
        )

    heights = triangle_heights(edges)
    n_rows = min(weights.shape[0], len(edges))
    for fn in range(n_rows):
        _fill_row(
            weights[fn],
            bin_freqs,
            float(edges.lower[fn]),
            float(edges.center[fn]),
            float(edges.upper[fn]),
            float(heights[fn]),
        )
    return n_rows
