"""Spectral filterbank utilities."""

from .filterbank import Filterbank
from .mel import compute_mel_filterbank, mel_filterbank
from .planner import (
    SLANEY,
    FilterEdges,
    SlaneyLayout,
    anchor_frequencies,
    plan_edges,
    triangle_heights,
)
from .weights import (
    bin_frequency_table,
    bin_to_freq,
    fill_triangular_weights,
    freq_to_bin,
)

__all__ = [
    "Filterbank",
    "FilterEdges",
    "SLANEY",
    "SlaneyLayout",
    "anchor_frequencies",
    "bin_frequency_table",
    "bin_to_freq",
    "compute_mel_filterbank",
    "fill_triangular_weights",
    "freq_to_bin",
    "mel_filterbank",
    "plan_edges",
    "triangle_heights",
]
