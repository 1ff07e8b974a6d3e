"""Plotting utilities for filterbank weight matrices."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from ..spectral.filterbank import Filterbank
from ..spectral.planner import FilterEdges
from ..spectral.weights import bin_frequency_table


def _as_matrix(filterbank: Filterbank | np.ndarray) -> np.ndarray:
    coeffs = filterbank.coeffs if isinstance(filterbank, Filterbank) else filterbank
    coeffs = np.asarray(coeffs)
    if coeffs.ndim != 2:
        raise ValueError("filterbank must be a 2-D array shaped (n_filters, n_bins)")
    return coeffs


def plot_filterbank(
    filterbank: Filterbank | np.ndarray,
    sample_rate: float,
    *,
    edges: FilterEdges | None = None,
    max_freq: float | None = None,
) -> plt.Figure:
    """Plot every filter row against bin frequency, with the weight image below.

    When ``edges`` is given, center frequencies are marked on the curve axis.
    """
    coeffs = _as_matrix(filterbank)
    n_filters, n_bins = coeffs.shape
    freqs = bin_frequency_table(sample_rate, n_bins)

    fig, (ax_curves, ax_image) = plt.subplots(
        nrows=2, ncols=1, figsize=(8.0, 6.0), height_ratios=[2, 1]
    )
    for row in coeffs:
        ax_curves.plot(freqs, row, linewidth=0.6)
    if edges is not None:
        n_marked = min(n_filters, len(edges))
        ax_curves.vlines(
            edges.center[:n_marked],
            0.0,
            coeffs.max(initial=0.0),
            colors="0.7",
            linewidth=0.3,
        )
    ax_curves.set_xlim(0.0, max_freq if max_freq is not None else freqs[-1])
    ax_curves.set_xlabel("Frequency [Hz]")
    ax_curves.set_ylabel("Weight")

    ax_image.imshow(
        coeffs,
        aspect="auto",
        origin="lower",
        interpolation="nearest",
        extent=(freqs[0], freqs[-1], -0.5, n_filters - 0.5),
        rasterized=True,
    )
    ax_image.set_xlabel("Frequency [Hz]")
    ax_image.set_ylabel("Filter")
    fig.tight_layout()
    return fig


def save_filterbank_plot(
    filterbank: Filterbank | np.ndarray,
    sample_rate: float,
    path: str | Path,
    *,
    edges: FilterEdges | None = None,
) -> Path:
    """Render :func:`plot_filterbank` to ``path`` and close the figure."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig = plot_filterbank(filterbank, sample_rate, edges=edges)
    fig.savefig(out)
    plt.close(fig)
    return out
