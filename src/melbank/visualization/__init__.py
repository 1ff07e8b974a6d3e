"""Visualization utilities for inspection and reporting."""

from .filterbank import plot_filterbank, save_filterbank_plot

__all__ = ["plot_filterbank", "save_filterbank_plot"]
