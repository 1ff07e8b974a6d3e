"""Example: project a synthetic magnitude spectrum onto Slaney Mel bands.

Usage
-----
``uv run python examples/mel_band_energies.py --sample-rate 16000 --n-bins 512``

The spectrum is a sum of two Gaussian peaks in place of a real transform
output; any ``(n_bins,)`` or ``(n_bins, n_frames)`` magnitude array works.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from melbank import bin_frequency_table, mel_filterbank, plan_edges
from melbank.logging_utils import configure_logging


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Apply a Slaney Mel filterbank to a synthetic spectrum.",
    )
    parser.add_argument("--sample-rate", type=float, default=16000.0)
    parser.add_argument("--n-bins", type=int, default=512)
    parser.add_argument(
        "--peaks",
        type=float,
        nargs="+",
        default=[440.0, 2500.0],
        help="Peak frequencies (Hz) of the synthetic spectrum.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("outputs/mel_band_energies.pdf"),
        help="Where to save the band-energy figure.",
    )
    return parser.parse_args(argv)


def synthetic_spectrum(freqs: np.ndarray, peaks: Sequence[float]) -> np.ndarray:
    spectrum = np.zeros_like(freqs)
    for peak in peaks:
        spectrum += np.exp(-0.5 * ((freqs - peak) / 40.0) ** 2)
    return spectrum


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    configure_logging("INFO")

    freqs = bin_frequency_table(args.sample_rate, args.n_bins)
    spectrum = synthetic_spectrum(freqs, args.peaks)
    fb = mel_filterbank(args.sample_rate, args.n_bins)
    bands = fb.apply(spectrum)
    edges = plan_edges()

    args.output.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(8.0, 3.0))
    ax.bar(np.arange(bands.shape[0]), bands)
    ax.set_xticks(np.arange(0, len(edges), 5))
    ax.set_xticklabels([f"{edges.center[i]:.0f}" for i in range(0, len(edges), 5)])
    ax.set_xlabel("Band center [Hz]")
    ax.set_ylabel("Energy")
    fig.tight_layout()
    fig.savefig(args.output)
    plt.close(fig)
    print(f"Saved {args.output}")


if __name__ == "__main__":
    main()
