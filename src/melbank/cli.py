from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

import numpy as np
import yaml

from .config_schema import RunConfig, config_to_dict, load_config
from .logging_utils import configure_logging, edge_records, log_records_jsonl
from .spectral import Filterbank, FilterEdges, mel_filterbank, plan_edges

LOGGER = logging.getLogger(__name__)

_FLAG_OVERRIDES = {
    "sample_rate": "filterbank.sample_rate",
    "n_bins": "filterbank.n_bins",
    "n_filters": "filterbank.n_filters",
    "freq_min": "filterbank.freq_min",
    "freq_max": "filterbank.freq_max",
    "dtype": "filterbank.dtype",
    "output": "output.coeffs",
    "plot": "output.plot",
    "edges_jsonl": "output.edges_jsonl",
    "log_level": "runtime.log_level",
}


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="melbank",
        description="Build a 40-band Slaney Mel filterbank matrix",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML config file.")
    parser.add_argument("--sample-rate", type=float, default=None, help="Sample rate in Hz.")
    parser.add_argument("--n-bins", type=int, default=None, help="Number of spectral bins.")
    parser.add_argument(
        "--n-filters", type=int, default=None, help="Number of filterbank rows."
    )
    parser.add_argument(
        "--freq-min",
        type=float,
        default=None,
        help="Reserved; accepted but not applied to band placement.",
    )
    parser.add_argument(
        "--freq-max",
        type=float,
        default=None,
        help="Reserved; accepted but not applied to band placement.",
    )
    parser.add_argument("--dtype", type=str, default=None, help="Coefficient dtype.")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write coefficients to .npy, or coefficients and edges to .npz.",
    )
    parser.add_argument("--plot", type=Path, default=None, help="Save a figure here.")
    parser.add_argument(
        "--edges-jsonl",
        type=Path,
        default=None,
        help="Append one JSON record per filter to this file.",
    )
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        help="Config override in dotlist form, e.g. filterbank.n_bins=512.",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Logging level.")
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the resolved config as YAML and exit",
    )
    return parser.parse_args(argv)


def _collect_overrides(args: argparse.Namespace) -> list[str]:
    overrides = list(args.set)
    for attr, key in _FLAG_OVERRIDES.items():
        value = getattr(args, attr)
        if value is not None:
            overrides.append(f"{key}={value}")
    return overrides


def save_coeffs(path: Path, filterbank: Filterbank, edges: FilterEdges) -> Path:
    """Save coefficients with edges as ``.npz``, otherwise coefficients as ``.npy``.

    Any other suffix is replaced by ``.npy``; the path actually written is
    returned.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".npz":
        np.savez(
            path,
            coeffs=filterbank.coeffs,
            lower=edges.lower,
            center=edges.center,
            upper=edges.upper,
        )
    else:
        path = path.with_suffix(".npy")
        np.save(path, filterbank.coeffs)
    return path


def run(config: RunConfig) -> Filterbank:
    """Build the filterbank described by ``config`` and write its outputs."""
    fb_cfg = config.filterbank
    filterbank = mel_filterbank(
        fb_cfg.sample_rate,
        fb_cfg.n_bins,
        fb_cfg.n_filters,
        freq_min=fb_cfg.freq_min,
        freq_max=fb_cfg.freq_max,
        dtype=fb_cfg.dtype,
    )
    edges = plan_edges()
    LOGGER.info(
        "Built %d x %d filterbank at %.1f Hz",
        filterbank.n_filters,
        filterbank.n_bins,
        fb_cfg.sample_rate,
    )

    if config.output.coeffs:
        saved = save_coeffs(Path(config.output.coeffs), filterbank, edges)
        LOGGER.info("Coefficients written to %s", saved)
    if config.output.edges_jsonl:
        count = log_records_jsonl(config.output.edges_jsonl, edge_records(edges))
        LOGGER.info("Wrote %d edge records to %s", count, config.output.edges_jsonl)
    if config.output.plot:
        from .visualization import save_filterbank_plot

        saved = save_filterbank_plot(
            filterbank, fb_cfg.sample_rate, config.output.plot, edges=edges
        )
        LOGGER.info("Plot written to %s", saved)
    return filterbank


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    config = load_config(args.config, overrides=_collect_overrides(args))
    configure_logging(config.runtime.log_level)

    if args.print_config:
        yaml.safe_dump(config_to_dict(config), sys.stdout, sort_keys=False)
        return

    run(config)


if __name__ == "__main__":
    main()
