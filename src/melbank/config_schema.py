"""Typed OmegaConf schemas and YAML I/O for filterbank runs."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import importlib
from pathlib import Path
from typing import Any, Iterable, Mapping

import numpy as np
import yaml

from .errors import InvalidParameterError

try:
    OmegaConf = importlib.import_module("omegaconf").OmegaConf
except ModuleNotFoundError as exc:  # pragma: no cover
    raise RuntimeError(
        "melbank.config_schema requires 'omegaconf'. Install dependencies with `uv sync`."
    ) from exc


@dataclass
class FilterbankConfig:
    """Filterbank shape and sampling configuration."""

    sample_rate: float = 44100.0
    n_bins: int = 1024
    n_filters: int = 40
    freq_min: float | None = None
    freq_max: float | None = None
    dtype: str = "float64"


@dataclass
class OutputConfig:
    """Where to write coefficients, plots and edge records."""

    coeffs: str | None = None
    plot: str | None = None
    edges_jsonl: str | None = None


@dataclass
class RuntimeConfig:
    """Runtime options."""

    log_level: str = "INFO"


@dataclass
class RunConfig:
    """Top-level configuration of one filterbank build."""

    filterbank: FilterbankConfig = field(default_factory=FilterbankConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)


def parse_config(data: Mapping[str, object]) -> RunConfig:
    """Decode and validate a mapping as :class:`RunConfig`, applying defaults."""
    base = OmegaConf.structured(RunConfig)
    merged = OmegaConf.merge(base, OmegaConf.create(dict(data)))
    decoded = OmegaConf.to_object(merged)
    if not isinstance(decoded, RunConfig):
        raise TypeError("Failed to decode config as RunConfig")
    return validate_config(decoded)


def validate_config(config: RunConfig) -> RunConfig:
    """Check value ranges that the schema types cannot express."""
    fb = config.filterbank
    if not np.isfinite(fb.sample_rate) or fb.sample_rate <= 0:
        raise InvalidParameterError(
            f"filterbank.sample_rate must be > 0, got {fb.sample_rate}"
        )
    if fb.n_bins < 2:
        raise InvalidParameterError(f"filterbank.n_bins must be >= 2, got {fb.n_bins}")
    if fb.n_filters < 1:
        raise InvalidParameterError(
            f"filterbank.n_filters must be >= 1, got {fb.n_filters}"
        )
    try:
        dtype = np.dtype(fb.dtype)
    except TypeError as exc:
        raise InvalidParameterError(f"Unknown filterbank.dtype '{fb.dtype}'") from exc
    if not np.issubdtype(dtype, np.floating):
        raise InvalidParameterError(
            f"filterbank.dtype must be a floating type, got '{fb.dtype}'"
        )
    return config


def load_config(
    path: str | Path | None = None,
    *,
    overrides: Iterable[str] | None = None,
) -> RunConfig:
    """Load a YAML config (or the defaults) with dotlist overrides applied."""
    override_list = [item for item in (overrides or []) if item]
    cfg = OmegaConf.structured(RunConfig)
    if path is not None:
        cfg = OmegaConf.merge(cfg, OmegaConf.load(Path(path)))
    if override_list:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(override_list))
    decoded = OmegaConf.to_object(cfg)
    if not isinstance(decoded, RunConfig):
        raise TypeError(f"Failed to decode {path or '<defaults>'} as RunConfig")
    return validate_config(decoded)


def config_to_dict(config: RunConfig) -> dict[str, Any]:
    """Convert :class:`RunConfig` to a plain dictionary."""
    return asdict(config)


def save_config(path: str | Path, config: RunConfig) -> Path:
    """Write ``config`` as YAML and return the written path."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(config_to_dict(config), handle, sort_keys=False)
    return out
