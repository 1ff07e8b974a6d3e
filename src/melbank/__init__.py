"""melbank public API."""

from .config_schema import RunConfig, load_config, parse_config, save_config
from .errors import InvalidParameterError, MelbankError
from .logging_utils import JsonlLogger, edge_records, log_records_jsonl
from .spectral import (
    SLANEY,
    Filterbank,
    FilterEdges,
    SlaneyLayout,
    bin_frequency_table,
    bin_to_freq,
    compute_mel_filterbank,
    freq_to_bin,
    mel_filterbank,
    plan_edges,
    triangle_heights,
)

__all__ = [
    "Filterbank",
    "FilterEdges",
    "SLANEY",
    "SlaneyLayout",
    "bin_frequency_table",
    "bin_to_freq",
    "compute_mel_filterbank",
    "freq_to_bin",
    "mel_filterbank",
    "plan_edges",
    "triangle_heights",
    "MelbankError",
    "InvalidParameterError",
    "RunConfig",
    "load_config",
    "parse_config",
    "save_config",
    "JsonlLogger",
    "edge_records",
    "log_records_jsonl",
]
