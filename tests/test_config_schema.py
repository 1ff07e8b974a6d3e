from __future__ import annotations

from pathlib import Path

import pytest
from omegaconf.errors import ConfigKeyError

from melbank import InvalidParameterError, load_config, parse_config, save_config
from melbank.config_schema import config_to_dict


def test_parse_config_applies_defaults() -> None:
    cfg = parse_config({"filterbank": {"n_bins": 512}})
    assert cfg.filterbank.n_bins == 512
    assert cfg.filterbank.sample_rate == 44100.0
    assert cfg.filterbank.n_filters == 40
    assert cfg.filterbank.freq_min is None
    assert cfg.output.coeffs is None
    assert cfg.runtime.log_level == "INFO"


def test_parse_config_rejects_unknown_key() -> None:
    with pytest.raises(ConfigKeyError, match="unknown_field"):
        parse_config({"filterbank": {"unknown_field": 1}})


def test_parse_config_validates_ranges() -> None:
    with pytest.raises(InvalidParameterError, match="sample_rate"):
        parse_config({"filterbank": {"sample_rate": 0, "n_bins": 1, "dtype": "int32"}})
    with pytest.raises(InvalidParameterError, match="n_bins"):
        parse_config({"filterbank": {"n_bins": 1}})
    with pytest.raises(InvalidParameterError, match="floating"):
        parse_config({"filterbank": {"dtype": "int32"}})


def test_load_config_merges_file_and_overrides(tmp_path: Path) -> None:
    path = tmp_path / "fb.yaml"
    path.write_text(
        "filterbank:\n  sample_rate: 16000\n  n_bins: 512\n",
        encoding="utf-8",
    )
    cfg = load_config(path, overrides=["filterbank.n_bins=256", "runtime.log_level=DEBUG"])
    assert cfg.filterbank.sample_rate == 16000.0
    assert cfg.filterbank.n_bins == 256
    assert cfg.runtime.log_level == "DEBUG"


def test_load_config_without_file_uses_defaults() -> None:
    cfg = load_config()
    assert cfg.filterbank.n_bins == 1024
    assert cfg.filterbank.dtype == "float64"


@pytest.mark.parametrize(
    "override, match",
    [
        ("filterbank.sample_rate=0", "sample_rate"),
        ("filterbank.n_bins=1", "n_bins"),
        ("filterbank.n_filters=0", "n_filters"),
        ("filterbank.dtype=int32", "floating"),
        ("filterbank.dtype=not_a_dtype", "dtype"),
    ],
)
def test_load_config_validates_ranges(override: str, match: str) -> None:
    with pytest.raises(InvalidParameterError, match=match):
        load_config(overrides=[override])


def test_save_config_writes_loadable_yaml(tmp_path: Path) -> None:
    cfg = load_config(overrides=["filterbank.freq_max=8000", "output.plot=fb.pdf"])
    path = save_config(tmp_path / "nested" / "run.yaml", cfg)
    assert path.exists()

    reloaded = load_config(path)
    assert config_to_dict(reloaded) == config_to_dict(cfg)
    assert reloaded.filterbank.freq_max == 8000.0
