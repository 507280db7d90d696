from pathlib import Path

import pytest

from targetplan.config import Config, load_config


def test_defaults():
    config = Config({})
    assert config.site_latitude_deg is None
    assert config.site_longitude_deg is None
    assert config.ephemeris_backend == "astropy"
    assert config.minimum_altitude_deg == 20.0


def test_load_config_explicit_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.toml")


def test_load_config_default_missing(monkeypatch, tmp_path):
    monkeypatch.setattr("targetplan.config.DEFAULT_CONFIG_PATH", tmp_path / "config.toml")
    assert load_config().ephemeris_backend == "astropy"


def test_load_config_reads_toml(tmp_path):
    path = Path(tmp_path) / "config.toml"
    path.write_text(
        "[site]\n"
        "latitude_deg = 51.48\n"
        "longitude_deg = 0.0\n"
        "elevation_m = 46\n"
        "\n"
        "[ephemeris]\n"
        'backend = "low_precision"\n'
        "\n"
        "[visibility]\n"
        "minimum_altitude_deg = 25\n"
    )
    config = load_config(path)
    assert config.site_latitude_deg == 51.48
    assert config.site_elevation_m == 46
    assert config.ephemeris_backend == "low_precision"
    assert config.minimum_altitude_deg == 25.0
