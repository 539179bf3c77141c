# test/test_config.py
import json
from pathlib import Path

import pytest

from shotprofile.config import ConfigError, Settings, load_config


def test_load_toml(tmp_path):
    path = tmp_path / "shot.toml"
    path.write_text('log_level = "DEBUG"\nlenient = true\n[domains]\nflow = [0, 8]\n', encoding="utf-8")

    data = load_config(path)
    assert data["log_level"] == "DEBUG"

    settings = Settings.load(path)
    assert settings.log_level == "DEBUG"
    assert settings.lenient is True
    assert settings.viewport.domains["flow"] == (0.0, 8.0)
    assert settings.viewport.domains["pressure"] == (0.0, 12.0)


def test_load_json(tmp_path):
    path = tmp_path / "shot.json"
    path.write_text(
        json.dumps({"preset_dir": "presets", "viewport": {"width": 800, "inner": [40, 20, 780, 370]}}),
        encoding="utf-8",
    )

    settings = Settings.load(path)
    assert settings.preset_dir == Path("presets")
    assert settings.viewport.width == 800.0
    assert settings.viewport.inner == (40.0, 20.0, 780.0, 370.0)


def test_defaults_without_path():
    settings = Settings.load(None)
    assert settings.log_level == "INFO"
    assert settings.json_logs is False
    assert settings.preset_dir is None
    assert settings.viewport.inner == (30.0, 20.0, 580.0, 370.0)


def test_missing_path(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.toml")


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "shot.yaml"
    path.write_text("log_level: INFO\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Unsupported"):
        load_config(path)


def test_broken_toml(tmp_path):
    path = tmp_path / "shot.toml"
    path.write_text("log_level = \n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_viewport():
    with pytest.raises(ConfigError):
        Settings.from_mapping({"viewport": {"width": 100}})
    with pytest.raises(ConfigError):
        Settings.from_mapping({"domains": {"flow": [1]}})
    with pytest.raises(ConfigError):
        Settings.from_mapping({"viewport": [1, 2]})


@pytest.mark.parametrize("key", ["json_logs", "lenient"])
def test_flags_must_be_booleans(key):
    with pytest.raises(ConfigError, match=key):
        Settings.from_mapping({key: "false"})
    assert getattr(Settings.from_mapping({key: True}), key) is True
