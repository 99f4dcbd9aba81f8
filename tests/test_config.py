import logging

import pytest

from logstats.config import Settings, load_settings
from logstats.errors import ConfigError


def test_missing_file_uses_defaults(tmp_path):
    settings = load_settings(tmp_path / "absent.yaml")
    assert settings == Settings(log_level="info", input_file="small.log")
    assert settings.logging_level == logging.INFO


def test_values_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("log_level: WARN\ninput_file: big.log\nunused: 1\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings.input_file == "big.log"
    assert settings.log_level == "warn"
    assert settings.logging_level == logging.WARNING


def test_overrides_win(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("log_level: error\n", encoding="utf-8")
    settings = load_settings(path, log_level="trace", input_file=None)
    assert settings.logging_level == logging.DEBUG
    assert settings.input_file == "small.log"


def test_env_selects_config(monkeypatch, tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("input_file: from_env.log\n", encoding="utf-8")
    monkeypatch.setenv("LOGSTATS_CONFIG", str(path))
    assert load_settings().input_file == "from_env.log"


@pytest.mark.parametrize(
    "content",
    ["log_level: [unterminated\n", "- just\n- a list\n", "log_level: loud\n", "input_file: {a: 1}\n"],
)
def test_malformed_config_raises(tmp_path, content):
    path = tmp_path / "config.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(path)
