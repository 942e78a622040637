"""Tests for configuration loading."""

import textwrap
from pathlib import Path

import pytest

from backend.utils.config import Config
from backend.utils.errors import ConfigurationError, ErrorType

CONFIG_YAML = textwrap.dedent("""
    app:
      title: "Mullai Test"
      default_center: [11.0, 77.0]
      default_zoom: 6
      about_text: "About text"
    geocoder:
      base_url: "https://geo.example/search"
      user_agent: "tests/1.0"
      accept_language: "en"
      timeout: 5
      min_interval: 0.5
    report:
      filename: "claim.pdf"
      title: "Claim Report"
    logging:
      level: "DEBUG"
      format: "%(message)s"
      file: ""
""")


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    for var in ("GEOCODER_BASE_URL", "GEOCODER_USER_AGENT", "GEOCODER_TIMEOUT",
                "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML)
    return path


def test_load_reads_all_sections(config_file):
    config = Config.load(str(config_file))
    assert config.app.title == "Mullai Test"
    assert config.app.default_center == (11.0, 77.0)
    assert config.geocoder.base_url == "https://geo.example/search"
    assert config.geocoder.timeout == 5.0
    assert config.geocoder.min_interval == 0.5
    assert config.report.filename == "claim.pdf"
    assert config.logging.level == "DEBUG"


def test_environment_overrides(config_file, monkeypatch):
    monkeypatch.setenv("GEOCODER_BASE_URL", "http://localhost:8080/search")
    monkeypatch.setenv("GEOCODER_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    config = Config.load(str(config_file))
    assert config.geocoder.base_url == "http://localhost:8080/search"
    assert config.geocoder.timeout == 2.5
    assert config.logging.level == "WARNING"


def test_defaults_for_missing_sections(tmp_path, monkeypatch):
    monkeypatch.delenv("GEOCODER_BASE_URL", raising=False)
    monkeypatch.delenv("GEOCODER_TIMEOUT", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text("{}\n")
    config = Config.load(str(path))
    assert config.report.filename == "report.pdf"
    assert config.report.title == "Decision Report"
    assert config.app.default_center == (20.0, 80.0)
    assert config.geocoder.base_url == "https://nominatim.openstreetmap.org/search"


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError) as excinfo:
        Config.load(str(tmp_path / "nope.yaml"))
    assert excinfo.value.error_type is ErrorType.CONFIG_MISSING


def test_invalid_timeout(config_file, monkeypatch):
    monkeypatch.setenv("GEOCODER_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError) as excinfo:
        Config.load(str(config_file))
    assert excinfo.value.error_type is ErrorType.CONFIG_INVALID


def test_shipped_config_loads():
    config = Config.load(str(Path(__file__).parent / "config.yaml"))
    assert config.report.filename == "report.pdf"
