"""
Tests for configuration, metadata loading and command line parsing.
"""

import json

import pytest

from src.geomag_service.core import Config
from src.geomag_service.core.config import BUNDLED_METADATA_FILE
from src.geomag_service.main import parse_params
from src.geomag_service.services import load_observatories


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "waveserver": {"base_url": "http://waveserver.test", "timeout": 10},
        "logging": {"level": "DEBUG"},
    }))
    return str(path)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("WAVESERVER_URL", "WAVESERVER_TIMEOUT", "METADATA_FILE", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


class TestConfig:
    """Test configuration loading."""

    def test_values_and_defaults(self, config_file):
        config = Config(config_file)

        assert config.waveserver_base_url == "http://waveserver.test"
        assert config.waveserver_timeout == 10
        assert config.waveserver_max_retries == 3
        assert config.waveserver_verify_ssl is True
        assert config.log_level == "DEBUG"
        assert config.log_file is None
        assert config.metadata_file == str(BUNDLED_METADATA_FILE)

    def test_dot_notation(self, config_file):
        config = Config(config_file)
        assert config.get("waveserver.timeout") == 10
        assert config.get("waveserver.missing", "fallback") == "fallback"

    def test_environment_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("WAVESERVER_URL", "http://other.test")
        monkeypatch.setenv("WAVESERVER_TIMEOUT", "5")
        monkeypatch.setenv("METADATA_FILE", "/tmp/observatories.json")

        config = Config(config_file)

        assert config.waveserver_base_url == "http://other.test"
        assert config.waveserver_timeout == 5
        assert config.metadata_file == "/tmp/observatories.json"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "absent.json"))

    def test_missing_base_url(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"waveserver": {}}))
        with pytest.raises(ValueError, match="waveserver.base_url"):
            Config(str(path))

    def test_missing_section(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{}")
        with pytest.raises(ValueError, match="waveserver"):
            Config(str(path))


class TestLoadObservatories:
    """Test observatory metadata loading."""

    def test_bundled_metadata(self, observatories):
        assert "BOU" in observatories
        assert observatories["BOU"].name == "Boulder"
        assert all(key == key.upper() for key in observatories)

    def test_mapping_is_read_only(self, observatories):
        with pytest.raises(TypeError):
            observatories["NEW_ID"] = None

    def test_ids_are_upper_cased(self, tmp_path):
        path = tmp_path / "observatories.json"
        path.write_text(json.dumps([
            {"id": "abc", "name": "Test", "latitude": 1, "longitude": 2, "elevation": 3}
        ]))
        assert list(load_observatories(path)) == ["ABC"]

    def test_missing_field(self, tmp_path):
        path = tmp_path / "observatories.json"
        path.write_text(json.dumps([{"id": "ABC"}]))
        with pytest.raises(ValueError, match="name"):
            load_observatories(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_observatories(tmp_path / "absent.json")


class TestParseParams:
    """Test command line parameter parsing."""

    def test_pairs(self):
        assert parse_params(["id=BOU", "elements=H,E"]) == {"id": "BOU", "elements": "H,E"}

    def test_repeated_names_collect(self):
        params = parse_params(["elements=H", "elements=E", "elements=Z"])
        assert params == {"elements": ["H", "E", "Z"]}

    def test_empty_value(self):
        assert parse_params(["type="]) == {"type": ""}

    def test_missing_equals(self):
        with pytest.raises(ValueError):
            parse_params(["BOU"])
