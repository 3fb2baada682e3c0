"""Unit tests for configuration sources."""

from __future__ import annotations

from pathlib import Path

import pytest

from kairo_agents.config.sources import EnvironmentSource, JsonFileSource, YamlFileSource
from kairo_agents.core.errors import ConfigError


class TestJsonFileSource:
    """Tests for JSON file loading."""

    def test_load(self, tmp_path: Path) -> None:
        """Test loading a JSON file."""
        path = tmp_path / "config.json"
        path.write_text('{"request_timeout": 30}')

        source = JsonFileSource(path)
        assert source.exists()
        assert source.load() == {"request_timeout": 30}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file loads as empty."""
        source = JsonFileSource(tmp_path / "missing.json")
        assert not source.exists()
        assert source.load() == {}

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test a blank file loads as empty."""
        path = tmp_path / "config.json"
        path.write_text("  \n")
        assert JsonFileSource(path).load() == {}

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test malformed JSON raises ConfigError."""
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            JsonFileSource(path).load()

    def test_root_must_be_mapping(self, tmp_path: Path) -> None:
        """Test non-object JSON root raises ConfigError."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON root must be a mapping, got list"):
            JsonFileSource(path).load()

    def test_directory_does_not_exist_as_file(self, tmp_path: Path) -> None:
        """Test a directory is not treated as a file."""
        assert not JsonFileSource(tmp_path).exists()


class TestYamlFileSource:
    """Tests for YAML file loading."""

    def test_load(self, tmp_path: Path) -> None:
        """Test loading a YAML file."""
        path = tmp_path / "config.yaml"
        path.write_text("anthropic:\n  coding: claude-custom\n")
        assert YamlFileSource(path).load() == {"anthropic": {"coding": "claude-custom"}}

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file loads as empty."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert YamlFileSource(path).load() == {}

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML raises ConfigError."""
        path = tmp_path / "config.yaml"
        path.write_text("key: [unclosed")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            YamlFileSource(path).load()

    def test_scalar_root(self, tmp_path: Path) -> None:
        """Test scalar YAML root raises ConfigError."""
        path = tmp_path / "config.yaml"
        path.write_text("just a string")
        with pytest.raises(ConfigError, match="YAML root must be a mapping"):
            YamlFileSource(path).load()


class TestEnvironmentSource:
    """Tests for environment variable loading."""

    def test_maps_variables(self) -> None:
        """Test environment variables map to config fields."""
        source = EnvironmentSource(
            {
                "ANTHROPIC_API_KEY": "a",
                "OPENAI_API_KEY": "o",
                "GOOGLE_API_KEY": "g",
                "AZURE_OPENAI_API_KEY": "z",
                "AZURE_OPENAI_ENDPOINT": "https://res.openai.azure.com",
                "AZURE_OPENAI_API_VERSION": "2024-02-01",
                "KAIRO_REQUEST_TIMEOUT": "60",
                "UNRELATED": "x",
            }
        )
        assert source.load() == {
            "anthropic_api_key": "a",
            "openai_api_key": "o",
            "google_api_key": "g",
            "azure_api_key": "z",
            "azure_endpoint": "https://res.openai.azure.com",
            "azure_api_version": "2024-02-01",
            "request_timeout": 60.0,
        }

    def test_blank_values_skipped(self) -> None:
        """Test blank variables are skipped."""
        assert EnvironmentSource({"ANTHROPIC_API_KEY": "   "}).load() == {}

    def test_values_stripped(self) -> None:
        """Test values are stripped."""
        assert EnvironmentSource({"OPENAI_API_KEY": " sk \n"}).load() == {"openai_api_key": "sk"}

    def test_invalid_float_kept_as_string(self) -> None:
        """Test unparsable timeouts are left for validation."""
        assert EnvironmentSource({"KAIRO_REQUEST_TIMEOUT": "soon"}).load() == {
            "request_timeout": "soon"
        }

    def test_always_exists(self) -> None:
        """Test the environment source always exists."""
        assert EnvironmentSource({}).exists()

    def test_defaults_to_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the process environment is used by default."""
        monkeypatch.setenv("GOOGLE_API_KEY", "from-env")
        assert EnvironmentSource().load()["google_api_key"] == "from-env"
