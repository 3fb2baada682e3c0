"""Unit tests for the configuration loader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from kairo_agents.config.loader import ConfigLoader, load_provider_config
from kairo_agents.config.sources import JsonFileSource, YamlFileSource
from kairo_agents.core.errors import ConfigError


class TestConfigLoader:
    """Tests for layered loading."""

    def test_defaults_only(self) -> None:
        """Test loading with no file and an empty environment."""
        config = ConfigLoader(environ={}).load_all()
        assert config.request_timeout == 120.0
        assert config.default_key("anthropic") is None

    def test_file_overrides_defaults(self, tmp_path: Path) -> None:
        """Test file values override defaults."""
        path = tmp_path / "providers.json"
        path.write_text(json.dumps({"request_timeout": 30, "google": {"fast": "gemini-x"}}))

        config = ConfigLoader(path, environ={}).load_all()

        assert config.request_timeout == 30
        assert config.google.fast == "gemini-x"
        # Sibling catalog entries survive the deep merge
        assert config.google.reasoning == "gemini-2.0-flash-exp"

    def test_environment_overrides_file(self, tmp_path: Path) -> None:
        """Test environment values override the file."""
        path = tmp_path / "providers.yaml"
        path.write_text("request_timeout: 30\nanthropic_api_key: file-key\n")

        config = ConfigLoader(
            path, environ={"KAIRO_REQUEST_TIMEOUT": "90", "ANTHROPIC_API_KEY": "env-key"}
        ).load_all()

        assert config.request_timeout == 90
        assert config.default_key("anthropic") == "env-key"

    def test_missing_file_is_skipped(self, tmp_path: Path) -> None:
        """Test a missing file is skipped."""
        config = ConfigLoader(tmp_path / "absent.json", environ={}).load_all()
        assert config.request_timeout == 120.0

    def test_invalid_value_raises_config_error(self) -> None:
        """Test invalid values raise ConfigError."""
        with pytest.raises(ConfigError, match="validation failed"):
            ConfigLoader(environ={"KAIRO_REQUEST_TIMEOUT": "soon"}).load_all()

    def test_out_of_range_value(self) -> None:
        """Test out-of-range values raise ConfigError."""
        with pytest.raises(ConfigError):
            ConfigLoader(environ={"KAIRO_REQUEST_TIMEOUT": "9000"}).load_all()

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        """Test unknown keys are ignored."""
        path = tmp_path / "providers.json"
        path.write_text(json.dumps({"theme": "dark"}))
        assert ConfigLoader(path, environ={}).load_all().request_timeout == 120.0


class TestFileSource:
    """Tests for picking a source by extension."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("a.json", JsonFileSource),
            ("a.yaml", YamlFileSource),
            ("a.YML", YamlFileSource),
        ],
    )
    def test_extension(self, name: str, expected: type) -> None:
        """Test source type is chosen by extension."""
        assert isinstance(ConfigLoader.file_source(Path(name)), expected)

    def test_unsupported(self) -> None:
        """Test unsupported extensions raise ConfigError."""
        with pytest.raises(ConfigError, match="Unsupported configuration format: .toml"):
            ConfigLoader.file_source(Path("a.toml"))


class TestMerge:
    """Tests for deep merge."""

    def test_nested_merge(self) -> None:
        """Test nested dictionaries are merged."""
        loader = ConfigLoader()
        base = {"a": {"x": 1, "y": 2}, "b": 1}
        override = {"a": {"y": 3}, "c": 4}

        assert loader.merge(base, override) == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}

    def test_inputs_not_modified(self) -> None:
        """Test merge leaves its inputs untouched."""
        loader = ConfigLoader()
        base = {"a": {"x": 1}}
        override = {"a": {"x": 2}}

        loader.merge(base, override)

        assert base == {"a": {"x": 1}}
        assert override == {"a": {"x": 2}}

    def test_non_dict_replaces(self) -> None:
        """Test non-dict values replace dictionaries."""
        assert ConfigLoader().merge({"a": {"x": 1}}, {"a": None}) == {"a": None}


class TestLoadProviderConfig:
    """Tests for the convenience function."""

    def test_reads_environment(self) -> None:
        """Test the helper reads the environment."""
        config = load_provider_config(environ={"OPENAI_API_KEY": "sk"})
        assert config.default_key("openai") == "sk"
