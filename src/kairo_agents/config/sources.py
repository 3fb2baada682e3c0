"""Configuration sources for the provider layer.

Each source loads a partial configuration dictionary from one place: a JSON
file, a YAML file, or the process environment.
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar

import yaml

from kairo_agents.core.errors import ConfigError
from kairo_agents.core.logging import get_logger

logger = get_logger("config.sources")


class IConfigSource(ABC):
    """Interface for configuration sources."""

    @abstractmethod
    def load(self) -> dict[str, Any]:
        """Load configuration from the source.

        Returns:
            Configuration dictionary, empty if the source does not exist.

        Raises:
            ConfigError: If the source exists but cannot be parsed.
        """
        ...

    @abstractmethod
    def exists(self) -> bool:
        """Check if the source exists."""
        ...


class _FileSource(IConfigSource):
    """Shared behavior for file-backed sources."""

    format_name: ClassVar[str] = ""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        """Get the file path."""
        return self._path

    def exists(self) -> bool:
        """Check if the file exists."""
        return self._path.exists() and self._path.is_file()

    def load(self) -> dict[str, Any]:
        if not self.exists():
            return {}

        try:
            with self._path.open(encoding="utf-8") as f:
                data = self._parse(f.read())
        except OSError as e:
            logger.warning("Cannot read %s: %s", self._path, e)
            raise ConfigError(f"Cannot read {self._path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"{self.format_name} root must be a mapping, got {type(data).__name__}"
            )
        return data

    @abstractmethod
    def _parse(self, content: str) -> Any:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path})"


class JsonFileSource(_FileSource):
    """Load configuration from a JSON file."""

    format_name = "JSON"

    def _parse(self, content: str) -> Any:
        if not content.strip():
            return None
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning("Invalid JSON in %s: %s", self._path, e)
            raise ConfigError(f"Invalid JSON in {self._path}: {e}") from e


class YamlFileSource(_FileSource):
    """Load configuration from a YAML file."""

    format_name = "YAML"

    def _parse(self, content: str) -> Any:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            logger.warning("Invalid YAML in %s: %s", self._path, e)
            raise ConfigError(f"Invalid YAML in {self._path}: {e}") from e


class EnvironmentSource(IConfigSource):
    """Load provider credentials and settings from environment variables.

    The variable names match the ones the hosted SDKs read themselves, so a
    shell that already works with those SDKs needs no extra setup.
    """

    MAPPINGS: ClassVar[dict[str, str]] = {
        "ANTHROPIC_API_KEY": "anthropic_api_key",
        "OPENAI_API_KEY": "openai_api_key",
        "GOOGLE_API_KEY": "google_api_key",
        "AZURE_OPENAI_API_KEY": "azure_api_key",
        "AZURE_OPENAI_ENDPOINT": "azure_endpoint",
        "AZURE_OPENAI_API_VERSION": "azure_api_version",
        "KAIRO_REQUEST_TIMEOUT": "request_timeout",
    }

    FLOAT_KEYS: ClassVar[frozenset[str]] = frozenset({"request_timeout"})

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Initialize environment source.

        Args:
            environ: Environment mapping. Defaults to os.environ.
        """
        self._environ = dict(environ) if environ is not None else dict(os.environ)

    def load(self) -> dict[str, Any]:
        config: dict[str, Any] = {}

        for env_var, key in self.MAPPINGS.items():
            value = self._environ.get(env_var)
            if value is None or not value.strip():
                continue
            config[key] = self._convert_value(key, value.strip())

        return config

    def exists(self) -> bool:
        """Environment always exists."""
        return True

    def _convert_value(self, key: str, value: str) -> Any:
        if key in self.FLOAT_KEYS:
            try:
                return float(value)
            except ValueError:
                logger.warning("Invalid float value for %s: %s", key, value)
        return value

    def __repr__(self) -> str:
        return "EnvironmentSource()"
