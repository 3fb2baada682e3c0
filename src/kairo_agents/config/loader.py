"""Provider configuration loader.

Load order (later overrides earlier):
1. Defaults (from ProviderConfig)
2. Optional settings file (.json, .yaml or .yml)
3. Environment variables
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from kairo_agents.config.models import ProviderConfig
from kairo_agents.config.sources import (
    EnvironmentSource,
    IConfigSource,
    JsonFileSource,
    YamlFileSource,
)
from kairo_agents.core.errors import ConfigError
from kairo_agents.core.logging import get_logger

logger = get_logger("config.loader")


class ConfigLoader:
    """Builds a validated ProviderConfig from layered sources."""

    def __init__(
        self,
        settings_file: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize configuration loader.

        Args:
            settings_file: Optional JSON or YAML settings file.
            environ: Environment mapping. Defaults to os.environ.
        """
        self._settings_file = settings_file
        self._environ = environ

    def load_all(self) -> ProviderConfig:
        """Load, merge and validate all sources.

        Returns:
            Validated ProviderConfig.

        Raises:
            ConfigError: If a source cannot be parsed or the merged result
                fails validation.
        """
        config: dict[str, Any] = ProviderConfig().model_dump()

        if self._settings_file is not None:
            config = self._load_and_merge(config, self.file_source(self._settings_file))

        config = self._load_and_merge(config, EnvironmentSource(self._environ))

        try:
            return ProviderConfig.model_validate(config)
        except ValidationError as e:
            logger.error("Configuration validation failed: %s", e)
            raise ConfigError(f"Configuration validation failed: {e}") from e

    @staticmethod
    def file_source(path: Path) -> IConfigSource:
        """Pick a file source from the file extension.

        Raises:
            ConfigError: If the extension is not supported.
        """
        suffix = path.suffix.lower()
        if suffix == ".json":
            return JsonFileSource(path)
        if suffix in (".yaml", ".yml"):
            return YamlFileSource(path)
        raise ConfigError(f"Unsupported configuration format: {suffix}")

    def _load_and_merge(
        self,
        base: dict[str, Any],
        source: IConfigSource,
    ) -> dict[str, Any]:
        if not source.exists():
            logger.debug("Config source %s not found, skipping", source)
            return base

        override = source.load()
        if not override:
            logger.debug("Config source %s returned nothing", source)
            return base

        logger.debug("Loaded config from %s", source)
        return self.merge(base, override)

    def merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two configuration dictionaries.

        Nested dictionaries are merged recursively; any other value in
        ``override`` replaces the one in ``base``. Neither input is modified.
        """
        result = copy.deepcopy(base)

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)

        return result


def load_provider_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ProviderConfig:
    """Load provider configuration from an optional file and the environment.

    Args:
        path: Optional JSON or YAML settings file.
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        Validated ProviderConfig.
    """
    return ConfigLoader(settings_file=path, environ=environ).load_all()
