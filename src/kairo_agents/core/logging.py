"""
Logging infrastructure for Kairo agents.

Everything logs under the ``Kairo`` namespace. The package never
configures output on its own: the namespace carries a NullHandler until
the host service calls ``setup_logging`` (or attaches its own handlers).

Records emitted while an agent runs carry an ``agent_id`` attribute, so a
shared log file can be filtered per agent.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping, MutableMapping
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from rich.logging import RichHandler

# Log level mapping for environment variable
LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

ROOT_LOGGER_NAME = "Kairo"

LOG_LEVEL_ENV = "KAIRO_LOG_LEVEL"
LOG_FILE_ENV = "KAIRO_LOG_FILE"

DEFAULT_LOG_DIR = Path.home() / ".kairo" / "logs"
DEFAULT_LOG_FILE = DEFAULT_LOG_DIR / "agents.log"

MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB per file
BACKUP_COUNT = 5

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(agent_id)s] %(message)s"
NO_AGENT = "-"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class AgentIdFilter(logging.Filter):
    """Give records logged outside an agent run a placeholder agent id."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "agent_id"):
            record.agent_id = NO_AGENT
        return True


class AgentLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that tags every record with the running agent's id."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("agent_id", self.extra["agent_id"])
        kwargs["extra"] = extra
        return msg, kwargs


def get_log_level_from_env(environ: Mapping[str, str] | None = None) -> int:
    """Get logging level from the KAIRO_LOG_LEVEL environment variable.

    Args:
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        Logging level constant. Defaults to WARNING if not set or invalid.
    """
    env = os.environ if environ is None else environ
    level_str = env.get(LOG_LEVEL_ENV, "WARNING").upper()
    return LOG_LEVEL_MAP.get(level_str, logging.WARNING)


def get_default_log_file(environ: Mapping[str, str] | None = None) -> Path:
    """Log file from KAIRO_LOG_FILE, else ``~/.kairo/logs/agents.log``."""
    env = os.environ if environ is None else environ
    configured = env.get(LOG_FILE_ENV)
    if configured:
        return Path(configured).expanduser()
    DEFAULT_LOG_DIR.mkdir(parents=True, exist_ok=True)
    return DEFAULT_LOG_FILE


def setup_logging(
    level: int | None = None,
    log_file: Path | None = None,
    console_output: bool = True,
    rich_console: bool = True,
    file_logging: bool = True,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Configure logging for the agent layer.

    Meant to be called once by the host service at startup; ``run_agent``
    and ``stream_orchestration`` never call it. The console level is
    resolved from, in order: the ``level`` argument, ``KAIRO_LOG_LEVEL``,
    then WARNING. The file handler always records DEBUG and rotates at
    10 MB.

    Args:
        level: Console logging level.
        log_file: Log file path. If None, uses KAIRO_LOG_FILE or the default.
        console_output: Show logs on console.
        rich_console: Use Rich for console formatting.
        file_logging: Write logs to file.
        environ: Environment mapping. Defaults to ``os.environ``.
    """
    handlers: list[logging.Handler] = []

    if level is None:
        level = get_log_level_from_env(environ)

    if file_logging:
        if log_file is None:
            log_file = get_default_log_file(environ)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    if console_output:
        if rich_console:
            console_handler: logging.Handler = RichHandler(
                rich_tracebacks=True,
                show_time=True,
                show_path=False,
                level=level,
            )
        else:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            console_handler.setLevel(level)
        handlers.append(console_handler)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    for handler in handlers:
        handler.addFilter(AgentIdFilter())
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``Kairo`` namespace.

    Args:
        name: Logger suffix, e.g. ``"agents.executor"``.

    Returns:
        Logger named ``Kairo.<name>``.
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def get_agent_logger(name: str, agent_id: str) -> AgentLoggerAdapter:
    """Logger under ``Kairo.<name>`` whose records carry ``agent_id``."""
    return AgentLoggerAdapter(get_logger(name), {"agent_id": agent_id})
