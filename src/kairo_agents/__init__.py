"""Kairo agents - specialized agent dispatch and provider routing."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("kairo-agents")
except PackageNotFoundError:
    __version__ = "0.0.0"  # Not installed, running from a checkout

__all__ = ["__version__"]
