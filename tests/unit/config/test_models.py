"""Unit tests for provider configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kairo_agents.config.models import (
    DEFAULT_AGENT_TASK_ROUTES,
    REASONING_TASKS,
    ModelRole,
    ProviderConfig,
)


class TestProviderConfigDefaults:
    """Tests for default values."""

    def test_no_credentials(self) -> None:
        """Test no default keys are configured."""
        config = ProviderConfig()
        for provider in ("anthropic", "openai", "google", "azure"):
            assert config.default_key(provider) is None

    def test_catalogs(self) -> None:
        """Test default model catalogs."""
        config = ProviderConfig()
        assert config.anthropic.coding == "claude-3-5-sonnet-20241022"
        assert config.google.reasoning == "gemini-2.0-flash-exp"
        assert config.openai.default == "gpt-4o"
        assert config.azure.fallback == "gpt-4o"

    def test_request_timeout(self) -> None:
        """Test default request timeout."""
        assert ProviderConfig().request_timeout == 120.0

    def test_routes_cover_every_agent(self) -> None:
        """Test every agent has a route table."""
        assert len(ProviderConfig().agent_task_routes) == 10

    def test_routes_are_copied(self) -> None:
        """Test config routes do not alias the module defaults."""
        ProviderConfig().agent_task_routes["design-agent"]["extra"] = ModelRole.CODING
        assert "extra" not in DEFAULT_AGENT_TASK_ROUTES["design-agent"]

    def test_reasoning_tasks(self) -> None:
        """Test the reasoning task names."""
        assert {"reasoning", "strategy", "planning", "analysis"} == REASONING_TASKS


class TestProviderConfigValidation:
    """Tests for validation rules."""

    @pytest.mark.parametrize("timeout", [0, 0.5, 601])
    def test_timeout_bounds(self, timeout: float) -> None:
        """Test out-of-range timeouts are rejected."""
        with pytest.raises(ValidationError):
            ProviderConfig(request_timeout=timeout)

    def test_endpoint_normalized(self) -> None:
        """Test Azure endpoint is trimmed of spaces and trailing slash."""
        config = ProviderConfig(azure_endpoint="  https://res.openai.azure.com/  ")
        assert config.azure_endpoint == "https://res.openai.azure.com"

    def test_blank_endpoint_is_none(self) -> None:
        """Test blank Azure endpoint reads as missing."""
        assert ProviderConfig(azure_endpoint="   ").azure_endpoint is None

    def test_route_roles_validated(self) -> None:
        """Test unknown route roles are rejected."""
        with pytest.raises(ValidationError):
            ProviderConfig(agent_task_routes={"pr-agent": {"review": "creative"}})

    def test_frozen(self) -> None:
        """Test config is immutable."""
        config = ProviderConfig()
        with pytest.raises(ValidationError):
            config.request_timeout = 5  # type: ignore[misc]


class TestSecrets:
    """API keys stay out of reprs."""

    def test_default_key(self) -> None:
        """Test default key lookup."""
        config = ProviderConfig(openai_api_key="sk-secret")
        assert config.default_key("openai") == "sk-secret"

    def test_key_not_in_repr(self) -> None:
        """Test keys are hidden from repr."""
        config = ProviderConfig(anthropic_api_key="sk-ant-secret")
        assert "sk-ant-secret" not in repr(config)

    def test_empty_key_is_none(self) -> None:
        """Test empty keys read as missing."""
        assert ProviderConfig(google_api_key="").default_key("google") is None

    def test_unknown_provider(self) -> None:
        """Test unknown providers have no key."""
        assert ProviderConfig().default_key("mistral") is None
