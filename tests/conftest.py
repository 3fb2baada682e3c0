"""Shared test fixtures for Kairo agent tests.

Fixture overview:

    project_settings          web-app project with design-agent enabled
    make_context              factory for AgentContext values
    fake_resolver             factory for a resolver whose handles are
                              FakeListChatModel instances
    mock_model                AsyncMock-backed chat model for call inspection
    clean_logging             resets the Kairo logger tree after a test

No fixture performs network I/O.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage

from kairo_agents.agents.base import AgentConfig, AgentContext, TaskContext
from kairo_agents.core.types import ProjectSettings
from kairo_agents.llm.routing import ProviderResolver


@pytest.fixture
def project_settings() -> ProjectSettings:
    """Web-app project with only the design agent enabled."""
    return ProjectSettings(
        project_type="web-app",
        enabled_agents=["design-agent"],
        sdk_rules={},
        api_keys={"anthropic": "k"},
    )


@pytest.fixture
def make_context(
    project_settings: ProjectSettings,
) -> Callable[..., AgentContext]:
    """Factory building an AgentContext around ``project_settings``."""

    def _make(
        agent_id: str = "design-agent",
        model: str = "claude-3-5-sonnet-20241022",
        enabled: bool = True,
        custom_prompt: str | None = None,
        settings: ProjectSettings | None = None,
        task_context: TaskContext | None = None,
    ) -> AgentContext:
        return AgentContext(
            project_settings=settings or project_settings,
            agent_config=AgentConfig(
                id=agent_id,
                model=model,
                enabled=enabled,
                custom_prompt=custom_prompt,
            ),
            task_context=task_context,
        )

    return _make


@pytest.fixture
def fake_resolver() -> Callable[..., MagicMock]:
    """Factory for a resolver that hands out fake chat models."""

    def _make(*responses: str) -> MagicMock:
        resolver = MagicMock(spec=ProviderResolver)
        resolver.resolve.return_value = FakeListChatModel(responses=list(responses))
        resolver.resolve_for_agent_task.return_value = FakeListChatModel(
            responses=list(responses)
        )
        return resolver

    return _make


@pytest.fixture
def mock_model() -> Callable[[str], MagicMock]:
    """Factory for a chat model whose ``ainvoke`` is an AsyncMock."""

    def _make(text: str = "") -> MagicMock:
        model = MagicMock()
        model.ainvoke = AsyncMock(return_value=AIMessage(content=text))
        return model

    return _make


@pytest.fixture
def clean_logging() -> Generator[None, None, None]:
    """Restore the Kairo logger tree after the test."""
    logger = logging.getLogger("Kairo")
    original = list(logger.handlers)
    yield
    for handler in logger.handlers:
        if handler not in original:
            handler.close()
    logger.handlers[:] = original
    logger.setLevel(logging.NOTSET)
