"""Tests for the orchestration chat stream."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from langchain_core.messages import AIMessage, AIMessageChunk, HumanMessage, SystemMessage

from kairo_agents.core.types import ApiKeys, ProjectSettings
from kairo_agents.llm.models import MessageRole
from kairo_agents.llm.routing import ProviderResolver
from kairo_agents.orchestration import (
    build_orchestration_prompt,
    parse_messages,
    stream_orchestration,
)


class TestBuildOrchestrationPrompt:
    """Tests for the orchestration system prompt."""

    def test_lists_enabled_agents(self) -> None:
        """Test prompt lists enabled agents and project details."""
        settings = ProjectSettings(
            project_type="mobile-app",
            enabled_agents=["security-agent", "pr-agent"],
            orchestration_mode="manual",
        )
        prompt = build_orchestration_prompt(settings)

        assert prompt.startswith("You are the Main Orchestration Agent for Kairo")
        assert "You have access to these agents:\n- security-agent\n- pr-agent\n" in prompt
        assert "- Type: mobile-app\n" in prompt
        assert "- Orchestration Mode: manual\n" in prompt
        assert "- Enabled Agents: 2 agents\n" in prompt
        assert prompt.endswith("always explain your orchestration decisions.")

    def test_defaults_without_settings(self) -> None:
        """Test default agents and project details without settings."""
        prompt = build_orchestration_prompt()
        assert "- frontend-agent\n- design-agent\n- performance-agent\n" in prompt
        assert "- Type: web-app\n" in prompt
        assert "- Orchestration Mode: intelligent\n" in prompt
        assert "- Enabled Agents: 3 agents\n" in prompt

    def test_defaults_when_no_agents_enabled(self) -> None:
        """Test default agents when none are enabled."""
        prompt = build_orchestration_prompt(ProjectSettings(enabled_agents=[]))
        assert "- frontend-agent\n" in prompt
        assert "- Enabled Agents: 3 agents\n" in prompt

    def test_delegation_format(self) -> None:
        """Test prompt explains the delegation format."""
        assert "[agent-name]" in build_orchestration_prompt()


class TestParseMessages:
    """Tests for inbound message validation."""

    def test_valid(self) -> None:
        """Test valid messages parse with their roles."""
        messages = parse_messages(
            [{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}]
        )
        assert [m.role for m in messages] == [MessageRole.USER, MessageRole.ASSISTANT]

    @pytest.mark.parametrize(
        "payload",
        [None, [], "hello", {"role": "user"}, [42], [{"role": "user"}], [{"content": 1}]],
    )
    def test_invalid_format(self, payload: object) -> None:
        """Test malformed payloads are rejected."""
        with pytest.raises(ValueError, match="Invalid messages format"):
            parse_messages(payload)

    def test_invalid_role(self) -> None:
        """Test unknown roles are rejected."""
        with pytest.raises(ValueError, match="Invalid message role: 'tool'"):
            parse_messages([{"role": "tool", "content": "x"}])


class TestStreamOrchestration:
    """Tests for the streamed orchestration reply."""

    @pytest.mark.asyncio
    async def test_streams_reply(self, fake_resolver) -> None:
        """Test reply is streamed from the frontend primary model."""
        resolver = fake_resolver("I'll coordinate with [design-agent].")
        settings = ProjectSettings(api_keys={"anthropic": "k"})

        chunks = [
            chunk
            async for chunk in stream_orchestration(
                [{"role": "user", "content": "Build a landing page"}], settings, resolver
            )
        ]

        assert "".join(chunks) == "I'll coordinate with [design-agent]."
        resolver.resolve_for_agent_task.assert_called_once_with(
            "frontend-agent", "primary", settings.api_keys
        )

    @pytest.mark.asyncio
    async def test_sends_prompt_and_history(self, fake_resolver) -> None:
        """Test system prompt, history and sampling settings reach the model."""
        async def reply(*args, **kwargs):
            yield AIMessageChunk(content="ok")

        model = MagicMock()
        model.astream = MagicMock(side_effect=reply)
        resolver = fake_resolver()
        resolver.resolve_for_agent_task.return_value = model

        chunks = [
            chunk
            async for chunk in stream_orchestration(
                [
                    {"role": "user", "content": "one"},
                    {"role": "assistant", "content": "two"},
                    {"role": "user", "content": "three"},
                ],
                resolver=resolver,
            )
        ]

        assert chunks == ["ok"]
        sent = model.astream.call_args.args[0]
        assert [type(m) for m in sent] == [SystemMessage, HumanMessage, AIMessage, HumanMessage]
        assert sent[0].content == build_orchestration_prompt()
        assert [m.content for m in sent[1:]] == ["one", "two", "three"]
        assert model.astream.call_args.kwargs == {"temperature": 0.7, "max_tokens": 4096}

    @pytest.mark.asyncio
    async def test_without_settings_passes_no_keys(self, fake_resolver) -> None:
        """Test no caller keys are passed without settings."""
        resolver = fake_resolver("x")
        async for _ in stream_orchestration([{"role": "user", "content": "hi"}], resolver=resolver):
            pass
        resolver.resolve_for_agent_task.assert_called_once_with("frontend-agent", "primary", None)

    @pytest.mark.asyncio
    async def test_invalid_messages_fail_before_resolution(self, fake_resolver) -> None:
        """Test invalid messages fail before a model is resolved."""
        resolver = fake_resolver("x")
        with pytest.raises(ValueError, match="Invalid messages format"):
            async for _ in stream_orchestration([], resolver=resolver):
                pass
        resolver.resolve_for_agent_task.assert_not_called()

    @pytest.mark.asyncio
    async def test_default_resolver_from_environment(self, fake_resolver) -> None:
        """Test resolver is built from the environment when omitted."""
        resolver = fake_resolver("env")
        with patch.object(ProviderResolver, "from_environment", return_value=resolver):
            chunks = [
                chunk
                async for chunk in stream_orchestration(
                    [{"role": "user", "content": "hi"}],
                    ProjectSettings(api_keys=ApiKeys(openai="o")),
                )
            ]
        assert "".join(chunks) == "env"
