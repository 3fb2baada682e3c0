"""Unit tests for message conversion."""

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage, ToolMessage

from kairo_agents.langchain.messages import (
    content_text,
    kairo_messages_to_langchain,
    kairo_to_langchain,
    langchain_messages_to_kairo,
    langchain_to_kairo,
)
from kairo_agents.llm.models import Message, MessageRole


class TestContentText:
    """Tests for content flattening."""

    def test_string(self) -> None:
        """Test string content is returned as is."""
        assert content_text("plain") == "plain"

    def test_none(self) -> None:
        """Test missing content becomes an empty string."""
        assert content_text(None) == ""

    def test_blocks(self) -> None:
        """Test only text parts of content blocks are kept."""
        content = [{"type": "text", "text": "a"}, {"type": "image_url"}, "b"]
        assert content_text(content) == "ab"


class TestLangchainToKairo:
    """Tests for LangChain to Kairo conversion."""

    def test_convert_system_message(self) -> None:
        """Test system message conversion."""
        result = langchain_to_kairo(SystemMessage(content="You are helpful"))
        assert result == Message(role=MessageRole.SYSTEM, content="You are helpful")

    def test_convert_human_message(self) -> None:
        """Test human message conversion."""
        result = langchain_to_kairo(HumanMessage(content="Hello"))
        assert result.role == MessageRole.USER

    def test_convert_ai_message(self) -> None:
        """Test AI message conversion."""
        result = langchain_to_kairo(AIMessage(content="Hi"))
        assert result.role == MessageRole.ASSISTANT
        assert result.content == "Hi"

    def test_convert_block_content(self) -> None:
        """Test block content is flattened."""
        result = langchain_to_kairo(HumanMessage(content=[{"type": "text", "text": "x"}]))
        assert result.content == "x"

    def test_convert_unsupported_message_type(self) -> None:
        """Test tool messages are rejected."""
        with pytest.raises(ValueError, match="Unsupported message type: ToolMessage"):
            langchain_to_kairo(ToolMessage(content="out", tool_call_id="call_1"))


class TestKairoToLangchain:
    """Tests for Kairo to LangChain conversion."""

    def test_convert_each_role(self) -> None:
        """Test each role maps to its LangChain type."""
        assert isinstance(kairo_to_langchain(Message.system("s")), SystemMessage)
        assert isinstance(kairo_to_langchain(Message.user("u")), HumanMessage)
        assert isinstance(kairo_to_langchain(Message.assistant("a")), AIMessage)


class TestBatchConversion:
    """Tests for list conversion."""

    def test_langchain_messages_to_kairo(self) -> None:
        """Test list conversion from LangChain."""
        messages = [SystemMessage(content="s"), HumanMessage(content="u")]
        assert [m.role for m in langchain_messages_to_kairo(messages)] == [
            MessageRole.SYSTEM,
            MessageRole.USER,
        ]

    def test_kairo_messages_to_langchain(self) -> None:
        """Test list conversion to LangChain."""
        result = kairo_messages_to_langchain([Message.user("u"), Message.assistant("a")])
        assert [type(m) for m in result] == [HumanMessage, AIMessage]
        assert [m.content for m in result] == ["u", "a"]

    def test_empty_list_conversion(self) -> None:
        """Test empty lists convert to empty lists."""
        assert langchain_messages_to_kairo([]) == []
        assert kairo_messages_to_langchain([]) == []
