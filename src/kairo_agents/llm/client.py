"""HTTP clients for the hosted model providers.

Each client speaks one provider's REST API and exposes the same two calls:

    response = await client.complete(request)   # CompletionResponse
    async for text in client.stream(request):    # str chunks
        ...

Every call opens and closes its own httpx.AsyncClient, so clients carry no
connection state between requests and may be shared across tasks.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Any, ClassVar

import httpx

from kairo_agents.core.errors import ConfigError
from kairo_agents.core.logging import get_logger
from kairo_agents.llm.errors import (
    ContentPolicyError,
    ContextLengthError,
    LLMError,
    ModelNotFoundError,
    ProviderAuthError,
    ProviderError,
    RateLimitError,
)
from kairo_agents.llm.models import (
    CompletionRequest,
    CompletionResponse,
    MessageRole,
    Provider,
    TokenUsage,
)

logger = get_logger("llm.client")


class ProviderClient(ABC):
    """Base class for provider REST clients."""

    provider: ClassVar[Provider]
    BASE_URL: ClassVar[str]

    def __init__(
        self,
        api_key: str | None,
        base_url: str | None = None,
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize client.

        A missing key is allowed here; calls fail with ProviderAuthError.

        Args:
            api_key: Provider API key
            base_url: Override API base URL
            timeout: Request timeout in seconds
            transport: Custom httpx transport (mainly for tests)
        """
        self.api_key = api_key
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout
        self._transport = transport

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """Create an HTTP client for a single request."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._get_headers(),
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        )

    def _check_configured(self) -> None:
        """Fail before any request when the client cannot make calls."""
        if not self.api_key:
            raise ProviderAuthError(
                f"No API key configured for provider '{self.provider.value}'",
                provider=self.provider.value,
            )

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        """
        Send a non-streaming completion request.

        Args:
            request: The completion request

        Returns:
            CompletionResponse with the model's text

        Raises:
            ProviderAuthError: If no API key is configured
            ConfigError: If required settings such as an Azure endpoint are missing
            LLMError: On transport or API errors
        """
        self._check_configured()
        request.stream = False

        logger.debug(
            "Completion request: provider=%s model=%s", self.provider.value, request.model
        )

        async with self._get_client() as client:
            try:
                response = await client.post(
                    self._completion_path(request),
                    params=self._request_params(request),
                    json=self._build_payload(request),
                )
            except httpx.TimeoutException as e:
                raise LLMError(f"Request timeout: {e!s}") from e
            except httpx.HTTPError as e:
                raise LLMError(f"HTTP error: {e!s}") from e

            await self._check_response(response, request.model)
            data: dict[str, Any] = response.json()

        result = self._parse_response(data, request)
        logger.debug(
            "Completion response: provider=%s tokens=%d",
            self.provider.value,
            result.usage.total_tokens,
        )
        return result

    async def stream(self, request: CompletionRequest) -> AsyncIterator[str]:
        """
        Send a streaming completion request.

        Args:
            request: The completion request

        Yields:
            Text fragments in arrival order

        Raises:
            ProviderAuthError: If no API key is configured
            ConfigError: If required settings such as an Azure endpoint are missing
            LLMError: On transport or API errors
        """
        self._check_configured()
        request.stream = True

        logger.debug(
            "Streaming request: provider=%s model=%s", self.provider.value, request.model
        )

        chunks_received = 0
        parse_errors = 0

        async with self._get_client() as client:
            try:
                async with client.stream(
                    "POST",
                    self._completion_path(request),
                    params=self._request_params(request),
                    json=self._build_payload(request),
                ) as response:
                    await self._check_response(response, request.model)

                    async for line in response.aiter_lines():
                        if not line.startswith("data:"):
                            continue
                        data = line[5:].strip()
                        if not data:
                            continue
                        if data == "[DONE]":
                            break
                        try:
                            chunk = json.loads(data)
                        except json.JSONDecodeError as e:
                            parse_errors += 1
                            logger.warning(
                                "Failed to parse streaming chunk: %s - data: %s...", e, data[:100]
                            )
                            continue

                        chunks_received += 1
                        text = self._parse_stream_chunk(chunk)
                        if text:
                            yield text
            except httpx.TimeoutException as e:
                raise LLMError(f"Request timeout: {e!s}") from e
            except httpx.HTTPError as e:
                raise LLMError(f"HTTP error: {e!s}") from e

        if parse_errors:
            logger.error(
                "Streaming completed with %d parse error(s); received %d valid chunks",
                parse_errors,
                chunks_received,
            )

    async def _check_response(self, response: httpx.Response, model: str) -> None:
        """
        Map an unsuccessful response to the error taxonomy.

        Raises:
            Appropriate LLMError subclass
        """
        if response.is_success:
            return

        # Streaming responses must be read before .text or .json() work
        try:
            await response.aread()
        except (httpx.HTTPError, httpx.StreamError) as e:
            logger.debug("Could not read error body: %s", e)

        error_msg = self._error_message(response)
        status = response.status_code
        lowered = error_msg.lower()

        if status in (401, 403):
            raise ProviderAuthError(error_msg, provider=self.provider.value)
        if status == 429:
            retry_after = response.headers.get("Retry-After")
            try:
                retry_seconds = float(retry_after) if retry_after else None
            except ValueError:
                retry_seconds = None
            raise RateLimitError(error_msg, retry_after=retry_seconds)
        if status == 404:
            raise ModelNotFoundError(model)
        if status == 400 and "context" in lowered:
            raise ContextLengthError(error_msg)
        if status == 400 and ("policy" in lowered or "safety" in lowered):
            raise ContentPolicyError(error_msg)
        raise ProviderError(error_msg, provider=self.provider.value)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            error_data = response.json()
        except (json.JSONDecodeError, ValueError, httpx.ResponseNotRead):
            return response.text or f"HTTP {response.status_code}"

        error = error_data.get("error") if isinstance(error_data, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str):
            return error
        return response.text or f"HTTP {response.status_code}"

    def _request_params(self, request: CompletionRequest) -> dict[str, str] | None:
        return None

    @abstractmethod
    def _get_headers(self) -> dict[str, str]:
        ...

    @abstractmethod
    def _completion_path(self, request: CompletionRequest) -> str:
        ...

    @abstractmethod
    def _build_payload(self, request: CompletionRequest) -> dict[str, Any]:
        ...

    @abstractmethod
    def _parse_response(
        self, data: dict[str, Any], request: CompletionRequest
    ) -> CompletionResponse:
        ...

    @abstractmethod
    def _parse_stream_chunk(self, chunk: dict[str, Any]) -> str | None:
        ...


class AnthropicClient(ProviderClient):
    """Client for the Anthropic Messages API."""

    provider = Provider.ANTHROPIC
    BASE_URL = "https://api.anthropic.com"
    API_VERSION = "2023-06-01"

    # The Messages API requires max_tokens on every request
    DEFAULT_MAX_TOKENS = 4096

    def _get_headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.api_key or "",
            "anthropic-version": self.API_VERSION,
            "Content-Type": "application/json",
        }

    def _completion_path(self, request: CompletionRequest) -> str:
        return "/v1/messages"

    def _build_payload(self, request: CompletionRequest) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": request.model,
            "messages": [m.to_dict() for m in request.conversation],
            "max_tokens": request.max_tokens or self.DEFAULT_MAX_TOKENS,
            "temperature": request.temperature,
        }
        system = request.system_prompt
        if system:
            payload["system"] = system
        if request.stop:
            payload["stop_sequences"] = request.stop
        if request.stream:
            payload["stream"] = True
        return payload

    def _parse_response(
        self, data: dict[str, Any], request: CompletionRequest
    ) -> CompletionResponse:
        text = "".join(
            block.get("text", "")
            for block in data.get("content", [])
            if block.get("type") == "text"
        )
        usage = data.get("usage", {})
        return CompletionResponse(
            text=text,
            model=data.get("model", request.model),
            provider=self.provider,
            usage=TokenUsage(
                prompt_tokens=usage.get("input_tokens", 0),
                completion_tokens=usage.get("output_tokens", 0),
            ),
            finish_reason=data.get("stop_reason"),
            id=data.get("id"),
        )

    def _parse_stream_chunk(self, chunk: dict[str, Any]) -> str | None:
        event_type = chunk.get("type")
        if event_type == "error":
            error = chunk.get("error", {})
            raise ProviderError(
                str(error.get("message", "Stream error")), provider=self.provider.value
            )
        if event_type != "content_block_delta":
            return None
        delta = chunk.get("delta", {})
        if delta.get("type") != "text_delta":
            return None
        return delta.get("text")


class OpenAIClient(ProviderClient):
    """Client for the OpenAI Chat Completions API."""

    provider = Provider.OPENAI
    BASE_URL = "https://api.openai.com/v1"

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _completion_path(self, request: CompletionRequest) -> str:
        return "/chat/completions"

    def _build_payload(self, request: CompletionRequest) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": request.model,
            "messages": [m.to_dict() for m in request.messages],
            "temperature": request.temperature,
        }
        if request.max_tokens:
            payload["max_tokens"] = request.max_tokens
        if request.stop:
            payload["stop"] = request.stop
        if request.stream:
            payload["stream"] = True
        return payload

    def _parse_response(
        self, data: dict[str, Any], request: CompletionRequest
    ) -> CompletionResponse:
        choices = data.get("choices") or []
        choice = choices[0] if choices else {}
        message = choice.get("message") or {}
        usage = data.get("usage") or {}
        return CompletionResponse(
            text=message.get("content") or "",
            model=data.get("model", request.model),
            provider=self.provider,
            usage=TokenUsage(
                prompt_tokens=usage.get("prompt_tokens", 0),
                completion_tokens=usage.get("completion_tokens", 0),
            ),
            finish_reason=choice.get("finish_reason"),
            id=data.get("id"),
        )

    def _parse_stream_chunk(self, chunk: dict[str, Any]) -> str | None:
        choices = chunk.get("choices") or []
        if not choices:
            return None
        delta = choices[0].get("delta") or {}
        return delta.get("content")


class AzureOpenAIClient(OpenAIClient):
    """Client for Azure OpenAI deployments.

    The request's model name is used as the deployment name.
    """

    provider = Provider.AZURE
    BASE_URL = ""

    def __init__(
        self,
        api_key: str | None,
        endpoint: str | None,
        api_version: str = "2024-06-01",
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize Azure client.

        A missing endpoint is allowed here; calls fail with ConfigError.

        Args:
            api_key: Azure OpenAI API key
            endpoint: Resource endpoint, e.g. https://my-resource.openai.azure.com
            api_version: REST API version
            timeout: Request timeout in seconds
            transport: Custom httpx transport (mainly for tests)
        """
        super().__init__(
            api_key,
            base_url=f"{endpoint.rstrip('/')}/openai" if endpoint else "",
            timeout=timeout,
            transport=transport,
        )
        self.endpoint = endpoint
        self.api_version = api_version

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.endpoint)

    def _check_configured(self) -> None:
        if not self.endpoint:
            raise ConfigError("Azure OpenAI endpoint is not configured")
        super()._check_configured()

    def _get_headers(self) -> dict[str, str]:
        return {
            "api-key": self.api_key or "",
            "Content-Type": "application/json",
        }

    def _completion_path(self, request: CompletionRequest) -> str:
        return f"/deployments/{request.model}/chat/completions"

    def _request_params(self, request: CompletionRequest) -> dict[str, str] | None:
        return {"api-version": self.api_version}


class GoogleClient(ProviderClient):
    """Client for the Gemini generateContent API."""

    provider = Provider.GOOGLE
    BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

    def _get_headers(self) -> dict[str, str]:
        return {
            "x-goog-api-key": self.api_key or "",
            "Content-Type": "application/json",
        }

    def _completion_path(self, request: CompletionRequest) -> str:
        model = request.model.removeprefix("models/")
        method = "streamGenerateContent" if request.stream else "generateContent"
        return f"/models/{model}:{method}"

    def _request_params(self, request: CompletionRequest) -> dict[str, str] | None:
        return {"alt": "sse"} if request.stream else None

    def _build_payload(self, request: CompletionRequest) -> dict[str, Any]:
        generation_config: dict[str, Any] = {"temperature": request.temperature}
        if request.max_tokens:
            generation_config["maxOutputTokens"] = request.max_tokens
        if request.stop:
            generation_config["stopSequences"] = request.stop

        payload: dict[str, Any] = {
            "contents": [
                {
                    "role": "model" if m.role == MessageRole.ASSISTANT else "user",
                    "parts": [{"text": m.content}],
                }
                for m in request.conversation
            ],
            "generationConfig": generation_config,
        }
        system = request.system_prompt
        if system:
            payload["systemInstruction"] = {"parts": [{"text": system}]}
        return payload

    @staticmethod
    def _candidate_text(data: dict[str, Any]) -> str:
        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts)

    def _parse_response(
        self, data: dict[str, Any], request: CompletionRequest
    ) -> CompletionResponse:
        if not data.get("candidates"):
            block_reason = (data.get("promptFeedback") or {}).get("blockReason")
            if block_reason:
                raise ContentPolicyError(f"Prompt blocked: {block_reason}")

        candidates = data.get("candidates") or [{}]
        usage = data.get("usageMetadata") or {}
        return CompletionResponse(
            text=self._candidate_text(data),
            model=data.get("modelVersion", request.model),
            provider=self.provider,
            usage=TokenUsage(
                prompt_tokens=usage.get("promptTokenCount", 0),
                completion_tokens=usage.get("candidatesTokenCount", 0),
            ),
            finish_reason=candidates[0].get("finishReason"),
            id=data.get("responseId"),
        )

    def _parse_stream_chunk(self, chunk: dict[str, Any]) -> str | None:
        return self._candidate_text(chunk) or None
