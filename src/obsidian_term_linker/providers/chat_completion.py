"""OpenAI-compatible chat completion client.

Works against any endpoint that speaks the `/chat/completions` protocol
(OpenAI, DeepSeek, OpenRouter, LM Studio). The configured endpoint is used
as-is; no path is appended. Failed calls are not retried.
"""

from __future__ import annotations

import time
from types import TracebackType
from typing import Any

import httpx

from obsidian_term_linker.domain.entities.term import ChatRequest
from obsidian_term_linker.domain.interfaces.chat_client import IChatClient
from obsidian_term_linker.exceptions import NetworkFailureError
from obsidian_term_linker.utils.logging import get_logger

logger = get_logger(__name__)


def extract_message_content(data: Any) -> str | None:
    """Return choices[0].message.content from a response envelope, if present."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first_choice = choices[0]
    if not isinstance(first_choice, dict):
        return None
    message = first_choice.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if not isinstance(content, str) or not content:
        return None
    return content


class OpenAICompatibleChatClient(IChatClient):
    """Chat client posting JSON-mode requests with bearer authentication.

    Configuration:
        endpoint: Full chat completions URL
        api_key: Bearer token (may be empty for local servers)
        timeout: Request timeout in seconds (default: 120.0)
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str = "",
        timeout: float = 120.0,
        client: httpx.AsyncClient | None = None,
    ):
        if not endpoint:
            msg = "Chat completion endpoint is required"
            raise ValueError(msg)

        self.endpoint = endpoint
        self.timeout = timeout
        self.headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def __aenter__(self) -> OpenAICompatibleChatClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def post_chat_completion(self, request: ChatRequest) -> str:
        payload = request.to_payload()
        start_time = time.perf_counter()

        logger.info(
            "chat_completion_request",
            endpoint=self.endpoint,
            model=request.model,
            message_count=len(request.messages),
            prompt_length=sum(len(m.content) for m in request.messages),
        )

        try:
            response = await self.client.post(
                self.endpoint,
                headers=self.headers,
                json=payload,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error("chat_completion_timeout", timeout=self.timeout, error=str(e))
            raise NetworkFailureError(
                f"Request timed out after {self.timeout}s",
                suggestion="Increase llm_timeout or check the endpoint",
                context={"endpoint": self.endpoint},
            ) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                "chat_completion_http_error",
                status_code=status_code,
                body=e.response.text[:500],
            )
            raise NetworkFailureError(
                f"Endpoint returned HTTP {status_code}",
                suggestion="Check api_key and llm_model" if status_code in (401, 403, 404) else None,
                context={"endpoint": self.endpoint, "status_code": status_code},
            ) from e
        except httpx.RequestError as e:
            logger.error("chat_completion_request_error", error=str(e))
            raise NetworkFailureError(
                f"Could not reach endpoint: {e}",
                suggestion="Verify api_endpoint and your network connection",
                context={"endpoint": self.endpoint},
            ) from e

        latency_ms = (time.perf_counter() - start_time) * 1000

        try:
            data = response.json()
        except ValueError as e:
            raise NetworkFailureError(
                "Endpoint response is not JSON",
                context={"endpoint": self.endpoint, "preview": response.text[:200]},
            ) from e

        content = extract_message_content(data)
        if content is None:
            logger.error("chat_completion_empty_payload", response_data=str(data)[:500])
            raise NetworkFailureError(
                "Endpoint returned no message content",
                context={"endpoint": self.endpoint},
            )

        usage = data.get("usage") or {}
        logger.info(
            "chat_completion_success",
            model=data.get("model", request.model),
            response_length=len(content),
            latency_ms=round(latency_ms, 2),
            total_tokens=usage.get("total_tokens", 0),
        )
        return content
