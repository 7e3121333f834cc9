"""OpenAI chat client construction and the ChatClient adapter."""

from __future__ import annotations

from typing import Any

import httpx
import openai
from openai import AsyncOpenAI

from mafpool.core.models import ChatMessage, ChatRole
from mafpool.logging import get_logger
from mafpool.providers.errors import (
    ProviderAPIError,
    ProviderAuthError,
    ProviderError,
    ProviderTimeoutError,
)

_log = get_logger("mafpool.providers.openai.client")


def create_client(api_key: str, endpoint: str | None = None) -> AsyncOpenAI:
    """Construct an AsyncOpenAI client.

    With no *endpoint* the SDK's default routing is used. Otherwise the
    endpoint must be an absolute URL and is passed through as ``base_url``.

    Raises:
        ValueError: If *endpoint* is not an absolute URL.
    """
    if not endpoint:
        return AsyncOpenAI(api_key=api_key)

    try:
        url = httpx.URL(endpoint)
    except httpx.InvalidURL as exc:
        raise ValueError(f"Invalid endpoint {endpoint!r}: {exc}") from exc
    if not url.is_absolute_url:
        raise ValueError(f"Endpoint must be an absolute URL, got {endpoint!r}")

    return AsyncOpenAI(api_key=api_key, base_url=endpoint)


def get_chat_client(client: AsyncOpenAI, model_id: str) -> OpenAIChatClient:
    """Return a chat handle scoped to *model_id*."""
    return OpenAIChatClient(client, model_id)


class OpenAIChatClient:
    """Model-scoped handle over the Chat Completions API."""

    def __init__(self, client: AsyncOpenAI, model_id: str) -> None:
        self._client = client
        self._model_id = model_id

    @property
    def client(self) -> AsyncOpenAI:
        return self._client

    @property
    def model_id(self) -> str:
        return self._model_id

    async def complete(self, messages: list[dict[str, Any]]) -> str:
        """Stream a completion for wire-format *messages* and return the text."""
        text_buffer = ""
        stream = await self._client.chat.completions.create(
            model=self._model_id,
            messages=messages,  # type: ignore[arg-type]
            stream=True,
        )
        async for chunk in stream:
            if not chunk.choices:
                continue
            delta = chunk.choices[0].delta
            if delta.content:
                text_buffer += delta.content
        return text_buffer

    def as_chat_client(self) -> OpenAIChatAdapter:
        """Expose this handle through the provider-neutral ChatClient interface."""
        return OpenAIChatAdapter(self)


class OpenAIChatAdapter:
    """ChatClient implementation translating to and from the OpenAI SDK."""

    def __init__(self, handle: OpenAIChatClient) -> None:
        self._handle = handle

    @property
    def model_id(self) -> str:
        return self._handle.model_id

    @property
    def handle(self) -> OpenAIChatClient:
        return self._handle

    async def get_response(self, messages: list[ChatMessage]) -> ChatMessage:
        payload = [to_openai_message(m) for m in messages]
        try:
            text = await self._handle.complete(payload)
        except openai.AuthenticationError as exc:
            raise ProviderAuthError(str(exc)) from exc
        except openai.PermissionDeniedError as exc:
            raise ProviderAuthError(str(exc)) from exc
        except openai.RateLimitError as exc:
            raise ProviderAPIError(str(exc), status_code=429) from exc
        except openai.APIStatusError as exc:
            raise ProviderAPIError(str(exc), status_code=exc.status_code) from exc
        except openai.APITimeoutError as exc:
            raise ProviderTimeoutError(str(exc)) from exc
        except openai.APIConnectionError as exc:
            raise ProviderError(str(exc)) from exc

        _log.debug("chat.completed: model=%s chars=%d", self.model_id, len(text))
        return ChatMessage(role=ChatRole.assistant, content=text)

    async def close(self) -> None:
        await self._handle.client.close()


def to_openai_message(message: ChatMessage) -> dict[str, Any]:
    """Convert a ChatMessage to the Chat Completions wire dict."""
    return {"role": message.role.value, "content": message.content}
