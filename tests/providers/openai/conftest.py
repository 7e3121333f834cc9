"""Shared fixtures and factories for OpenAI provider tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from openai.types.chat import ChatCompletionChunk
from openai.types.chat.chat_completion_chunk import Choice, ChoiceDelta


@pytest.fixture
def mock_async_openai() -> MagicMock:
    """MagicMock of AsyncOpenAI with streaming create and close as AsyncMocks."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    client.close = AsyncMock()
    return client


def text_chunk(content: str | None) -> ChatCompletionChunk:
    """Minimal ChatCompletionChunk with text delta content."""
    return ChatCompletionChunk(
        id="chunk-1",
        choices=[
            Choice(
                delta=ChoiceDelta(content=content),
                finish_reason=None,
                index=0,
            )
        ],
        created=1700000000,
        model="gpt-4o",
        object="chat.completion.chunk",
    )


def empty_chunk() -> ChatCompletionChunk:
    """ChatCompletionChunk with no choices (e.g. a trailing usage chunk)."""
    return ChatCompletionChunk(
        id="chunk-1",
        choices=[],
        created=1700000000,
        model="gpt-4o",
        object="chat.completion.chunk",
    )


def async_stream(*chunks: Any) -> AsyncMock:
    """Return an AsyncMock whose __aiter__ yields the given chunks."""

    async def _gen() -> Any:
        for chunk in chunks:
            yield chunk

    mock = AsyncMock()
    mock.__aiter__ = lambda _: _gen()
    return mock
