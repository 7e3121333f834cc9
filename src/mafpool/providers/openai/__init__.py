"""OpenAI chat provider and pool registration helpers."""

from __future__ import annotations

from mafpool.providers.openai.client import (
    OpenAIChatAdapter,
    OpenAIChatClient,
    create_client,
    get_chat_client,
)
from mafpool.providers.openai.extension import (
    DEFAULT_INSTRUCTIONS,
    add_openai,
    build_openai_agent,
    remove_openai,
)

__all__ = [
    "DEFAULT_INSTRUCTIONS",
    "OpenAIChatAdapter",
    "OpenAIChatClient",
    "add_openai",
    "build_openai_agent",
    "create_client",
    "get_chat_client",
    "remove_openai",
]
