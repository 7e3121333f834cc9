"""Provider contracts and chat provider adapters."""

from __future__ import annotations

from mafpool.providers.base import Agent, AgentPool, ChatClient
from mafpool.providers.errors import (
    ProviderAPIError,
    ProviderAuthError,
    ProviderError,
    ProviderTimeoutError,
)

__all__ = [
    "Agent",
    "AgentPool",
    "ChatClient",
    "ProviderAPIError",
    "ProviderAuthError",
    "ProviderError",
    "ProviderTimeoutError",
]
