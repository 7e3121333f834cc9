"""Core Pydantic models for the agent pool."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class AgentState(StrEnum):
    """Lifecycle states for a pooled agent."""

    idle = "idle"
    processing = "processing"
    terminated = "terminated"


class ChatRole(StrEnum):
    """Author role of a chat message."""

    system = "system"
    user = "user"
    assistant = "assistant"


class ChatMessage(BaseModel):
    """A single turn in a conversation with an agent."""

    role: ChatRole
    content: str
    author_name: str | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


# (options) -> awaitable Agent. Typed loosely to keep models free of provider imports.
AgentFactory = Callable[..., Awaitable[Any]]


class AgentOptions(BaseModel):
    """Configuration record stored in a pool for one registered agent.

    The rate and token limits are advisory: they are carried for the pool
    to act on and are not enforced here. ``agent_factory`` is invoked by the
    pool with this record when it decides to build the agent.
    """

    model_config = ConfigDict(
        frozen=True, arbitrary_types_allowed=True, protected_namespaces=()
    )

    model_id: str
    api_key: SecretStr
    endpoint: str | None = None
    requests_per_second: int | None = None
    requests_per_minute: int | None = None
    requests_per_day: int | None = None
    tokens_per_day: int | None = None
    instructions: str | None = None
    agent_factory: AgentFactory | None = Field(default=None, exclude=True, repr=False)
