"""Agent, ChatClient and AgentPool Protocols — contracts between the pool and providers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mafpool.core.models import AgentOptions, AgentState, ChatMessage


@runtime_checkable
class Agent(Protocol):
    """A conversational entity bound to one model and one instruction prompt."""

    @property
    def name(self) -> str:
        """Agent display name."""
        ...

    @property
    def instructions(self) -> str:
        """System prompt the agent was built with."""
        ...

    @property
    def state(self) -> AgentState:
        """Current lifecycle state."""
        ...

    async def run(self, text: str) -> ChatMessage:
        """Send a user turn and return the assistant reply."""
        ...

    async def shutdown(self) -> None:
        """Release the underlying client."""
        ...


@runtime_checkable
class ChatClient(Protocol):
    """Provider-neutral chat interface scoped to a single model."""

    @property
    def model_id(self) -> str: ...

    async def get_response(self, messages: list[ChatMessage]) -> ChatMessage:
        """Return the assistant reply to *messages*."""
        ...

    async def close(self) -> None: ...


@runtime_checkable
class AgentPool(Protocol):
    """Stores agent configuration records keyed by ``(pool_id, key)``.

    The pool decides when ``AgentOptions.agent_factory`` runs and owns the
    conflict policy for duplicate keys.
    """

    async def add(self, pool_id: str, key: str, options: AgentOptions) -> None:
        """Store *options* under ``(pool_id, key)``."""
        ...

    async def remove(self, pool_id: str, key: str) -> bool:
        """Remove the entry; return False if nothing was registered."""
        ...
