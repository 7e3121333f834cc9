"""Shared pytest fixtures for the mafpool test suite."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import pytest
from pydantic import SecretStr

from mafpool.config import Settings
from mafpool.core.models import AgentOptions, AgentState, ChatMessage, ChatRole


@pytest.fixture
def test_settings() -> Settings:
    """Settings instance with test defaults, ignoring any .env file on disk."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        openai_api_key="sk-test",
        log_level="DEBUG",
        log_format="text",
    )


class FakeAgent:
    """Test double satisfying the Agent Protocol."""

    def __init__(self, name: str = "fake", instructions: str = "be fake") -> None:
        self._name = name
        self._instructions = instructions
        self._state = AgentState.idle
        self.shutdown_called = False
        self.shutdown_error: Exception | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def instructions(self) -> str:
        return self._instructions

    @property
    def state(self) -> AgentState:
        return self._state

    async def run(self, text: str) -> ChatMessage:
        return ChatMessage(role=ChatRole.assistant, content=f"echo: {text}")

    async def shutdown(self) -> None:
        self.shutdown_called = True
        self._state = AgentState.terminated
        if self.shutdown_error is not None:
            raise self.shutdown_error


def make_options(
    model_id: str = "gpt-4o-mini",
    factory: Callable[[AgentOptions], Awaitable[FakeAgent]] | None = None,
    **overrides: object,
) -> AgentOptions:
    """Factory for AgentOptions test instances."""
    return AgentOptions(
        model_id=model_id,
        api_key=SecretStr("sk-test"),
        agent_factory=factory,
        **overrides,  # type: ignore[arg-type]
    )
