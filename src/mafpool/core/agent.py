"""ChatAgent — conversational agent over any ChatClient."""

from __future__ import annotations

from mafpool.core.models import AgentState, ChatMessage, ChatRole
from mafpool.logging import get_logger
from mafpool.providers.base import ChatClient

_log = get_logger("mafpool.core.agent")


class ChatAgent:
    """Named agent that keeps conversation history and delegates turns to a ChatClient."""

    def __init__(self, name: str, chat_client: ChatClient, instructions: str) -> None:
        self._name = name
        self._chat_client = chat_client
        self._instructions = instructions
        self._state = AgentState.idle
        self._history: list[ChatMessage] = [
            ChatMessage(role=ChatRole.system, content=instructions)
        ]

    @property
    def name(self) -> str:
        return self._name

    @property
    def instructions(self) -> str:
        return self._instructions

    @property
    def state(self) -> AgentState:
        return self._state

    @property
    def chat_client(self) -> ChatClient:
        return self._chat_client

    @property
    def history(self) -> list[ChatMessage]:
        return list(self._history)

    async def run(self, text: str) -> ChatMessage:
        """Append a user turn, fetch the reply, and record it in history.

        The user turn is dropped again if the client raises, so a failed
        call does not leave an unanswered message behind.
        """
        if self._state == AgentState.terminated:
            raise RuntimeError(f"Agent '{self._name}' has been shut down")

        self._state = AgentState.processing
        self._history.append(ChatMessage(role=ChatRole.user, content=text))
        try:
            reply = await self._chat_client.get_response(list(self._history))
        except BaseException:
            self._history.pop()
            raise
        finally:
            self._state = AgentState.idle

        reply = reply.model_copy(update={"author_name": self._name})
        self._history.append(reply)
        _log.debug("agent.reply: name=%s chars=%d", self._name, len(reply.content))
        return reply

    async def shutdown(self) -> None:
        """Close the chat client and mark as terminated."""
        await self._chat_client.close()
        self._state = AgentState.terminated


def as_agent(chat_client: ChatClient, *, instructions: str, name: str) -> ChatAgent:
    """Wrap a generic chat interface as a named conversational agent."""
    return ChatAgent(name=name, chat_client=chat_client, instructions=instructions)
