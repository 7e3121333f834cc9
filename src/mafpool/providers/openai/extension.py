"""OpenAI registration helpers for any AgentPool.

``add_openai`` only records configuration. The OpenAI client and the agent
are built later, when the pool calls :func:`build_openai_agent` with the
stored record. Errors from the pool or from client construction propagate
unchanged, and so does task cancellation.
"""

from __future__ import annotations

from pydantic import SecretStr

from mafpool.core.agent import ChatAgent, as_agent
from mafpool.core.models import AgentOptions
from mafpool.logging import get_logger
from mafpool.providers.base import AgentPool
from mafpool.providers.openai.client import create_client, get_chat_client

DEFAULT_INSTRUCTIONS = "You are a helpful assistant."

_log = get_logger("mafpool.providers.openai.extension")


async def build_openai_agent(options: AgentOptions) -> ChatAgent:
    """Build a ChatAgent from an OpenAI configuration record."""
    client = create_client(options.api_key.get_secret_value(), options.endpoint)
    chat_client = get_chat_client(client, options.model_id).as_chat_client()
    instructions = (
        options.instructions
        if options.instructions is not None
        else DEFAULT_INSTRUCTIONS
    )
    _log.debug(
        "openai.agent_built: model=%s custom_endpoint=%s",
        options.model_id,
        bool(options.endpoint),
    )
    return as_agent(chat_client, instructions=instructions, name=options.model_id)


async def add_openai(
    pool: AgentPool,
    pool_id: str,
    key: str,
    model_id: str,
    api_key: str,
    endpoint: str | None = None,
    rps: int | None = None,
    rpm: int | None = None,
    rpd: int | None = None,
    tokens_per_day: int | None = None,
    instructions: str | None = None,
) -> None:
    """Register an OpenAI model in *pool* under ``(pool_id, key)``.

    The rate and token limits are handed to the pool as-is. No client is
    constructed here.
    """
    options = AgentOptions(
        model_id=model_id,
        api_key=SecretStr(api_key),
        endpoint=endpoint,
        requests_per_second=rps,
        requests_per_minute=rpm,
        requests_per_day=rpd,
        tokens_per_day=tokens_per_day,
        instructions=instructions,
        agent_factory=build_openai_agent,
    )
    await pool.add(pool_id, key, options)


async def remove_openai(pool: AgentPool, pool_id: str, key: str) -> bool:
    """Unregister ``(pool_id, key)`` from *pool*.

    Returns:
        True if the entry existed and was removed, False if it was absent.
    """
    return await pool.remove(pool_id, key)
