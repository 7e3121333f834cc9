"""chat command — register a model in a throwaway pool and send one prompt."""

from __future__ import annotations

import asyncio
import os

import typer
from rich import print as rprint
from rich.markup import escape

from mafpool.config import Settings
from mafpool.core.pool import InMemoryAgentPool
from mafpool.providers.errors import ProviderError
from mafpool.providers.openai.extension import add_openai, remove_openai

_POOL_ID = "cli"


def _resolve_api_key(flag: str | None, settings: Settings) -> str | None:
    """Resolve API key: CLI flag → MAFPOOL_OPENAI_API_KEY → OPENAI_API_KEY."""
    if flag:
        return flag
    if settings.openai_api_key:
        return settings.openai_api_key
    return os.environ.get("OPENAI_API_KEY")


def chat(
    model: str = typer.Argument(help="Model identifier (e.g. gpt-4o-mini)"),
    prompt: str = typer.Argument(help="Message to send"),
    endpoint: str | None = typer.Option(
        None,
        "--endpoint",
        help="Base URL of an OpenAI-compatible endpoint",
    ),
    api_key: str | None = typer.Option(
        None, "--api-key", help="API key (defaults to OPENAI_API_KEY)"
    ),
    instructions: str | None = typer.Option(
        None, "--instructions", help="System prompt override"
    ),
) -> None:
    """Send a prompt to an OpenAI model through an agent pool."""
    settings = Settings()
    resolved_key = _resolve_api_key(api_key, settings)
    if not resolved_key:
        rprint(
            "[red]Error: no API key. Pass --api-key or set OPENAI_API_KEY.[/red]"
        )
        raise typer.Exit(code=1)

    asyncio.run(
        _chat(
            model,
            prompt,
            endpoint or settings.openai_endpoint,
            resolved_key,
            instructions,
        )
    )


async def _chat(
    model: str,
    prompt: str,
    endpoint: str | None,
    api_key: str,
    instructions: str | None,
) -> None:
    pool = InMemoryAgentPool()
    await add_openai(
        pool,
        _POOL_ID,
        model,
        model,
        api_key,
        endpoint=endpoint,
        instructions=instructions,
    )
    try:
        agent = await pool.get_agent(_POOL_ID, model)
        reply = await agent.run(prompt)
        rprint(f"[dim]\\[{escape(agent.name)}][/dim] {escape(reply.content)}")
    except (ProviderError, ValueError) as exc:
        rprint(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1)
    finally:
        await remove_openai(pool, _POOL_ID, model)
        await pool.close()
