"""Register OpenAI-backed chat agents in agent pools."""

from __future__ import annotations

from mafpool.core.pool import InMemoryAgentPool
from mafpool.providers.openai.extension import add_openai, remove_openai

__version__ = "0.1.0"

__all__ = ["InMemoryAgentPool", "__version__", "add_openai", "remove_openai"]
