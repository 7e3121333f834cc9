"""In-memory agent pool: store configuration records and build agents on demand."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from mafpool.core.models import AgentOptions
from mafpool.logging import get_logger
from mafpool.providers.base import Agent


class PoolError(Exception):
    """Base for pool-specific errors."""


class PoolEntryExistsError(PoolError):
    """Raised when adding a key that is already registered in the pool."""


class PoolEntryNotFoundError(PoolError):
    """Raised when referencing a key that is not registered in the pool."""


class PoolClosedError(PoolError):
    """Raised when adding to a pool after it has been closed."""


logger = get_logger(__name__)


@dataclass
class _PoolEntry:
    options: AgentOptions
    agent: Agent | None = None
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)


class InMemoryAgentPool:
    """Keeps agent configuration records keyed by ``(pool_id, key)``.

    Records are stored as given. An entry's ``agent_factory`` runs the first
    time :meth:`get_agent` asks for it, at most once per entry, and the
    built agent is reused until the entry is removed or the pool is closed.
    Advisory rate and token limits on the record are not enforced.
    """

    def __init__(self) -> None:
        self._pools: dict[str, dict[str, _PoolEntry]] = {}
        self._closed = False

    async def add(self, pool_id: str, key: str, options: AgentOptions) -> None:
        """Store *options* under ``(pool_id, key)`` without building the agent.

        Raises:
            PoolClosedError: If the pool has been closed.
            PoolEntryExistsError: If the pair is already registered.
        """
        if self._closed:
            raise PoolClosedError("Pool has been closed")

        entries = self._pools.setdefault(pool_id, {})
        if key in entries:
            raise PoolEntryExistsError(
                f"Key '{key}' already exists in pool '{pool_id}'"
            )
        entries[key] = _PoolEntry(options=options)

        logger.info(
            "pool.added: pool_id=%s key=%s model=%s", pool_id, key, options.model_id
        )

    async def remove(self, pool_id: str, key: str) -> bool:
        """Drop ``(pool_id, key)`` and shut down any agent built from it.

        The entry is removed even if the agent's shutdown raises; the
        failure is logged and the removal still reports True.

        Returns:
            True if the entry existed, False otherwise.
        """
        entries = self._pools.get(pool_id)
        if entries is None or key not in entries:
            return False

        entry = entries.pop(key)
        if not entries:
            del self._pools[pool_id]

        if entry.agent is not None:
            try:
                await entry.agent.shutdown()
            except Exception:
                logger.warning(
                    "pool.shutdown_failed: pool_id=%s key=%s",
                    pool_id,
                    key,
                    exc_info=True,
                )

        logger.info("pool.removed: pool_id=%s key=%s", pool_id, key)
        return True

    def has(self, pool_id: str, key: str) -> bool:
        """Return True if ``(pool_id, key)`` is registered."""
        return key in self._pools.get(pool_id, {})

    def keys(self, pool_id: str) -> list[str]:
        """Return the keys registered in *pool_id* in insertion order."""
        return list(self._pools.get(pool_id, {}))

    def get_options(self, pool_id: str, key: str) -> AgentOptions:
        """Return the configuration record stored under ``(pool_id, key)``.

        Raises:
            PoolEntryNotFoundError: If the pair is not registered.
        """
        return self._entry(pool_id, key).options

    async def get_agent(self, pool_id: str, key: str) -> Agent:
        """Return the agent for ``(pool_id, key)``, building it on first use.

        A factory failure propagates and leaves the entry registered and
        unbuilt, so a later call retries.

        Raises:
            PoolEntryNotFoundError: If the pair is not registered, or was
                removed while the agent was being built.
            PoolError: If the record carries no agent factory.
        """
        entry = self._entry(pool_id, key)
        async with entry.lock:
            if entry.agent is not None:
                return entry.agent

            factory = entry.options.agent_factory
            if factory is None:
                raise PoolError(
                    f"Entry '{key}' in pool '{pool_id}' has no agent factory"
                )

            agent = await factory(entry.options)

            if self._pools.get(pool_id, {}).get(key) is not entry:
                await agent.shutdown()
                raise PoolEntryNotFoundError(
                    f"Key '{key}' was removed from pool '{pool_id}' during construction"
                )

            entry.agent = agent
            logger.info(
                "pool.agent_built: pool_id=%s key=%s name=%s",
                pool_id,
                key,
                agent.name,
            )
            return agent

    async def close(self) -> None:
        """Shut down every built agent, clear all pools and reject further adds.

        Shutdown failures are logged rather than raised so that every agent
        gets a chance to release its client.
        """
        self._closed = True
        pools, self._pools = self._pools, {}

        count = 0
        for pool_id, entries in pools.items():
            for key, entry in entries.items():
                if entry.agent is None:
                    continue
                count += 1
                try:
                    await entry.agent.shutdown()
                except Exception:
                    logger.warning(
                        "pool.shutdown_failed: pool_id=%s key=%s",
                        pool_id,
                        key,
                        exc_info=True,
                    )

        logger.info("pool.closed: pools=%d agents=%d", len(pools), count)

    def _entry(self, pool_id: str, key: str) -> _PoolEntry:
        entries = self._pools.get(pool_id, {})
        if key not in entries:
            raise PoolEntryNotFoundError(
                f"Key '{key}' not found in pool '{pool_id}'"
            )
        return entries[key]
