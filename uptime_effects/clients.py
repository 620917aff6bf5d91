from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from concurrent.futures import Executor, Future
from typing import Any, Protocol

logger = logging.getLogger(__name__)

AsyncLookup = Callable[[str], Awaitable[int]]
BlockingLookup = Callable[[str], int]


class UptimeClient(Protocol):
    """Uptime source abstraction.

    Aggregation depends on this interface rather than on a concrete lookup, so
    the same code runs over plain values in tests and deferred values in
    production.  The return value is wrapped in the client's ``F``.
    """

    def get_uptime(self, hostname: str) -> Any:
        """Return the uptime for ``hostname`` wrapped in ``F``."""


class TestUptimeClient:
    """Synchronous client over a fixed mapping. Unknown hosts report 0."""

    __test__ = False  # not a pytest test class

    def __init__(self, hosts: Mapping[str, int]) -> None:
        self._hosts = dict(hosts)

    @property
    def hosts(self) -> dict[str, int]:
        return dict(self._hosts)

    def get_uptime(self, hostname: str) -> int:
        return self._hosts.get(hostname, 0)


class AsyncUptimeClient:
    """Production client returning awaitables from an injected async lookup."""

    def __init__(self, lookup: AsyncLookup) -> None:
        self._lookup = lookup

    def get_uptime(self, hostname: str) -> Awaitable[int]:
        logger.debug("Scheduling async uptime lookup for %s", hostname)
        return self._lookup(hostname)


class ExecutorUptimeClient:
    """Production client running a blocking lookup on an executor."""

    def __init__(self, lookup: BlockingLookup, executor: Executor) -> None:
        self._lookup = lookup
        self._executor = executor

    def get_uptime(self, hostname: str) -> Future[int]:
        logger.debug("Submitting uptime lookup for %s", hostname)
        return self._executor.submit(self._lookup, hostname)


def simulated_lookup(hosts: Mapping[str, int], *, latency_s: float = 0.0) -> AsyncLookup:
    """Build an async lookup over ``hosts`` that answers after ``latency_s``.

    Stands in for a remote call; unknown hosts answer 0.
    """
    if latency_s < 0:
        raise ValueError("latency_s must be >= 0")
    table = dict(hosts)
    delay = float(latency_s)

    async def _lookup(hostname: str) -> int:
        await asyncio.sleep(delay)
        return table.get(hostname, 0)

    return _lookup
