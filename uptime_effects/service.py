"""Uptime aggregation written once for every computation wrapper.

``UptimeService`` pairs an ``UptimeClient`` with the ``Applicative`` instance
for the wrapper that client returns.  The caller chooses the pair:

* ``TestUptimeClient`` with ``IDENTITY`` gives plain integers;
* ``AsyncUptimeClient`` with ``AWAITABLE`` gives awaitables;
* ``ExecutorUptimeClient`` with ``FUTURE`` gives ``concurrent.futures.Future``.

The aggregation itself only uses ``traverse`` and ``map``, so lookups for
different hosts are independent and may proceed concurrently under the
deferred wrappers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .applicative import Applicative, traverse
from .clients import UptimeClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UptimeReport:
    """Per-host uptimes in request order together with their total."""

    uptimes: tuple[tuple[str, int], ...]
    total: int

    def as_dict(self) -> dict[str, int]:
        # Repeated hostnames keep the last value; ``total`` counts every entry.
        return dict(self.uptimes)


def _build_report(hostnames: list[str], values: list[int]) -> UptimeReport:
    return UptimeReport(uptimes=tuple(zip(hostnames, values)), total=sum(values))


class UptimeService:
    def __init__(self, client: UptimeClient, applicative: Applicative) -> None:
        self._client = client
        self._applicative = applicative

    @property
    def applicative(self) -> Applicative:
        return self._applicative

    def get_total_uptime(self, hostnames: Iterable[str]) -> Any:
        """Return the summed uptime of ``hostnames`` wrapped in ``F``."""
        hosts = list(hostnames)
        logger.debug("Aggregating uptime for %d host(s)", len(hosts))
        app = self._applicative
        return app.map(traverse(app, hosts, self._client.get_uptime), sum)

    def get_uptime_report(self, hostnames: Iterable[str]) -> Any:
        """Return an ``UptimeReport`` for ``hostnames`` wrapped in ``F``."""
        hosts = list(hostnames)
        logger.debug("Building uptime report for %d host(s)", len(hosts))
        app = self._applicative
        return app.map(
            traverse(app, hosts, self._client.get_uptime),
            lambda values: _build_report(hosts, values),
        )
