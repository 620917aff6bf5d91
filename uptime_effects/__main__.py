"""Command line demo: ``python -m uptime_effects host1=10 host2=6``.

Computes the same total through every wrapper to show that the aggregation
code does not change between them.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor

from .applicative import AWAITABLE, FUTURE, IDENTITY
from .clients import AsyncUptimeClient, ExecutorUptimeClient, TestUptimeClient, simulated_lookup
from .config import Settings
from .logging_config import setup_logging
from .service import UptimeService

logger = logging.getLogger(__name__)


def _host_pair(text: str) -> tuple[str, int]:
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected HOST=VALUE, got {text!r}")
    try:
        return name, int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"uptime for {name!r} must be an integer") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uptime_effects",
        description="Sum host uptimes through identity, awaitable and future wrappers.",
    )
    parser.add_argument("pairs", nargs="*", type=_host_pair, metavar="HOST=VALUE")
    parser.add_argument(
        "--hosts",
        nargs="+",
        default=None,
        help="hosts to aggregate (default: every host given); unknown hosts count as 0",
    )
    return parser


def compute_totals(hosts: Mapping[str, int], hostnames: Sequence[str], settings: Settings) -> dict[str, int]:
    """Return the total for ``hostnames`` under each wrapper, keyed by wrapper name."""
    totals: dict[str, int] = {}

    identity = UptimeService(TestUptimeClient(hosts), IDENTITY)
    totals["identity"] = identity.get_total_uptime(hostnames)

    lookup = simulated_lookup(hosts, latency_s=settings.lookup_latency_s)
    awaitable = UptimeService(AsyncUptimeClient(lookup), AWAITABLE)

    async def _await_total() -> int:
        return await awaitable.get_total_uptime(hostnames)

    totals["awaitable"] = asyncio.run(_await_total())

    with ThreadPoolExecutor(max_workers=settings.max_workers) as pool:
        future = UptimeService(ExecutorUptimeClient(lambda h: hosts.get(h, 0), pool), FUTURE)
        totals["future"] = future.get_total_uptime(hostnames).result()

    return totals


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running the demo from the command line."""
    args = _build_parser().parse_args(argv)
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    hosts = dict(args.pairs)
    hostnames = list(args.hosts) if args.hosts is not None else list(hosts)
    logger.info("Aggregating %d host(s) across %d known", len(hostnames), len(hosts))

    for wrapper, total in compute_totals(hosts, hostnames, settings).items():
        print(f"{wrapper}: {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
