"""Runtime settings read from ``UPTIME_*`` environment variables.

Settings are only needed by the ``python -m uptime_effects`` entry point; the
library classes take their collaborators as constructor arguments.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

LOG_LEVEL_ENV = "UPTIME_LOG_LEVEL"
LOG_FILE_ENV = "UPTIME_LOG_FILE"
MAX_WORKERS_ENV = "UPTIME_MAX_WORKERS"
LOOKUP_LATENCY_ENV = "UPTIME_LOOKUP_LATENCY_S"


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: str = "INFO"
    log_file: str | None = None
    max_workers: int = 4
    lookup_latency_s: float = 0.0

    def __post_init__(self) -> None:
        if self.max_workers <= 0:
            raise ValueError("max_workers must be > 0")
        if self.lookup_latency_s < 0:
            raise ValueError("lookup_latency_s must be >= 0")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        log_file = env.get(LOG_FILE_ENV, "").strip() or None
        return cls(
            log_level=env.get(LOG_LEVEL_ENV, "INFO").strip().upper() or "INFO",
            log_file=log_file,
            max_workers=_parse(env, MAX_WORKERS_ENV, int, "4"),
            lookup_latency_s=_parse(env, LOOKUP_LATENCY_ENV, float, "0.0"),
        )


def _parse(env: Mapping[str, str], name: str, kind: type, default: str):
    raw = env.get(name, "").strip() or default
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"{name} must be a {kind.__name__}, got {raw!r}") from None
