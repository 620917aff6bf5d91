"""Root logger setup for the ``python -m uptime_effects`` entry point.

Library modules only create module-level loggers; handlers are attached
here, and only when nothing else has configured the root logger.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    # Unknown names fall back to INFO rather than failing the demo.
    return logging.getLevelNamesMapping().get(name.strip().upper(), logging.INFO)


def setup_logging(level: str = "INFO", logfile: str | None = None) -> None:
    """Log to stderr, and to ``logfile`` as well when one is given."""
    root = logging.getLogger()
    if root.handlers:
        return

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(_level_from_name(level))
