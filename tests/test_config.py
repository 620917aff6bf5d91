"""Tests for environment settings and root logger setup.

Settings are read from explicit mappings where possible; the logging tests
save and restore the root logger's handlers around each check.
"""

from __future__ import annotations

import logging

import pytest

from uptime_effects.config import Settings
from uptime_effects.logging_config import setup_logging


def test_defaults_when_env_is_empty() -> None:
    """An empty environment yields the documented defaults."""
    s = Settings.from_env({})
    assert s == Settings(log_level="INFO", log_file=None, max_workers=4, lookup_latency_s=0.0)


def test_values_read_from_env() -> None:
    """Every UPTIME_* variable is parsed into its field."""
    s = Settings.from_env(
        {
            "UPTIME_LOG_LEVEL": "debug",
            "UPTIME_LOG_FILE": "uptime.log",
            "UPTIME_MAX_WORKERS": "8",
            "UPTIME_LOOKUP_LATENCY_S": "0.25",
        }
    )
    assert s.log_level == "DEBUG"
    assert s.log_file == "uptime.log"
    assert s.max_workers == 8
    assert s.lookup_latency_s == 0.25


def test_from_env_uses_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an explicit mapping the process environment is used."""
    monkeypatch.setenv("UPTIME_MAX_WORKERS", "2")
    assert Settings.from_env().max_workers == 2


@pytest.mark.parametrize(
    "env, message",
    [
        ({"UPTIME_MAX_WORKERS": "0"}, "max_workers"),
        ({"UPTIME_MAX_WORKERS": "many"}, "UPTIME_MAX_WORKERS"),
        ({"UPTIME_LOOKUP_LATENCY_S": "-1"}, "lookup_latency_s"),
        ({"UPTIME_LOOKUP_LATENCY_S": "soon"}, "UPTIME_LOOKUP_LATENCY_S"),
    ],
)
def test_invalid_values_raise(env: dict[str, str], message: str) -> None:
    """Out-of-range or unparsable values raise ValueError naming the setting."""
    with pytest.raises(ValueError, match=message):
        Settings.from_env(env)


def test_setup_logging_keeps_existing_handlers() -> None:
    """An already configured root logger is left untouched."""
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    saved = list(root.handlers)
    root.handlers = [sentinel]
    try:
        setup_logging("DEBUG")
        assert root.handlers == [sentinel]
    finally:
        root.handlers = saved


def test_setup_logging_attaches_console_and_file(tmp_path) -> None:
    """A bare root logger gets a console handler and an optional file handler."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    root.handlers = []
    try:
        setup_logging("warning", str(tmp_path / "run.log"))
        assert root.level == logging.WARNING
        kinds = {type(h) for h in root.handlers}
        assert kinds == {logging.StreamHandler, logging.FileHandler}
    finally:
        for h in root.handlers:
            h.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_unknown_level_falls_back_to_info() -> None:
    """An unrecognised level name configures INFO."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    root.handlers = []
    try:
        setup_logging("chatty")
        assert root.level == logging.INFO
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
