"""Scenario-run logging to a file under the configured log directory."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

from flightcalc.result import Failure
from flightcalc.settings import get_settings

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "flightcalc.scenario"

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        settings = get_settings()
        os.makedirs(settings.log_dir, exist_ok=True)

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(settings.log_level)
        logger.propagate = False

        if not logger.handlers:
            handler = logging.FileHandler(
                os.path.join(settings.log_dir, settings.log_file_name),
                encoding="utf-8",
            )
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            logger.addHandler(handler)
        _logger = logger

    return _logger


def reset_logger() -> None:
    """Close and drop the cached logger so the next call re-reads settings."""
    global _logger
    with _logger_lock:
        named = logging.getLogger(LOGGER_NAME)
        for handler in named.handlers[:]:
            handler.close()
            named.removeHandler(handler)
        _logger = None


def log_scenario_call(fn: F) -> F:
    """Decorator that logs scenario runs with their inputs, outcome and timing."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_parts = [repr(a) for a in args]
        arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
        arg_str = ", ".join(arg_parts)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        if isinstance(result, Failure):
            logger.warning(
                "FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, result.kind.name, result.message, elapsed,
            )
        else:
            logger.info("OK: %s -> %r (%.3fs)", fn.__qualname__, result, elapsed)
        return result

    return wrapper  # type: ignore[return-value]
