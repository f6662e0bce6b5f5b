"""Centralized logging utilities for portal retrieval sessions.

Besides handler setup this module offers two timing helpers:

- ``perf_span``: a context manager that times a block (for instance a single
  reverse-DNS lookup) and emits one structured INFO line with its duration
  and outcome.
- ``perf``: a decorator that wraps every call of a function in a span.

Both write through the logger hierarchy configured by ``configure_logging`` so
timings land in the per-session log file.
"""

import functools
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from gpportal.config import AppConfig

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [session=%(session_id)s] %(message)s"
PERF_LOG_FORMAT = "event=perf name=%s duration_ms=%.3f success=%s tags=%s"


class _SessionContextFilter(logging.Filter):
    """Stamp every log record with the current session identifier."""

    def __init__(self, session_id: str) -> None:
        super().__init__()
        self._session_id = session_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = self._session_id
        return True


def _sanitize_session_id(session_id: str) -> str:
    return "".join(ch if ch.isalnum() or ch in ("-", "_") else "-" for ch in session_id)


def generate_session_id() -> str:
    """Return a session identifier derived from the current UTC time."""
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def configure_logging(
    config: AppConfig,
    session_id: Optional[str] = None,
    include_console: bool = True,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> Path:
    """Install root handlers for one retrieval session and return the log path."""
    resolved_session_id = session_id or generate_session_id()

    log_dir = config.log_directory
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / f"{config.app_name}-{_sanitize_session_id(resolved_session_id)}.log"

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers = [logging.FileHandler(log_path, encoding="utf-8")]
    if include_console:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setFormatter(logging.Formatter(fmt))
        handler.addFilter(_SessionContextFilter(resolved_session_id))
        root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    return log_path


def _format_tags(tags: Optional[Mapping[str, Any]]) -> str:
    if not tags:
        return "{}"
    return "{" + ", ".join(f"{k}={tags[k]!r}" for k in sorted(tags)) + "}"


class perf_span:
    """Context manager timing an arbitrary block.

    Example:
        with perf_span("dns.reverse_lookup", tags={"ip": "10.0.0.1"}):
            resolver.lookup("10.0.0.1")
    """

    def __init__(
        self,
        name: str,
        *,
        tags: Optional[Mapping[str, Any]] = None,
        level: int = logging.INFO,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._name = name
        self._tags = tags or {}
        self._level = level
        self._logger = logger or logging.getLogger(__name__)
        self._start_ns: Optional[int] = None

    def __enter__(self) -> "perf_span":
        self._start_ns = time.monotonic_ns()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        end_ns = time.monotonic_ns()
        start_ns = self._start_ns or end_ns
        self._logger.log(
            self._level,
            PERF_LOG_FORMAT,
            self._name,
            (end_ns - start_ns) / 1_000_000.0,
            str(exc_type is None).lower(),
            _format_tags(self._tags),
        )
        return False


def perf(
    name: Optional[str] = None,
    *,
    tags: Optional[Mapping[str, Any]] = None,
    level: int = logging.INFO,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator running each call of a function inside a ``perf_span``.

    The span is named ``name`` or ``<module>.<qualname>`` and logs through the
    function's module logger. Exceptions propagate after ``success=false`` is
    logged.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        span_name = name or f"{func.__module__}.{func.__qualname__}"
        logger = logging.getLogger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with perf_span(span_name, tags=tags, level=level, logger=logger):
                return func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = [
    "configure_logging",
    "generate_session_id",
    "DEFAULT_LOG_FORMAT",
    "perf",
    "perf_span",
]
