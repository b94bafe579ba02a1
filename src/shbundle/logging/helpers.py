from __future__ import annotations

"""Small logging helpers to standardize shbundle logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: configuration of the base 'shbundle' logger.
    - get_logger: namespaced logger factory ('shbundle.*').
    - trace_io utilities gated by SHBUNDLE_TRACE_IO.
"""

import logging
import os
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from shbundle.core.interfaces.logging import LoggerLikeProtocol


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'shbundle.directives').
        - msg: Formatted message string.
        - version: shbundle.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import, the package __init__ imports this module indirectly.
            from shbundle import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("SHBUNDLE_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'shbundle' logger and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    import sys as _sys

    base = logging.getLogger("shbundle")
    for handler in list(base.handlers):
        base.removeHandler(handler)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'shbundle'."""
    if not name or name == "shbundle":
        return logging.getLogger("shbundle")
    if name.startswith("shbundle"):
        return logging.getLogger(name)
    return logging.getLogger(f"shbundle.{name}")


def is_trace_io_enabled() -> bool:
    """Check if IO tracing is enabled via env flag."""
    return os.getenv("SHBUNDLE_TRACE_IO") == "1"


def trace_io(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Emit debug-verbosity IO trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context appended in debug format.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
