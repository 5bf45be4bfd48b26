from __future__ import annotations

"""Small logging helpers to standardize bracetpl logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Configuration of the base 'bracetpl' logger.
    - get_logger: Namespaced logger factory ('bracetpl.*').
    - trace_render: render tracing gated by BRACETPL_TRACE.
"""

import logging
import os
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from bracetpl.core.interfaces.logging import LoggerLikeProtocol


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'bracetpl.render').
        - msg: Formatted message string.
        - version: bracetpl.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import, the package __init__ imports this module.
            from bracetpl import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("BRACETPL_VERSION", "unknown")

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

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'bracetpl' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger("bracetpl")
    if base.handlers:
        base.setLevel(level)
        return base

    import sys as _sys

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
    """Return a namespaced logger under 'bracetpl'."""
    if not name or name == "bracetpl":
        return logging.getLogger("bracetpl")
    if name.startswith("bracetpl."):
        return logging.getLogger(name)
    return logging.getLogger(f"bracetpl.{name}")


def is_trace_enabled() -> bool:
    """Check if render tracing is enabled via env flag."""
    return os.getenv("BRACETPL_TRACE") == "1"


def trace_render(logger: "LoggerLikeProtocol", message: str, *, enabled: Optional[bool] = None, **ctx) -> None:
    """Emit debug-verbosity render traces only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        enabled: Explicit switch; falls back to BRACETPL_TRACE when None.
        **ctx: Optional structured context attached to the record.
    """
    if enabled is None:
        enabled = is_trace_enabled()
    if not enabled:
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
