from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging surface the tokenizer, renderer and engine write to.

    A stdlib ``logging.Logger`` satisfies it; so does any adapter that
    forwards these four levels elsewhere (structured loggers, test doubles).
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out loggers scoped under the 'bracetpl' namespace."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the logger for scope *name* (e.g. 'render')."""
        ...
