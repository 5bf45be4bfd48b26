from __future__ import annotations

"""Exception types raised by bracetpl.

The tokenizer never raises; every error here originates in the value model
or in the resolver.
"""

from typing import Optional

# Reasons attached to UnresolvedKeyError.
REASON_MISSING = 'missing'
REASON_NOT_A_CONTEXT = 'not-a-context'
REASON_CONTEXT_AT_TERMINAL = 'context-at-terminal'


class BracetplError(Exception):
    """Base class for every bracetpl failure."""


class UnresolvedKeyError(BracetplError, LookupError):
    """Raised when a dotted path cannot be resolved to a scalar value.

    A missing segment, a non-terminal segment that is not a sub-context and a
    sub-context found at the terminal segment all raise this error; ``reason``
    tells them apart.
    """

    def __init__(self, path: str, segment: Optional[str] = None, reason: str = REASON_MISSING) -> None:
        self.path = path
        self.segment = path if segment is None else segment
        self.reason = reason
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.reason == REASON_NOT_A_CONTEXT:
            return f'cannot resolve {self.path!r}: {self.segment!r} is not a sub-context'
        if self.reason == REASON_CONTEXT_AT_TERMINAL:
            return f'cannot resolve {self.path!r}: {self.segment!r} is a sub-context, not a value'
        return f'cannot resolve {self.path!r}: key {self.segment!r} not found'

    def __str__(self) -> str:
        # LookupError would otherwise repr() the message.
        return self._describe()


class VariableTypeError(BracetplError, TypeError):
    """Raised when a value does not fit the requested variable kind."""
