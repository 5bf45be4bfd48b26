from __future__ import annotations

"""Token model, lexer states and render results.

Tokens are small frozen dataclasses. ``Expression`` and ``Statement`` keep the
untrimmed inner text in ``raw`` (excluded from equality) so the original
template span can be rebuilt with :meth:`Token.source`.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Iterable, Optional

from bracetpl.constants import (
    EXPRESSION_CLOSE,
    EXPRESSION_OPEN,
    STATEMENT_CLOSE,
    STATEMENT_OPEN,
)
from bracetpl.core.errors import UnresolvedKeyError


class TokenKind(Enum):
    TEXT = auto()
    EXPRESSION = auto()
    STATEMENT = auto()


class LexerState(Enum):
    """Scanner state; ``START`` doubles as "scanning literal text"."""

    START = auto()
    IN_EXPRESSION = auto()
    IN_STATEMENT = auto()


class Token(ABC):
    """Base class of every token produced by the tokenizer."""

    kind: ClassVar[TokenKind]

    @abstractmethod
    def source(self) -> str:
        """Return the template span this token was scanned from."""
        raise NotImplementedError


@dataclass(frozen=True)
class Text(Token):
    content: str

    kind = TokenKind.TEXT

    def source(self) -> str:
        return self.content


@dataclass(frozen=True)
class Expression(Token):
    name: str
    raw: Optional[str] = field(default=None, compare=False)

    kind = TokenKind.EXPRESSION

    def source(self) -> str:
        inner = self.name if self.raw is None else self.raw
        return f'{EXPRESSION_OPEN}{inner}{EXPRESSION_CLOSE}'


@dataclass(frozen=True)
class Statement(Token):
    name: str
    raw: Optional[str] = field(default=None, compare=False)

    kind = TokenKind.STATEMENT

    def source(self) -> str:
        inner = self.name if self.raw is None else self.raw
        return f'{STATEMENT_OPEN}{inner}{STATEMENT_CLOSE}'


def reconstruct(tokens: Iterable[Token]) -> str:
    """Concatenate the source span of every token, in order."""
    return ''.join(tok.source() for tok in tokens)


@dataclass(frozen=True)
class RenderResult:
    """Outcome of a non-raising render: either ``text`` or ``error`` is set.

    ``error`` is the UnresolvedKeyError itself, so callers can branch on
    ``reason`` or ``path`` without parsing the message.
    """

    text: Optional[str] = None
    error: Optional[UnresolvedKeyError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def reason(self) -> Optional[str]:
        return None if self.error is None else self.error.reason

    @property
    def message(self) -> Optional[str]:
        return None if self.error is None else str(self.error)
