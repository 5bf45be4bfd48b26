from __future__ import annotations

"""
TemplateTokenizer – canonical tokenizer for brace-delimited templates.

The scanner is a single left-to-right pass with a two-character lookback:

    * '{{' outside a region opens an expression, '}}' closes it.
    * '{%' outside a region opens a statement, '%}' closes it.
    * A lone '{' or '}' is plain text.

Whatever was buffered before an opening marker becomes a Text token (when
non-empty). The content of a closed region becomes an Expression/Statement
whose name is stripped of surrounding whitespace; empty regions such as
'{{ }}' still produce a token with an empty name.

Unterminated regions are not errors: at end of input the buffered content is
flushed as Text, prefixed with its opening marker, so "abc{{ x" yields
[Text("abc"), Text("{{ x")].
"""

from typing import Iterable, List, Optional

from bracetpl.constants import (
    EXPRESSION_CLOSE,
    EXPRESSION_OPEN,
    STATEMENT_CLOSE,
    STATEMENT_OPEN,
)
from bracetpl.core.interfaces.logging import LoggerLikeProtocol
from bracetpl.core.interfaces.lexing import TokenizerProtocol
from bracetpl.core.models import Expression, LexerState, Statement, Text, Token
from bracetpl.logging.helpers import get_logger

_OPENERS = {
    EXPRESSION_OPEN: LexerState.IN_EXPRESSION,
    STATEMENT_OPEN: LexerState.IN_STATEMENT,
}
_CLOSERS = {
    LexerState.IN_EXPRESSION: EXPRESSION_CLOSE,
    LexerState.IN_STATEMENT: STATEMENT_CLOSE,
}
_OPEN_MARKER = {
    LexerState.IN_EXPRESSION: EXPRESSION_OPEN,
    LexerState.IN_STATEMENT: STATEMENT_OPEN,
}


class TemplateTokenizer(TokenizerProtocol):
    """Two-character lookback state machine over a character sequence."""

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('parsing')

    def tokenize(self, chars: Iterable[str]) -> List[Token]:
        """Split *chars* into an ordered list of tokens.

        *chars* may be a string or any iterable of single characters. This
        method never raises for any input.
        """
        tokens: List[Token] = []
        buf: List[str] = []
        state = LexerState.START

        for ch in chars:
            buf.append(ch)
            if len(buf) < 2:
                continue
            window = buf[-2] + buf[-1]

            if state is LexerState.START:
                nxt = _OPENERS.get(window)
                if nxt is None:
                    continue
                text = ''.join(buf[:-2])
                if text:
                    tokens.append(Text(text))
                buf.clear()
                state = nxt
                continue

            if window == _CLOSERS[state]:
                raw = ''.join(buf[:-2])
                if state is LexerState.IN_EXPRESSION:
                    tokens.append(Expression(raw.strip(), raw=raw))
                else:
                    tokens.append(Statement(raw.strip(), raw=raw))
                buf.clear()
                state = LexerState.START

        if state is not LexerState.START:
            self._log.debug('unterminated %s marker flushed as text', _OPEN_MARKER[state])
            tokens.append(Text(_OPEN_MARKER[state] + ''.join(buf)))
        elif buf:
            tokens.append(Text(''.join(buf)))

        return tokens


def tokenize(chars: Iterable[str]) -> List[Token]:
    """Tokenize *chars* with a default :class:`TemplateTokenizer`."""
    return TemplateTokenizer().tokenize(chars)
