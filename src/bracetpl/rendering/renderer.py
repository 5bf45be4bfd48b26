"""
Renderer component for bracetpl.

This module provides:
  • TokenRendererProtocol – DI-friendly interface (from core.interfaces.render).
  • TokenRenderer         – single pass over a token sequence.

Notes
-----
• Text tokens are copied verbatim.
• Expression names are resolved through a ResolverProtocol; an unresolved
  name aborts the whole render with UnresolvedKeyError, so a missing key is
  never confused with a value that is genuinely an empty string.
• Statement tokens are not evaluated: their original '{% ... %}' span is
  written back unchanged.
"""

from typing import Iterable, List, Optional

from bracetpl.core.context import Context
from bracetpl.core.interfaces.logging import LoggerLikeProtocol
from bracetpl.core.interfaces.render import TokenRendererProtocol
from bracetpl.core.interfaces.resolving import ResolverProtocol
from bracetpl.core.models import Expression, Statement, Text, Token
from bracetpl.logging.helpers import get_logger, trace_render
from bracetpl.rendering.path_resolver import PathResolver


class TokenRenderer(TokenRendererProtocol):
    """Concatenate literal text and resolved expressions."""

    def __init__(
        self,
        *,
        resolver: Optional[ResolverProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
        trace: Optional[bool] = None,
    ) -> None:
        self._resolver = resolver or PathResolver()
        self._log = logger or get_logger('render')
        self._trace = trace

    def render_tokens(self, tokens: Iterable[Token], root: Context) -> str:
        """Render *tokens* against *root*.

        Raises:
            UnresolvedKeyError: an expression could not be resolved.
        """
        out: List[str] = []
        for tok in tokens:
            if isinstance(tok, Text):
                out.append(tok.content)
            elif isinstance(tok, Expression):
                value = self._resolver.resolve(tok.name, root)
                trace_render(self._log, 'expression resolved', enabled=self._trace, name=tok.name, value=value)
                out.append(value)
            elif isinstance(tok, Statement):
                trace_render(self._log, 'statement passed through', enabled=self._trace, name=tok.name)
                out.append(tok.source())
            else:
                raise TypeError(f'unsupported token type: {type(tok).__name__}')
        return ''.join(out)


def render_tokens(tokens: Iterable[Token], root: Context) -> str:
    """Render *tokens* with a default :class:`TokenRenderer`."""
    return TokenRenderer().render_tokens(tokens, root)
