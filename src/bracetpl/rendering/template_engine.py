"""
template_engine – Concrete RenderStrategyProtocol implementation for bracetpl.

This module provides the default double-brace engine: the template is
tokenized by a TokenizerProtocol and the tokens are rendered by a
TokenRendererProtocol against a Context.

  • {{ name }}        → display text of the value addressed by "name"
  • {{ a.b.c }}       → nested lookup through sub-contexts
  • {% anything %}    → written back unchanged (statements are not executed)
  • unterminated {{   → kept literally
"""

from typing import Callable, List, Optional

from bracetpl.core.context import Context
from bracetpl.core.errors import UnresolvedKeyError
from bracetpl.core.interfaces.logging import LoggerLikeProtocol
from bracetpl.core.interfaces.lexing import TokenizerProtocol
from bracetpl.core.interfaces.render import TokenRendererProtocol
from bracetpl.core.interfaces.templating import RenderStrategyProtocol
from bracetpl.core.models import RenderResult, Token
from bracetpl.logging.helpers import get_logger
from bracetpl.parsing.tokenizer import TemplateTokenizer
from bracetpl.rendering.renderer import TokenRenderer


class DoubleBraceTemplateEngine(RenderStrategyProtocol):
    """Tokenize-then-render engine for ``{{ }}`` / ``{% %}`` templates."""

    def __init__(
        self,
        *,
        tokenizer: Optional[TokenizerProtocol] = None,
        renderer: Optional[TokenRendererProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('templates')
        self._tokenizer = tokenizer or TemplateTokenizer()
        self._renderer = renderer or TokenRenderer()

    def tokenize(self, template: str) -> List[Token]:
        """Return the token sequence of *template*."""
        return self._tokenizer.tokenize(template)

    def render(self, template: str, context: Context) -> str:  # type: ignore[override]
        """Render *template* against *context*.

        Raises:
            UnresolvedKeyError: an expression names a missing or non-scalar value.
        """
        tokens = self._tokenizer.tokenize(template)
        self._log.debug('rendering %d tokens', len(tokens))
        return self._renderer.render_tokens(tokens, context)

    def safe_render(self, template: str, context: Context) -> RenderResult:
        """Render *template* without raising on unresolved keys."""
        try:
            return RenderResult(text=self.render(template, context))
        except UnresolvedKeyError as exc:
            self._log.warning('template rendering failed: %s', exc)
            return RenderResult(error=exc)

    @property
    def strategy(self) -> Callable[[str, Context], str]:
        """Return this engine as a bare ``(template, context) -> text`` callable."""
        return lambda tpl, ctx: self.render(tpl, ctx)
