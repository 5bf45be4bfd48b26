from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, Optional, Union

from bracetpl.constants import EXPRESSION_CLOSE, EXPRESSION_OPEN, STATEMENT_CLOSE, STATEMENT_OPEN
from bracetpl.core.context import Context, Pair, TemplateVariable, VariableKind, build_context, pair
from bracetpl.core.errors import BracetplError, UnresolvedKeyError, VariableTypeError
from bracetpl.core.interfaces.templating import RenderStrategyProtocol
from bracetpl.core.models import (
    Expression,
    LexerState,
    RenderResult,
    Statement,
    Text,
    Token,
    TokenKind,
    reconstruct,
)
from bracetpl.logging.helpers import get_logger
from bracetpl.parsing.tokenizer import TemplateTokenizer, tokenize
from bracetpl.rendering.path_resolver import DefaultPathResolver, PathResolver, resolve
from bracetpl.rendering.renderer import TokenRenderer, render_tokens
from bracetpl.rendering.template_engine import DoubleBraceTemplateEngine
from bracetpl.runtime.container import EngineBuilder, EngineConfig, build_engine

__version__ = '0.1.0'

Strategy = Union[RenderStrategyProtocol, Callable[[str, Context], str]]

_log = get_logger('templates')


def _as_context(context: Union[Context, Mapping]) -> Context:
    return context if isinstance(context, Context) else Context.from_mapping(context)


def render(template: str, context: Union[Context, Mapping], strategy: Optional[Strategy] = None) -> str:
    """Render *template* against *context* using *strategy*.

    *strategy* may be any RenderStrategyProtocol implementation or a bare
    ``(template, context) -> text`` callable; the default double-brace engine
    is used when omitted. Plain mappings are converted to a Context first.

    Raises:
        UnresolvedKeyError: (default engine) an expression cannot be resolved.
    """
    ctx = _as_context(context)
    if strategy is None:
        return DoubleBraceTemplateEngine().render(template, ctx)
    if isinstance(strategy, RenderStrategyProtocol):
        return strategy.render(template, ctx)
    return strategy(template, ctx)


def safe_render(template: str, context: Union[Context, Mapping], strategy: Optional[Strategy] = None) -> RenderResult:
    """Like :func:`render` but report unresolved keys in a RenderResult."""
    try:
        return RenderResult(text=render(template, context, strategy))
    except UnresolvedKeyError as exc:
        _log.warning('template rendering failed: %s', exc)
        return RenderResult(error=exc)


__all__ = [
    'EXPRESSION_OPEN',
    'EXPRESSION_CLOSE',
    'STATEMENT_OPEN',
    'STATEMENT_CLOSE',
    'Context',
    'Pair',
    'TemplateVariable',
    'VariableKind',
    'build_context',
    'pair',
    'BracetplError',
    'UnresolvedKeyError',
    'VariableTypeError',
    'RenderStrategyProtocol',
    'Expression',
    'LexerState',
    'RenderResult',
    'Statement',
    'Text',
    'Token',
    'TokenKind',
    'reconstruct',
    'TemplateTokenizer',
    'tokenize',
    'DefaultPathResolver',
    'PathResolver',
    'resolve',
    'TokenRenderer',
    'render_tokens',
    'DoubleBraceTemplateEngine',
    'EngineBuilder',
    'EngineConfig',
    'build_engine',
    'render',
    'safe_render',
]
