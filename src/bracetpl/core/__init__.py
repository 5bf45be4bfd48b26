from __future__ import annotations

"""Public surface for bracetpl.core.

This module exposes the value model, token model, errors and protocol types
from a single stable import location:

    from bracetpl.core import Context, Expression, UnresolvedKeyError, ...
"""

from bracetpl.core.context import (
    Context,
    Pair,
    TemplateVariable,
    VariableKind,
    build_context,
    format_double,
    pair,
)
from bracetpl.core.errors import BracetplError, UnresolvedKeyError, VariableTypeError
from bracetpl.core.interfaces import (
    RenderStrategyProtocol,
    ResolverProtocol,
    TokenizerProtocol,
    TokenRendererProtocol,
)
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

__all__ = [
    # Value model
    "Context",
    "Pair",
    "TemplateVariable",
    "VariableKind",
    "build_context",
    "format_double",
    "pair",
    # Errors
    "BracetplError",
    "UnresolvedKeyError",
    "VariableTypeError",
    # Protocols
    "RenderStrategyProtocol",
    "ResolverProtocol",
    "TokenizerProtocol",
    "TokenRendererProtocol",
    # Tokens
    "Expression",
    "LexerState",
    "RenderResult",
    "Statement",
    "Text",
    "Token",
    "TokenKind",
    "reconstruct",
]
