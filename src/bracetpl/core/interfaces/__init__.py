from .factories import (
    ResolverFactoryProtocol,
    TokenizerFactoryProtocol,
    TokenRendererFactoryProtocol,
)
from .lexing import TokenizerProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .render import TokenRendererProtocol
from .resolving import ResolverProtocol
from .templating import RenderStrategyProtocol

__all__ = [
    'ResolverFactoryProtocol',
    'TokenizerFactoryProtocol',
    'TokenRendererFactoryProtocol',
    'TokenizerProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'TokenRendererProtocol',
    'ResolverProtocol',
    'RenderStrategyProtocol',
]
