"""
rendering.factories – Default DI factories for Tokenizer, Resolver and TokenRenderer.

These classes are thin facades around the concrete implementations so
callers can inject them via Protocol-based factories without importing
implementation details at the composition sites.
"""

import logging
from typing import Callable, Optional

from bracetpl.core.interfaces.factories import (
    ResolverFactoryProtocol,
    TokenizerFactoryProtocol,
    TokenRendererFactoryProtocol,
)
from bracetpl.core.interfaces.lexing import TokenizerProtocol
from bracetpl.core.interfaces.render import TokenRendererProtocol
from bracetpl.core.interfaces.resolving import ResolverProtocol
from bracetpl.parsing.tokenizer import TemplateTokenizer
from bracetpl.rendering.path_resolver import PathResolver
from bracetpl.rendering.renderer import TokenRenderer


class DefaultTokenizerFactory(TokenizerFactoryProtocol):
    """Default factory for TokenizerProtocol.

    Example:
        >>> factory = DefaultTokenizerFactory()
        >>> tokenizer = factory(logger)
    """

    def __init__(self, builder: Optional[Callable[[logging.Logger], TokenizerProtocol]] = None) -> None:
        self._builder = builder or (lambda lg: TemplateTokenizer(logger=lg))

    def __call__(self, logger: logging.Logger) -> TokenizerProtocol:  # type: ignore[override]
        return self._builder(logger)


class DefaultResolverFactory(ResolverFactoryProtocol):
    """Default factory for ResolverProtocol."""

    def __init__(self, builder: Optional[Callable[[logging.Logger], ResolverProtocol]] = None) -> None:
        self._builder = builder or (lambda lg: PathResolver(logger=lg))

    def __call__(self, logger: logging.Logger) -> ResolverProtocol:  # type: ignore[override]
        return self._builder(logger)


class DefaultTokenRendererFactory(TokenRendererFactoryProtocol):
    """Default factory for TokenRendererProtocol.

    Example:
        >>> factory = DefaultTokenRendererFactory(trace=True)
        >>> renderer = factory(resolver, logger)
    """

    def __init__(
        self,
        builder: Optional[
            Callable[[ResolverProtocol, logging.Logger], TokenRendererProtocol]
        ] = None,
        *,
        trace: Optional[bool] = None,
    ) -> None:
        self._trace = trace
        self._builder = builder or self._default_builder

    def _default_builder(self, resolver: ResolverProtocol, logger: logging.Logger) -> TokenRendererProtocol:
        return TokenRenderer(resolver=resolver, logger=logger, trace=self._trace)

    def __call__(  # type: ignore[override]
        self,
        resolver: ResolverProtocol,
        logger: logging.Logger,
    ) -> TokenRendererProtocol:
        return self._builder(resolver, logger)
