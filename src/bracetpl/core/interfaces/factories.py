# src/bracetpl/core/interfaces/factories.py
"""
core.interfaces.factories – Protocols for DI factories (Tokenizer/Resolver/Renderer).

These protocols standardize the dependency-injection surface so the
EngineBuilder can accept pluggable factories without depending on concrete
implementations.
"""

import logging
from typing import Protocol, runtime_checkable

from bracetpl.core.interfaces.lexing import TokenizerProtocol
from bracetpl.core.interfaces.render import TokenRendererProtocol
from bracetpl.core.interfaces.resolving import ResolverProtocol


@runtime_checkable
class TokenizerFactoryProtocol(Protocol):
    """Factory that builds a TokenizerProtocol."""

    def __call__(self, logger: logging.Logger) -> TokenizerProtocol:  # pragma: no cover - interface
        ...


@runtime_checkable
class ResolverFactoryProtocol(Protocol):
    """Factory that builds a ResolverProtocol."""

    def __call__(self, logger: logging.Logger) -> ResolverProtocol:  # pragma: no cover - interface
        ...


@runtime_checkable
class TokenRendererFactoryProtocol(Protocol):
    """Factory that builds a TokenRendererProtocol on top of a resolver."""

    def __call__(
        self,
        resolver: ResolverProtocol,
        logger: logging.Logger,
    ) -> TokenRendererProtocol:  # pragma: no cover - interface
        ...
