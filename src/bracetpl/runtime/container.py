from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from bracetpl.core.interfaces.factories import (
    ResolverFactoryProtocol,
    TokenizerFactoryProtocol,
    TokenRendererFactoryProtocol,
)
from bracetpl.core.interfaces.logging import LoggerFactoryProtocol
from bracetpl.logging.factory import DefaultLoggerFactory
from bracetpl.rendering.factories import (
    DefaultResolverFactory,
    DefaultTokenizerFactory,
    DefaultTokenRendererFactory,
)
from bracetpl.rendering.template_engine import DoubleBraceTemplateEngine

_TRUTHY = {'1', 'true', 'yes', 'on'}


def _env_flag(env: Mapping[str, str], key: str) -> bool:
    return (env.get(key) or '').strip().lower() in _TRUTHY


def _env_level(env: Mapping[str, str], key: str, default: int) -> int:
    raw = (env.get(key) or '').strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class EngineConfig:
    """Immutable configuration blob used to seed the EngineBuilder."""
    json_logs: bool = False
    log_level: int = logging.INFO
    trace: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'EngineConfig':
        """Read BRACETPL_LOG_JSON, BRACETPL_LOG_LEVEL and BRACETPL_TRACE."""
        env = os.environ if env is None else env
        return cls(
            json_logs=_env_flag(env, 'BRACETPL_LOG_JSON'),
            log_level=_env_level(env, 'BRACETPL_LOG_LEVEL', logging.INFO),
            trace=_env_flag(env, 'BRACETPL_TRACE'),
        )


@dataclass
class EngineBuilder:
    """Composable builder that wires default factories into a DoubleBraceTemplateEngine."""
    config: EngineConfig

    # Optional factory overrides / DI hooks
    logger_factory: Optional[LoggerFactoryProtocol] = None
    tokenizer_factory: Optional[TokenizerFactoryProtocol] = None
    resolver_factory: Optional[ResolverFactoryProtocol] = None
    renderer_factory: Optional[TokenRendererFactoryProtocol] = None

    @classmethod
    def from_config(cls, cfg: EngineConfig) -> 'EngineBuilder':
        """Build a new EngineBuilder from a single EngineConfig."""
        return cls(config=cfg)

    def build(self) -> DoubleBraceTemplateEngine:
        """Assemble the engine, falling back to default factories."""
        cfg = self.config
        lf = self.logger_factory or DefaultLoggerFactory(json_logs=cfg.json_logs, level=cfg.log_level)
        tok_f = self.tokenizer_factory or DefaultTokenizerFactory()
        res_f = self.resolver_factory or DefaultResolverFactory()
        ren_f = self.renderer_factory or DefaultTokenRendererFactory(trace=cfg.trace)

        tokenizer = tok_f(lf.get_logger('parsing'))
        resolver = res_f(lf.get_logger('resolve'))
        renderer = ren_f(resolver, lf.get_logger('render'))
        return DoubleBraceTemplateEngine(
            tokenizer=tokenizer,
            renderer=renderer,
            logger=lf.get_logger('templates'),
        )


def build_engine(cfg: Optional[EngineConfig] = None) -> DoubleBraceTemplateEngine:
    """Build an engine from *cfg* or from the environment."""
    return EngineBuilder.from_config(cfg or EngineConfig.from_env()).build()
