#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Runtime wiring, configuration and logging tests for *bracetpl*.
"""
from __future__ import annotations

import io
import json
import logging
import os
import unittest
from unittest.mock import Mock, patch

import bracetpl
from bracetpl import (
    DoubleBraceTemplateEngine,
    EngineBuilder,
    EngineConfig,
    Expression,
    Text,
    build_context,
    build_engine,
)
from bracetpl.logging.factory import DefaultLoggerFactory
from bracetpl.logging.helpers import JsonLogFormatter, get_logger, trace_render
from bracetpl.rendering.factories import (
    DefaultResolverFactory,
    DefaultTokenizerFactory,
    DefaultTokenRendererFactory,
)


class _RecordingLoggerFactory:
    """Logger factory that remembers which scopes were requested."""

    def __init__(self) -> None:
        self.names: list[str] = []

    def get_logger(self, name: str) -> logging.Logger:
        self.names.append(name)
        return get_logger(name)


class _FixedTokenizer:
    def __init__(self, tokens) -> None:
        self._tokens = tokens

    def tokenize(self, chars):
        return list(self._tokens)


# --------------------------------------------------------------------------- #
#  1. Configuration                                                           #
# --------------------------------------------------------------------------- #
class EngineConfigTests(unittest.TestCase):
    def test_defaults_from_empty_env(self) -> None:
        cfg = EngineConfig.from_env({})
        self.assertEqual(cfg, EngineConfig())
        self.assertFalse(cfg.json_logs)
        self.assertEqual(cfg.log_level, logging.INFO)
        self.assertFalse(cfg.trace)

    def test_values_from_env(self) -> None:
        cfg = EngineConfig.from_env({
            "BRACETPL_LOG_JSON": "1",
            "BRACETPL_LOG_LEVEL": "debug",
            "BRACETPL_TRACE": "true",
        })
        self.assertTrue(cfg.json_logs)
        self.assertEqual(cfg.log_level, logging.DEBUG)
        self.assertTrue(cfg.trace)

    def test_numeric_and_unknown_levels(self) -> None:
        self.assertEqual(EngineConfig.from_env({"BRACETPL_LOG_LEVEL": "15"}).log_level, 15)
        self.assertEqual(EngineConfig.from_env({"BRACETPL_LOG_LEVEL": "bogus"}).log_level, logging.INFO)

    def test_reads_process_environment(self) -> None:
        with patch.dict(os.environ, {"BRACETPL_TRACE": "yes"}):
            self.assertTrue(EngineConfig.from_env().trace)


# --------------------------------------------------------------------------- #
#  2. Builder                                                                 #
# --------------------------------------------------------------------------- #
class EngineBuilderTests(unittest.TestCase):
    def test_build_with_defaults(self) -> None:
        lf = _RecordingLoggerFactory()
        engine = EngineBuilder(config=EngineConfig(), logger_factory=lf).build()
        self.assertIsInstance(engine, DoubleBraceTemplateEngine)
        self.assertEqual(engine.render("hi {{ who }}", build_context([("who", "there")])), "hi there")
        self.assertEqual(sorted(lf.names), ["parsing", "render", "resolve", "templates"])

    def test_custom_tokenizer_factory(self) -> None:
        tokens = [Text("x="), Expression("x")]
        builder = EngineBuilder.from_config(EngineConfig())
        builder.logger_factory = _RecordingLoggerFactory()
        builder.tokenizer_factory = DefaultTokenizerFactory(builder=lambda lg: _FixedTokenizer(tokens))
        engine = builder.build()
        self.assertEqual(engine.render("ignored", build_context([("x", 1)])), "x=1")

    def test_custom_resolver_factory(self) -> None:
        resolver = Mock()
        resolver.resolve.return_value = "R"
        builder = EngineBuilder(
            config=EngineConfig(),
            logger_factory=_RecordingLoggerFactory(),
            resolver_factory=DefaultResolverFactory(builder=lambda lg: resolver),
        )
        self.assertEqual(builder.build().render("{{ a.b }}!", build_context([])), "R!")
        resolver.resolve.assert_called_once()
        self.assertEqual(resolver.resolve.call_args[0][0], "a.b")

    def test_trace_flag_reaches_renderer(self) -> None:
        builder = EngineBuilder(
            config=EngineConfig(trace=True),
            logger_factory=_RecordingLoggerFactory(),
        )
        engine = builder.build()
        with self.assertLogs("bracetpl.render", level="DEBUG") as cm:
            engine.render("{{ a }}", build_context([("a", 1)]))
        self.assertTrue(any("expression resolved" in line for line in cm.output))

    def test_renderer_factory_receives_resolver(self) -> None:
        seen = {}

        def _build(resolver, logger):
            seen["resolver"] = resolver
            return DefaultTokenRendererFactory()(resolver, logger)

        builder = EngineBuilder(
            config=EngineConfig(),
            logger_factory=_RecordingLoggerFactory(),
            renderer_factory=DefaultTokenRendererFactory(builder=_build),
        )
        builder.build()
        self.assertIn("resolver", seen)

    def test_build_engine_helper(self) -> None:
        self.assertIsInstance(build_engine(EngineConfig()), DoubleBraceTemplateEngine)


# --------------------------------------------------------------------------- #
#  3. Logging                                                                 #
# --------------------------------------------------------------------------- #
class LoggingTests(unittest.TestCase):
    def test_get_logger_namespacing(self) -> None:
        self.assertEqual(get_logger(None).name, "bracetpl")
        self.assertEqual(get_logger("bracetpl").name, "bracetpl")
        self.assertEqual(get_logger("render").name, "bracetpl.render")
        self.assertEqual(get_logger("bracetpl.x").name, "bracetpl.x")

    def test_json_formatter(self) -> None:
        record = logging.LogRecord("bracetpl.render", logging.INFO, __file__, 1, "hello %s", ("w",), None)
        record.context = {"k": 1}
        payload = json.loads(JsonLogFormatter().format(record))
        self.assertEqual(payload["msg"], "hello w")
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["module"], "bracetpl.render")
        self.assertEqual(payload["version"], bracetpl.__version__)
        self.assertEqual(payload["ctx"], {"k": 1})
        self.assertTrue(payload["ts"].endswith("Z"))

    def test_trace_disabled(self) -> None:
        lg = Mock()
        trace_render(lg, "x", enabled=False, a=1)
        with patch.dict(os.environ, {"BRACETPL_TRACE": "0"}):
            trace_render(lg, "x")
        lg.debug.assert_not_called()

    def test_trace_enabled_from_env(self) -> None:
        lg = Mock()
        with patch.dict(os.environ, {"BRACETPL_TRACE": "1"}):
            trace_render(lg, "x")
        lg.debug.assert_called_once_with("%s", "x")

    def test_logger_factory_json_stream(self) -> None:
        base = logging.getLogger("bracetpl")
        saved = (base.handlers[:], base.propagate, base.level)
        base.handlers.clear()
        buf = io.StringIO()
        try:
            lg = DefaultLoggerFactory(json_logs=True, stream=buf).get_logger("render")
            lg.info("hi")
        finally:
            base.handlers[:] = saved[0]
            base.propagate = saved[1]
            base.setLevel(saved[2])
        payload = json.loads(buf.getvalue().strip().splitlines()[-1])
        self.assertEqual(payload["msg"], "hi")
        self.assertEqual(payload["module"], "bracetpl.render")


if __name__ == "__main__":
    unittest.main(verbosity=2)
