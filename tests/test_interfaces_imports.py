def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import bracetpl.core.interfaces as I

    assert hasattr(I, "RenderStrategyProtocol")
    assert hasattr(I, "TokenizerProtocol")
    assert hasattr(I, "ResolverProtocol")
    assert hasattr(I, "TokenRendererProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "TokenizerFactoryProtocol")
    assert hasattr(I, "ResolverFactoryProtocol")
    assert hasattr(I, "TokenRendererFactoryProtocol")


def test_default_implementations_satisfy_protocols():
    import logging

    from bracetpl.core.interfaces import (
        LoggerLikeProtocol,
        RenderStrategyProtocol,
        ResolverProtocol,
        TokenizerProtocol,
        TokenRendererProtocol,
    )
    from bracetpl.parsing.tokenizer import TemplateTokenizer
    from bracetpl.rendering.path_resolver import PathResolver
    from bracetpl.rendering.renderer import TokenRenderer
    from bracetpl.rendering.template_engine import DoubleBraceTemplateEngine

    assert isinstance(TemplateTokenizer(), TokenizerProtocol)
    assert isinstance(PathResolver(), ResolverProtocol)
    assert isinstance(TokenRenderer(), TokenRendererProtocol)
    assert isinstance(DoubleBraceTemplateEngine(), RenderStrategyProtocol)
    assert isinstance(logging.getLogger("bracetpl"), LoggerLikeProtocol)


def test_core_reexports():
    import bracetpl.core as C

    for name in C.__all__:
        assert hasattr(C, name), name
