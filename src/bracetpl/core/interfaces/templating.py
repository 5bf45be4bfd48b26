from __future__ import annotations
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from bracetpl.core.context import Context


@runtime_checkable
class RenderStrategyProtocol(Protocol):
    """Anything that renders a template string against a Context."""

    def render(self, template: str, context: "Context") -> str:
        ...
