from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from bracetpl.core.context import Context
    from bracetpl.core.models import Token


@runtime_checkable
class TokenRendererProtocol(Protocol):
    """Turns an already tokenized template into output text."""

    def render_tokens(self, tokens: Iterable["Token"], root: "Context") -> str:
        ...
