from __future__ import annotations
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from bracetpl.core.context import Context, TemplateVariable


@runtime_checkable
class ResolverProtocol(Protocol):
    """Translates a dotted name into display text using a Context tree."""

    def lookup(self, path: str, root: "Context") -> "TemplateVariable":
        """Return the scalar variable addressed by *path*."""
        ...

    def resolve(self, path: str, root: "Context") -> str:
        """Return the display text of the value addressed by *path*."""
        ...
