from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from bracetpl.core.models import Token


@runtime_checkable
class TokenizerProtocol(Protocol):
    """Splits template text into Text / Expression / Statement tokens."""

    def tokenize(self, chars: Iterable[str]) -> List["Token"]:
        """Return the ordered token sequence for *chars*; never raises."""
        ...
