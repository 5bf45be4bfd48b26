from __future__ import annotations
"""
Dotted-path resolver.

A path such as ``"a map.nested.nested nested"`` is split on '.' and walked
iteratively from the root context: every non-terminal segment must name a
sub-context, the terminal segment must name a scalar value. Segments are used
verbatim, so names may contain spaces.
"""

import logging
from typing import Optional

from bracetpl.constants import PATH_SEP
from bracetpl.core.context import Context, TemplateVariable
from bracetpl.core.errors import (
    REASON_CONTEXT_AT_TERMINAL,
    REASON_MISSING,
    REASON_NOT_A_CONTEXT,
    UnresolvedKeyError,
)
from bracetpl.core.interfaces.resolving import ResolverProtocol
from bracetpl.logging.helpers import get_logger


class PathResolver(ResolverProtocol):
    """Resolve dotted names against a :class:`Context` tree."""

    def __init__(self, *, separator: str = PATH_SEP, logger: Optional[logging.Logger] = None) -> None:
        self._sep = separator
        self._log = logger or get_logger('resolve')

    def lookup(self, path: str, root: Context) -> TemplateVariable:
        """Walk *path* from *root* and return the scalar variable it names.

        Raises:
            UnresolvedKeyError: a segment is missing, a non-terminal segment is
                not a sub-context, or the terminal segment is a sub-context.
        """
        segments = path.split(self._sep)
        current = root
        for seg in segments[:-1]:
            var = current.get(seg)
            if var is None:
                raise UnresolvedKeyError(path, seg, REASON_MISSING)
            if not var.is_context:
                raise UnresolvedKeyError(path, seg, REASON_NOT_A_CONTEXT)
            current = var.value

        last = segments[-1]
        var = current.get(last)
        if var is None:
            raise UnresolvedKeyError(path, last, REASON_MISSING)
        if var.is_context:
            raise UnresolvedKeyError(path, last, REASON_CONTEXT_AT_TERMINAL)
        return var

    def resolve(self, path: str, root: Context) -> str:
        """Return the display text of the value addressed by *path*."""
        return self.lookup(path, root).to_text()


# Public default.
DefaultPathResolver = PathResolver


def resolve(path: str, root: Context) -> str:
    """Resolve *path* against *root* with a default :class:`PathResolver`."""
    return PathResolver().resolve(path, root)
