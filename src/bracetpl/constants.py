from __future__ import annotations

"""Project-wide constants used across modules.

Marker strings are fixed; the tokenizer does not accept custom delimiters.
"""

EXPRESSION_OPEN: str = '{{'
EXPRESSION_CLOSE: str = '}}'
STATEMENT_OPEN: str = '{%'
STATEMENT_CLOSE: str = '%}'

# Path separator used by the resolver for nested contexts.
PATH_SEP: str = '.'

# Inclusive bounds of the Integer variable kind (signed 64-bit).
INT_MIN: int = -(2 ** 63)
INT_MAX: int = 2 ** 63 - 1
