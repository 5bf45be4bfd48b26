from __future__ import annotations

"""
context – Typed variable store used to resolve template expressions.

This module provides:
  • VariableKind      – the six kinds a stored value can take.
  • TemplateVariable  – one typed value (exactly one kind active).
  • Context           – read-only mapping name → TemplateVariable, possibly
                        holding nested contexts (SubContext values).
  • Pair / pair()     – name/value pairs used to build a Context, inferring
                        the variable kind from the Python type.
  • build_context()   – build a Context from a list of pairs.

Contexts are built once and never mutated afterwards, so a single instance
can be shared across renders (and threads) without locking.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, Optional, Union

from bracetpl.constants import INT_MAX, INT_MIN
from bracetpl.core.errors import VariableTypeError
from bracetpl.logging.helpers import get_logger

if TYPE_CHECKING:
    from bracetpl.core.interfaces.logging import LoggerLikeProtocol


class VariableKind(Enum):
    BOOLEAN = auto()
    INTEGER = auto()
    DOUBLE = auto()
    STRING = auto()
    DISPLAYABLE = auto()
    SUB_CONTEXT = auto()


def format_double(value: float) -> str:
    """Render *value* in its natural base-10 form.

    The shortest round-trip digits are used and never an exponent, so
    ``1.2`` stays ``"1.2"``, ``1e20`` becomes ``"100000000000000000000"`` and
    integral values drop the fractional part (``2.0`` → ``"2"``).
    """
    if value != value:
        return 'NaN'
    if value in (float('inf'), float('-inf')):
        return 'inf' if value > 0 else '-inf'
    dec = Decimal(repr(value))
    if value.is_integer():
        dec = dec.to_integral_value()
    return format(dec, 'f')


@dataclass(frozen=True)
class TemplateVariable:
    """A single typed value stored in a :class:`Context`.

    Use the kind-specific constructors (``boolean``, ``integer``, ...) or
    :meth:`of` to infer the kind from a Python value.
    """

    kind: VariableKind
    value: Any

    # Constructors -----------------------------------------------------------

    @classmethod
    def boolean(cls, value: bool) -> 'TemplateVariable':
        if not isinstance(value, bool):
            raise VariableTypeError(f'Boolean expects a bool, got {type(value).__name__}')
        return cls(VariableKind.BOOLEAN, value)

    @classmethod
    def integer(cls, value: int) -> 'TemplateVariable':
        if isinstance(value, bool) or not isinstance(value, int):
            raise VariableTypeError(f'Integer expects an int, got {type(value).__name__}')
        if not INT_MIN <= value <= INT_MAX:
            raise ValueError(f'Integer {value} is outside the signed 64-bit range')
        return cls(VariableKind.INTEGER, value)

    @classmethod
    def double(cls, value: float) -> 'TemplateVariable':
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise VariableTypeError(f'Double expects a float, got {type(value).__name__}')
        return cls(VariableKind.DOUBLE, float(value))

    @classmethod
    def string(cls, value: str) -> 'TemplateVariable':
        if not isinstance(value, str):
            raise VariableTypeError(f'String expects a str, got {type(value).__name__}')
        return cls(VariableKind.STRING, value)

    @classmethod
    def displayable(cls, value: Any) -> 'TemplateVariable':
        """Wrap any object; its ``str()`` conversion is used when rendered."""
        return cls(VariableKind.DISPLAYABLE, value)

    @classmethod
    def sub_context(cls, value: Union['Context', Mapping]) -> 'TemplateVariable':
        if isinstance(value, Context):
            return cls(VariableKind.SUB_CONTEXT, value)
        if isinstance(value, Mapping):
            return cls(VariableKind.SUB_CONTEXT, Context.from_mapping(value))
        raise VariableTypeError(f'SubContext expects a Context, got {type(value).__name__}')

    @classmethod
    def of(cls, value: Any) -> 'TemplateVariable':
        """Infer the variable kind from the Python type of *value*.

        ``bool`` is checked before ``int`` since it is a subclass of it.
        Objects that are not a scalar, a string or a mapping are stored as
        displayable values.
        """
        if isinstance(value, TemplateVariable):
            return value
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, int):
            return cls.integer(value)
        if isinstance(value, float):
            return cls.double(value)
        if isinstance(value, str):
            return cls.string(value)
        if isinstance(value, (Context, Mapping)):
            return cls.sub_context(value)
        return cls.displayable(value)

    # Accessors --------------------------------------------------------------

    @property
    def is_context(self) -> bool:
        return self.kind is VariableKind.SUB_CONTEXT

    def to_text(self) -> str:
        """Return the display text of a scalar value.

        Raises:
            VariableTypeError: if this variable holds a sub-context.
        """
        if self.kind is VariableKind.BOOLEAN:
            return 'true' if self.value else 'false'
        if self.kind is VariableKind.INTEGER:
            return str(self.value)
        if self.kind is VariableKind.DOUBLE:
            return format_double(self.value)
        if self.kind is VariableKind.STRING:
            return self.value
        if self.kind is VariableKind.DISPLAYABLE:
            return str(self.value)
        raise VariableTypeError('a sub-context has no text form')


@dataclass(frozen=True)
class Pair:
    """A name bound to a typed value, the unit a Context is built from."""

    name: str
    value: TemplateVariable


def pair(name: str, value: Any) -> Pair:
    """Build a :class:`Pair`, inferring the variable kind from *value*."""
    if not isinstance(name, str):
        raise VariableTypeError(f'variable names must be str, got {type(name).__name__}')
    return Pair(name, TemplateVariable.of(value))


class Context(Mapping):
    """Read-only mapping from names to :class:`TemplateVariable` values."""

    __slots__ = ('_vars',)

    def __init__(self, variables: Optional[Mapping[str, Any]] = None) -> None:
        # Raw Python values are coerced so lookups only ever see TemplateVariable.
        self._vars: Dict[str, TemplateVariable] = {}
        for name, value in (variables or {}).items():
            if not isinstance(name, str):
                raise VariableTypeError(f'variable names must be str, got {type(name).__name__}')
            self._vars[name] = TemplateVariable.of(value)

    @classmethod
    def with_pairs(cls, pairs: Iterable[Pair], *, logger: Optional[LoggerLikeProtocol] = None) -> 'Context':
        """Build a context from *pairs*; a repeated name overwrites the earlier value."""
        log = logger or get_logger('context')
        variables: Dict[str, TemplateVariable] = {}
        for item in pairs:
            if item.name in variables:
                log.debug('duplicate variable %r overwritten', item.name)
            variables[item.name] = item.value
        return cls(variables)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> 'Context':
        """Build a context from a plain mapping, converting nested mappings."""
        return cls.with_pairs(pair(k, v) for k, v in mapping.items())

    def __getitem__(self, name: str) -> TemplateVariable:
        return self._vars[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f'Context({self._vars!r})'


def build_context(pairs: Iterable[Union[Pair, tuple]]) -> Context:
    """Build a :class:`Context` from pairs or ``(name, value)`` tuples.

    Later pairs with a duplicate name overwrite earlier ones.
    """
    normalized = (p if isinstance(p, Pair) else pair(*p) for p in pairs)
    return Context.with_pairs(normalized)
