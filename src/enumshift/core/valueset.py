"""
Typed value sets: a closed Enum plus the primitive values it replaces.

A parameter that used to take ``"partial"`` or ``"full"`` gets a strongly
typed replacement::

    @typed_value_set
    class RefundMode(str, Enum):
        PARTIAL = "partial"
        FULL = "full"

The ``ValueSet`` descriptor built for the enum is what coercion, call sites
and dispatchers work against. Building it validates the enum once, at class
definition time, so a broken value set never reaches a caller.

Manifesto:
    - **Closed set:** Members are fixed when the class body runs
    - **One-to-one backing values:** Aliases would make coercion ambiguous
    - **One primitive type:** A value set is all ``str`` or all ``int``
    - **No bools:** ``True == 1`` would let a flag masquerade as a member

Architecture:
    ::

        ┌───────────────────────────────────────────────────────────┐
        │                    ValueSet[E]                             │
        ├───────────────────────────────────────────────────────────┤
        │  enum_cls        type[E]                                   │
        │  members         (E.PARTIAL, E.FULL)   definition order    │
        │  backing_type    str | int                                 │
        │  backing_values  frozenset({"partial", "full"})            │
        ├───────────────────────────────────────────────────────────┤
        │  lookup(value) -> E | None      exact match only           │
        │  to_dict()     -> {"PARTIAL": "partial", ...}              │
        └───────────────────────────────────────────────────────────┘

Examples:
    >>> class Mode(str, Enum):
    ...     PARTIAL = "partial"
    ...     FULL = "full"
    >>> vs = value_set(Mode)
    >>> vs.lookup("full")
    <Mode.FULL: 'full'>
    >>> vs.lookup("FULL") is None
    True
    >>> len(vs)
    2

Guardrails:
    ❌ DON'T: Give two members the same value (Enum makes the second an alias)
    ✅ DO: One distinct backing value per member

    ❌ DON'T: Mix ``"1"`` and ``1`` in one enum
    ✅ DO: Pick the primitive type the old API accepted

Tags:
    enum, value-set, typed-enum, expand-contract, enumshift

Doc-Types:
    - API Reference
    - Migration Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Iterator, TypeVar

from enumshift.core.errors import ValueSetDefinitionError
from enumshift.core.logging import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)

BACKING_TYPES: tuple[type, ...] = (str, int)

_value_sets: dict[type[Enum], ValueSet[Any]] = {}


def is_backing_value(value: Any) -> bool:
    """True for plain ``str``/``int`` values (no bools, no enum members)."""
    return (
        isinstance(value, BACKING_TYPES)
        and not isinstance(value, bool)
        and not isinstance(value, Enum)
    )


@dataclass(frozen=True)
class ValueSet(Generic[E]):
    """
    Validated view over a typed enum.

    Build with :func:`value_set`; the constructor does not validate.
    """

    enum_cls: type[E]
    members: tuple[E, ...]
    backing_type: type
    _by_value: dict[Any, E] = field(repr=False, compare=False)

    @property
    def name(self) -> str:
        return self.enum_cls.__name__

    @property
    def backing_values(self) -> frozenset[Any]:
        return frozenset(self._by_value)

    def lookup(self, value: Any) -> E | None:
        """Exact lookup of a backing value; ``None`` if nothing matches."""
        if not is_backing_value(value) or not isinstance(value, self.backing_type):
            return None
        return self._by_value.get(value)

    def to_dict(self) -> dict[str, Any]:
        """Member name -> backing value, in definition order."""
        return {m.name: m.value for m in self.members}

    def __contains__(self, value: object) -> bool:
        if isinstance(value, self.enum_cls):
            return True
        return self.lookup(value) is not None

    def __iter__(self) -> Iterator[E]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)


def _build(enum_cls: type[E]) -> ValueSet[E]:
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise ValueSetDefinitionError(f"{enum_cls!r} is not an Enum class")

    name = enum_cls.__name__
    members = tuple(enum_cls)
    if not members:
        raise ValueSetDefinitionError(f"{name} has no members").with_context(enum=name)

    aliases = [alias for alias, m in enum_cls.__members__.items() if m.name != alias]
    if aliases:
        raise ValueSetDefinitionError(
            f"{name} has aliased members (duplicate backing values): {', '.join(aliases)}"
        ).with_context(enum=name)

    backing_types = set()
    for member in members:
        value = member.value
        if isinstance(value, bool) or not isinstance(value, BACKING_TYPES):
            raise ValueSetDefinitionError(
                f"{name}.{member.name} has backing value {value!r}; expected str or int"
            ).with_context(enum=name)
        backing_types.add(str if isinstance(value, str) else int)

    if len(backing_types) > 1:
        raise ValueSetDefinitionError(
            f"{name} mixes str and int backing values"
        ).with_context(enum=name)

    return ValueSet(
        enum_cls=enum_cls,
        members=members,
        backing_type=backing_types.pop(),
        _by_value={m.value: m for m in members},
    )


def value_set(enum_cls: type[E]) -> ValueSet[E]:
    """Validate ``enum_cls`` and return its (cached) ValueSet.

    Raises:
        ValueSetDefinitionError: enum is empty, aliased, or has bad backing values
    """
    cached = _value_sets.get(enum_cls)
    if cached is not None:
        return cached
    vs = _build(enum_cls)
    _value_sets[enum_cls] = vs
    logger.debug(
        "value_set_registered",
        enum=vs.name,
        members=len(vs),
        backing_type=vs.backing_type.__name__,
    )
    return vs


def typed_value_set(enum_cls: type[E]) -> type[E]:
    """Class decorator: validate the enum at definition time and return it unchanged."""
    value_set(enum_cls)
    return enum_cls


__all__ = [
    "ValueSet",
    "value_set",
    "typed_value_set",
    "is_backing_value",
]
