"""
Coercion of primitive values into typed enum members.

``coerce`` is the single conversion point between the loosely typed world
(``"partial"``) and the typed one (``RefundMode.PARTIAL``):

- a member of the target enum is returned unchanged
- a backing value returns the one member that owns it
- anything else raises ``InvalidInputError``

There is no fuzzy matching. ``"Partial"``, ``" partial"``, ``"PARTIAL"``
(the member name), ``"1"`` for an int-backed enum and ``True`` for ``1`` are
all rejected. Explicit input is the whole point of the migration.

Architecture:
    ::

        value ──► classify() ──► Typed(member)   ──► member
                       │
                       └──────► Primitive(value) ──► ValueSet.lookup()
                                                        │
                                           member ◄─────┴────► InvalidInputError

Examples:
    >>> class Mode(str, Enum):
    ...     PARTIAL = "partial"
    ...     FULL = "full"
    >>> coerce("partial", Mode)
    <Mode.PARTIAL: 'partial'>
    >>> coerce(Mode.FULL, Mode)
    <Mode.FULL: 'full'>
    >>> try_coerce("bogus", Mode).is_err()
    True

Tags:
    coercion, enum, validation, expand-contract, enumshift

Doc-Types:
    - API Reference
    - Migration Guide
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BeforeValidator

from enumshift.core.errors import InvalidInputError
from enumshift.core.logging import get_logger
from enumshift.core.result import Err, Ok, Result
from enumshift.core.valueset import ValueSet, is_backing_value, value_set

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True, slots=True)
class Typed(Generic[E]):
    """Boundary value that already is a member of the target enum."""

    member: E


@dataclass(frozen=True, slots=True)
class Primitive:
    """Boundary value given as a raw backing value (``str``/``int``)."""

    value: str | int


BoundaryValue = Typed[E] | Primitive


def _reject(value: Any, vs: ValueSet[Any], reason: str | None = None) -> InvalidInputError:
    logger.debug(
        "coercion_failed",
        enum=vs.name,
        value=repr(value),
        reason=reason,
    )
    return InvalidInputError(
        value,
        enum_name=vs.name,
        allowed=vs.backing_values,
        reason=reason,
    )


def _reason_for(value: Any, vs: ValueSet[Any]) -> str | None:
    if isinstance(value, bool):
        return "bool is not a backing value"
    if isinstance(value, Enum):
        return f"member of {type(value).__name__}, not {vs.name}"
    if not isinstance(value, vs.backing_type):
        return f"expected {vs.backing_type.__name__}, got {type(value).__name__}"
    return None


def classify(value: Any, enum_cls: type[E]) -> BoundaryValue[E]:
    """
    Resolve the "member or primitive" union into one of its two forms.

    Raises:
        InvalidInputError: ``value`` is neither a member of ``enum_cls`` nor a
            ``str``/``int`` primitive
    """
    if isinstance(value, enum_cls):
        return Typed(value)
    if is_backing_value(value):
        return Primitive(value)
    vs = value_set(enum_cls)
    raise _reject(value, vs, _reason_for(value, vs))


def coerce(value: Any, enum_cls: type[E]) -> E:
    """
    Convert ``value`` into a member of ``enum_cls``.

    Args:
        value: A member of ``enum_cls`` or one of its backing values
        enum_cls: Target enum; validated as a typed value set on first use

    Returns:
        The matching member (``value`` itself if already a member)

    Raises:
        InvalidInputError: No member has ``value`` as its backing value
        ValueSetDefinitionError: ``enum_cls`` is not a valid typed value set
    """
    vs = value_set(enum_cls)
    match classify(value, enum_cls):
        case Typed(member):
            return member
        case Primitive(raw):
            member = vs.lookup(raw)
            if member is None:
                raise _reject(raw, vs, _reason_for(raw, vs))
            return member


def try_coerce(value: Any, enum_cls: type[E]) -> Result[E]:
    """Non-raising :func:`coerce`: ``Ok(member)`` or ``Err(InvalidInputError)``."""
    try:
        return Ok(coerce(value, enum_cls))
    except InvalidInputError as e:
        return Err(e)


def enum_field(enum_cls: type[E]) -> Any:
    """
    Pydantic field type accepting a member or a backing value of ``enum_cls``.

    Usage:
        class RefundRequest(BaseModel):
            mode: enum_field(RefundMode)

    Unknown values fail model validation with the ``InvalidInputError``
    message.
    """
    value_set(enum_cls)

    def _coerce(value: Any) -> E:
        return coerce(value, enum_cls)

    return Annotated[enum_cls, BeforeValidator(_coerce)]


__all__ = [
    "Typed",
    "Primitive",
    "BoundaryValue",
    "classify",
    "coerce",
    "try_coerce",
    "enum_field",
]
