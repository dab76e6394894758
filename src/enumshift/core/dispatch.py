"""
Exhaustive dispatch over the members of a typed enum.

A ``Dispatcher`` maps every member of an enum to exactly one handler and
refuses to run until it does. Sealing it at module level turns "a member
was added but nobody handles it" into an import-time failure::

    refund = Dispatcher(RefundMode)

    @refund.register(RefundMode.PARTIAL)
    def _partial(mode, order): ...

    @refund.register(RefundMode.FULL)
    def _full(mode, order): ...

    refund.seal()       # UnhandledMemberError if a member is missing

    refund("partial", order)   # coerced, then only _partial runs

For code that prefers a plain ``match`` statement, end it with
``case _: assert_never(mode)`` (``typing.assert_never``) so a type checker
reports the missing branch instead.

Manifesto:
    - **Exhaustive by construction:** seal() checks every member
    - **No silent fallthrough:** There is no default handler
    - **One branch per member:** Duplicate registration is an error
    - **Boundary coercion:** Callers may pass a member or a backing value

Tags:
    dispatch, exhaustiveness, pattern-matching, enum, enumshift

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any, Generic, TypeVar

from enumshift.core.coercion import coerce
from enumshift.core.errors import DispatchDefinitionError, UnhandledMemberError
from enumshift.core.logging import get_logger
from enumshift.core.valueset import value_set

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)
R = TypeVar("R")
H = TypeVar("H", bound=Callable[..., Any])


def missing_members(enum_cls: type[E], handled: Iterable[E]) -> list[E]:
    """Members of ``enum_cls`` not in ``handled``, in definition order."""
    seen = set(handled)
    return [m for m in value_set(enum_cls) if m not in seen]


class Dispatcher(Generic[E, R]):
    """
    Routes a member of ``enum_cls`` to the handler registered for it.

    Handlers are called as ``handler(member, *args, **kwargs)``.
    """

    def __init__(self, enum_cls: type[E], name: str | None = None):
        value_set(enum_cls)
        self.enum_cls = enum_cls
        self.name = name or f"{enum_cls.__name__}Dispatcher"
        self._handlers: dict[E, Callable[..., R]] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def handled(self) -> frozenset[E]:
        return frozenset(self._handlers)

    def register(self, *members: E) -> Callable[[H], H]:
        """Decorator binding ``handler`` to one or more members."""
        if self._sealed:
            raise DispatchDefinitionError(f"{self.name} is sealed; cannot register handlers")
        if not members:
            raise DispatchDefinitionError(f"{self.name}.register() needs at least one member")
        for member in members:
            if not isinstance(member, self.enum_cls):
                raise DispatchDefinitionError(
                    f"{member!r} is not a member of {self.enum_cls.__name__}"
                ).with_context(enum=self.enum_cls.__name__)
        seen: set[E] = set()
        for member in members:
            if member in seen:
                raise DispatchDefinitionError(
                    f"{self.name}.register() lists {member.name} more than once"
                ).with_context(enum=self.enum_cls.__name__)
            seen.add(member)

        def decorator(handler: H) -> H:
            for member in members:
                if member in self._handlers:
                    raise DispatchDefinitionError(
                        f"{self.name} already has a handler for {member.name}"
                    ).with_context(enum=self.enum_cls.__name__)
            for member in members:
                self._handlers[member] = handler
            return handler

        return decorator

    def seal(self) -> Dispatcher[E, R]:
        """Verify every member has a handler and freeze the dispatcher.

        Raises:
            UnhandledMemberError: at least one member has no handler
        """
        missing = missing_members(self.enum_cls, self._handlers)
        if missing:
            raise UnhandledMemberError(self.enum_cls.__name__, missing)
        if not self._sealed:
            self._sealed = True
            logger.debug(
                "dispatcher_sealed",
                dispatcher=self.name,
                enum=self.enum_cls.__name__,
                branches=len(self._handlers),
            )
        return self

    def handler_for(self, value: E | str | int) -> Callable[..., R]:
        """Handler that ``value`` dispatches to (after coercion)."""
        self.seal()
        return self._handlers[coerce(value, self.enum_cls)]

    def __call__(self, value: E | str | int, *args: Any, **kwargs: Any) -> R:
        self.seal()
        member = coerce(value, self.enum_cls)
        return self._handlers[member](member, *args, **kwargs)

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"Dispatcher({self.enum_cls.__name__}, {len(self._handlers)} branches, {state})"


def exhaustive(
    enum_cls: type[E],
    handlers: Mapping[E, Callable[..., R]],
    name: str | None = None,
) -> Dispatcher[E, R]:
    """Build a sealed dispatcher from a ``{member: handler}`` mapping."""
    dispatcher: Dispatcher[E, R] = Dispatcher(enum_cls, name=name)
    for member, handler in handlers.items():
        dispatcher.register(member)(handler)
    return dispatcher.seal()


__all__ = ["Dispatcher", "exhaustive", "missing_members"]
