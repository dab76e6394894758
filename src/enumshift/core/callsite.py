"""
Call sites: parameters declared as migrating from primitives to an enum.

``@migrating_parameter`` marks one parameter of a function as being in a
given :class:`~enumshift.core.phases.MigrationPhase`. The phase is part of
the function's definition, so moving to the next phase is a code change
shipped in a release, exactly like changing a type hint.

At call time the decorated function resolves the argument once, at the
boundary, and the function body only ever sees a member::

    @migrating_parameter("mode", RefundMode, phase=MigrationPhase.DEPRECATE,
                         since="2.3", removal="3.0")
    def refund(order_id: str, mode: RefundMode | str) -> Refund:
        match mode:               # always a RefundMode here
            ...

Every decorated function is recorded in a registry so tooling (``enumshift
callsites audit``) can list migrations in progress and flag those whose
removal version has been reached.

Manifesto:
    - **Resolve once:** The member-or-primitive union never leaks inward
    - **Declared, not stateful:** Phases live in decorator arguments
    - **Loud deprecations:** Primitive use in DEPRECATE is reported through
      the configured ``deprecation_action``
    - **No defaults on failure:** Bad values raise ``InvalidInputError``

Tags:
    call-site, decorator, deprecation, expand-contract, registry, enumshift

Doc-Types:
    - API Reference
    - Migration Guide
"""

from __future__ import annotations

import functools
import inspect
import warnings
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from itertools import zip_longest
from typing import Any, TypeVar

from enumshift.core.coercion import Primitive, Typed, classify, coerce
from enumshift.core.errors import (
    DefinitionError,
    DeprecatedUsageError,
    InvalidInputError,
)
from enumshift.core.logging import get_logger
from enumshift.core.phases import MigrationPhase, check_progression
from enumshift.core.settings import DeprecationAction, get_settings
from enumshift.core.valueset import value_set

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

CALL_SITE_ATTR = "__enumshift_call_site__"


# ── Versions ─────────────────────────────────────────────────────────────


def parse_version(version: str) -> tuple[int, ...]:
    """Parse ``"6.5"``, ``"v6.5.0.0"`` into a tuple of ints.

    Raises:
        ValueError: a component is not numeric
    """
    text = version.strip().removeprefix("v")
    try:
        return tuple(int(part) for part in text.split("."))
    except ValueError:
        raise ValueError(f"invalid version: {version!r}") from None


def version_reached(current: str, target: str) -> bool:
    """True if ``current >= target``; missing trailing components count as 0."""
    for c, t in zip_longest(parse_version(current), parse_version(target), fillvalue=0):
        if c != t:
            return c > t
    return True


# ── Registry ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CallSiteSpec:
    """Declared migration of one parameter."""

    qualname: str
    parameter: str
    enum_cls: type[Enum]
    phase: MigrationPhase
    since: str | None = None
    removal: str | None = None

    @property
    def module(self) -> str:
        return self.qualname.rsplit(".", 1)[0]

    def is_overdue(self, current_version: str) -> bool:
        """Removal version reached but primitives are still accepted."""
        if self.removal is None or self.phase is MigrationPhase.FINALIZE:
            return False
        return version_reached(current_version, self.removal)

    def to_dict(self) -> dict[str, Any]:
        return {
            "call_site": self.qualname,
            "parameter": self.parameter,
            "enum": self.enum_cls.__name__,
            "phase": self.phase.value,
            "since": self.since,
            "removal": self.removal,
        }


_registry: dict[tuple[str, str], CallSiteSpec] = {}


def _register(spec: CallSiteSpec) -> None:
    key = (spec.qualname, spec.parameter)
    previous = _registry.get(key)
    if previous is not None:
        check_progression(previous.phase, spec.phase)
    _registry[key] = spec
    logger.debug(
        "call_site_registered",
        call_site=spec.qualname,
        parameter=spec.parameter,
        enum=spec.enum_cls.__name__,
        phase=spec.phase.value,
    )


def list_call_sites(module: str | None = None) -> list[CallSiteSpec]:
    """All registered call sites, optionally limited to a module (and its submodules)."""
    sites = sorted(_registry.values(), key=lambda s: (s.qualname, s.parameter))
    if module is None:
        return sites
    return [s for s in sites if s.module == module or s.module.startswith(f"{module}.")]


def get_call_site(qualname: str, parameter: str | None = None) -> CallSiteSpec:
    """Look up a call site by qualified function name."""
    for (name, param), spec in _registry.items():
        if name == qualname and (parameter is None or param == parameter):
            return spec
    available = ", ".join(sorted({name for name, _ in _registry}))
    raise KeyError(f"Call site '{qualname}' not found. Available: {available}")


def overdue_call_sites(current_version: str, module: str | None = None) -> list[CallSiteSpec]:
    """Call sites whose removal version is reached without reaching FINALIZE."""
    return [s for s in list_call_sites(module) if s.is_overdue(current_version)]


def clear_call_sites() -> None:
    """Clear registry (for testing)."""
    _registry.clear()


def call_site_of(func: Callable[..., Any]) -> CallSiteSpec | None:
    """Spec attached to a decorated function, if any."""
    return getattr(func, CALL_SITE_ATTR, None)


# ── Resolution ───────────────────────────────────────────────────────────


def _deprecation_message(spec: CallSiteSpec, raw: Any, member: Enum) -> str:
    message = f"Passing {raw!r} as '{spec.parameter}' to {spec.qualname}() is deprecated"
    if spec.since:
        message += f" since {spec.since}"
    message += f"; pass {type(member).__name__}.{member.name} instead."
    if spec.removal:
        message += f" Primitive values will be rejected in {spec.removal}."
    return message


def _report_deprecation(spec: CallSiteSpec, raw: Any, member: Enum) -> None:
    action = get_settings().deprecation_action
    if action is DeprecationAction.IGNORE:
        return

    message = _deprecation_message(spec, raw, member)
    if action is DeprecationAction.ERROR:
        raise DeprecatedUsageError(message).with_context(
            enum=spec.enum_cls.__name__,
            parameter=spec.parameter,
            call_site=spec.qualname,
            phase=spec.phase.value,
        )

    logger.warning(
        "primitive_argument_deprecated",
        call_site=spec.qualname,
        parameter=spec.parameter,
        value=repr(raw),
        replacement=f"{type(member).__name__}.{member.name}",
        removal=spec.removal,
    )
    if action is DeprecationAction.WARN:
        # stacklevel points at the caller of the decorated function
        warnings.warn(message, DeprecationWarning, stacklevel=4)


def _resolve(spec: CallSiteSpec, value: Any) -> Enum:
    enum_name = spec.enum_cls.__name__
    try:
        match classify(value, spec.enum_cls):
            case Typed(member):
                if not spec.phase.accepts_typed:
                    raise InvalidInputError(
                        value,
                        enum_name=enum_name,
                        allowed=value_set(spec.enum_cls).backing_values,
                        reason=f"{enum_name} members are not accepted before the dual_accept phase",
                    )
                return member
            case Primitive(raw):
                if not spec.phase.accepts_primitive:
                    raise InvalidInputError(
                        raw,
                        enum_name=enum_name,
                        reason=f"primitive values are no longer accepted; pass a {enum_name} member",
                    )
                member = coerce(raw, spec.enum_cls)
                if spec.phase.primitive_deprecated:
                    _report_deprecation(spec, raw, member)
                return member
    except InvalidInputError as e:
        e.with_context(
            parameter=spec.parameter,
            call_site=spec.qualname,
            phase=spec.phase.value,
        )
        raise


def migrating_parameter(
    parameter: str,
    enum_cls: type[Enum],
    *,
    phase: MigrationPhase = MigrationPhase.DUAL_ACCEPT,
    since: str | None = None,
    removal: str | None = None,
) -> Callable[[F], F]:
    """
    Declare ``parameter`` of the decorated function as migrating to ``enum_cls``.

    Args:
        parameter: Name of the migrating parameter
        enum_cls: Typed value set replacing the primitive values
        phase: Current migration phase of this parameter
        since: Version that started the current phase (for messages)
        removal: Version in which primitives stop being accepted

    Raises:
        DefinitionError: ``parameter`` is not a named parameter of the function,
            or a version string is malformed
        ValueSetDefinitionError: ``enum_cls`` is not a valid typed value set
        PhaseRegressionError: the function was already registered in a later phase
    """
    value_set(enum_cls)
    for version in (since, removal):
        if version is not None:
            try:
                parse_version(version)
            except ValueError as e:
                raise DefinitionError(str(e), cause=e) from e

    def decorator(func: F) -> F:
        sig = inspect.signature(func)
        param = sig.parameters.get(parameter)
        qualname = f"{func.__module__}.{func.__qualname__}"
        if param is None or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            raise DefinitionError(
                f"{qualname}() has no named parameter '{parameter}'"
            ).with_context(call_site=qualname, parameter=parameter)

        spec = CallSiteSpec(
            qualname=qualname,
            parameter=parameter,
            enum_cls=enum_cls,
            phase=phase,
            since=since,
            removal=removal,
        )
        _register(spec)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = sig.bind(*args, **kwargs)
            if parameter in bound.arguments:
                value = bound.arguments[parameter]
                if not (value is None and param.default is None):
                    bound.arguments[parameter] = _resolve(spec, value)
            elif param.default is not param.empty and param.default is not None:
                # defaults are the author's choice, never deprecated
                bound.arguments[parameter] = coerce(param.default, enum_cls)
            return func(*bound.args, **bound.kwargs)

        setattr(wrapper, CALL_SITE_ATTR, spec)
        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = [
    "CallSiteSpec",
    "migrating_parameter",
    "list_call_sites",
    "get_call_site",
    "overdue_call_sites",
    "clear_call_sites",
    "call_site_of",
    "parse_version",
    "version_reached",
]
