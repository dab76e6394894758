"""
Structured error types for enumshift.

Every failure the library can raise is an ``EnumshiftError`` carrying a
category, structured context and an optional chained cause. The hierarchy is
deliberately small: the only error a well-formed program sees at runtime is
``InvalidInputError``; the rest fire while enums, dispatchers and call sites
are being defined (import time).

Manifesto:
    - **One runtime error kind:** Unrecognized input is ``InvalidInputError``
    - **Definition errors fail early:** Broken value sets, dispatchers and
      phase regressions surface when the defining module is imported
    - **Rich Context:** Errors carry the enum, the value and the call site
    - **Never defaulted:** Nothing in enumshift catches its own errors

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────────┐
        │                       EnumshiftError                          │
        │            (category, context, cause, to_dict)                │
        ├──────────────────────────────────────────────────────────────┤
        │                                                               │
        │  InvalidInputError     DeprecatedUsageError     ConfigError   │
        │  (VALIDATION,          (VALIDATION)             (CONFIG)      │
        │   also ValueError)                                            │
        │                                                               │
        │  DefinitionError (DEFINITION)                                 │
        │       │                                                       │
        │  ValueSetDefinitionError   DispatchDefinitionError            │
        │  UnhandledMemberError      PhaseRegressionError               │
        └──────────────────────────────────────────────────────────────┘

Examples:
    >>> err = InvalidInputError("bogus", enum_name="Mode", allowed=["full", "partial"])
    >>> err.category
    <ErrorCategory.VALIDATION: 'VALIDATION'>
    >>> err.to_dict()["context"]["enum"]
    'Mode'

Guardrails:
    ❌ DON'T: Catch InvalidInputError and fall back to a default member
    ✅ DO: Let it propagate to the API boundary that received the value

Tags:
    error-handling, exception-hierarchy, error-context, enumshift

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable


class ErrorCategory(str, Enum):
    """
    Error categories for classification and reporting.

    Attributes:
        VALIDATION: Caller passed a value the parameter does not accept
        DEFINITION: An enum, dispatcher or call site is declared wrongly
        CONFIG: Invalid settings
        INTERNAL: Bugs, unexpected state
    """

    VALIDATION = "VALIDATION"
    DEFINITION = "DEFINITION"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        enum: Name of the enum involved
        parameter: Parameter name at the call site
        call_site: Qualified name of the decorated function
        phase: Migration phase of the call site
        metadata: Additional key-value pairs
    """

    enum: str | None = None
    parameter: str | None = None
    call_site: str | None = None
    phase: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["enum", "parameter", "call_site", "phase"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class EnumshiftError(Exception):
    """
    Base exception for all enumshift errors.

    Subclasses set ``default_category`` so callers never have to pass it.

    Examples:
        >>> error = EnumshiftError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.with_context(enum="Mode").context.enum
        'Mode'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> EnumshiftError:
        """
        Add context to this error (fluent API).

        Usage:
            raise InvalidInputError("x", enum_name="Mode").with_context(
                call_site="api.search",
                parameter="mode",
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# VALIDATION ERRORS (raised while a call is in flight)
# =============================================================================


class InvalidInputError(EnumshiftError, ValueError):
    """
    A value does not correspond to any member of the enum.

    Also a ``ValueError`` so that pydantic validators and code written
    against the stdlib ``Enum(value)`` contract keep working.

    Examples:
        >>> err = InvalidInputError("bogus", enum_name="Mode", allowed=["partial", "full"])
        >>> str(err)
        "'bogus' is not a valid Mode; expected one of: 'full', 'partial'"
        >>> err.value
        'bogus'
    """

    default_category = ErrorCategory.VALIDATION

    def __init__(
        self,
        value: Any,
        *,
        enum_name: str,
        allowed: Iterable[Any] = (),
        reason: str | None = None,
        context: ErrorContext | None = None,
    ):
        self.value = value
        self.enum_name = enum_name
        self.allowed = sorted(allowed, key=repr)
        message = f"{value!r} is not a valid {enum_name}"
        if reason:
            message = f"{message} ({reason})"
        if self.allowed:
            message = f"{message}; expected one of: {', '.join(repr(a) for a in self.allowed)}"
        super().__init__(message, context=context)
        self.context.enum = enum_name
        self.context.metadata.setdefault("value", repr(value))


class DeprecatedUsageError(EnumshiftError):
    """A deprecated primitive was passed while deprecations are escalated to errors."""

    default_category = ErrorCategory.VALIDATION


# =============================================================================
# DEFINITION ERRORS (raised at import time)
# =============================================================================


class DefinitionError(EnumshiftError):
    """Base for mistakes in how enums, dispatchers or call sites are declared."""

    default_category = ErrorCategory.DEFINITION


class ValueSetDefinitionError(DefinitionError):
    """Enum cannot be used as a typed value set (aliases, mixed or bool backing values)."""


class DispatchDefinitionError(DefinitionError):
    """Handler registered twice, or for something that is not a member."""


class UnhandledMemberError(DefinitionError):
    """
    A dispatcher does not define a branch for every member.

    Attributes:
        missing: Members without a handler, in definition order
    """

    def __init__(self, enum_name: str, missing: Iterable[Enum]):
        self.missing = list(missing)
        names = ", ".join(m.name for m in self.missing)
        super().__init__(f"Dispatcher for {enum_name} has no branch for: {names}")
        self.context.enum = enum_name


class PhaseRegressionError(DefinitionError):
    """A call site's migration phase moved backwards."""


# =============================================================================
# CONFIG ERRORS
# =============================================================================


class ConfigError(EnumshiftError):
    """Invalid configuration."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "EnumshiftError",
    "InvalidInputError",
    "DeprecatedUsageError",
    "DefinitionError",
    "ValueSetDefinitionError",
    "DispatchDefinitionError",
    "UnhandledMemberError",
    "PhaseRegressionError",
    "ConfigError",
]
