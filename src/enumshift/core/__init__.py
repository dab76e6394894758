"""enumshift core -- Expand & Contract primitives for enum-valued parameters.

Manifesto:
    Replacing a string parameter with an enum is a breaking change unless it
    is done in steps: introduce the enum, accept both forms, deprecate the
    primitive, then drop it. ``enumshift.core`` gives each step a concrete,
    testable shape so the migration is visible in code instead of in a wiki.

Architecture::

    Layer 1 -- Type System & Errors
        errors.py          Structured error hierarchy (EnumshiftError, InvalidInputError)
        result.py          Result[T] envelope (Ok / Err)

    Layer 2 -- Value Sets
        valueset.py        ValueSet descriptor + typed_value_set validation
        coercion.py        coerce / try_coerce / classify / enum_field

    Layer 3 -- Migration
        phases.py          MigrationPhase (introduce -> finalize)
        callsite.py        @migrating_parameter + call-site registry
        dispatch.py        Exhaustive Dispatcher over enum members

    Layer 4 -- Cross-Cutting Concerns
        logging.py         Structured logging (structlog)
        settings.py        EnumshiftSettings (pydantic-settings)

Tags:
    enumshift, expand-contract, enum-migration, api-evolution

Doc-Types:
    package-overview, module-index
"""

from enumshift.core.callsite import (
    CallSiteSpec,
    call_site_of,
    clear_call_sites,
    get_call_site,
    list_call_sites,
    migrating_parameter,
    overdue_call_sites,
)
from enumshift.core.coercion import (
    BoundaryValue,
    Primitive,
    Typed,
    classify,
    coerce,
    enum_field,
    try_coerce,
)
from enumshift.core.dispatch import Dispatcher, exhaustive, missing_members
from enumshift.core.errors import (
    ConfigError,
    DefinitionError,
    DeprecatedUsageError,
    DispatchDefinitionError,
    EnumshiftError,
    ErrorCategory,
    ErrorContext,
    InvalidInputError,
    PhaseRegressionError,
    UnhandledMemberError,
    ValueSetDefinitionError,
)
from enumshift.core.phases import MigrationPhase, check_progression
from enumshift.core.result import Err, Ok, Result, partition_results
from enumshift.core.valueset import ValueSet, typed_value_set, value_set

__all__ = [
    # callsite
    "CallSiteSpec",
    "call_site_of",
    "clear_call_sites",
    "get_call_site",
    "list_call_sites",
    "migrating_parameter",
    "overdue_call_sites",
    # coercion
    "BoundaryValue",
    "Primitive",
    "Typed",
    "classify",
    "coerce",
    "enum_field",
    "try_coerce",
    # dispatch
    "Dispatcher",
    "exhaustive",
    "missing_members",
    # errors
    "ConfigError",
    "DefinitionError",
    "DeprecatedUsageError",
    "DispatchDefinitionError",
    "EnumshiftError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidInputError",
    "PhaseRegressionError",
    "UnhandledMemberError",
    "ValueSetDefinitionError",
    # phases
    "MigrationPhase",
    "check_progression",
    # result
    "Err",
    "Ok",
    "Result",
    "partition_results",
    # valueset
    "ValueSet",
    "typed_value_set",
    "value_set",
]
