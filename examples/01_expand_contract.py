#!/usr/bin/env python3
"""Expand & Contract — Migrating a String Parameter to an Enum.

================================================================================
WHY A PHASED MIGRATION?
================================================================================

A refund API takes ``mode: str`` with the values ``"partial"`` and ``"full"``.
Replacing it with ``mode: RefundMode`` in one release breaks every caller.
Instead the parameter moves through four releases::

    v1.0  INTRODUCE    mode: str                 RefundMode used internally
    v1.1  DUAL_ACCEPT  mode: RefundMode | str    both accepted
    v1.2  DEPRECATE    mode: RefundMode | str    str emits DeprecationWarning
    v2.0  FINALIZE     mode: RefundMode          str rejected

This script shows each phase side by side (normally only one exists at a
time), plus the exhaustive dispatcher that keeps the refund behaviour in
sync with the enum.

Run:
    python examples/01_expand_contract.py
"""

from __future__ import annotations

import warnings
from enum import Enum
from typing import assert_never

from enumshift import (
    Dispatcher,
    InvalidInputError,
    MigrationPhase,
    coerce,
    migrating_parameter,
    overdue_call_sites,
    typed_value_set,
)


@typed_value_set
class RefundMode(str, Enum):
    PARTIAL = "partial"
    FULL = "full"


# ── Exhaustive dispatch ──────────────────────────────────────────────────

refund = Dispatcher(RefundMode)


@refund.register(RefundMode.PARTIAL)
def _refund_partial(mode: RefundMode, amount: int) -> str:
    return f"refunding {amount // 2} of {amount}"


@refund.register(RefundMode.FULL)
def _refund_full(mode: RefundMode, amount: int) -> str:
    return f"refunding all {amount}"


refund.seal()


# Same guarantee with a match statement, checked by the type checker
def describe(mode: RefundMode) -> str:
    match mode:
        case RefundMode.PARTIAL:
            return "part of the order"
        case RefundMode.FULL:
            return "the whole order"
        case _:
            assert_never(mode)


# ── One function per phase ───────────────────────────────────────────────


@migrating_parameter("mode", RefundMode, phase=MigrationPhase.DUAL_ACCEPT, since="1.1")
def refund_v1_1(mode: RefundMode | str, amount: int) -> str:
    return refund(mode, amount)


@migrating_parameter(
    "mode", RefundMode, phase=MigrationPhase.DEPRECATE, since="1.2", removal="2.0"
)
def refund_v1_2(mode: RefundMode | str, amount: int) -> str:
    return refund(mode, amount)


@migrating_parameter("mode", RefundMode, phase=MigrationPhase.FINALIZE, since="2.0")
def refund_v2_0(mode: RefundMode, amount: int) -> str:
    return refund(mode, amount)


def main() -> None:
    print("coerce('partial') ->", coerce("partial", RefundMode))
    try:
        coerce("Partial", RefundMode)
    except InvalidInputError as e:
        print("coerce('Partial') ->", e)

    print("v1.1 str   :", refund_v1_1("full", 100))
    print("v1.1 enum  :", refund_v1_1(RefundMode.PARTIAL, 100))

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        print("v1.2 str   :", refund_v1_2("full", 100))
    print("  warning  :", caught[0].message)

    print("v2.0 enum  :", refund_v2_0(RefundMode.FULL, 100))
    try:
        refund_v2_0("full", 100)
    except InvalidInputError as e:
        print("v2.0 str   :", e)

    print("describe   :", describe(RefundMode.PARTIAL))
    print("overdue@2.0:", [s.qualname for s in overdue_call_sites("2.0", module=__name__)])


if __name__ == "__main__":
    main()
