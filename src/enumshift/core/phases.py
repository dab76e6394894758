"""
Migration phases of an Expand & Contract parameter change.

A parameter moves through four released states. The phase is declared in
code next to the parameter (see :mod:`enumshift.core.callsite`) and changes
only when a new version is released; nothing advances it at runtime.

    ┌────────────┬──────────────┬──────────────┬──────────────────────┐
    │ Phase      │ Primitive    │ Member       │ Notes                │
    ├────────────┼──────────────┼──────────────┼──────────────────────┤
    │ INTRODUCE  │ accepted     │ rejected     │ enum used internally │
    │ DUAL_ACCEPT│ accepted     │ accepted     │ expand               │
    │ DEPRECATE  │ deprecated   │ accepted     │ notice on primitive  │
    │ FINALIZE   │ rejected     │ accepted     │ contract             │
    └────────────┴──────────────┴──────────────┴──────────────────────┘
"""

from __future__ import annotations

from enum import Enum

from enumshift.core.errors import PhaseRegressionError


class MigrationPhase(str, Enum):
    """Ordered phases; comparisons follow release order."""

    INTRODUCE = "introduce"
    DUAL_ACCEPT = "dual_accept"
    DEPRECATE = "deprecate"
    FINALIZE = "finalize"

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    @property
    def accepts_primitive(self) -> bool:
        return self is not MigrationPhase.FINALIZE

    @property
    def accepts_typed(self) -> bool:
        return self is not MigrationPhase.INTRODUCE

    @property
    def primitive_deprecated(self) -> bool:
        return self is MigrationPhase.DEPRECATE

    def next(self) -> MigrationPhase:
        """Following phase; FINALIZE is terminal and returns itself."""
        return _ORDER[min(self.rank + 1, len(_ORDER) - 1)]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MigrationPhase):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, MigrationPhase):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, MigrationPhase):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, MigrationPhase):
            return NotImplemented
        return self.rank >= other.rank


_ORDER: tuple[MigrationPhase, ...] = tuple(MigrationPhase)


def check_progression(previous: MigrationPhase, current: MigrationPhase) -> None:
    """Raise if ``current`` is earlier than ``previous``.

    Staying in the same phase or skipping ahead is allowed.
    """
    if current < previous:
        raise PhaseRegressionError(
            f"Migration phase regressed from {previous.value} to {current.value}"
        ).with_context(phase=current.value, previous=previous.value)


__all__ = ["MigrationPhase", "check_progression"]
