"""Tests for enumshift.core.phases module."""

import pytest

from enumshift.core.errors import PhaseRegressionError
from enumshift.core.phases import MigrationPhase, check_progression


class TestMigrationPhase:
    def test_release_order(self):
        assert (
            MigrationPhase.INTRODUCE
            < MigrationPhase.DUAL_ACCEPT
            < MigrationPhase.DEPRECATE
            < MigrationPhase.FINALIZE
        )
        assert sorted(MigrationPhase, reverse=True)[0] is MigrationPhase.FINALIZE

    def test_accepted_forms(self):
        table = {
            MigrationPhase.INTRODUCE: (True, False, False),
            MigrationPhase.DUAL_ACCEPT: (True, True, False),
            MigrationPhase.DEPRECATE: (True, True, True),
            MigrationPhase.FINALIZE: (False, True, False),
        }
        for phase, (primitive, typed, deprecated) in table.items():
            assert phase.accepts_primitive is primitive
            assert phase.accepts_typed is typed
            assert phase.primitive_deprecated is deprecated

    def test_next(self):
        assert MigrationPhase.INTRODUCE.next() is MigrationPhase.DUAL_ACCEPT
        assert MigrationPhase.DEPRECATE.next() is MigrationPhase.FINALIZE
        assert MigrationPhase.FINALIZE.next() is MigrationPhase.FINALIZE

    def test_from_value(self):
        assert MigrationPhase("deprecate") is MigrationPhase.DEPRECATE

    def test_comparison_with_other_types(self):
        with pytest.raises(TypeError):
            MigrationPhase.INTRODUCE < 1  # noqa: B015


class TestCheckProgression:
    @pytest.mark.parametrize(
        "previous,current",
        [
            (MigrationPhase.INTRODUCE, MigrationPhase.INTRODUCE),
            (MigrationPhase.INTRODUCE, MigrationPhase.DUAL_ACCEPT),
            (MigrationPhase.DUAL_ACCEPT, MigrationPhase.FINALIZE),
        ],
    )
    def test_forward_or_same(self, previous, current):
        check_progression(previous, current)

    def test_regression_raises(self):
        with pytest.raises(PhaseRegressionError, match="from deprecate to dual_accept") as exc_info:
            check_progression(MigrationPhase.DEPRECATE, MigrationPhase.DUAL_ACCEPT)
        assert exc_info.value.context.phase == "dual_accept"
        assert exc_info.value.context.metadata["previous"] == "deprecate"
