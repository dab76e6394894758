"""Tests for enumshift.cli.callsites — list/audit commands.

Call sites register on import, and the autouse fixture clears the registry,
so every test forgets ``refund_api`` first to force a fresh import.
"""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from enumshift.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reimport(fresh_import):
    fresh_import("refund_api")


class TestList:
    def test_json(self):
        result = runner.invoke(app, ["callsites", "list", "refund_api", "--json"])
        assert result.exit_code == 0
        sites = json.loads(result.stdout)
        assert [(s["call_site"], s["phase"]) for s in sites] == [
            ("refund_api.refund", "deprecate"),
            ("refund_api.schedule", "finalize"),
        ]

    def test_table(self):
        result = runner.invoke(app, ["callsites", "list", "refund_api"])
        assert result.exit_code == 0
        assert "refund" in result.stdout

    def test_missing_module(self):
        result = runner.invoke(app, ["callsites", "list", "no_such_module_xyz"])
        assert result.exit_code == 1


class TestAudit:
    def test_nothing_overdue(self):
        result = runner.invoke(app, ["callsites", "audit", "refund_api", "--current-version", "1.9"])
        assert result.exit_code == 0
        assert "none overdue" in result.stdout

    def test_overdue_fails(self):
        result = runner.invoke(
            app, ["callsites", "audit", "refund_api", "--current-version", "2.0.0", "--json"]
        )
        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["checked"] == 2
        assert [s["call_site"] for s in payload["overdue"]] == ["refund_api.refund"]

    def test_invalid_version(self):
        result = runner.invoke(app, ["callsites", "audit", "refund_api", "--current-version", "next"])
        assert result.exit_code == 1
