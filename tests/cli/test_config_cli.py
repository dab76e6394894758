"""Tests for enumshift.cli.config — config show command."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from enumshift.cli.app import app

runner = CliRunner()


class TestShowConfig:
    def test_show_json_format(self):
        result = runner.invoke(app, ["config", "show", "--format", "json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["deprecation_action"] == "warn"

    def test_show_env_format(self, monkeypatch):
        monkeypatch.setenv("ENUMSHIFT_DEPRECATION_ACTION", "error")
        result = runner.invoke(app, ["config", "show", "--format", "env"])
        assert result.exit_code == 0
        assert "ENUMSHIFT_DEPRECATION_ACTION=error" in result.stdout
        assert "ENUMSHIFT_LOG_LEVEL=WARNING" in result.stdout

    def test_show_table_format(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "deprecation_action" in result.stdout
