"""
Root Typer application for the enumshift CLI.
"""

from __future__ import annotations

import typer
from rich.markup import escape
from typer import Typer

from enumshift.cli.utils import err_console
from enumshift.core.errors import ConfigError

app = Typer(
    name="enumshift",
    help="enumshift — Expand & Contract migrations for enum-valued parameters.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from enumshift import __version__

        typer.echo(f"enumshift {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """enumshift CLI — inspect value sets and audit migrating call sites."""
    from enumshift.core.logging import configure_logging
    from enumshift.core.settings import get_settings

    try:
        settings = get_settings(_force_reload=True)
    except ConfigError as e:
        err_console.print(f"[red]Configuration Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e

    configure_logging(level=settings.log_level, json_format=settings.json_logs)


# ── Sub-command registration ─────────────────────────────────────────────

from enumshift.cli.callsites import app as callsites_app  # noqa: E402
from enumshift.cli.config import app as config_app  # noqa: E402
from enumshift.cli.enums import app as enum_app  # noqa: E402

app.add_typer(enum_app, name="enum", help="Inspect typed value sets.")
app.add_typer(callsites_app, name="callsites", help="List and audit migrating parameters.")
app.add_typer(config_app, name="config", help="Configuration management.")
