"""
CLI: ``enumshift callsites`` — list and audit migrating parameters.

Call sites register when their module is imported, so both commands import
the given modules first.
"""

from __future__ import annotations

import typer
from rich.markup import escape

from enumshift.cli.utils import console, err_console, import_module, output_json, print_table
from enumshift.core.callsite import CallSiteSpec, list_call_sites, parse_version

app = typer.Typer(no_args_is_help=True)


def _collect(modules: list[str]) -> list[CallSiteSpec]:
    sites: list[CallSiteSpec] = []
    for name in modules:
        import_module(name)
        sites.extend(s for s in list_call_sites(name) if s not in sites)
    return sites


@app.command("list")
def list_sites(
    modules: list[str] = typer.Argument(..., help="Modules to import and scan"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List migrating parameters declared in MODULES."""
    sites = _collect(modules)

    if json_out:
        output_json([s.to_dict() for s in sites])
        return

    print_table([s.to_dict() for s in sites], title="Migrating parameters")


@app.command("audit")
def audit_sites(
    modules: list[str] = typer.Argument(..., help="Modules to import and scan"),
    current_version: str = typer.Option(
        ..., "--current-version", "-v", help="Version being released, e.g. 3.0.0"
    ),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Fail if a call site reached its removal version without being finalized."""
    try:
        parse_version(current_version)
    except ValueError as e:
        err_console.print(f"[bold red]Error[/bold red]: {escape(str(e))}")
        raise typer.Exit(1) from e

    sites = _collect(modules)
    overdue = [s for s in sites if s.is_overdue(current_version)]

    if json_out:
        output_json(
            {
                "current_version": current_version,
                "checked": len(sites),
                "overdue": [s.to_dict() for s in overdue],
            }
        )
    elif overdue:
        print_table([s.to_dict() for s in overdue], title=f"Overdue at {current_version}")
    else:
        console.print(f"[green]✓ {len(sites)} call site(s) checked, none overdue[/green]")

    if overdue:
        raise typer.Exit(1)
