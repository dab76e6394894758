"""
CLI utility helpers — object loading and output formatting.
"""

from __future__ import annotations

import importlib
import json
from enum import Enum
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from enumshift.core.errors import EnumshiftError

console = Console()
err_console = Console(stderr=True)


# ── Loading ──────────────────────────────────────────────────────────────


def import_module(name: str) -> Any:
    """Import ``name`` or exit with a readable error."""
    try:
        return importlib.import_module(name)
    except ImportError as e:
        err_console.print(
            f"[bold red]Error[/bold red]: cannot import {escape(repr(name))}: {escape(str(e))}"
        )
        raise typer.Exit(code=1) from e
    except EnumshiftError as e:
        # definition errors fire while the module body runs
        err_console.print(f"[bold red]Error[/bold red] ({e.category.value}): {escape(e.message)}")
        raise typer.Exit(code=1) from e


def load_enum(path: str) -> type[Enum]:
    """Resolve ``package.module:EnumName`` (nested ``Outer.Inner`` allowed)."""
    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        err_console.print(f"[bold red]Error[/bold red]: expected 'module:Enum', got {escape(repr(path))}")
        raise typer.Exit(code=1)

    obj: Any = import_module(module_name)
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            err_console.print(
                f"[bold red]Error[/bold red]: {escape(repr(module_name))} "
                f"has no attribute {escape(repr(attr_path))}"
            )
            raise typer.Exit(code=1) from e

    if not (isinstance(obj, type) and issubclass(obj, Enum)):
        err_console.print(f"[bold red]Error[/bold red]: {escape(repr(path))} is not an Enum class")
        raise typer.Exit(code=1)
    return obj


# ── Output helpers ───────────────────────────────────────────────────────


def output_json(payload: Any) -> None:
    console.print_json(json.dumps(payload, default=str))


def output_error(error: EnumshiftError, *, as_json: bool = False) -> NoReturn:
    """Render an error and exit 1."""
    if as_json:
        output_json({"ok": False, "error": error.to_dict()})
    else:
        err_console.print(f"[bold red]Error[/bold red] ({error.category.value}): {escape(error.message)}")
    raise typer.Exit(code=1)


def print_table(rows: list[dict[str, Any]], *, title: str = "") -> None:
    """Render a list of dicts as a Rich table."""
    if not rows:
        console.print("[dim]No items.[/dim]")
        return
    table = Table(title=escape(title) if title else None, show_lines=False, pad_edge=False)
    for col in rows[0]:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*("-" if v is None else escape(str(v)) for v in row.values()))
    console.print(table)
