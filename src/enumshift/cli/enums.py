"""
CLI: ``enumshift enum`` — inspect typed value sets and try coercions.
"""

from __future__ import annotations

import typer
from rich.markup import escape

from enumshift.cli.utils import (
    console,
    err_console,
    load_enum,
    output_error,
    output_json,
    print_table,
)
from enumshift.core.coercion import try_coerce
from enumshift.core.errors import EnumshiftError
from enumshift.core.result import Err, Ok
from enumshift.core.valueset import value_set

app = typer.Typer(no_args_is_help=True)


@app.command("values")
def show_values(
    path: str = typer.Argument(..., help="Enum as 'package.module:EnumName'"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show the members and backing values of a typed enum."""
    enum_cls = load_enum(path)
    try:
        vs = value_set(enum_cls)
    except EnumshiftError as e:
        output_error(e, as_json=json_out)

    if json_out:
        output_json(
            {
                "enum": vs.name,
                "backing_type": vs.backing_type.__name__,
                "members": vs.to_dict(),
            }
        )
        return

    print_table(
        [{"member": name, "value": repr(value)} for name, value in vs.to_dict().items()],
        title=f"{vs.name} ({vs.backing_type.__name__})",
    )


@app.command("coerce")
def coerce_value(
    path: str = typer.Argument(..., help="Enum as 'package.module:EnumName'"),
    value: str = typer.Argument(..., help="Backing value to resolve"),
    as_int: bool = typer.Option(False, "--int", help="Treat VALUE as an int backing value"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Resolve a backing value to its member; exit 1 if it is not valid."""
    enum_cls = load_enum(path)

    raw: str | int = value
    if as_int:
        try:
            raw = int(value)
        except ValueError as e:
            err_console.print(f"[red]Not an int:[/red] {escape(value)}")
            raise typer.Exit(1) from e

    try:
        result = try_coerce(raw, enum_cls)
    except EnumshiftError as e:
        output_error(e, as_json=json_out)

    match result:
        case Ok(member):
            if json_out:
                output_json({"ok": True, "member": member.name, "value": member.value})
            else:
                console.print(f"[green]✓[/green] {escape(value)} → {enum_cls.__name__}.{member.name}")
        case Err(error):
            output_error(error, as_json=json_out)
