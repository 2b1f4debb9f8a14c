"""
Refraction CLI - look at a live Python object the way refraction sees it.

Commands:
1. inspect: List the visible methods and properties of an object
2. call: Invoke a visible method through a MethodHandle
3. get: Read a visible property through a PropertyHandle
"""

import importlib
import inspect
import logging
import os
import sys
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from refraction import __version__
from refraction.members import MethodHandle, PropertyHandle
from refraction.reflector import InstanceReflector
from refraction.schemas import MemberSummary

app = typer.Typer(
    name="refraction",
    help="Instance-bound reflection for Python objects",
    add_completion=False,
)

console = Console()

VISIBILITY_STYLES = {
    "private": "red",
    "protected": "yellow",
    "public": "green",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def load_target(target: str) -> Any:
    """
    Import and return the object named by 'module:attribute'.

    Dotted attributes are followed (e.g. 'pkg.mod:Outer.Inner'). A class is
    instantiated without arguments; any other object is returned as-is.

    Raises:
        typer.BadParameter: If target is not in 'module:attribute' form
    """
    module_name, separator, attribute_path = target.partition(":")
    if not separator or not module_name or not attribute_path:
        raise typer.BadParameter(f"Expected 'module:attribute', got '{target}'")

    # Allow targets from the project the command is run in
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    obj = importlib.import_module(module_name)
    for part in attribute_path.split("."):
        obj = getattr(obj, part)

    if inspect.isclass(obj):
        obj = obj()
    return obj


def _member_table(title: str, members: List[MemberSummary], show_signature: bool = False) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Name")
    table.add_column("Visibility")
    table.add_column("Declared In")
    if show_signature:
        table.add_column("Signature")

    for member in members:
        style = VISIBILITY_STYLES[member.visibility]
        row = [
            escape(member.name),
            f"[{style}]{member.visibility}[/{style}]",
            escape(member.declared_in),
        ]
        if show_signature:
            row.append(escape(member.signature or ""))
        table.add_row(*row)

    return table


@app.command("inspect")
def inspect_object(
    target: str = typer.Argument(..., help="Object as 'module:attribute' (classes are instantiated without arguments)"),
    methods: bool = typer.Option(True, "--methods/--no-methods", help="Include methods"),
    properties: bool = typer.Option(True, "--properties/--no-properties", help="Include properties"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    List the visible methods and properties of an object.

    Private members of ancestor classes are left out, exactly as
    InstanceReflector.get_methods()/get_properties() return them.

    Example:
        refraction inspect myapp.models:Account --json
    """
    _configure_logging(verbose)

    try:
        report = InstanceReflector(load_target(target)).describe()
    except typer.BadParameter:
        raise
    except Exception as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not methods:
        report = report.model_copy(update={"methods": []})
    if not properties:
        report = report.model_copy(update={"properties": []})

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
        return

    console.print(Panel.fit(
        f"[bold cyan]{escape(report.type_name)}[/bold cyan]\n\n"
        f"Module: [yellow]{escape(report.module)}[/yellow]\n"
        f"Lineage: [yellow]{escape(' -> '.join(report.lineage) or '-')}[/yellow]"
    ))

    if methods:
        console.print(_member_table("Methods", report.methods, show_signature=True))
    if properties:
        console.print(_member_table("Properties", report.properties))

    console.print(f"\n[bold]Visible members:[/bold] {report.total_members}")


@app.command("call")
def call_method(
    target: str = typer.Argument(..., help="Object as 'module:attribute'"),
    method: str = typer.Argument(..., help="Method name, e.g. '__recalculate'"),
    args: Optional[List[str]] = typer.Argument(None, help="Positional arguments, passed as strings"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Invoke a visible method and print the repr of its result."""
    _configure_logging(verbose)

    try:
        handle = MethodHandle(load_target(target), method)
        result = handle.invoke_args(list(args or []))
    except typer.BadParameter:
        raise
    except Exception as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    typer.echo(repr(result))


@app.command("get")
def get_property(
    target: str = typer.Argument(..., help="Object as 'module:attribute'"),
    name: str = typer.Argument(..., help="Property name, e.g. '_balance'"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Print the repr of a visible property's value."""
    _configure_logging(verbose)

    try:
        value = PropertyHandle(load_target(target), name).get()
    except typer.BadParameter:
        raise
    except Exception as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    typer.echo(repr(value))


@app.command()
def version():
    """Show the version of refraction."""
    console.print(f"[bold cyan]Refraction[/bold cyan] v{__version__}")
    console.print("Instance-bound reflection for Python objects")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
