"""``distrosync properties SPECIFIER`` — reconcile a descriptor's custom properties.

Values given with ``--set`` win over the descriptor; remaining properties
with a prompt are asked for interactively.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from distrosync.adapters import ConsolePrompt
from distrosync.cli.commands._wiring import build_resolver
from distrosync.core.properties import reconcile_properties

console = Console()


def _parse_overrides(pairs: list[str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--set")
        overrides[key] = value
    return overrides


def properties_cmd(
    specifier: str = typer.Argument(
        ...,
        help="Descriptor file path, or [group:]artifact:version coordinate.",
    ),
    overrides: list[str] = typer.Option(
        [],
        "--set",
        "-s",
        help="Property override as KEY=VALUE; may be repeated.",
    ),
    repository: Path = typer.Option(
        None,
        "--repository",
        "-r",
        help="Local artifact repository (defaults to DISTROSYNC_REPOSITORY_PATH).",
    ),
    interactive: bool = typer.Option(
        True,
        "--interactive/--no-interactive",
        help="Prompt for properties that have no other value.",
    ),
) -> None:
    """Print the property values a server would receive from SPECIFIER."""
    values = _parse_overrides(overrides)
    resolver = build_resolver(repository)
    try:
        descriptor = resolver.resolve(specifier)
    except (ValueError, RuntimeError, OSError) as exc:
        console.print(f"[bold red]Cannot resolve {escape(specifier)}:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    prompt = ConsolePrompt(console=console) if interactive else None
    resolved = reconcile_properties(descriptor, values, prompt)

    table = Table(title="Server Properties", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")
    for name, value in resolved.items():
        table.add_row(escape(name), escape(value))
    console.print(table)
