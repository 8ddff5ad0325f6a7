"""``distrosync resolve SPECIFIER`` — show the descriptor a specifier resolves to."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from distrosync.cli.commands._wiring import build_resolver
from distrosync.cli.render import DistroRenderer

console = Console()


def resolve_cmd(
    specifier: str = typer.Argument(
        ...,
        help="Descriptor file path, or [group:]artifact:version coordinate.",
    ),
    repository: Path = typer.Option(
        None,
        "--repository",
        "-r",
        help="Local artifact repository (defaults to DISTROSYNC_REPOSITORY_PATH).",
    ),
    work_dir: Path = typer.Option(
        None,
        "--work-dir",
        "-w",
        help="Scratch directory for fetched archives.",
    ),
    project_version: str = typer.Option(
        None,
        "--project-version",
        help="Value substituted for ${project.version} placeholders.",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the resolved descriptor to this file.",
    ),
) -> None:
    """Resolve a distro specifier and print the descriptor."""
    resolver = build_resolver(repository, work_dir, project_version)
    try:
        if output is not None:
            descriptor = resolver.save_descriptor_to(output, specifier)
        else:
            descriptor = resolver.resolve(specifier)
    except (ValueError, RuntimeError, OSError) as exc:
        console.print(f"[bold red]Cannot resolve {escape(specifier)}:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    DistroRenderer(console=console).print_descriptor(descriptor)
    if output is not None:
        console.print(f"[dim]Written to {output}[/dim]")
