"""``distrosync diff SERVER_DIR SPECIFIER`` — plan an upgrade of a server.

Scans the installed webapp and modules, resolves the target descriptor and
prints the upgrade differential. Nothing on disk is changed.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from distrosync.adapters import scan_server_directory
from distrosync.cli.commands._wiring import build_resolver
from distrosync.cli.render import DistroRenderer
from distrosync.core.differential import CoreArtifactDeletionError, calculate_update_differential
from distrosync.core.resolver import InvalidSpecifierError, UnsupportedVersionError

console = Console()


def diff_cmd(
    server_dir: Path = typer.Argument(
        ...,
        help="Server directory holding the webapp and a modules/ folder.",
    ),
    specifier: str = typer.Argument(
        ...,
        help="Target descriptor file path or [group:]artifact:version coordinate.",
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
) -> None:
    """Compute the changes needed to bring SERVER_DIR up to SPECIFIER."""
    resolver = build_resolver(repository, work_dir)

    try:
        installed = scan_server_directory(server_dir)
        descriptor = resolver.resolve(specifier)
    except (InvalidSpecifierError, UnsupportedVersionError) as exc:
        console.print(f"[bold red]Invalid target:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    except (ValueError, RuntimeError, OSError) as exc:
        console.print(f"[bold red]Resolution failed:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    try:
        differential = calculate_update_differential(installed, descriptor)
    except CoreArtifactDeletionError as exc:
        console.print(f"[bold red]Refusing to plan upgrade:[/bold red] {escape(str(exc))}")
        console.print(
            "[dim]The target descriptor must declare a platform version "
            "when the server has one installed.[/dim]"
        )
        raise typer.Exit(code=1)

    if descriptor.built_in and differential.to_delete:
        console.print(
            f"[bold yellow]Warning:[/bold yellow] built-in descriptor for "
            f"{escape(descriptor.name)} {escape(descriptor.version)} lists no modules; "
            f"{len(differential.to_delete)} installed module(s) would be deleted."
        )

    DistroRenderer(console=console).print_differential(differential)
