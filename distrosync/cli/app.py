"""Main Typer application — imports and registers all CLI commands.

Entry point: ``distrosync`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from distrosync.cli.commands.compare import compare_cmd
from distrosync.cli.commands.diff import diff_cmd
from distrosync.cli.commands.properties import properties_cmd
from distrosync.cli.commands.resolve import resolve_cmd
from distrosync.config import settings

app = typer.Typer(
    name="distrosync",
    help="distrosync: resolve distributions and plan server upgrades.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="resolve", help="Resolve a distro specifier to a descriptor.")(resolve_cmd)
app.command(name="diff", help="Show the upgrade differential for a server.")(diff_cmd)
app.command(name="compare", help="Compare two version strings.")(compare_cmd)
app.command(name="properties", help="Reconcile a descriptor's custom properties.")(properties_cmd)


@app.callback()
def _configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging once per invocation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
