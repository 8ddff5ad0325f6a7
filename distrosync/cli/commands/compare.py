"""``distrosync compare A B`` — compare two version strings."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from distrosync.models.versioning import Comparison, Version, compare

console = Console()

_STYLES: dict[Comparison, str] = {
    Comparison.LOWER: "yellow",
    Comparison.EQUAL: "dim",
    Comparison.HIGHER: "green",
}

_PHRASES: dict[Comparison, str] = {
    Comparison.LOWER: "lower than",
    Comparison.EQUAL: "equal to",
    Comparison.HIGHER: "higher than",
}


def _describe(version: Version) -> str:
    kind = "snapshot" if version.is_unstable else "release"
    return f"{escape(version.raw)} [dim]({kind})[/dim]"


def compare_cmd(
    first: str = typer.Argument(..., help="Left-hand version."),
    second: str = typer.Argument(..., help="Right-hand version."),
) -> None:
    """Print whether FIRST is lower, equal or higher than SECOND."""
    a, b = Version.parse(first), Version.parse(second)
    result = compare(a, b)
    style = _STYLES[result]
    console.print(f"{_describe(a)} is [{style}]{_PHRASES[result]}[/{style}] {_describe(b)}")
