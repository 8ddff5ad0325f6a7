"""distrosync CLI — Typer-based command-line interface.

Provides the ``distrosync`` command with subcommands for resolving distro
specifiers, planning server upgrades and comparing versions.

All output uses Rich for formatted terminal display.
"""
