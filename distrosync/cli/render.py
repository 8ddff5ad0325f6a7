"""Rich renderables for descriptors and differentials.

Color scheme
------------
- green   : upgrade / add
- yellow  : downgrade
- red     : delete
- dim     : unchanged
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from distrosync.models.descriptor import DistroDescriptor
from distrosync.models.differential import UpgradeDifferential


class DistroRenderer:
    """Prints descriptors and differentials to a Rich console.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    # ------------------------------------------------------------------
    # Descriptor
    # ------------------------------------------------------------------

    def render_descriptor(self, descriptor: DistroDescriptor) -> Panel:
        table = Table(show_header=True, header_style="bold", expand=True)
        table.add_column("Module", style="cyan")
        table.add_column("Version", style="green")
        table.add_column("Group", style="dim")
        for module in descriptor.modules:
            table.add_row(module.name, module.version, module.group_id)

        platform = descriptor.platform_version or "[dim]none[/dim]"
        title = (
            f"[bold]{descriptor.name}[/bold] {descriptor.version}  "
            f"platform {platform}"
        )
        return Panel(table, title=title, border_style="cyan", padding=(0, 1))

    def print_descriptor(self, descriptor: DistroDescriptor) -> None:
        self.console.print(self.render_descriptor(descriptor))
        if descriptor.properties:
            props = Table(title="Properties", show_header=True, header_style="bold")
            props.add_column("Name", style="cyan")
            props.add_column("Value")
            props.add_column("Prompt", style="dim")
            for name, prop in descriptor.properties.items():
                props.add_row(name, prop.value or prop.default or "", prop.prompt or "")
            self.console.print(props)

    # ------------------------------------------------------------------
    # Differential
    # ------------------------------------------------------------------

    def render_differential(self, differential: UpgradeDifferential) -> Panel:
        table = Table(show_header=True, header_style="bold", expand=True)
        table.add_column("Change", justify="center")
        table.add_column("Artifact", style="cyan")
        table.add_column("From")
        table.add_column("To")

        if differential.platform_artifact is not None:
            label = (
                "[bold green]PLATFORM UP[/bold green]"
                if differential.platform_upgraded
                else "[bold yellow]PLATFORM DOWN[/bold yellow]"
            )
            table.add_row(label, differential.platform_artifact.artifact_id, "", differential.platform_artifact.version)
        for change in differential.updates:
            table.add_row("[green]UPDATE[/green]", change.new.artifact_id, change.old.version, change.new.version)
        for change in differential.downgrades:
            table.add_row("[yellow]DOWNGRADE[/yellow]", change.new.artifact_id, change.old.version, change.new.version)
        for artifact in differential.to_add:
            table.add_row("[green]ADD[/green]", artifact.artifact_id, "", artifact.version)
        for artifact in differential.to_delete:
            table.add_row("[red]DELETE[/red]", artifact.artifact_id, artifact.version, "")

        if differential.is_empty:
            table.add_row("[dim]-[/dim]", "[dim]Server is up to date[/dim]", "", "")

        return Panel(table, title="[bold]Upgrade Differential[/bold]", border_style="blue", padding=(0, 1))

    def print_differential(self, differential: UpgradeDifferential) -> None:
        self.console.print(self.render_differential(differential))
