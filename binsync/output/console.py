# binsync Console Output
# Rich-based console output for user-friendly display

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from binsync.sync.engine import SyncRequest
from binsync.sync.status import TargetStatus


class Console:
    """
    Console output manager using Rich.

    Provides formatted output for install runs and target inspection.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
        """
        self.verbose = verbose
        self._console = RichConsole(no_color=not colored, highlight=False)

    @property
    def rich_console(self) -> RichConsole:
        """Underlying Rich console, shared with the install logger."""
        return self._console

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]Warning:[/yellow] {escape(message)}", soft_wrap=True)

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]{escape(message)}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]{escape(message)}[/blue]")

    def print_request(self, request: SyncRequest) -> None:
        """Print the parameters of an install run."""
        skip = ", ".join(sorted(request.skip_binaries)) or "none"
        prefix = request.binaries_prefix or "none"
        targets = "\n".join(f"  • {escape(str(p))}" for p in request.target_dirs) or "  none"
        self._console.print(
            Panel(
                f"Source: {escape(str(request.source_dir))}\n"
                f"Targets:\n{targets}\n"
                f"Update existing: {'yes' if request.update_binaries else 'no'}\n"
                f"Skip: {escape(skip)}\n"
                f"Prefix: {escape(prefix)}",
                title="Install",
                border_style="blue",
            )
        )

    def print_targets(self, statuses: list[TargetStatus]) -> None:
        """
        Print install state for each target directory.

        Args:
            statuses: Target statuses as returned by inspect_targets.
        """
        if not statuses:
            self._console.print("[dim]No target directories configured[/dim]")
            return

        table = Table(title="Target Directories", show_header=True, header_style="bold")
        table.add_column("Directory", style="cyan")
        table.add_column("Writable", justify="center")
        table.add_column("Installed", justify="right")
        table.add_column("Missing", justify="right")
        table.add_column("Stale temps", justify="right")

        for status in statuses:
            if not status.exists:
                writable = "[red]missing[/red]"
            elif status.writable:
                writable = "[green]yes[/green]"
            else:
                writable = "[yellow]no[/yellow]"

            missing_style = "red" if status.missing else "green"
            temps_style = "yellow" if status.has_stale_temps else "dim"
            table.add_row(
                escape(str(status.path)),
                writable,
                str(len(status.installed)),
                f"[{missing_style}]{len(status.missing)}[/{missing_style}]",
                f"[{temps_style}]{len(status.stale_temps)}[/{temps_style}]",
            )

        self._console.print()
        self._console.print(table)

        for status in statuses:
            self._print_target_details(status)

    def _print_target_details(self, status: TargetStatus) -> None:
        """Print per-file details for one target."""
        if status.error:
            self._console.print(f"  [red]✗[/red] {escape(str(status.path))}: {escape(status.error)}")

        if not (self.verbose or status.missing or status.has_stale_temps):
            return

        for name in status.missing:
            self._console.print(f"    [red]✗[/red] {escape(name)} [dim]missing in {escape(str(status.path))}[/dim]")
        for temp in status.stale_temps:
            self._console.print(f"    [yellow]![/yellow] {escape(str(temp))} [dim](stale temp file)[/dim]")

        if self.verbose:
            for name in status.installed:
                self._console.print(f"    [green]✓[/green] {escape(name)}")
            for name in status.skipped:
                self._console.print(f"    [dim]○ {escape(name)} (skipped)[/dim]")

    def print_config_summary(self, config_path: str, loaded: bool) -> None:
        """Print configuration summary."""
        source = "file" if loaded else "built-in defaults (file not found)"
        self._console.print(
            Panel(
                f"Config: {escape(config_path)}\nLoaded from: {source}",
                title="binsync Configuration",
                border_style="blue",
            )
        )


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)
