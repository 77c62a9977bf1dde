"""Rich console logger for install operations."""

from typing import Optional

from rich.console import Console
from rich.markup import escape


class InstallLogger:
    """Rich console output for install operations.

    This is the default logger handed to the binary synchronizer. Anything
    with ``info`` and ``warning`` methods can stand in for it.
    """

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        """Initialize logger.

        Args:
            console: Rich Console instance
            verbose: Enable debug output
        """
        self.console = console or Console()
        self.verbose = verbose

    def debug(self, message: str) -> None:
        """Dim debug message, shown only in verbose mode."""
        if self.verbose:
            self.console.print(f"[dim]· {escape(message)}[/dim]", soft_wrap=True)

    def info(self, message: str) -> None:
        """Blue info message."""
        self.console.print(f"[blue]ℹ[/blue] {escape(message)}", soft_wrap=True)

    def success(self, message: str) -> None:
        """Green success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}", soft_wrap=True)

    def warning(self, message: str) -> None:
        """Yellow warning message."""
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", soft_wrap=True)

    def error(self, message: str) -> None:
        """Red error message."""
        self.console.print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)
