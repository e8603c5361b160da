"""Console-based output handler for Tessa."""

from pathlib import Path

from rich.console import Console
from rich.table import Table


class ConsoleOutputHandler:
    """Rich Console-based output handler."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print(self, message: object, **kwargs) -> None:
        """Print a message or a rich renderable."""
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message."""
        self.print(message)

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.print(f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        """Print an error message."""
        self.print(f"[red]Error:[/red] {message}")


def exists_marker(path: Path) -> str:
    """Return a colored marker telling whether ``path`` exists."""
    try:
        found = path.exists()
    except (OSError, ValueError):
        found = False
    return "[green]exists[/green]" if found else "[dim]missing[/dim]"


def build_locations_table(locations: dict[str, str]) -> Table:
    """Render resolved locations as a two-column table."""
    table = Table(title="Tessa locations", show_header=True, header_style="bold")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in locations.items():
        table.add_row(key, value)
    return table


def build_candidates_table(title: str, paths: list[Path]) -> Table:
    """Render an ordered probe list with an existence marker per path."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Path")
    table.add_column("Status")
    for index, path in enumerate(paths, start=1):
        table.add_row(str(index), str(path), exists_marker(path))
    return table
