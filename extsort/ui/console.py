"""Console output for extsort, built on Rich."""

from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

# (style, prefix) per message kind
STATUS_STYLES = {
    "info": ("blue", "ℹ️ "),
    "warning": ("yellow", "⚠️ "),
    "error": ("red", "❌"),
    "success": ("green", "✓"),
}


class ConsoleUI:
    """
    Operator-facing output of a run.

    Status messages are plain text: paths and file names are escaped so
    that brackets in them are never read as Rich markup.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console if console is not None else Console()

    def print(self, *args, **kwargs) -> None:
        """Print to console (delegates to Rich Console)."""
        self.console.print(*args, **kwargs)

    def status(self, kind: str, message: str) -> None:
        """
        Print a one-line status message.

        Args:
            kind: One of the STATUS_STYLES keys.
            message: Plain text, escaped before printing.
        """
        style, prefix = STATUS_STYLES[kind]
        self.console.print(f"[{style}]{prefix} {escape(message)}[/{style}]")

    def print_info(self, message: str) -> None:
        self.status("info", message)

    def print_warning(self, message: str) -> None:
        self.status("warning", message)

    def print_error(self, message: str) -> None:
        self.status("error", message)

    def print_success(self, message: str) -> None:
        self.status("success", message)

    def print_panel(self, content: str, title: str = "") -> None:
        """Print markup content in a blue bordered panel."""
        self.console.print(Panel(content, title=title, border_style="blue"))

    def print_table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Iterable[Sequence[str]],
    ) -> None:
        """
        Print a table built from columns and rows of markup cells.

        Args:
            title: Table title.
            columns: Column headers.
            rows: Cell values; callers escape any untrusted text.
        """
        table = Table(title=title, show_header=True, header_style="bold magenta")
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*row)
        self.console.print(table)
