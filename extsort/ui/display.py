"""Display functions for run configuration and results."""

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.rule import Rule

from extsort.ui.console import ConsoleUI

if TYPE_CHECKING:
    from extsort.config.context import OrganizeConfig
    from extsort.filesystem.file_ops import RelocationResult
    from extsort.pipeline.orchestrator import OrganizeReport


def format_file_count(count: int) -> str:
    """
    Format file count with proper pluralization.

    Args:
        count: Number of files.

    Returns:
        Formatted string like "5 files" or "1 file".
    """
    return f"{count} file{'s' if count != 1 else ''}"


def display_configuration(config: "OrganizeConfig", console: ConsoleUI) -> None:
    """
    Display the run configuration to the user.

    Args:
        config: Run configuration.
        console: Console UI instance.
    """
    console.print_panel(
        f"[bold]Organizing by extension[/bold]\n"
        f"Directory: [cyan]{escape(str(config.base_dir))}[/cyan]\n"
        f"No extension: [cyan]{config.unknown_bucket}/[/cyan]",
        title="Extsort",
    )


def _status_cell(result: "RelocationResult") -> str:
    if result.abandoned:
        return f"[red]{escape(result.error)}[/red]"
    if result.failed:
        return "[yellow]partial[/yellow]"
    return "[green]ok[/green]"


def display_summary(report: "OrganizeReport", console: ConsoleUI) -> None:
    """
    Display the final summary of a run.

    One row per extension group, followed by totals.

    Args:
        report: Run report.
        console: Console UI instance.
    """
    console.print(Rule("[bold green]Summary[/bold green]"))

    if report.results:
        console.print_table(
            "By Extension",
            ["Extension", "Moved", "Left in place", "Status"],
            [
                (escape(r.extension), str(len(r.moved)), str(len(r.failed)), _status_cell(r))
                for r in report.results
            ],
        )

    console.print(f"[blue]Entries:[/blue] {report.entries}")
    console.print(f"[blue]Skipped (not ordinary files):[/blue] {len(report.skipped)}")
    console.print(f"[green]Moved:[/green] {format_file_count(report.moved)}")
    if report.failed > 0:
        console.print(f"[red]Left in place:[/red] {format_file_count(report.failed)}")
    if report.groups_failed > 0:
        console.print(f"[red]Groups abandoned:[/red] {report.groups_failed}")
