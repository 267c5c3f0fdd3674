"""User interface components."""

from extsort.ui.console import ConsoleUI
from extsort.ui.display import (
    format_file_count,
    display_configuration,
    display_summary,
)

__all__ = [
    "ConsoleUI",
    "format_file_count",
    "display_configuration",
    "display_summary",
]
