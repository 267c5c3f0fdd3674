"""Directory organization pipeline."""

from extsort.pipeline.orchestrator import (
    OrganizeReport,
    DirectoryOrganizer,
    organize_directory,
)

__all__ = [
    "OrganizeReport",
    "DirectoryOrganizer",
    "organize_directory",
]
