"""Filesystem operations for directory organization."""

from extsort.filesystem.discovery import (
    FilterResult,
    read_directory,
    is_ordinary_file,
    extract_ordinary_files,
)
from extsort.filesystem.file_ops import (
    RelocationResult,
    ensure_destination,
    move_into,
    relocate_group,
)

__all__ = [
    "FilterResult",
    "read_directory",
    "is_ordinary_file",
    "extract_ordinary_files",
    "RelocationResult",
    "ensure_destination",
    "move_into",
    "relocate_group",
]
