"""Directory listing and ordinary-file detection."""

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from loguru import logger

from extsort.errors import (
    DirectoryAccessError,
    DirectoryNotFoundError,
    EmptyDirectoryError,
    InvalidDirectoryError,
)

# Non-blocking so that opening a FIFO does not hang the run
_OPEN_FLAGS = os.O_RDONLY | getattr(os, "O_NONBLOCK", 0)

SKIP_OPEN_FAILED = "open failed"
SKIP_STAT_FAILED = "stat failed"
SKIP_DIRECTORY = "directory"


@dataclass
class FilterResult:
    """
    Outcome of filtering directory entries.

    Attributes:
        files: Ordinary file paths, in listing order.
        skipped: (entry name, reason) pairs for excluded entries.
    """

    files: List[Path] = field(default_factory=list)
    skipped: List[Tuple[str, str]] = field(default_factory=list)


def read_directory(base: Path) -> List[str]:
    """
    Return the names of the immediate entries of a directory.

    Args:
        base: Directory to list.

    Returns:
        Entry names (files and subdirectories alike), in listing order.

    Raises:
        DirectoryNotFoundError: If the path does not exist.
        DirectoryAccessError: If the path cannot be opened or listed.
        InvalidDirectoryError: If the path is not a directory.
        EmptyDirectoryError: If the directory has no entries.
    """
    try:
        st = os.stat(base)
    except FileNotFoundError:
        raise DirectoryNotFoundError(base, f"{base} does not exist")
    except OSError as e:
        raise DirectoryAccessError(base, f"Cannot open {base}: {e.strerror or e}")

    if not stat.S_ISDIR(st.st_mode):
        raise InvalidDirectoryError(base, f"{Path(base).name} is not a directory")

    try:
        names = os.listdir(base)
    except OSError as e:
        raise DirectoryAccessError(base, f"Cannot list {base}: {e.strerror or e}")

    if not names:
        raise EmptyDirectoryError(base, "This directory does not contain any files")

    logger.debug(f"{len(names)} entries in {base}")
    return names


def _check_entry(path: Path) -> Optional[str]:
    """Return a skip reason for path, or None if it is an ordinary file."""
    try:
        fd = os.open(path, _OPEN_FLAGS)
    except OSError:
        return SKIP_OPEN_FAILED

    try:
        st = os.fstat(fd)
    except OSError:
        return SKIP_STAT_FAILED
    finally:
        os.close(fd)

    if stat.S_ISDIR(st.st_mode):
        return SKIP_DIRECTORY
    return None


def is_ordinary_file(path: Path) -> bool:
    """
    Check whether path can be opened and is not a directory.

    The file is briefly opened and closed during the check.
    """
    return _check_entry(path) is None


def extract_ordinary_files(base: Path, names: Iterable[str]) -> FilterResult:
    """
    Keep the entries of base that are ordinary files.

    Entries that cannot be opened or stat'ed, and directories, are skipped
    without raising.

    Args:
        base: Directory containing the entries.
        names: Entry names as returned by read_directory.

    Returns:
        FilterResult with kept paths in input order and the skipped names.
    """
    result = FilterResult()

    for name in names:
        path = Path(base) / name
        reason = _check_entry(path)
        if reason is not None:
            logger.debug(f"Skipping {name}: {reason}")
            result.skipped.append((name, reason))
            continue
        result.files.append(path)

    logger.debug(f"{len(result.files)} ordinary files, {len(result.skipped)} skipped")
    return result
