"""File operations for creating destinations and moving files into them."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from loguru import logger

from extsort.config.settings import DEFAULT_DIR_MODE
from extsort.errors import DestinationConflictError, DestinationError


@dataclass
class RelocationResult:
    """
    Outcome of relocating one extension group.

    Attributes:
        extension: Group name.
        destination: Destination subdirectory.
        moved: Paths successfully moved (original locations).
        failed: Paths left in place because the rename failed.
        error: Reason the whole group was abandoned, if it was.
    """

    extension: str
    destination: Path
    moved: List[Path] = field(default_factory=list)
    failed: List[Path] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def abandoned(self) -> bool:
        """True when the destination could not be prepared."""
        return self.error is not None


def ensure_destination(directory: Path, mode: int = DEFAULT_DIR_MODE) -> Path:
    """
    Create a destination directory and its missing ancestors.

    Args:
        directory: Directory to create.
        mode: Permission bits for created directories.

    Returns:
        The directory path.

    Raises:
        DestinationConflictError: If the path exists but is not a directory.
        DestinationError: If creation fails for any other reason.
    """
    try:
        directory.mkdir(mode=mode, parents=True, exist_ok=True)
    except FileExistsError:
        raise DestinationConflictError(
            directory, f"{directory} already exists and is not a directory"
        )
    except OSError as e:
        raise DestinationError(
            directory, f"Error while creating dir {directory}: {e.strerror or e}"
        )

    # Guards against the path being replaced between mkdir and use
    if not directory.is_dir():
        raise DestinationConflictError(
            directory, f"{directory} already exists and is not a directory"
        )
    return directory


def move_into(source: Path, directory: Path) -> bool:
    """
    Rename a file into a directory, keeping its name.

    Never overwrites an existing target.

    Args:
        source: File to move.
        directory: Destination directory (same filesystem).

    Returns:
        True if the file was moved, False otherwise.
    """
    target = directory / source.name

    if os.path.lexists(target):
        logger.warning(f"Destination file exists, leaving in place: {source.name}")
        return False

    try:
        os.rename(source, target)
    except OSError as e:
        logger.warning(f"Could not move {source.name}: {e.strerror or e}")
        return False

    logger.debug(f"Moved {source.name} -> {directory.name}/")
    return True


def relocate_group(
    directory: Path,
    paths: Iterable[Path],
    extension: Optional[str] = None,
    mode: int = DEFAULT_DIR_MODE,
) -> RelocationResult:
    """
    Move every file of an extension group into its destination directory.

    If the destination cannot be prepared the group is abandoned and all of
    its files stay in place. Individual rename failures do not stop the group.

    Args:
        directory: Destination subdirectory.
        paths: Files of the group, in order.
        extension: Group name (defaults to the directory name).
        mode: Permission bits for a created destination.

    Returns:
        RelocationResult describing what was moved.
    """
    paths = list(paths)
    result = RelocationResult(
        extension=extension if extension is not None else directory.name,
        destination=directory,
    )

    try:
        ensure_destination(directory, mode)
    except DestinationError as e:
        logger.error(str(e))
        result.error = str(e)
        result.failed.extend(paths)
        return result

    for path in paths:
        if move_into(path, directory):
            result.moved.append(path)
        else:
            result.failed.append(path)

    return result
