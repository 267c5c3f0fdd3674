"""Run configuration passed explicitly through the pipeline."""

from dataclasses import dataclass
from pathlib import Path

from extsort.config.settings import DEFAULT_DIR_MODE, UNKNOWN_EXTENSION


@dataclass(frozen=True)
class OrganizeConfig:
    """
    Configuration for a single organization run.

    Attributes:
        base_dir: Directory whose immediate files are organized.
        unknown_bucket: Group name for files without an extension.
        dir_mode: Permission bits for created destination directories.
    """

    base_dir: Path
    unknown_bucket: str = UNKNOWN_EXTENSION
    dir_mode: int = DEFAULT_DIR_MODE

    def destination_for(self, extension: str) -> Path:
        """Return the destination subdirectory for an extension group."""
        return self.base_dir / extension
