"""Orchestration of a single organization run."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from loguru import logger
from tqdm import tqdm

from extsort.classification import group_by_extension
from extsort.config.context import OrganizeConfig
from extsort.filesystem import (
    RelocationResult,
    extract_ordinary_files,
    read_directory,
    relocate_group,
)


@dataclass
class OrganizeReport:
    """Outcome of one run over a base directory."""

    base_dir: Path
    entries: int = 0
    skipped: List[Tuple[str, str]] = field(default_factory=list)
    results: List[RelocationResult] = field(default_factory=list)

    @property
    def files(self) -> int:
        return sum(len(r.moved) + len(r.failed) for r in self.results)

    @property
    def moved(self) -> int:
        return sum(len(r.moved) for r in self.results)

    @property
    def failed(self) -> int:
        return sum(len(r.failed) for r in self.results)

    @property
    def groups_failed(self) -> int:
        return sum(1 for r in self.results if r.abandoned)

    @property
    def has_failures(self) -> bool:
        return self.failed > 0


class DirectoryOrganizer:
    """
    Runs Reader -> Filter -> Classifier -> Relocator over a base directory.

    Groups are relocated one after the other; a failure in one group never
    stops the others.
    """

    def __init__(self, config: OrganizeConfig):
        """
        Initialize the organizer.

        Args:
            config: Run configuration.
        """
        self.config = config

    def classify(self) -> Tuple[OrganizeReport, Dict[str, List[Path]]]:
        """
        List, filter and group the base directory without touching it.

        Raises:
            BaseDirectoryError: If the base directory is unusable or empty.
        """
        base = self.config.base_dir
        names = read_directory(base)
        filtered = extract_ordinary_files(base, names)
        groups = group_by_extension(filtered.files, self.config.unknown_bucket)

        report = OrganizeReport(base_dir=base, entries=len(names), skipped=filtered.skipped)
        return report, groups

    def run(self) -> OrganizeReport:
        """
        Organize the base directory.

        Returns:
            OrganizeReport with per-group results.

        Raises:
            BaseDirectoryError: If the base directory is unusable or empty.
                Raised before any file is moved.
        """
        report, groups = self.classify()
        logger.info(
            f"{len(groups)} extension groups from {report.entries} entries in {report.base_dir}"
        )

        with tqdm(groups.items(), desc="Organizing", unit="group", disable=None) as pbar:
            for extension, paths in pbar:
                pbar.set_postfix_str(extension)
                result = relocate_group(
                    self.config.destination_for(extension),
                    paths,
                    extension=extension,
                    mode=self.config.dir_mode,
                )
                report.results.append(result)

        logger.info(f"Moved {report.moved} files, {report.failed} left in place")
        return report


def organize_directory(config: OrganizeConfig) -> OrganizeReport:
    """Organize config.base_dir and return the run report."""
    return DirectoryOrganizer(config).run()
