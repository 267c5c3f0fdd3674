"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from extsort.config.context import OrganizeConfig
from extsort.config.settings import PROG_NAME
from extsort.errors import ConfigurationError


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        base_dir: Directory to organize, or None when --dir was not given.
    """

    base_dir: Optional[Path] = None


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="""
        Moves the files of a directory into subdirectories named after
        their lower-cased extension. Files without an extension go to 'unknown'.
        """
    )

    parser.add_argument(
        '--dir',
        default='',
        help="the base directory to process"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    An empty --dir value is treated the same as a missing one.
    """
    base_dir = Path(namespace.dir) if namespace.dir else None
    return CLIArgs(base_dir=base_dir)


def build_config(cli_args: CLIArgs) -> OrganizeConfig:
    """
    Build the run configuration from CLI arguments.

    Raises:
        ConfigurationError: If no base directory was given.
    """
    if cli_args.base_dir is None:
        raise ConfigurationError("Please specify a directory")
    return OrganizeConfig(base_dir=cli_args.base_dir)
