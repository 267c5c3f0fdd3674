"""Entry point for the extsort package.

This module provides the command-line entry point for the organization tool.
Run with: python -m extsort --dir <path>
"""

import sys
from typing import List, Optional

from loguru import logger

from extsort.config import (
    EXIT_CONFIG_ERROR,
    EXIT_OK,
    EXIT_PATH_ERROR,
    args_to_cli_args,
    build_config,
    create_parser,
    parse_arguments,
)
from extsort.errors import BaseDirectoryError, ConfigurationError, EmptyDirectoryError
from extsort.pipeline import organize_directory
from extsort.ui import ConsoleUI, display_configuration, display_summary


def setup_logging(debug: bool = False) -> None:
    """
    Configure loguru logging.

    Only a stderr sink is installed: a log file in the working directory
    could land inside the directory being organized.

    Args:
        debug: If True, enable debug-level logging.
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )


def main(argv: Optional[List[str]] = None, console: Optional[ConsoleUI] = None) -> int:
    """
    Main entry point for the organization tool.

    Args:
        argv: Command-line arguments (None for sys.argv).
        console: Console UI instance (a new one by default).

    Returns:
        Exit code: 0 on completion or empty directory, 1 for an unusable
        directory, 2 when no directory was given.
    """
    namespace = parse_arguments(argv)
    cli_args = args_to_cli_args(namespace)

    setup_logging()
    console = console or ConsoleUI()

    try:
        config = build_config(cli_args)
    except ConfigurationError as e:
        console.print_error(str(e))
        console.print(create_parser().format_usage().rstrip(), markup=False)
        return EXIT_CONFIG_ERROR

    display_configuration(config, console)

    try:
        report = organize_directory(config)
    except EmptyDirectoryError as e:
        console.print_info(str(e))
        return EXIT_OK
    except BaseDirectoryError as e:
        console.print_error(str(e))
        return EXIT_PATH_ERROR

    display_summary(report, console)
    if report.has_failures:
        console.print_warning("Some files were left in place")
    else:
        console.print_success("Directory organized")
    return EXIT_OK


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
