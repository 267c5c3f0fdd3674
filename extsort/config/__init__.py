"""Configuration and CLI handling."""

from extsort.config.settings import (
    UNKNOWN_EXTENSION,
    DEFAULT_DIR_MODE,
    EXIT_OK,
    EXIT_PATH_ERROR,
    EXIT_CONFIG_ERROR,
    PROG_NAME,
)
from extsort.config.context import OrganizeConfig
from extsort.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    args_to_cli_args,
    build_config,
)

__all__ = [
    "UNKNOWN_EXTENSION",
    "DEFAULT_DIR_MODE",
    "EXIT_OK",
    "EXIT_PATH_ERROR",
    "EXIT_CONFIG_ERROR",
    "PROG_NAME",
    "OrganizeConfig",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "args_to_cli_args",
    "build_config",
]
