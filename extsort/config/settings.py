"""Configuration settings and constants for the extsort package."""

# Group name for files without a usable extension
UNKNOWN_EXTENSION: str = "unknown"

# Mode for created destination directories (umask still applies)
DEFAULT_DIR_MODE: int = 0o777

# Exit codes
EXIT_OK: int = 0
EXIT_PATH_ERROR: int = 1
EXIT_CONFIG_ERROR: int = 2

PROG_NAME: str = "extsort"
