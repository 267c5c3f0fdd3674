"""Exceptions raised while organizing a directory."""


class OrganizeError(Exception):
    """Base class for all organization errors."""

    pass


class ConfigurationError(OrganizeError):
    """Missing or invalid run configuration (no base directory given)."""

    pass


class BaseDirectoryError(OrganizeError):
    """The base directory cannot be used."""

    def __init__(self, path, message: str):
        super().__init__(message)
        self.path = path


class DirectoryNotFoundError(BaseDirectoryError):
    """The base directory does not exist."""

    pass


class DirectoryAccessError(BaseDirectoryError):
    """The base directory exists but cannot be opened or listed."""

    pass


class InvalidDirectoryError(BaseDirectoryError):
    """The base path exists but is not a directory."""

    pass


class EmptyDirectoryError(BaseDirectoryError):
    """The base directory has no entries. Informational, not a failure."""

    pass


class DestinationError(OrganizeError):
    """A destination subdirectory could not be prepared."""

    def __init__(self, path, message: str):
        super().__init__(message)
        self.path = path


class DestinationConflictError(DestinationError):
    """The destination path exists but is not a directory."""

    pass
