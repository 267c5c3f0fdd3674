"""Extension detection and grouping of file paths."""

from pathlib import Path
from typing import Dict, Iterable, List, Union

from extsort.config.settings import UNKNOWN_EXTENSION


def extension_of(path: Union[str, Path], unknown: str = UNKNOWN_EXTENSION) -> str:
    """
    Return the lower-cased extension of a file, without the leading dot.

    Leading dots belong to the name, not the extension: '.gitignore' has no
    extension while '.bashrc.bak' has 'bak'. A trailing dot ('notes.') also
    counts as no extension.

    Args:
        path: File path; only the final segment is inspected.
        unknown: Value returned when there is no extension.

    Returns:
        Extension such as 'txt', or `unknown`.
    """
    name = Path(path).name
    _, dot, ext = name.lstrip(".").rpartition(".")
    if not dot or not ext:
        return unknown
    return ext.lower()


def group_by_extension(
    paths: Iterable[Path],
    unknown: str = UNKNOWN_EXTENSION,
) -> Dict[str, List[Path]]:
    """
    Group file paths by extension.

    Args:
        paths: File paths in listing order.
        unknown: Group name for files without an extension.

    Returns:
        Dict mapping extension to its paths, in arrival order.
    """
    groups: Dict[str, List[Path]] = {}
    for path in paths:
        groups.setdefault(extension_of(path, unknown), []).append(path)
    return groups
