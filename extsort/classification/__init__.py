"""File classification by extension."""

from extsort.classification.extension import (
    extension_of,
    group_by_extension,
)

__all__ = [
    "extension_of",
    "group_by_extension",
]
