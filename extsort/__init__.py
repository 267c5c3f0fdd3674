"""
Extsort - Directory organization tool.

Tidies a directory by:
- Listing its immediate entries (no recursion)
- Keeping ordinary files only
- Grouping them by lower-cased extension
- Moving each group into a subdirectory named after the extension
"""

__version__ = "0.1.0"
