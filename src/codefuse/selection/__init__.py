"""File selection and ordering."""

from .discovery import is_excluded_directory, select_files
from .ordering import SORT_BY_NAME, SORT_BY_TYPE, order_paths, resolve_sort_mode

__all__ = [
    "SORT_BY_NAME",
    "SORT_BY_TYPE",
    "is_excluded_directory",
    "order_paths",
    "resolve_sort_mode",
    "select_files",
]
