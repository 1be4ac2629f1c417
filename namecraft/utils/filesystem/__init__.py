"""Filesystem utilities package.

Helpers for path splitting, rename result summaries and file sorting.
"""

from namecraft.utils.filesystem.file_utils import (
    get_file_name,
    split_file_name,
    split_file_path,
    summarize_rename_results,
)
from namecraft.utils.filesystem.sorting import create_sorted_index_map, sort_files

__all__ = [
    "create_sorted_index_map",
    "get_file_name",
    "sort_files",
    "split_file_name",
    "split_file_path",
    "summarize_rename_results",
]
