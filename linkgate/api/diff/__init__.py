"""Staged change set domain."""

from .ChangedFile import ChangedFile
from .ChangeStatus import ChangeStatus
from .DiffError import DiffError
from .get_diff_files import get_diff_files
from .get_diff_md_files import filter_md_files, get_diff_md_files

__all__ = [
    "ChangeStatus",
    "ChangedFile",
    "DiffError",
    "filter_md_files",
    "get_diff_files",
    "get_diff_md_files",
]
