"""Narrow the staged change set to markdown documents."""

from collections.abc import Iterable
from pathlib import Path

from ...constants import MARKDOWN_EXTENSIONS
from .ChangedFile import ChangedFile
from .ChangeStatus import ChangeStatus
from .get_diff_files import get_diff_files


def filter_md_files(
    changed: Iterable[ChangedFile], extensions: Iterable[str] = MARKDOWN_EXTENSIONS
) -> list[ChangedFile]:
    """Keep markdown documents that still exist (no deletions)."""
    allowed = set(extensions)
    return [item for item in changed if item.status is not ChangeStatus.DELETED and item.extension in allowed]


def get_diff_md_files(
    root: Path | None = None, extensions: Iterable[str] = MARKDOWN_EXTENSIONS
) -> list[ChangedFile]:
    """Get all staged markdown documents, excluding deleted ones."""
    return filter_md_files(get_diff_files(root), extensions)
