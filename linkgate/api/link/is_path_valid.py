"""Local link check."""

from pathlib import Path


def is_path_valid(path: Path) -> bool:
    """Return True if ``path`` can be stat'ed (file or directory)."""
    try:
        path.stat()
    except (OSError, ValueError):
        return False
    return True
