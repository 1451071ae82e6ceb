"""Collect the staged change set."""

import logging
import subprocess
from pathlib import Path

from ...constants import DEFAULT_STATUSES, DIFF_COMMAND
from ._parse_diff_line import _parse_diff_line
from .ChangedFile import ChangedFile
from .DiffError import DiffError

logger = logging.getLogger(__name__)


def get_diff_files(root: Path | None = None, statuses: str = DEFAULT_STATUSES) -> list[ChangedFile]:
    """Get all staged files changed relative to HEAD.

    Args:
        root: Working tree root (default: current directory)
        statuses: Status letters to keep, any of ``a d m r c`` (case-insensitive)

    Returns:
        ChangedFile records in git's output order

    Raises:
        DiffError: If git cannot be run or exits with an error
    """
    root = Path.cwd() if root is None else root
    wanted = statuses.lower()

    logger.debug(f"Running {' '.join(DIFF_COMMAND)} in {root}")
    try:
        result = subprocess.run(
            DIFF_COMMAND,
            cwd=root,
            capture_output=True,
            text=True,
            encoding="utf-8",
            # Non-UTF-8 file names survive as surrogates and map back to the same bytes
            errors="surrogateescape",
            check=False,
        )
    except OSError as exc:
        raise DiffError(f"Cannot run git: {exc}") from exc

    if result.returncode != 0:
        raise DiffError(f"git diff failed: {result.stderr.strip()}")

    changed = []
    for line in result.stdout.splitlines():
        changed_file = _parse_diff_line(line, root, wanted)
        if changed_file is not None:
            changed.append(changed_file)
    return changed
