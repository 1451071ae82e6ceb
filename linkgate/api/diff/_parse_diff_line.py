"""Parse one line of ``git diff --name-status`` output."""

from pathlib import Path

from .ChangedFile import ChangedFile
from .ChangeStatus import ChangeStatus


def _parse_diff_line(line: str, root: Path, statuses: str) -> ChangedFile | None:
    """Build a ChangedFile from a diff line, or None if the line is filtered out.

    Format: ``M\\tpath`` or, for renames and copies, ``R100\\told\\tnew``.
    """
    if not line:
        return None

    parts = line.split("\t")
    if len(parts) < 2:
        return None

    status = ChangeStatus.from_code(parts[0])
    if status is None or status.value not in statuses:
        return None

    # Renames and copies list the destination last
    rel_path = parts[-1]
    abs_path = root / rel_path

    return ChangedFile(
        status=status,
        absolute_path=abs_path,
        relative_path=rel_path,
        extension=abs_path.suffix[1:],
    )
