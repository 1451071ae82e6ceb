"""Changed file dataclass."""

from dataclasses import dataclass
from pathlib import Path

from .ChangeStatus import ChangeStatus


@dataclass(frozen=True)
class ChangedFile:
    """A file in the staged change set."""

    status: ChangeStatus
    absolute_path: Path
    relative_path: str  # as printed by git
    extension: str  # suffix without the dot
