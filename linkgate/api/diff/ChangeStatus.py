"""Git change status of a staged file."""

from enum import Enum


class ChangeStatus(Enum):
    """Status letters reported by ``git diff --name-status``."""

    ADDED = "a"
    DELETED = "d"
    MODIFIED = "m"
    RENAMED = "r"
    COPIED = "c"

    @classmethod
    def from_code(cls, code: str) -> "ChangeStatus | None":
        """Map a status code such as ``M`` or ``R100`` to a status, or None if unknown."""
        if not code:
            return None
        try:
            return cls(code[0].lower())
        except ValueError:
            return None
