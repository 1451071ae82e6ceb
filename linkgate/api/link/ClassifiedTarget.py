"""Classified link target dataclass."""

from dataclasses import dataclass
from pathlib import Path

from .TargetKind import TargetKind


@dataclass(frozen=True)
class ClassifiedTarget:
    """A link target with its kind and, for local targets, the path to check."""

    target: str
    kind: TargetKind
    resolved_path: Path | None = None
