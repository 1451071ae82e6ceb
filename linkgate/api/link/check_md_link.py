"""Check every link of one markdown document."""

import logging
from pathlib import Path

from ...constants import REQUEST_TIMEOUT, TOOL_DIR
from ..diff.ChangedFile import ChangedFile
from ._parsers import MarkdownParser
from .classify_target import classify_target
from .is_path_valid import is_path_valid
from .is_url_valid import is_url_valid
from .TargetKind import TargetKind

logger = logging.getLogger(__name__)


def check_md_link(
    text: str,
    md_file: ChangedFile,
    timeout: float = REQUEST_TIMEOUT,
    tool_dir: Path = TOOL_DIR,
) -> list[str]:
    """Return the targets in ``text`` that do not resolve, in extraction order.

    Targets are checked one at a time; repeated targets are checked again.
    """
    invalid = []
    for ref in MarkdownParser().parse(text):
        classified = classify_target(ref.raw_target, md_file.absolute_path, tool_dir)

        if classified.kind is TargetKind.NETWORK:
            valid = is_url_valid(ref.raw_target, timeout)
        else:
            valid = classified.resolved_path is not None and is_path_valid(classified.resolved_path)

        if not valid:
            logger.info(
                f"{md_file.relative_path}:{ref.line_number}:{ref.column_number}: "
                f"unresolved {classified.kind.value} target {ref.raw_target}"
            )
            invalid.append(ref.raw_target)
    return invalid
