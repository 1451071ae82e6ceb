"""Classify a link target and resolve local targets to a filesystem path."""

import os
import re
from pathlib import Path

from ...constants import TOOL_DIR
from .ClassifiedTarget import ClassifiedTarget
from .TargetKind import TargetKind

HTTP_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def _resolve(base: Path, relative: str) -> Path:
    return Path(os.path.abspath(os.path.join(base, relative)))


def classify_target(target: str, document_path: Path, tool_dir: Path = TOOL_DIR) -> ClassifiedTarget:
    """Classify ``target`` found in the document at ``document_path``.

    Local targets resolve as follows:

    - absolute (``/img/a.png``): under the directory one level above ``tool_dir``,
      never under the filesystem root;
    - not starting with ``..`` (``img/a.png``): ``<document dir>/../<target>``;
    - starting with ``..`` (``../img/a.png``): ``<document dir>/./<target>``.

    Args:
        target: Raw link target, title already stripped
        document_path: Absolute path of the document containing the link
        tool_dir: Anchor for absolute targets (default: installed package directory)
    """
    if HTTP_PATTERN.match(target):
        return ClassifiedTarget(target=target, kind=TargetKind.NETWORK)

    document_dir = document_path.parent
    if os.path.isabs(target):
        resolved = _resolve(tool_dir, ".." + target)
    elif not target.startswith(".."):
        resolved = _resolve(document_dir, "../" + target)
    else:
        resolved = _resolve(document_dir, "./" + target)

    return ClassifiedTarget(target=target, kind=TargetKind.LOCAL, resolved_path=resolved)
