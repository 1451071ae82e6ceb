"""Link API domain: extract, classify and resolve links of staged documents."""

from .check_md_link import check_md_link
from .ClassifiedTarget import ClassifiedTarget
from .classify_target import classify_target
from .cmd_check import cmd_check
from .is_path_valid import is_path_valid
from .is_url_valid import is_url_valid
from .LinkCheckOutput import LinkCheckOutput
from .TargetKind import TargetKind
from .ValidationReport import ValidationReport

__all__ = [
    "ClassifiedTarget",
    "LinkCheckOutput",
    "TargetKind",
    "ValidationReport",
    "check_md_link",
    "classify_target",
    "cmd_check",
    "is_path_valid",
    "is_url_valid",
]
