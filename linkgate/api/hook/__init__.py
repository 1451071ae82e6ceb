"""Pre-commit hook management."""

from .cmd_install import cmd_install
from .cmd_status import cmd_status
from .cmd_uninstall import cmd_uninstall
from .HookOutput import HookOutput

__all__ = [
    "HookOutput",
    "cmd_install",
    "cmd_status",
    "cmd_uninstall",
]
