"""Locations of the packaged hook script and the installed hook."""

from pathlib import Path

HOOK_MARKER = "linkgate pre-commit hook"


def get_hook_source_path() -> Path:
    """Get path to pre-commit hook template."""
    return Path(__file__).parent / "pre-commit"


def get_hook_install_path(repo_path: Path) -> Path:
    """Get path where hook should be installed."""
    return repo_path / ".git" / "hooks" / "pre-commit"


def is_hook_installed(repo_path: Path) -> bool:
    """Check if the linkgate hook is installed and executable."""
    hook_path = get_hook_install_path(repo_path)
    if not (hook_path.is_file() and hook_path.stat().st_mode & 0o111):
        return False
    return HOOK_MARKER in hook_path.read_text(encoding="utf-8", errors="replace")
