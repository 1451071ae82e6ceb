"""Fixed constants for the staged-document link check."""

from pathlib import Path

LINKGATE_HOME_EXT = ".linkgate"  # user-level state/config directory suffix

# Staged changes against the current commit
DIFF_COMMAND = ["git", "-c", "core.quotepath=off", "diff", "--cached", "--name-status", "HEAD"]

# Added, deleted, modified, renamed, copied
DEFAULT_STATUSES = "admrc"

MARKDOWN_EXTENSIONS = ("md", "markdown")

# Seconds per network check
REQUEST_TIMEOUT = 10.0

# Installed package directory; absolute link targets are anchored one level above it
TOOL_DIR = Path(__file__).resolve().parent
