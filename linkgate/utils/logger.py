import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LINKGATE_HOME_EXT

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified linkgate logging.

    Args:
        home: Path to linkgate home directory. If None, derived from environment.
        level: Logging level name for the ``linkgate`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        env_home = os.environ.get("LINKGATE_HOME")
        home = Path(env_home).expanduser().resolve() if env_home else Path.home() / LINKGATE_HOME_EXT

    root_logger = logging.getLogger("linkgate")
    root_logger.setLevel(getattr(logging, level))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        # Ensure directory exists
        home.mkdir(parents=True, exist_ok=True)
        file_handler: logging.Handler = RotatingFileHandler(
            home / "linkgate.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
    except OSError:
        # No log file; the check itself must still run
        file_handler = logging.NullHandler()
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"linkgate.{name}")
