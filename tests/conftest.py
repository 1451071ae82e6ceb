"""Shared pytest configuration and fixtures for all tests."""

import logging
import subprocess
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "integration"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def git(repo: Path, *args: str) -> subprocess.CompletedProcess:
    """Run a git command in ``repo`` and fail the test if it fails."""
    return subprocess.run(["git", *args], cwd=repo, capture_output=True, text=True, check=True)


def stage(repo: Path, rel_path: str, content: str) -> Path:
    """Write ``content`` to ``rel_path`` inside ``repo`` and stage it."""
    file_path = repo / rel_path
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    git(repo, "add", rel_path)
    return file_path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def linkgate_home(tmp_path_factory, monkeypatch) -> Path:
    """Point LINKGATE_HOME at a temporary directory (logs, optional config)."""
    home = tmp_path_factory.mktemp("linkgate_home")
    monkeypatch.setenv("LINKGATE_HOME", str(home))
    return home


@pytest.fixture
def fresh_logging(monkeypatch):
    """Let configure_logging run again; undo its handlers and level afterwards."""
    from linkgate.utils import logger as logger_module

    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    root_logger = logging.getLogger("linkgate")
    handlers_before = list(root_logger.handlers)
    level_before = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[len(handlers_before) :]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(level_before)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository with one commit, so HEAD exists."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()

    git(repo_path, "init")
    git(repo_path, "config", "user.email", "test@example.com")
    git(repo_path, "config", "user.name", "Test User")
    git(repo_path, "config", "commit.gpgsign", "false")
    git(repo_path, "commit", "--allow-empty", "-m", "Initial")
    return repo_path
