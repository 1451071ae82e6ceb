"""End-to-end runs of the check against staged changes in a real repository."""

import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

import linkgate
from linkgate.cli import main
from tests.conftest import git, stage


def _response(status_code: int) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    return response


@pytest.fixture
def in_repo(git_repo, monkeypatch):
    monkeypatch.chdir(git_repo)
    return git_repo


def test_reachable_url_passes(in_repo, capsys):
    stage(in_repo, "README.md", "[x](https://example.com/ok)")

    with patch("requests.get", return_value=_response(200)) as mock_get:
        assert main([]) == 0

    mock_get.assert_called_once_with("https://example.com/ok", timeout=10.0)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_missing_local_file_fails(in_repo, capsys):
    stage(in_repo, "README.md", "[x](./missing.png)")

    assert main([]) != 0

    err = capsys.readouterr().err
    assert "README.md" in err
    assert "./missing.png" in err


def test_mixed_documents(in_repo, capsys):
    (in_repo / "img").mkdir()
    (in_repo / "img" / "logo.png").write_bytes(b"")
    git(in_repo, "add", "img/logo.png")
    stage(in_repo, "docs/guide.md", '![logo](../img/logo.png "Logo") [home](https://example.com/)')
    stage(in_repo, "docs/broken.markdown", "[gone](https://example.com/gone)\n[rel](img/logo.png)")
    stage(in_repo, "notes.txt", "[ignored](nowhere.png)")

    def fake_get(url, timeout):
        return _response(404 if url.endswith("gone") else 200)

    with patch("requests.get", side_effect=fake_get):
        assert main(["--display", "json"]) == 1

    err = capsys.readouterr().err
    assert "docs/broken.markdown" in err
    assert "https://example.com/gone" in err
    assert "docs/guide.md" not in err.split("invalid_links", 1)[1].split("documents", 1)[0]
    assert "nowhere.png" not in err


def test_installed_hook_blocks_commit(in_repo):
    assert main(["hook", "install"]) == 0
    hook_path = in_repo / ".git" / "hooks" / "pre-commit"
    # Run the hook with the interpreter and sources under test
    project_root = Path(linkgate.__file__).resolve().parent.parent
    hook_path.write_text(
        f"#!/bin/sh\n# linkgate pre-commit hook\nPYTHONPATH=\"{project_root}\" exec \"{sys.executable}\" -m linkgate\n"
    )

    stage(in_repo, "README.md", "[x](./missing.png)")
    result = subprocess.run(["git", "commit", "-m", "Add readme"], cwd=in_repo, capture_output=True, text=True)

    assert result.returncode != 0
    assert "./missing.png" in result.stderr
