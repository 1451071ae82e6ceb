"""Report whether the pre-commit hook is installed."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from . import _paths
from .HookOutput import HookOutput


def cmd_status(path: str = ".") -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        repo_path = Path(path).expanduser().resolve()
        hook_path = _paths.get_hook_install_path(repo_path)

        yield (0.5, "Inspecting hook...")
        installed = _paths.is_hook_installed(repo_path)
        result_obj.output = HookOutput(hook_path=str(hook_path), installed=installed).model_dump(mode="python")
        result_obj.result = "Hook installed" if installed else "Hook not installed"
        result_obj.success = True

    return StageResult(announce=f"Checking pre-commit hook in {path}...", progress_callback=do_work)
