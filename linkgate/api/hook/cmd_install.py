"""Install the pre-commit hook."""

import shutil
from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ..StageResult import StageResult
from . import _paths
from .HookOutput import HookOutput


def cmd_install(path: str = ".", force: bool = False) -> StageResult:
    """Install the linkgate pre-commit hook into the repository at ``path``.

    Args:
        path: Repository root (must contain a ``.git`` directory)
        force: Overwrite an existing pre-commit hook
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        logger = get_logger("hook.cmd_install")
        repo_path = Path(path).expanduser().resolve()
        hook_dest = _paths.get_hook_install_path(repo_path)

        yield (0.3, "Checking repository...")
        git_dir = repo_path / ".git"
        if not git_dir.is_dir():
            result_obj.output = HookOutput(
                hook_path=str(hook_dest), installed=False, errors=[f"Not a git repository: {repo_path}"]
            ).model_dump(mode="python")
            result_obj.result = f"Not a git repository: {repo_path}"
            result_obj.success = False
            return

        if hook_dest.exists() and not force:
            result_obj.output = HookOutput(
                hook_path=str(hook_dest), installed=_paths.is_hook_installed(repo_path), errors=["Hook already exists"]
            ).model_dump(mode="python")
            result_obj.result = f"Hook already exists: {hook_dest} (use --force to overwrite)"
            result_obj.success = False
            return

        yield (0.6, "Copying hook script...")
        try:
            hook_dest.parent.mkdir(exist_ok=True)
            shutil.copy2(_paths.get_hook_source_path(), hook_dest)
            hook_dest.chmod(0o755)
        except OSError as exc:
            logger.error(f"Failed to install hook: {exc}")
            result_obj.output = HookOutput(hook_path=str(hook_dest), installed=False, errors=[str(exc)]).model_dump(
                mode="python"
            )
            result_obj.result = f"Failed to install hook: {exc}"
            result_obj.success = False
            return

        logger.info(f"Installed pre-commit hook: {hook_dest}")
        yield (1.0, "Complete")
        result_obj.output = HookOutput(hook_path=str(hook_dest), installed=True).model_dump(mode="python")
        result_obj.result = f"Installed pre-commit hook: {hook_dest}"
        result_obj.success = True

    return StageResult(announce=f"Installing pre-commit hook in {path}...", progress_callback=do_work)
