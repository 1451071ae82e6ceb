"""Uninstall the pre-commit hook."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ..StageResult import StageResult
from . import _paths
from .HookOutput import HookOutput


def cmd_uninstall(path: str = ".") -> StageResult:
    """Remove the linkgate pre-commit hook; hooks written by other tools are left alone."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        logger = get_logger("hook.cmd_uninstall")
        repo_path = Path(path).expanduser().resolve()
        hook_path = _paths.get_hook_install_path(repo_path)

        yield (0.5, "Removing hook script...")
        if not hook_path.exists():
            logger.debug("Hook not installed, nothing to uninstall")
            result_obj.output = HookOutput(hook_path=str(hook_path), installed=False).model_dump(mode="python")
            result_obj.result = "Hook not installed, nothing to uninstall"
            result_obj.success = True
            return

        if not _paths.is_hook_installed(repo_path):
            result_obj.output = HookOutput(
                hook_path=str(hook_path), installed=False, errors=["Hook was not installed by linkgate"]
            ).model_dump(mode="python")
            result_obj.result = f"Refusing to remove foreign hook: {hook_path}"
            result_obj.success = False
            return

        try:
            hook_path.unlink()
        except OSError as exc:
            logger.error(f"Failed to uninstall hook: {exc}")
            result_obj.output = HookOutput(hook_path=str(hook_path), installed=True, errors=[str(exc)]).model_dump(
                mode="python"
            )
            result_obj.result = f"Failed to uninstall hook: {exc}"
            result_obj.success = False
            return

        logger.info(f"Uninstalled pre-commit hook: {hook_path}")
        result_obj.output = HookOutput(hook_path=str(hook_path), installed=False).model_dump(mode="python")
        result_obj.result = f"Uninstalled pre-commit hook: {hook_path}"
        result_obj.success = True

    return StageResult(announce=f"Uninstalling pre-commit hook in {path}...", progress_callback=do_work)
