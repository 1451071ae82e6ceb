"""Link check API command."""

from collections.abc import Iterator
from pathlib import Path

from ...constants import TOOL_DIR
from ...utils.logger import configure_logging, get_logger
from ..config.LinkGateConfig import LinkGateConfig
from ..diff.DiffError import DiffError
from ..diff.get_diff_files import get_diff_files
from ..diff.get_diff_md_files import filter_md_files
from ..StageResult import StageResult
from .check_md_link import check_md_link
from .LinkCheckOutput import LinkCheckOutput
from .ValidationReport import ValidationReport

INVALID_LINKS_HEADER = "Invalid links found in staged documents, please check!"


def cmd_check(root: Path | None = None, tool_dir: Path = TOOL_DIR) -> StageResult:
    """Check the links of every staged markdown document.

    Stops at the first document that cannot be read; no partial report is returned then.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = LinkGateConfig.load()
        except ValueError as exc:
            result_obj.output = LinkCheckOutput(errors=[str(exc)]).model_dump(mode="python")
            result_obj.result = f"Cannot load configuration: {exc}"
            result_obj.success = False
            return

        configure_logging(LinkGateConfig.get_home_dir(), config.log.level)
        logger = get_logger("link.cmd_check")

        yield (0.2, "Collecting staged changes...")
        work_root = Path.cwd() if root is None else root
        try:
            changed = get_diff_files(work_root, config.check.statuses)
        except DiffError as exc:
            logger.error(str(exc))
            result_obj.output = LinkCheckOutput(errors=[str(exc)]).model_dump(mode="python")
            result_obj.result = f"Cannot collect staged changes: {exc}"
            result_obj.success = False
            return

        md_files = filter_md_files(changed, config.check.extensions)
        logger.debug(f"{len(md_files)} of {len(changed)} staged files are markdown documents")

        report = ValidationReport()
        documents = []
        for index, md_file in enumerate(md_files):
            yield (0.3 + 0.7 * index / len(md_files), f"Checking {md_file.relative_path}...")
            try:
                text = md_file.absolute_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.error(f"Cannot read {md_file.absolute_path}: {exc}")
                result_obj.output = LinkCheckOutput(
                    errors=[f"Cannot read {md_file.relative_path}: {exc}"]
                ).model_dump(mode="python")
                result_obj.result = f"Cannot read {md_file.relative_path}"
                result_obj.success = False
                return

            documents.append(md_file.relative_path)
            report.add(md_file.relative_path, check_md_link(text, md_file, config.check.timeout, tool_dir))

        yield (1.0, "Complete")

        result_obj.output = LinkCheckOutput(
            invalid_links=report.to_dict(),
            documents=documents,
            errors=[],
        ).model_dump(mode="python")

        if report:
            logger.info(f"Invalid links in {len(report)} of {len(documents)} documents")
            result_obj.result = INVALID_LINKS_HEADER
            result_obj.success = False
        else:
            result_obj.result = f"All links valid in {len(documents)} documents"
            result_obj.success = True

    return StageResult(announce="Checking links in staged documents...", progress_callback=do_work)
