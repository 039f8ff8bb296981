"""Link check API command."""

from collections.abc import Iterator

from soupsieve import SelectorSyntaxError

from ..config.ConfigError import ConfigError
from ..config.NotesConfig import NotesConfig
from ..StageResult import StageResult
from . import LinkCheckOutput
from .DocumentReport import DocumentReport
from .validate import validate


def _empty_output(selector: str, errors: list[str]) -> dict:
    return LinkCheckOutput(
        errors=errors,
        selector=selector,
        documents=[],
        documents_checked=0,
        links_found=0,
        links_missing=0,
        read_errors=0,
    ).model_dump(mode="python")


def cmd_check(documents: list[str] | None = None, selector: str | None = None) -> StageResult:
    """Check that pagination links in each document point at existing files.

    Args:
        documents: Document paths to check. ``None`` means the configured list.
        selector: CSS selector for pagination links. Defaults to the configured selector.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.05, "Loading configuration...")
        try:
            config = NotesConfig.load()
        except ConfigError as e:
            result_obj.output = _empty_output(selector or "", [str(e)])
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return

        paths = list(documents) if documents is not None else list(config.documents)
        active_selector = selector or config.selector

        reports: list[DocumentReport] = []
        try:
            total = len(paths)
            for index, report in enumerate(validate(paths, active_selector), start=1):
                reports.append(report)
                yield (0.05 + 0.95 * index / total, f"Checked {report.path}")
        except SelectorSyntaxError as e:
            result_obj.output = _empty_output(active_selector, [f"Invalid selector {active_selector!r}: {e}"])
            result_obj.result = f"Invalid selector: {active_selector}"
            result_obj.success = False
            return

        links_found = sum(len(r.links) for r in reports)
        links_missing = sum(len(r.missing) for r in reports)
        failed = [r for r in reports if r.error is not None]

        result_obj.output = LinkCheckOutput(
            errors=[f"{r.path}: {r.error}" for r in failed],
            selector=active_selector,
            documents=[r.to_dict() for r in reports],
            documents_checked=len(reports),
            links_found=links_found,
            links_missing=links_missing,
            read_errors=len(failed),
        ).model_dump(mode="python")
        result_obj.result = (
            f"Checked {len(reports)} documents: {links_found} links, "
            f"{links_missing} missing, {len(failed)} unreadable"
        )
        result_obj.success = True

    return StageResult(announce="Checking pagination links...", progress_callback=do_work)
