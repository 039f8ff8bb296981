"""Validate pagination links across a list of documents."""

from collections.abc import Iterable, Iterator

from ...utils.get_logger import get_logger
from ._parsers import PaginationParser
from .DEFAULT_SELECTOR import DEFAULT_SELECTOR
from .DocumentReadError import DocumentReadError
from .DocumentReport import DocumentReport
from .LinkRecord import LinkRecord
from .read_document import read_document
from .target_exists import target_exists

logger = get_logger("link.validate")


def _check_document(path: str, parser: PaginationParser) -> list[LinkRecord]:
    text = read_document(path)
    try:
        refs = list(parser.parse(text))
    except Exception as e:
        raise DocumentReadError(path, f"parse failed: {e}") from e

    records = []
    for ref in refs:
        exists = target_exists(ref.target)
        if not exists:
            logger.debug("Missing target %r in %s", ref.target, path)
        records.append(LinkRecord(target=ref.target, label=ref.label, exists=exists))
    return records


def validate(documents: Iterable[str], selector: str = DEFAULT_SELECTOR) -> Iterator[DocumentReport]:
    """Yield one report per document, in the order given.

    Link targets are resolved against the current working directory.
    A document that cannot be read or parsed yields a report with ``error``
    set and processing continues with the next document. Errors outside a
    single document (a bad selector, a non-iterable ``documents``) propagate.
    """
    parser = PaginationParser(selector)
    for path in documents:
        logger.debug("Checking %s", path)
        try:
            links = _check_document(path, parser)
        except DocumentReadError as e:
            logger.warning("Cannot parse %s: %s", path, e.reason)
            yield DocumentReport(path=path, error=e.reason)
            continue
        yield DocumentReport(path=path, links=links)
