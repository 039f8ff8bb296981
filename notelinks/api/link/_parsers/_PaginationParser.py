"""HTML pagination link parser."""

from collections.abc import Iterator

import soupsieve
from bs4 import BeautifulSoup

from ..DEFAULT_SELECTOR import DEFAULT_SELECTOR
from ._BaseParser import BaseParser, LinkRef


class PaginationParser(BaseParser):
    """Select anchors matching a CSS selector from HTML markup.

    Markup is parsed with ``html5lib``, which builds the same tree a browser
    would; malformed markup is repaired rather than rejected.
    """

    def __init__(self, selector: str = DEFAULT_SELECTOR):
        self.selector = selector
        # Compile once so a bad selector fails before any document is read
        self._pattern = soupsieve.compile(selector)

    def parse(self, text: str) -> Iterator[LinkRef]:
        soup = BeautifulSoup(text, "html5lib")
        for tag in self._pattern.select(soup):
            href = tag.get("href")
            if isinstance(href, list):
                href = " ".join(href)
            yield LinkRef(target=href or "", label=tag.get_text().strip())
