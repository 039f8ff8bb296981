"""Abstract base parser for link extraction."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from .LinkRef import LinkRef


class BaseParser(ABC):
    """Abstract interface for document parsers."""

    @abstractmethod
    def parse(self, text: str) -> Iterator[LinkRef]:
        """Parse text and yield found links in document order."""
        pass
