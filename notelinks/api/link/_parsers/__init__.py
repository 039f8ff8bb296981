"""Link parsers package."""

from ._BaseParser import BaseParser
from ._PaginationParser import PaginationParser
from .LinkRef import LinkRef

__all__ = ["BaseParser", "LinkRef", "PaginationParser"]
