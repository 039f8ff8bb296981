"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for link check command.

    Output structure:
    - errors: list[str] - one "<path>: <reason>" entry per unreadable document
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - selector: str - CSS selector used to find pagination links
    - documents: list[dict] - per-document reports in configured order, each with
      path, links (target, label, exists) and error (None when the document was read)
    - documents_checked: int - number of documents processed
    - links_found: int - total pagination links across all documents
    - links_missing: int - links whose target does not exist
    - read_errors: int - documents that could not be read or parsed
    """

    selector: str = Field(..., description="CSS selector used to find pagination links")
    documents: list[dict[str, Any]] = Field(..., description="Per-document reports in configured order")
    documents_checked: int = Field(..., ge=0, description="Number of documents processed")
    links_found: int = Field(..., ge=0, description="Total pagination links found")
    links_missing: int = Field(..., ge=0, description="Links whose target does not exist")
    read_errors: int = Field(..., ge=0, description="Documents that could not be read or parsed")


schema_registry.register_output_schema("link", "check", LinkCheckOutput)
