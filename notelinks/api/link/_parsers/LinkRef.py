"""Link reference dataclass."""

from dataclasses import dataclass


@dataclass
class LinkRef:
    """A link found in a document, before its target is checked."""

    target: str
    label: str
