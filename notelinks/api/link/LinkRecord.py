"""Link record dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkRecord:
    """A pagination link and whether its target exists."""

    target: str
    label: str
    exists: bool
