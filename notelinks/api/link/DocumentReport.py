"""Per-document validation report."""

from dataclasses import dataclass, field
from typing import Any

from .LinkRecord import LinkRecord


@dataclass
class DocumentReport:
    """Links found in one document, or the reason it could not be read.

    ``error`` is set exactly when the document could not be read or parsed,
    in which case ``links`` is empty.
    """

    path: str
    links: list[LinkRecord] = field(default_factory=list)
    error: str | None = None

    @property
    def missing(self) -> list[LinkRecord]:
        return [link for link in self.links if not link.exists]

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "links": [
                {
                    "target": link.target,
                    "label": link.label,
                    "exists": link.exists,
                }
                for link in self.links
            ],
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DocumentReport":
        return cls(
            path=data["path"],
            links=[
                LinkRecord(
                    target=link["target"],
                    label=link["label"],
                    exists=link["exists"],
                )
                for link in data.get("links", [])
            ],
            error=data.get("error"),
        )
