"""Top-level notelinks configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..link.DEFAULT_SELECTOR import DEFAULT_SELECTOR
from .ConfigError import ConfigError
from .get_config_path import get_config_path
from .LogConfig import LogConfig

# The note pages of the original collection
DEFAULT_DOCUMENTS = [
    "纳瓦尔宝典-笔记.html",
    "纳瓦尔宝典-笔记2.html",
    "纳瓦尔宝典-笔记3.html",
    "纳瓦尔宝典-笔记4.html",
]


class NotesConfig(BaseModel):
    """Documents to check, pagination selector and logging."""

    model_config = ConfigDict(extra="forbid")

    documents: list[str] = Field(default_factory=lambda: list(DEFAULT_DOCUMENTS), description="Document paths")
    selector: str = Field(DEFAULT_SELECTOR, min_length=1, description="CSS selector for pagination links")
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> "NotesConfig":
        """Load config from file, or return defaults if the file does not exist.

        Raises:
            ConfigError: If the file is not valid JSON or fails validation
        """
        if path is None:
            path = get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            first = e.errors()[0]
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc)
            msg = first.get("msg", str(e))
            detail = f"{field}: {msg}" if field else msg
            raise ConfigError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return self.model_dump(mode="python")
