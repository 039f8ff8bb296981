"""Config API module."""

from .._output_schemas.config import ConfigShowOutput, ConfigVersionOutput

__all__ = ["ConfigShowOutput", "ConfigVersionOutput"]
