"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    config_path: str = Field(..., description="Path to the configuration file")
    from_file: bool = Field(..., description="True if the file existed and was loaded, False if defaults were used")
    content: dict[str, Any] = Field(..., description="Effective configuration")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")


schema_registry.register_output_schema("config", "show", ConfigShowOutput)
schema_registry.register_output_schema("config", "version", ConfigVersionOutput)
