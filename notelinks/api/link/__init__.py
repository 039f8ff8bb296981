"""Link API domain."""

from .._output_schemas.link import LinkCheckOutput

__all__ = ["LinkCheckOutput"]
