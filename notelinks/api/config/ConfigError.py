"""Configuration error."""


class ConfigError(ValueError):
    """Raised when the configuration file cannot be parsed or validated."""
