"""Get path to the notelinks config file."""

from pathlib import Path

CONFIG_FILENAME = "notelinks.json"


def get_config_path() -> Path:
    """Get path to the config file in the current working directory."""
    return Path.cwd() / CONFIG_FILENAME
