import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``notelinks`` namespace.

    Configuration is left to the entry point; library use without it
    falls through to the standard logging defaults.
    """
    return logging.getLogger(f"notelinks.{name}")
