"""Existence check for link targets."""

import os


def target_exists(target: str) -> bool:
    """Return True if ``target`` exists relative to the current working directory.

    The target is tested literally: query strings, fragments and
    percent-escapes are not stripped or decoded.
    """
    if not target:
        return False
    return os.path.exists(target)
