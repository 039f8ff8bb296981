"""Read a document's markup from disk."""

from pathlib import Path

from .DocumentReadError import DocumentReadError


def read_document(path: str) -> str:
    """Return the full UTF-8 text of ``path``.

    Raises:
        DocumentReadError: If the file is missing, unreadable, not valid UTF-8
            or the path itself cannot be opened
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DocumentReadError(path, "file does not exist") from None
    except IsADirectoryError:
        raise DocumentReadError(path, "path is a directory") from None
    except PermissionError:
        raise DocumentReadError(path, "permission denied") from None
    except UnicodeDecodeError as e:
        raise DocumentReadError(path, f"not valid UTF-8: {e}") from e
    except OSError as e:
        raise DocumentReadError(path, str(e)) from e
    except ValueError as e:
        # e.g. embedded null byte
        raise DocumentReadError(path, str(e)) from e
