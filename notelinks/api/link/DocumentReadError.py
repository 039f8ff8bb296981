"""Error raised when a document cannot be read or parsed."""


class DocumentReadError(Exception):
    """A configured document could not be read or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
