# src/moelist/core/errors.py


class MoelistError(Exception):
    """Base application error for moelist.

    Use this for predictable, user-facing error messages that should be
    caught by the CLI and displayed nicely.
    """

    pass


class ArchiveReadError(MoelistError):
    """Raised when a single archive cannot be inspected."""

    def __init__(self, archive_name: str, message: str) -> None:
        super().__init__(f"{archive_name}: {message}")
        self.archive_name = archive_name
