"""Concordance error types."""


class ConcordanceError(Exception):
    """Base error for all concordance failures."""


class InputReadError(ConcordanceError):
    """The input document could not be opened or read."""

    def __init__(self, file_path: str) -> None:
        super().__init__(f"Unable to open file - {file_path}")
        self.file_path = file_path
