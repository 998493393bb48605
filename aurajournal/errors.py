class JournalError(Exception):
    """Base class for errors raised by the journal core."""


class NotFoundError(JournalError):
    """Raised when a referenced journal entry (or the progress record) does not exist."""


class InvalidInputError(JournalError, ValueError):
    """Raised on malformed input: empty content, unknown mood, intensity outside 1-5."""


class UpstreamClassificationError(JournalError):
    """
    Raised when the sentiment service failed or timed out.

    The journal entry was already saved; only the classification is missing.
    """

    def __init__(self, message: str, *, entry_id: int | None = None):
        super().__init__(message)
        self.entry_id = entry_id


class UninitializedStoreError(JournalError):
    """Raised when the progress record is missing. Indicates a setup bug."""


class AlreadyClassifiedError(InvalidInputError):
    """Raised when AI fields are attached to an entry that already has them."""
