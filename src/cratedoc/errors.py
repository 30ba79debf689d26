class ContentError(Exception):
    """Base class for every failure surfaced by a documentation lookup."""

    def __init__(self, subject, reason=""):
        self.subject = subject
        self.reason = reason
        message = f"{type(self).__name__}: {subject}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class NotFound(ContentError):
    """No documentation exists for the subject at the requested source."""


class LoadFailure(ContentError):
    """The source exists but could not be read or decoded."""


class InvalidPage(ContentError):
    """The page handed to a parser is not an all-items page."""
