"""Error taxonomy for the question pipeline."""


class LabError(Exception):
    """Base class for errors raised by the lab core."""


class MalformedQuestion(LabError):
    """A raw question record that cannot be normalized."""

    def __init__(self, message: str, record: dict | None = None):
        super().__init__(message)
        self.record = record


class SourceLoadFailure(LabError):
    """The question source could not be fetched, parsed or validated."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source
