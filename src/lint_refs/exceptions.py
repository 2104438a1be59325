class UnrecoverableError(ValueError):
    """Base class for all errors that should fail the linting job."""

    pass


class InvalidEventPayloadError(UnrecoverableError):
    """Raised when the event payload file exists but cannot be parsed as JSON."""

    pass


class InvalidOutputValueError(UnrecoverableError):
    """Raised when a computed value cannot be written as a single key=value line."""

    pass
