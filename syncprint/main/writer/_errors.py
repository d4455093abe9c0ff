"""
Error types raised by the synchronized writer.

Every failure to deliver output is a PrintError, which is an IOError so
callers that already handle I/O failures catch it without extra clauses.
"""


class PrintError(IOError):
    """Output could not be formatted, encoded or delivered to the sink."""


class TemplateError(PrintError):
    """The template does not match the supplied arguments."""


class SinkFullError(PrintError):
    """A bounded sink has no room left for the bytes being written."""

    def __init__(self, message: str, capacity: int, requested: int):
        super().__init__(message)
        self.capacity = capacity
        self.requested = requested
