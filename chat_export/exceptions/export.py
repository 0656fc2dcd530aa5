"""
Client-facing errors raised by the message export pipeline.
"""


class ExportError(Exception):
    """Base class for errors answered with a JSON error envelope.

    Each subclass fixes the HTTP status code and its short description;
    the message is what the caller sees in the response body.
    """

    status_code = 400
    status_description = "Bad request"
    error_code = "BAD_REQUEST"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class InvalidRangeError(ExportError):
    """The range query parameter is not a known token."""

    error_code = "INVALID_RANGE"

    def __init__(self, message: str = "range value not recognized"):
        super().__init__(message)


class UnsupportedFormatError(ExportError):
    """The requested output format has no renderer."""

    error_code = "UNSUPPORTED_FORMAT"

    def __init__(self, message: str = "format not supported."):
        super().__init__(message)


class RoomNotFoundError(ExportError):
    """The room is absent, invalid or private."""

    status_code = 404
    status_description = "Not found"
    error_code = "NOT_FOUND"


class RepositoryUnavailableError(ExportError):
    """The message store did not answer within the configured timeout."""

    status_code = 503
    status_description = "Service unavailable"
    error_code = "REPOSITORY_UNAVAILABLE"

    def __init__(self, message: str = "Message store did not respond in time."):
        super().__init__(message)
