"""
wger API Exception Hierarchy

Closed set of error types raised by the wger client. Every failure of a
fetch surfaces as exactly one of these.
"""

NETWORK_ERROR_MESSAGE = "A network error occurred. Please try again."


class WgerAPIError(Exception):
    """Base exception for all wger API errors."""

    user_message = NETWORK_ERROR_MESSAGE

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        endpoint: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.endpoint = endpoint


class InvalidURLError(WgerAPIError):
    """Malformed request target."""

    pass


class InvalidResponseError(WgerAPIError):
    """Response present but not classifiable."""

    pass


class NoDataError(WgerAPIError):
    """Empty body where content was expected."""

    pass


class NotFoundError(WgerAPIError):
    """Server reported "Not found."."""

    user_message = "Not found."


class OtherError(WgerAPIError):
    """Server reported a detail string other than "Not found."."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, **kwargs)
        self.message = message

    @property
    def user_message(self) -> str:
        return self.message


class _WrappedError(WgerAPIError):
    def __init__(self, cause: BaseException, **kwargs):
        super().__init__(str(cause), **kwargs)
        self.cause = cause

    @property
    def user_message(self) -> str:
        return str(self.cause)


class DecodingError(_WrappedError):
    """200 response whose JSON did not match the expected schema."""


class UnderlyingError(_WrappedError):
    """Transport-level or otherwise unexpected failure."""
