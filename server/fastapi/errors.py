"""Exceptions raised at Nova's boundaries (auth, persistence, model API, device)."""


class NovaError(Exception):
    """Base exception for all failures that abort a chat turn."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthRequired(NovaError):
    """Raised when no authenticated session is available."""

    def __init__(self, message: str = "Please sign in to send messages.", status_code: int | None = None) -> None:
        super().__init__(message, status_code)


class PersistenceError(NovaError):
    """Raised when writing to the message store fails."""

    pass


class UpstreamError(NovaError):
    """Raised when the chat-completion call fails or returns non-success."""

    pass


class MalformedResponse(NovaError):
    """Raised when a response body does not have the expected shape."""

    pass


class GeolocationError(NovaError):
    """Raised by a device locator when the position cannot be read."""

    pass
