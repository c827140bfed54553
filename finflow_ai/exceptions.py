"""FinFlow AI completion exceptions."""


class CompletionError(Exception):
    """Base exception for completion failures."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NetworkError(CompletionError):
    """Completion endpoint could not be reached (connection failure or timeout)."""

    pass


class AuthenticationError(CompletionError):
    """Authentication failed (401)."""

    def __init__(self, message: str, status_code: int | None = 401) -> None:
        super().__init__(message, status_code=status_code)


class InsufficientCreditsError(CompletionError):
    """Account has no credits left for the requested model (402)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=402)


class RateLimitError(CompletionError):
    """Rate limit exceeded (429)."""

    def __init__(self, message: str, retry_after: float | None = None) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class ServerError(CompletionError):
    """Server error (5xx)."""

    pass


class MalformedResponseError(CompletionError):
    """Response body could not be parsed as a chat completion."""

    pass


class EmptyCompletionError(CompletionError):
    """Response carried no choice with text content."""

    def __init__(self, message: str = "No completion returned") -> None:
        super().__init__(message)
