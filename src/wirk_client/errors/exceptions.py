"""Structured exceptions for configuration and request errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from wirk_client.errors.models import ProblemDetail


class ConfigurationError(Exception):
    """Base exception for client misuse detected before any network activity.

    Configuration errors are always raised synchronously and are never
    delivered through a completion callback.
    """

    pass


class InvalidEndpointError(ConfigurationError):
    """Raised when the client endpoint is not a non-empty string."""

    pass


class MissingPathVariableError(ConfigurationError):
    """Raised when a required path variable is missing or empty."""

    def __init__(self, message: str, variable_name: str):
        super().__init__(message)
        self.variable_name = variable_name


class APIError(Exception):
    """Base exception for request errors.

    Request errors are delivered as values to the caller. They carry the
    HTTP status (``0`` when no response was received) and a message.
    """

    def __init__(
        self,
        message: str,
        status: int = 0,
        response: "httpx.Response | None" = None,
        problem_detail: "ProblemDetail | None" = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.response = response
        self.problem_detail = problem_detail

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, message={self.message!r})"


class TransportError(APIError):
    """Network-level failure, no HTTP status available."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, status=0, **kwargs)


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity (validation errors)."""

    def __init__(self, message: str, validation_errors: list[dict] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.validation_errors = validation_errors if validation_errors is not None else []


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass
