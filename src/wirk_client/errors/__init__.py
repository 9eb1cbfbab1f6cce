"""Configuration errors, request errors and RFC 7807 support."""

from wirk_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConfigurationError,
    ConflictError,
    ForbiddenError,
    InvalidEndpointError,
    MissingPathVariableError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from wirk_client.errors.handler import error_for_response, is_success
from wirk_client.errors.models import ProblemDetail

__all__ = [
    "APIError",
    "BadRequestError",
    "ClientError",
    "ConfigurationError",
    "ConflictError",
    "ForbiddenError",
    "InvalidEndpointError",
    "MissingPathVariableError",
    "NotFoundError",
    "ProblemDetail",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
    "error_for_response",
    "is_success",
]
