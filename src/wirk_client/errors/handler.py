"""Map HTTP responses onto request error values."""

import httpx

from wirk_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from wirk_client.errors.models import ProblemDetail

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def is_success(status: int) -> bool:
    return 200 <= status < 300


def error_for_response(response: httpx.Response) -> APIError | None:
    """Build the error value for a non-2xx response.

    Unlike ``httpx.Response.raise_for_status`` nothing is raised: the
    dispatcher hands the error to the caller as a value.

    Args:
        response: HTTP response object

    Returns:
        None for 2xx responses, otherwise an APIError subclass chosen from
        the status code.
    """
    status = response.status_code
    if is_success(status):
        return None

    problem_detail = ProblemDetail.from_response(response)

    if status in EXCEPTION_MAP:
        exc_class = EXCEPTION_MAP[status]
    elif 400 <= status < 500:
        exc_class = ClientError
    elif 500 <= status < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    if problem_detail:
        message = problem_detail.to_message()
    else:
        response_text = response.text[:200]
        message = f"HTTP {status}: {response_text}" if response_text else f"HTTP {status}"

    kwargs = {
        "status": status,
        "response": response,
        "problem_detail": problem_detail,
    }

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        return RateLimitError(message, retry_after=retry_after, **kwargs)

    if exc_class is ValidationError:
        validation_errors = None
        if problem_detail and problem_detail.extensions:
            if "errors" in problem_detail.extensions:
                validation_errors = problem_detail.extensions.get("errors")
            else:
                validation_errors = problem_detail.extensions.get("validation_errors")
        return ValidationError(message, validation_errors=validation_errors, **kwargs)

    return exc_class(message, **kwargs)
