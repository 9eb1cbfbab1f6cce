"""Request dispatch over httpx.

The dispatcher sends one request and turns the outcome into an
:class:`ApiResponse`: either an error value or a decoded body, never both.
Transport concerns (connections, TLS, redirects, timeouts) are left to the
httpx transport it is given.

## Outcome mapping

| Outcome | error | body | response |
|---------|-------|------|----------|
| Network failure | `TransportError` (status 0) | `None` | `None` |
| Status outside 2xx | `APIError` subclass | `None` | raw response |
| 2xx | `None` | decoded payload (`None` when empty) | raw response |

Example:
    ```python
    dispatcher = RequestDispatcher(transport=httpx.MockTransport(handler))
    error, body, response = await dispatcher.execute(
        "GET", "https://api.example.com/App", SecurityContribution()
    )
    ```
"""

import logging
from collections.abc import Callable, Coroutine, Mapping
from typing import Any, NamedTuple

import httpx

from wirk_client.auth.resolver import SecurityContribution
from wirk_client.errors.exceptions import APIError, TransportError
from wirk_client.errors.handler import error_for_response

logger = logging.getLogger(__name__)

Callback = Callable[[APIError | None, Any, httpx.Response | None], None]


class ApiResponse(NamedTuple):
    """Single-shot result of one operation call."""

    error: APIError | None
    body: Any
    response: httpx.Response | None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> Any:
        """Raise the error if there is one, otherwise return the body."""
        if self.error is not None:
            raise self.error
        return self.body


def _is_json(content_type: str) -> bool:
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime == "application/json" or mime.endswith("+json") or mime == "text/json"


def decode_body(response: httpx.Response) -> Any:
    """Decode a successful response according to its Content-Type.

    Raises:
        ValueError: If a JSON body cannot be decoded.
    """
    if not response.content:
        return None
    if _is_json(response.headers.get("content-type", "")):
        return response.json()
    return response.text


class RequestDispatcher:
    """Send requests and complete each one exactly once.

    Args:
        client: Shared httpx client. When None, a short-lived client is
            opened per request.
        transport: Transport for short-lived clients, e.g.
            ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = client
        self._transport = transport

    def build_request(
        self,
        method: str,
        url: str,
        contribution: SecurityContribution,
        *,
        headers: Mapping[str, str] | None = None,
        query_params: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> httpx.Request:
        """Merge security and caller entries into a ready-to-send request.

        Raises:
            TypeError: If ``body`` is not JSON-serializable.
            httpx.InvalidURL: If ``url`` cannot be parsed.
        """
        merged_headers, merged_params = contribution.merge(headers, query_params)
        merged_headers.setdefault("Accept", "application/json")
        return httpx.Request(
            method,
            url,
            params=merged_params or None,
            headers=merged_headers,
            json=body,
        )

    async def _send(self, request: httpx.Request) -> httpx.Response:
        if self._client is not None:
            return await self._client.send(request)

        async with httpx.AsyncClient(transport=self._transport) as client:
            return await client.send(request)

    def execute(
        self,
        method: str,
        url: str,
        contribution: SecurityContribution,
        *,
        headers: Mapping[str, str] | None = None,
        query_params: Mapping[str, str] | None = None,
        body: Any = None,
        callback: Callback | None = None,
    ) -> Coroutine[Any, Any, ApiResponse]:
        """Build one request now and return the coroutine that delivers its outcome.

        The request is built before this method returns, so encoding
        problems raise here and no coroutine is created. The returned
        coroutine never raises for request failures; it must be awaited
        (or scheduled as a task) for the request to be sent and the
        callback to run.

        Args:
            method: HTTP method.
            url: Fully formed URL, path variables already interpolated.
            contribution: Resolved security headers and query parameters.
            headers: Caller headers, applied over the security headers.
            query_params: Caller query parameters, applied over the
                security query parameters.
            body: JSON-serializable payload, omitted when None.
            callback: Called once with ``(error, body, response)``.

        Returns:
            Coroutine resolving to the same ``(error, body, response)`` triple.

        Raises:
            TypeError: If ``body`` is not JSON-serializable.
            httpx.InvalidURL: If ``url`` cannot be parsed.
        """
        request = self.build_request(
            method,
            url,
            contribution,
            headers=headers,
            query_params=query_params,
            body=body,
        )
        return self._dispatch(request, callback)

    async def _dispatch(self, request: httpx.Request, callback: Callback | None) -> ApiResponse:
        method, url = request.method, str(request.url)
        logger.debug(f"Dispatching {method} {url}")

        try:
            response = await self._send(request)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(f"Request {method} {url} failed: {e}")
            message = str(e) or type(e).__name__
            result = ApiResponse(TransportError(f"Request failed: {message}"), None, None)
        else:
            result = self._to_result(method, url, response)

        if callback is not None:
            callback(*result)
        return result

    def _to_result(self, method: str, url: str, response: httpx.Response) -> ApiResponse:
        error = error_for_response(response)
        if error is not None:
            logger.warning(f"Request {method} {url} failed with {response.status_code}")
            return ApiResponse(error, None, response)

        try:
            payload = decode_body(response)
        except ValueError as e:
            logger.warning(f"Request {method} {url} returned an undecodable body: {e}")
            return ApiResponse(
                APIError(f"Invalid JSON response: {e}", status=response.status_code, response=response),
                None,
                response,
            )

        logger.debug(f"Request {method} {url} succeeded with {response.status_code}")
        return ApiResponse(None, payload, response)
