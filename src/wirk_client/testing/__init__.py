"""Testing utilities for code built on the Wirk client.

Example:
    ```python
    from wirk_client import WirkClient
    from wirk_client.testing import RecordingTransport, json_response


    async def test_lists_apps():
        transport = RecordingTransport(lambda request: json_response([{"IdApp": 1}]))
        client = WirkClient(transport=transport)

        error, apps, _ = await client.get_app()

        assert apps == [{"IdApp": 1}]
        assert transport.requests[0].url.path == "/v1_0/App"
    ```
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


def json_response(payload: Any, status_code: int = 200, **kwargs: Any) -> httpx.Response:
    """Build a JSON response the way the API sends it."""
    return httpx.Response(status_code, json=payload, **kwargs)


def empty_response(status_code: int = 204) -> httpx.Response:
    return httpx.Response(status_code)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled.

    Attributes:
        requests: Requests in the order they were sent.
    """

    def __init__(self, handler: Handler | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._user_handler = handler or (lambda request: empty_response(200))
        super().__init__(self._record)

    async def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._user_handler(request)
        if isinstance(response, Awaitable):
            response = await response
        return response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


def failing_transport(exc: httpx.RequestError | None = None) -> httpx.MockTransport:
    """Transport that raises a network error for every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc or httpx.ConnectError("Connection refused", request=request)

    return httpx.MockTransport(handler)


__all__ = ["RecordingTransport", "empty_response", "failing_transport", "json_response"]
