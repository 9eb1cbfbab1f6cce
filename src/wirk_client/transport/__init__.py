"""Request dispatch on top of httpx transports.

The dispatcher owns no retry, caching or pooling policy: those belong to
the httpx transport handed to it.

Example:
    ```python
    from wirk_client.transport import RequestDispatcher

    dispatcher = RequestDispatcher(transport=httpx.AsyncHTTPTransport(retries=2))
    ```
"""

from wirk_client.transport.dispatcher import ApiResponse, Callback, RequestDispatcher, decode_body

__all__ = ["ApiResponse", "Callback", "RequestDispatcher", "decode_body"]
