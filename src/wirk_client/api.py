"""Wirk API client.

One method per remote operation. Each method raises configuration errors
immediately and returns an awaitable resolving to an
:class:`~wirk_client.transport.ApiResponse`.

Example:
    ```python
    from wirk_client import WirkClient

    async with WirkClient() as client:
        client.configure_basicauthentication_authentication("alice", "secret")
        error, project, response = await client.get_app_project_id(42)
        if error:
            print(error.status, error.message)
    ```
"""

from collections.abc import Coroutine, Mapping
from typing import Any

from wirk_client.client import BaseOpenAPIClient
from wirk_client.config import DEFAULT_ENDPOINT
from wirk_client.operations import (
    BASIC_AUTHENTICATION,
    GET_APP,
    GET_APP_ID,
    GET_APP_PROJECT_ID,
    GET_TASK_LINE_ID,
    POST_APP_PROJECT,
    POST_TASK_LINE,
)
from wirk_client.request_config import RequestConfig
from wirk_client.transport.dispatcher import ApiResponse, Callback

Config = RequestConfig | Mapping[str, Any] | None
Result = Coroutine[Any, Any, ApiResponse]


class WirkClient(BaseOpenAPIClient):
    """Client for the Wirk crowdsourcing API.

    Operation methods send nothing by themselves: the returned coroutine
    must be awaited, or scheduled with ``asyncio.create_task``, for the
    request to go out and for ``callback`` to run.
    """

    DEFAULT_ENDPOINT = DEFAULT_ENDPOINT
    BASIC_SCHEMES = (BASIC_AUTHENTICATION,)

    def configure_basicauthentication_authentication(self, username: str, key: str) -> None:
        """Configure the ``Basicauthentication`` scheme required by project and task line operations."""
        self.configure_basic_scheme(BASIC_AUTHENTICATION, username, key)

    def get_app(self, config: Config = None, callback: Callback | None = None) -> Result:
        """Get all apps.

        Returns a list of apps, e.g.
        ``[{"AppName": ..., "HasInstruction": false, "IdApp": 1, "Qualities": []}]``.
        The result must be awaited for the request to be sent and
        ``callback`` to run.
        """
        return self._call(GET_APP, config=config, callback=callback)

    def get_app_id(self, app_id: int | str, config: Config = None, callback: Callback | None = None) -> Result:
        """Get one app by id. Await the result to send the request and run ``callback``."""
        return self._call(GET_APP_ID, path_values={"Id": app_id}, config=config, callback=callback)

    def get_app_project_id(
        self, app_project_id: int | str, config: Config = None, callback: Callback | None = None
    ) -> Result:
        """Get an app project.

        Requires the ``Basicauthentication`` scheme. The payload carries the
        project state, credit and task counters (``NbTaskClosed``,
        ``NbTotalTask``). Await the result to send the request and run
        ``callback``.
        """
        return self._call(GET_APP_PROJECT_ID, path_values={"Id": app_project_id}, config=config, callback=callback)

    def post_app_project(self, body: Any, config: Config = None, callback: Callback | None = None) -> Result:
        """Create an app project. Requires ``Basicauthentication``.

        ``body`` must be JSON-serializable; otherwise ``TypeError`` is raised
        by this call. Await the result to send the request and run ``callback``.
        """
        return self._call(POST_APP_PROJECT, body=body, config=config, callback=callback)

    def get_task_line_id(
        self, task_line_id: int | str, config: Config = None, callback: Callback | None = None
    ) -> Result:
        """Get a task line. Requires ``Basicauthentication``.

        Await the result to send the request and run ``callback``.
        """
        return self._call(GET_TASK_LINE_ID, path_values={"Id": task_line_id}, config=config, callback=callback)

    def post_task_line(self, body: Any, config: Config = None, callback: Callback | None = None) -> Result:
        """Create a task line.

        Uses the global credential by default; pass
        ``RequestConfig(security="Basicauthentication")`` to send the named
        basic credential instead. ``body`` must be JSON-serializable;
        otherwise ``TypeError`` is raised by this call. Await the result to
        send the request and run ``callback``.
        """
        return self._call(POST_TASK_LINE, body=body, config=config, callback=callback)
