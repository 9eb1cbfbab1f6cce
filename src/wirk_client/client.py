"""Base client class holding endpoint, security state and dispatch."""

from collections.abc import Coroutine, Mapping
from pathlib import Path
from typing import Any, Self

import httpx

from wirk_client.auth.resolver import SecurityState, resolve_security
from wirk_client.auth.schemes import SecurityScheme, api_key, basic, oauth2
from wirk_client.config import ClientSettings, load_settings
from wirk_client.errors.exceptions import InvalidEndpointError
from wirk_client.operations import Operation
from wirk_client.request_config import RequestConfig
from wirk_client.transport.dispatcher import ApiResponse, Callback, RequestDispatcher


class BaseOpenAPIClient:
    """Base class for generated API clients.

    Holds the endpoint and the security configuration, and turns an
    :class:`~wirk_client.operations.Operation` plus call arguments into a
    dispatched request. Subclasses add one method per operation and one
    ``configure_<scheme>_authentication`` method per declared scheme.

    Configuration errors are raised when an operation method is called;
    the returned awaitable only performs the network round trip.

    Args:
        endpoint: Base URL. Must be a non-empty string when given; trailing
            slashes are stripped.
        transport: httpx transport used for requests.
        http_client: Externally managed httpx client. Takes precedence over
            ``transport``.

    Example:
        ```python
        async with WirkClient() as client:
            client.configure_global_oauth2_token("abc")
            error, apps, response = await client.get_app()
        ```
    """

    DEFAULT_ENDPOINT = ""

    # Named basic schemes filled from settings by ``from_settings``.
    BASIC_SCHEMES: tuple[str, ...] = ()

    def __init__(
        self,
        endpoint: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if endpoint is not None and (not isinstance(endpoint, str) or not endpoint):
            raise InvalidEndpointError("endpoint parameter must be a non-empty string.")

        self._endpoint = (endpoint or self.DEFAULT_ENDPOINT).rstrip("/")
        self._security = SecurityState()
        self._transport = transport
        self._http_client = http_client
        self._owned_client: httpx.AsyncClient | None = None
        self._dispatcher = RequestDispatcher(client=http_client, transport=transport)

    @classmethod
    def from_settings(cls, settings: ClientSettings, **kwargs: Any) -> Self:
        """Build a client and apply every credential present in ``settings``.

        Basic credentials configure the global credential and every basic
        scheme the client declares. An OAuth2 token replaces global basic
        credentials, and an API token replaces both.
        """
        client = cls(settings.endpoint, **kwargs)

        if settings.has_basic_credentials:
            client.configure_global_basic_authentication(settings.username, settings.key)
            for scheme_name in client.BASIC_SCHEMES:
                client.configure_basic_scheme(scheme_name, settings.username, settings.key)
        if settings.oauth2_token is not None:
            client.configure_global_oauth2_token(settings.oauth2_token)
        if settings.api_token is not None:
            client.configure_global_api_token(settings.api_token_name, settings.api_token, settings.api_token_location)

        return client

    @classmethod
    def from_env(cls, *, dotenv_path: str | Path | None = None, endpoint: str | None = None, **kwargs: Any) -> Self:
        """Build a client from ``WIRK_*`` environment variables and ``.env``."""
        return cls.from_settings(load_settings(dotenv_path=dotenv_path, endpoint=endpoint), **kwargs)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def global_security(self) -> SecurityScheme:
        return self._security.global_security

    @property
    def security_configurations(self) -> Mapping[str, SecurityScheme]:
        return dict(self._security.security_configurations)

    async def __aenter__(self) -> Self:
        """Keep one httpx client open for every call made inside the block.

        Raises:
            RuntimeError: If the client is already inside an ``async with`` block.
        """
        if self._owned_client is not None:
            raise RuntimeError("Cannot open a client instance more than once.")
        if self._http_client is None:
            self._owned_client = httpx.AsyncClient(transport=self._transport)
            self._dispatcher = RequestDispatcher(client=self._owned_client)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._owned_client is not None:
            await self._owned_client.aclose()
            self._owned_client = None
            self._dispatcher = RequestDispatcher(transport=self._transport)

    def configure_global_api_token(self, token_name: str, token_value: str, location: str | None = None) -> None:
        """Authenticate through an API token sent as a header or query parameter.

        Args:
            token_name: Header or query parameter name.
            token_value: The token.
            location: ``"header"`` or ``"query"``, case-insensitive.
                Defaults to HEADER.

        Raises:
            InvalidLocationError: For any other location. State is unchanged.
        """
        self._security.global_security = api_key(token_name, token_value, location)

    def configure_global_oauth2_token(self, token: str) -> None:
        """Send ``Authorization: Bearer <token>`` on operations without a named scheme."""
        self._security.global_security = oauth2(token)

    def configure_global_basic_authentication(self, username: str, key: str) -> None:
        """Send basic credentials on operations without a named scheme."""
        self._security.global_security = basic(username, key)

    def configure_basic_scheme(self, scheme_name: str, username: str, key: str) -> None:
        """Configure a named basic-auth scheme declared by the API."""
        self._security.security_configurations[scheme_name] = basic(username, key)

    def _call(
        self,
        operation: Operation,
        *,
        path_values: Mapping[str, Any] | None = None,
        body: Any = None,
        config: RequestConfig | Mapping[str, Any] | None = None,
        callback: Callback | None = None,
    ) -> Coroutine[Any, Any, ApiResponse]:
        """Validate, resolve security and return the dispatch coroutine.

        Raises:
            MissingPathVariableError: A required path variable is missing.
            MissingSecuritySchemeError: The required scheme is not configured.
            UnsupportedSecuritySchemeError: The override is not declared.
            TypeError: The body is not JSON-serializable.
        """
        request_config = RequestConfig.coerce(config)
        url = self._endpoint + operation.build_path(path_values)
        contribution = resolve_security(
            request_config,
            self._security.global_security,
            self._security.security_configurations,
            operation.default_scheme,
            operation.security[1:],
        )

        return self._dispatcher.execute(
            operation.method,
            url,
            contribution,
            headers=request_config.headers,
            query_params=request_config.query_parameters,
            body=body if operation.has_body else None,
            callback=callback,
        )
