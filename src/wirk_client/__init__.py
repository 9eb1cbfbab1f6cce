"""Wirk Client - Python client for the Wirk REST API.

This library provides:
- One method per API operation, returning an awaitable result
- Global and per-scheme authentication (API token, OAuth2, basic)
- Uniform error values for transport failures and non-2xx responses
- Environment and .env based configuration

Example:
    ```python
    from wirk_client import WirkClient

    client = WirkClient()
    client.configure_global_api_token("X-Api-Token", "secret", "query")

    error, apps, response = await client.get_app()
    ```
"""

from wirk_client.api import WirkClient
from wirk_client.request_config import RequestConfig
from wirk_client.transport.dispatcher import ApiResponse

__version__ = "0.1.0"

__all__ = ["ApiResponse", "RequestConfig", "WirkClient", "__version__"]
