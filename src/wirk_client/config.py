"""Environment-driven client settings.

Settings are resolved through :class:`~wirk_client.auth.CredentialResolver`,
so each value may come from an explicit argument, the environment or a
``.env`` file.

| Variable | Meaning |
|----------|---------|
| ``WIRK_ENDPOINT`` | Base URL, defaults to the public API |
| ``WIRK_USERNAME`` / ``WIRK_KEY`` | Basic credentials |
| ``WIRK_OAUTH2_TOKEN`` | OAuth2 access token |
| ``WIRK_API_TOKEN`` / ``WIRK_API_TOKEN_FILE`` | API token value, or a file holding it |
| ``WIRK_API_TOKEN_NAME`` | Header or query parameter name for the API token |
| ``WIRK_API_TOKEN_LOCATION`` | ``header`` or ``query`` |
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from wirk_client.auth.credentials import CredentialResolver

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://api.wirk.io/v1_0"
DEFAULT_API_TOKEN_NAME = "X-Api-Token"


@dataclass(frozen=True)
class ClientSettings:
    endpoint: str = DEFAULT_ENDPOINT
    username: str | None = None
    key: str | None = None
    oauth2_token: str | None = None
    api_token_name: str = DEFAULT_API_TOKEN_NAME
    api_token: str | None = None
    api_token_location: str | None = None

    @property
    def has_basic_credentials(self) -> bool:
        return self.username is not None and self.key is not None

    def __repr__(self) -> str:
        return (
            f"ClientSettings(endpoint={self.endpoint!r}, username={self.username!r}, "
            f"key={'***' if self.key else None}, oauth2_token={'***' if self.oauth2_token else None}, "
            f"api_token_name={self.api_token_name!r}, api_token={'***' if self.api_token else None}, "
            f"api_token_location={self.api_token_location!r})"
        )


def load_settings(
    *,
    resolver: CredentialResolver | None = None,
    dotenv_path: str | Path | None = None,
    endpoint: str | None = None,
) -> ClientSettings:
    """Load client settings from the environment and ``.env``.

    Args:
        resolver: Resolver to use; a new one loading ``dotenv_path`` is
            created when omitted.
        dotenv_path: Path to the ``.env`` file for a newly created resolver.
        endpoint: Explicit endpoint, takes precedence over ``WIRK_ENDPOINT``.

    Returns:
        The resolved settings. Missing credentials are left as None.
    """
    if resolver is None:
        resolver = CredentialResolver(dotenv_path=dotenv_path)

    api_token = resolver.resolve(env_var_name="WIRK_API_TOKEN")
    if api_token is None:
        api_token = resolver.resolve_from_file(env_var_name="WIRK_API_TOKEN_FILE")

    settings = ClientSettings(
        endpoint=resolver.resolve(value=endpoint, env_var_name="WIRK_ENDPOINT", default=DEFAULT_ENDPOINT),
        username=resolver.resolve(env_var_name="WIRK_USERNAME"),
        key=resolver.resolve(env_var_name="WIRK_KEY"),
        oauth2_token=resolver.resolve(env_var_name="WIRK_OAUTH2_TOKEN"),
        api_token_name=resolver.resolve(env_var_name="WIRK_API_TOKEN_NAME", default=DEFAULT_API_TOKEN_NAME),
        api_token=api_token,
        api_token_location=resolver.resolve(env_var_name="WIRK_API_TOKEN_LOCATION"),
    )
    logger.debug(f"Loaded client settings: {settings!r}")
    return settings
