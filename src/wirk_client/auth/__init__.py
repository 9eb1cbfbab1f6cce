"""Authentication components for the Wirk client.

This module provides:
- Security scheme variants (none, API key, OAuth2, basic)
- Per-call security resolution and header/query merging
- Multi-source credential resolution (value → env → .env → default)

Example:
    ```python
    from wirk_client.auth import SecurityState, basic, resolve_security

    state = SecurityState()
    state.security_configurations["Basicauthentication"] = basic("alice", "secret")
    contribution = resolve_security(
        None, state.global_security, state.security_configurations, "Basicauthentication"
    )
    ```
"""

from wirk_client.auth.credentials import CredentialResolver
from wirk_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
    InvalidLocationError,
    MissingSecuritySchemeError,
    UnsupportedSecuritySchemeError,
)
from wirk_client.auth.resolver import SecurityContribution, SecurityState, resolve_security
from wirk_client.auth.schemes import (
    NO_SECURITY,
    ApiKeySecurity,
    BasicSecurity,
    NoSecurity,
    OAuth2Security,
    Placement,
    SecurityScheme,
    api_key,
    basic,
    basic_token,
    oauth2,
    parse_placement,
)

__all__ = [
    "NO_SECURITY",
    "ApiKeySecurity",
    "BasicSecurity",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "InvalidLocationError",
    "MissingSecuritySchemeError",
    "NoSecurity",
    "OAuth2Security",
    "Placement",
    "SecurityContribution",
    "SecurityScheme",
    "SecurityState",
    "UnsupportedSecuritySchemeError",
    "api_key",
    "basic",
    "basic_token",
    "oauth2",
    "parse_placement",
    "resolve_security",
]
