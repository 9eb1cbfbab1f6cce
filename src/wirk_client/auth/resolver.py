"""Per-call security resolution.

The resolver decides which credential a single request carries and turns
it into concrete header and query additions.

Resolution order (highest to lowest priority):
1. Security override carried by the request config
2. Global security, when the operation's scheme is ``_NONE``
3. The named scheme from the client's security configurations

Example:
    ```python
    from wirk_client.auth.resolver import resolve_security

    contribution = resolve_security(
        config,
        state.global_security,
        state.security_configurations,
        "Basicauthentication",
    )
    headers, params = contribution.merge(config.headers, config.query_parameters)
    ```

Resolution only reads client state, so resolving concurrently with other
calls is safe. A ``configure_*`` call racing a resolution is observed or not
depending on ordering; no lock is taken.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, assert_never

import httpx

from wirk_client.auth.exceptions import MissingSecuritySchemeError, UnsupportedSecuritySchemeError
from wirk_client.auth.schemes import (
    NO_SECURITY,
    ApiKeySecurity,
    BasicSecurity,
    NoSecurity,
    OAuth2Security,
    Placement,
    SecurityScheme,
)

if TYPE_CHECKING:
    from wirk_client.request_config import RequestConfig

logger = logging.getLogger(__name__)

SECURITY_TYPES = (NoSecurity, ApiKeySecurity, OAuth2Security, BasicSecurity)


@dataclass
class SecurityState:
    """Client-owned security configuration.

    Attributes:
        global_security: Credential applied to ``_NONE`` operations.
        security_configurations: Named scheme configurations, keyed by the
            scheme identifiers declared by the API.
    """

    global_security: SecurityScheme = field(default_factory=NoSecurity)
    security_configurations: dict[str, SecurityScheme] = field(default_factory=dict)


@dataclass(frozen=True)
class SecurityContribution:
    """Headers and query parameters derived from one resolved scheme."""

    headers: Mapping[str, str] = field(default_factory=dict)
    query_params: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_scheme(cls, scheme: SecurityScheme) -> "SecurityContribution":
        if isinstance(scheme, NoSecurity):
            return cls()
        if isinstance(scheme, ApiKeySecurity):
            if scheme.placement is Placement.QUERY:
                return cls(query_params={scheme.name: scheme.token})
            return cls(headers={scheme.name: scheme.token})
        if isinstance(scheme, (OAuth2Security, BasicSecurity)):
            return cls(headers={"Authorization": scheme.token})
        assert_never(scheme)

    def merge(
        self,
        headers: Mapping[str, str] | None = None,
        query_params: Mapping[str, str] | None = None,
    ) -> tuple[httpx.Headers, dict[str, str]]:
        """Apply caller entries on top of the security entries.

        Caller headers replace security headers with the same name compared
        case-insensitively; query parameters are compared exactly. Inputs are
        not mutated.
        """
        merged_headers = httpx.Headers(dict(self.headers))
        if headers:
            merged_headers.update(headers)

        merged_params = dict(self.query_params)
        if query_params:
            merged_params.update(query_params)

        return merged_headers, merged_params


def _lookup(
    scheme_name: str,
    global_security: SecurityScheme,
    security_configurations: Mapping[str, SecurityScheme],
) -> SecurityScheme:
    if scheme_name == NO_SECURITY:
        return global_security

    try:
        return security_configurations[scheme_name]
    except KeyError:
        raise MissingSecuritySchemeError(
            f"Security scheme '{scheme_name}' is required but not configured; "
            f"call configure_{scheme_name.lower()}_authentication() first",
            scheme_name=scheme_name,
        ) from None


def resolve_security(
    request_config: "RequestConfig | None",
    global_security: SecurityScheme,
    security_configurations: Mapping[str, SecurityScheme],
    default_scheme_name: str,
    declared_schemes: tuple[str, ...] = (),
) -> SecurityContribution:
    """Resolve the security contribution for one request.

    Args:
        request_config: Per-call config; its ``security`` field, when set,
            overrides the operation default.
        global_security: The client's global credential.
        security_configurations: The client's named scheme configurations.
        default_scheme_name: Scheme the operation declares as its default,
            or ``_NONE``.
        declared_schemes: Every scheme the operation accepts. The default is
            always accepted.

    Returns:
        The headers and query parameters to attach.

    Raises:
        MissingSecuritySchemeError: The selected named scheme is not configured.
        UnsupportedSecuritySchemeError: The override names a scheme the
            operation does not declare.
    """
    scheme_name = default_scheme_name
    override = request_config.security if request_config is not None else None

    if isinstance(override, SECURITY_TYPES):
        logger.debug(f"Using per-call security override: {override!r}")
        return SecurityContribution.from_scheme(override)

    if override is not None:
        accepted = (default_scheme_name, *declared_schemes)
        if override not in accepted:
            raise UnsupportedSecuritySchemeError(
                f"Security scheme '{override}' is not declared by this operation (accepted: {', '.join(accepted)})",
                scheme_name=str(override),
                declared=accepted,
            )
        scheme_name = override

    scheme = _lookup(scheme_name, global_security, security_configurations)
    logger.debug(f"Resolved security scheme '{scheme_name}': {scheme!r}")
    return SecurityContribution.from_scheme(scheme)
