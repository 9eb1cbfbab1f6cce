"""Security scheme variants and their constructors.

A security scheme is one of four frozen dataclasses. The ``SecurityScheme``
union lets the resolver check every variant exhaustively.

Example:
    ```python
    from wirk_client.auth.schemes import api_key, basic, oauth2

    basic("alice", "secret")        # BasicSecurity(token="Basic YWxpY2U6c2VjcmV0")
    oauth2("abc")                    # OAuth2Security(token="Bearer abc")
    api_key("X-Token", "t", "query") # ApiKeySecurity(placement=Placement.QUERY, ...)
    ```
"""

import base64
import logging
from dataclasses import dataclass
from enum import Enum

from wirk_client.auth.exceptions import InvalidLocationError

logger = logging.getLogger(__name__)

# Scheme name used by operations that only honour the global credential.
NO_SECURITY = "_NONE"


class Placement(str, Enum):
    """Where an API key travels on the request."""

    HEADER = "HEADER"
    QUERY = "QUERY"


@dataclass(frozen=True)
class NoSecurity:
    """Contributes nothing to the request."""


@dataclass(frozen=True)
class ApiKeySecurity:
    placement: Placement
    name: str
    token: str

    def __repr__(self) -> str:
        return f"ApiKeySecurity(placement={self.placement.value}, name={self.name!r}, token='***')"


@dataclass(frozen=True)
class OAuth2Security:
    """Bearer credential; ``token`` is the full Authorization header value."""

    token: str

    def __repr__(self) -> str:
        return "OAuth2Security(token='***')"


@dataclass(frozen=True)
class BasicSecurity:
    """Basic credential; ``token`` is the full Authorization header value."""

    token: str

    def __repr__(self) -> str:
        return "BasicSecurity(token='***')"


SecurityScheme = NoSecurity | ApiKeySecurity | OAuth2Security | BasicSecurity


def parse_placement(location: str | None) -> Placement:
    """Normalize a token location, case-insensitively.

    Args:
        location: ``"header"`` or ``"query"`` in any case. ``None`` defaults
            to HEADER.

    Returns:
        The matching Placement.

    Raises:
        InvalidLocationError: For any other value.
    """
    if location is None:
        logger.info("No location defined, it defaults to 'HEADER'")
        return Placement.HEADER

    if not isinstance(location, str):
        raise InvalidLocationError(f"Unknown location: {location!r}", location=location)

    try:
        return Placement(location.upper())
    except ValueError:
        raise InvalidLocationError(f"Unknown location: {location}", location=location) from None


def basic_token(username: str, key: str) -> str:
    """Format ``"Basic " + base64(username:key)``.

    The raw UTF-8 bytes of ``username:key`` are encoded; no Unicode
    normalization is applied.

    Raises:
        TypeError: If either input is not a string.
    """
    if not isinstance(username, str) or not isinstance(key, str):
        raise TypeError("username and key must be strings")
    encoded = base64.b64encode(f"{username}:{key}".encode()).decode("ascii")
    return f"Basic {encoded}"


def basic(username: str, key: str) -> BasicSecurity:
    return BasicSecurity(token=basic_token(username, key))


def oauth2(token: str) -> OAuth2Security:
    return OAuth2Security(token=f"Bearer {token}")


def api_key(name: str, token: str, location: str | None = None) -> ApiKeySecurity:
    return ApiKeySecurity(placement=parse_placement(location), name=name, token=token)
