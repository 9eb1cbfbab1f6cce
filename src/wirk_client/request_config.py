"""Per-call request configuration."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from wirk_client.auth.schemes import SecurityScheme


@dataclass(frozen=True)
class RequestConfig:
    """Extra headers, query parameters and security override for one call.

    Attributes:
        headers: Headers applied on top of the security-derived ones.
        query_parameters: Query parameters applied on top of the
            security-derived ones.
        security: Optional override. Either the name of a scheme the
            operation declares, or a scheme instance used as-is.
    """

    headers: Mapping[str, str] = field(default_factory=dict)
    query_parameters: Mapping[str, str] = field(default_factory=dict)
    security: str | SecurityScheme | None = None

    @classmethod
    def coerce(cls, config: "RequestConfig | Mapping[str, Any] | None") -> "RequestConfig":
        """Accept a RequestConfig, a plain mapping or None.

        Mappings may use ``query_parameters`` or ``queryParameters``.
        """
        if config is None:
            return cls()
        if isinstance(config, RequestConfig):
            return config
        if not isinstance(config, Mapping):
            raise TypeError(f"config must be a RequestConfig or a mapping, got {type(config).__name__}")

        query = config.get("query_parameters", config.get("queryParameters"))
        return cls(
            headers=dict(config.get("headers") or {}),
            query_parameters=dict(query or {}),
            security=config.get("security"),
        )
