"""RFC 7807 Problem Details models."""

from dataclasses import dataclass
from typing import Any

import httpx

STANDARD_FIELDS = frozenset({"type", "title", "status", "detail", "instance"})


@dataclass
class ProblemDetail:
    """RFC 7807 Problem Details object.

    See: https://datatracker.ietf.org/doc/html/rfc7807
    """

    type: str | None = None
    title: str | None = None
    status: int | None = None
    detail: str | None = None
    instance: str | None = None

    # Extension members (additional fields from API)
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ProblemDetail | None":
        """Parse problem details from an error response.

        Bodies declared as ``application/problem+json`` are always parsed;
        plain JSON bodies are accepted when they carry at least one standard
        field.

        Returns:
            ProblemDetail object or None if the body is not a problem document
        """
        content_type = response.headers.get("content-type", "")
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError, UnicodeDecodeError):
            return None

        if not isinstance(data, dict):
            return None
        if "application/problem+json" not in content_type and not data.keys() & STANDARD_FIELDS:
            return None

        extensions = {k: v for k, v in data.items() if k not in STANDARD_FIELDS}
        return cls(
            type=data.get("type"),
            title=data.get("title"),
            status=data.get("status"),
            detail=data.get("detail"),
            instance=data.get("instance"),
            extensions=extensions or None,
        )

    def to_message(self) -> str:
        """Flatten the problem document into a single error message."""
        lines = []

        if self.title:
            lines.append(self.title)
        if self.detail and self.detail != self.title:
            lines.append(self.detail)
        if self.type:
            lines.append(f"Problem Type: {self.type}")
        if self.instance:
            lines.append(f"Instance: {self.instance}")

        return "\n".join(lines) if lines else "Unknown API error"
