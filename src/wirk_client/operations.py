"""Operation descriptors and path-variable handling."""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from wirk_client.auth.schemes import NO_SECURITY
from wirk_client.errors.exceptions import MissingPathVariableError

_PATH_VARIABLE = re.compile(r"{(\w+)}")


def check_path_variable(value: Any, name: str) -> None:
    """Fail fast on a missing or empty required path variable.

    Raises:
        MissingPathVariableError: If ``value`` is None or an empty string.
    """
    if value is None or (isinstance(value, str) and not value):
        raise MissingPathVariableError(f"Missing the required parameter '{name}'", variable_name=name)


@dataclass(frozen=True)
class Operation:
    """Static description of one remote operation.

    Attributes:
        name: Client method name.
        method: HTTP method.
        path: Path template relative to the endpoint, e.g. ``/App/{Id}``.
        security: Accepted scheme names; the first one is the default.
        has_body: Whether the operation sends a JSON payload.
    """

    name: str
    method: str
    path: str
    security: tuple[str, ...] = (NO_SECURITY,)
    has_body: bool = False

    @property
    def default_scheme(self) -> str:
        return self.security[0]

    @property
    def path_variables(self) -> tuple[str, ...]:
        return tuple(_PATH_VARIABLE.findall(self.path))

    def build_path(self, path_values: Mapping[str, Any] | None = None) -> str:
        """Validate and interpolate the path variables.

        Each value is converted with ``str`` and percent-encoded as a single
        path segment.
        """
        path_values = path_values or {}
        for name in self.path_variables:
            check_path_variable(path_values.get(name), name)

        return _PATH_VARIABLE.sub(lambda m: quote(str(path_values[m.group(1)]), safe=""), self.path)


BASIC_AUTHENTICATION = "Basicauthentication"

GET_APP = Operation("get_app", "GET", "/App")
GET_APP_ID = Operation("get_app_id", "GET", "/App/{Id}")
GET_APP_PROJECT_ID = Operation("get_app_project_id", "GET", "/AppProject/{Id}", security=(BASIC_AUTHENTICATION,))
POST_APP_PROJECT = Operation(
    "post_app_project", "POST", "/AppProject", security=(BASIC_AUTHENTICATION,), has_body=True
)
GET_TASK_LINE_ID = Operation("get_task_line_id", "GET", "/TaskLine/{Id}", security=(BASIC_AUTHENTICATION,))
POST_TASK_LINE = Operation(
    "post_task_line", "POST", "/TaskLine", security=(NO_SECURITY, BASIC_AUTHENTICATION), has_body=True
)

OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (GET_APP, GET_APP_ID, GET_APP_PROJECT_ID, POST_APP_PROJECT, GET_TASK_LINE_ID, POST_TASK_LINE)
}
