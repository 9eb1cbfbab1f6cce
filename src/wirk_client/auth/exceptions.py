"""Exceptions raised while configuring or resolving authentication.

Security errors are configuration errors: they surface synchronously when
the client is misconfigured and no request has been sent yet.

Example:
    ```python
    from wirk_client.auth.exceptions import MissingSecuritySchemeError

    try:
        client.get_app_project_id(42)
    except MissingSecuritySchemeError as e:
        print(f"Configure {e.scheme_name} first")
    ```
"""

from wirk_client.errors.exceptions import ConfigurationError


class InvalidLocationError(ConfigurationError):
    """Raised when an API token location is neither HEADER nor QUERY."""

    def __init__(self, message: str, location: object = None):
        super().__init__(message)
        self.location = location


class MissingSecuritySchemeError(ConfigurationError):
    """Raised when an operation requires a named scheme that was never configured.

    Attributes:
        scheme_name: The scheme identifier declared by the API.
    """

    def __init__(self, message: str, scheme_name: str):
        super().__init__(message)
        self.scheme_name = scheme_name


class UnsupportedSecuritySchemeError(ConfigurationError):
    """Raised when a per-call override names a scheme the operation does not declare."""

    def __init__(self, message: str, scheme_name: str, declared: tuple[str, ...] = ()):
        super().__init__(message)
        self.scheme_name = scheme_name
        self.declared = declared


class CredentialError(Exception):
    """Base exception for credential loading errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credential file cannot be read."""

    pass
