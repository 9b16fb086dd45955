"""Exceptions raised while resolving credentials and loading settings.

Example:
    ```python
    from gitlab_client_core.auth.exceptions import CredentialNotFoundError

    if not token:
        raise CredentialNotFoundError("GitLab token not found", env_var_name="GITLAB_PERSONAL_ACCESS_TOKEN")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential and configuration errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved from any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class ConfigurationError(CredentialError):
    """Raised when resolved settings are present but invalid.

    Attributes:
        problems: One ``"VARIABLE: reason"`` line per invalid setting.
    """

    def __init__(self, message: str, problems: list[str] | None = None):
        super().__init__(message)
        self.problems = problems if problems is not None else []
