"""Credentials and credential resolution.

Example:
    ```python
    from gitlab_client_core.auth import CredentialResolver, Credentials

    resolver = CredentialResolver()
    credentials = Credentials(
        base_url="https://gitlab.com/api/v4",
        token=resolver.resolve(env_var_name="GITLAB_PERSONAL_ACCESS_TOKEN", required=True),
    )
    ```
"""

from gitlab_client_core.auth.credentials import CredentialResolver, Credentials
from gitlab_client_core.auth.exceptions import (
    ConfigurationError,
    CredentialError,
    CredentialNotFoundError,
)

__all__ = [
    "ConfigurationError",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Credentials",
]
