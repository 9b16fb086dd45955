"""GitLab credentials and multi-source credential resolution.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment without overriding it)
4. Default value

Example:
    ```python
    from gitlab_client_core.auth import CredentialResolver, Credentials

    resolver = CredentialResolver()
    token = resolver.resolve(env_var_name="GITLAB_PERSONAL_ACCESS_TOKEN", required=True)
    base_url = resolver.resolve(env_var_name="GITLAB_API_URL", default="https://gitlab.com/api/v4")

    credentials = Credentials(base_url=base_url, token=token)
    ```

Security Considerations:
    - Tokens are never logged (masked with ***)
    - Only the source of a value is logged (explicit, env var, default)
    - ``Credentials`` hides the token from ``repr``
"""

import logging
import os
from dataclasses import dataclass, field
from threading import Lock

from dotenv import load_dotenv

from gitlab_client_core.auth.exceptions import CredentialNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """Immutable connection credentials for one client instance.

    Attributes:
        base_url: API root, e.g. ``https://gitlab.com/api/v4``.
        token: Bearer token. Excluded from ``repr``.
    """

    base_url: str
    token: str = field(repr=False)

    def __post_init__(self) -> None:
        # Normalize so path templates can always start with "/"
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))


class CredentialResolver:
    """Resolve credentials from explicit values, the environment, and .env files.

    Example:
        ```python
        resolver = CredentialResolver()

        token = resolver.resolve(env_var_name="GITLAB_PERSONAL_ACCESS_TOKEN", required=True)
        timeout = resolver.resolve(env_var_name="GITLAB_TIMEOUT", default="30", mask_in_logs=False)
        ```
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load a .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once (thread-safe)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    @staticmethod
    def _mask_credential(value: str | None) -> str:
        if value is None:
            return "None"
        return "***"

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a credential from multiple sources.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable name to check.
            default: Default value if not found elsewhere.
            required: Raise CredentialNotFoundError when nothing resolves.
            mask_in_logs: Mask the value in debug logs. Disable for
                non-sensitive settings.

        Returns:
            Resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required=True and nothing resolved.
        """
        candidates = [
            ("explicit value", value),
            (env_var_name, os.environ.get(env_var_name) if env_var_name else None),
            ("default", default),
        ]
        for source, candidate in candidates:
            if candidate is not None:
                shown = self._mask_credential(candidate) if mask_in_logs else candidate
                logger.debug(f"{env_var_name or 'setting'} resolved from {source}: {shown}")
                return candidate

        if required:
            raise CredentialNotFoundError(f"{env_var_name or 'Credential'}: not set", env_var_name=env_var_name)
        return None
