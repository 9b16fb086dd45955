"""Process settings for building a :class:`GitLabClient`.

Settings are read once, at startup, through :class:`CredentialResolver`
(explicit value, then environment, then ``.env``, then default). Client
methods never look at the environment themselves.

Example:
    ```python
    from gitlab_client_core.config import load_settings
    from gitlab_client_core.client import GitLabClient

    settings = load_settings()
    async with GitLabClient(settings.credentials, timeout=settings.timeout) as client:
        user = await client.verify_connection()
    ```
"""

import logging
import math
from dataclasses import dataclass
from urllib.parse import urlsplit

from gitlab_client_core.auth.credentials import CredentialResolver, Credentials
from gitlab_client_core.auth.exceptions import ConfigurationError, CredentialNotFoundError
from gitlab_client_core.transport.http import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

TOKEN_ENV = "GITLAB_PERSONAL_ACCESS_TOKEN"
API_URL_ENV = "GITLAB_API_URL"
READ_ONLY_ENV = "GITLAB_READ_ONLY_MODE"
TIMEOUT_ENV = "GITLAB_TIMEOUT"

DEFAULT_API_URL = "https://gitlab.com/api/v4"
MIN_TOKEN_LENGTH = 20

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    """Validated, immutable process settings.

    Attributes:
        credentials: API base URL and token
        read_only: Hide and refuse mutating tools
        timeout: Per-request timeout in seconds
    """

    credentials: Credentials
    read_only: bool = False
    timeout: float = DEFAULT_TIMEOUT


def parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"expected true or false, got {raw!r}")


def _check_url(url: str, problems: list[str]) -> None:
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        problems.append(f"{API_URL_ENV}: expected an http(s) URL, got {url!r}")
    elif parts.scheme == "http":
        logger.warning(f"{API_URL_ENV} uses plain http; the access token will be sent unencrypted")


def load_settings(resolver: CredentialResolver | None = None) -> Settings:
    """Resolve and validate settings from the environment.

    Every variable is checked before anything is raised, so one error
    reports all the problems at once.

    Args:
        resolver: Resolver to read from; a default one (which loads ``.env``)
            is created when omitted

    Raises:
        ConfigurationError: if any setting is missing or invalid
    """
    resolver = resolver or CredentialResolver()
    problems: list[str] = []

    token = None
    try:
        token = resolver.resolve(env_var_name=TOKEN_ENV, required=True)
    except CredentialNotFoundError:
        problems.append(f"{TOKEN_ENV}: not set")
    if token is not None and len(token.strip()) < MIN_TOKEN_LENGTH:
        problems.append(f"{TOKEN_ENV}: must be at least {MIN_TOKEN_LENGTH} characters")

    base_url = resolver.resolve(env_var_name=API_URL_ENV, default=DEFAULT_API_URL, mask_in_logs=False)
    _check_url(base_url, problems)

    read_only = False
    raw_read_only = resolver.resolve(env_var_name=READ_ONLY_ENV, default="false", mask_in_logs=False)
    try:
        read_only = parse_bool(raw_read_only)
    except ValueError as e:
        problems.append(f"{READ_ONLY_ENV}: {e}")

    timeout = DEFAULT_TIMEOUT
    raw_timeout = resolver.resolve(env_var_name=TIMEOUT_ENV, default=str(DEFAULT_TIMEOUT), mask_in_logs=False)
    try:
        timeout = float(raw_timeout)
    except ValueError:
        problems.append(f"{TIMEOUT_ENV}: expected a number of seconds, got {raw_timeout!r}")
    else:
        if not math.isfinite(timeout):
            problems.append(f"{TIMEOUT_ENV}: must be a finite number of seconds, got {raw_timeout!r}")
        elif timeout <= 0:
            problems.append(f"{TIMEOUT_ENV}: must be positive, got {raw_timeout!r}")

    if problems:
        raise ConfigurationError(f"Invalid GitLab settings: {'; '.join(problems)}", problems=problems)

    return Settings(
        credentials=Credentials(base_url=base_url, token=token.strip()),
        read_only=read_only,
        timeout=timeout,
    )
