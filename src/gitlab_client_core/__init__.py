"""GitLab Client Core - Typed async client layer for the GitLab REST API (v4).

This library provides:
- An async resource client covering projects, repositories, issues, merge
  requests, CI/CD, wikis, users and groups
- Per-segment path encoding and GitLab-style query assembly
- Typed errors mapped from HTTP status codes
- Validated response records and paginated envelopes
- CI configuration linting with automatic ``.gitlab-ci.yml`` loading
- A tool registry with read-only filtering

Example:
    ```python
    from gitlab_client_core import GitLabClient, load_settings

    settings = load_settings()

    async with GitLabClient(settings.credentials, timeout=settings.timeout) as client:
        result = await client.validate_ci_yaml("group/app")
        print(result.valid, result.errors)
    ```
"""

from gitlab_client_core.auth import Credentials
from gitlab_client_core.client import GitLabClient
from gitlab_client_core.config import Settings, load_settings
from gitlab_client_core.errors import GitLabError
from gitlab_client_core.models import Page
from gitlab_client_core.tools import ToolRegistry, build_registry

__version__ = "0.1.0"

__all__ = [
    "Credentials",
    "GitLabClient",
    "GitLabError",
    "Page",
    "Settings",
    "ToolRegistry",
    "__version__",
    "build_registry",
    "load_settings",
]
