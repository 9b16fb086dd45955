"""The GitLab resource client."""

import httpx

from gitlab_client_core.auth.credentials import Credentials
from gitlab_client_core.ci import CIConfigValidator
from gitlab_client_core.models.pipelines import CIValidationResult
from gitlab_client_core.models.users import UserDetail
from gitlab_client_core.resources import (
    GroupsResource,
    IssuesResource,
    LabelsResource,
    MergeRequestsResource,
    PipelinesResource,
    ProjectsResource,
    RepositoryResource,
    UsersResource,
    WikisResource,
)
from gitlab_client_core.resources.base import ProjectId
from gitlab_client_core.transport.http import DEFAULT_TIMEOUT, Transport


class GitLabClient:
    """Async client for the GitLab REST API (v4).

    Endpoints are grouped by area (``client.projects``, ``client.repository``,
    ``client.issues`` and so on). All groups share one transport, and so one
    connection pool and one set of credentials. The client keeps no other
    state between calls.

    Args:
        credentials: API base URL and access token
        timeout: Per-request timeout in seconds
        transport: Optional httpx transport (``httpx.MockTransport`` in tests)

    Example:
        ```python
        credentials = Credentials(base_url="https://gitlab.com/api/v4", token=token)

        async with GitLabClient(credentials) as client:
            page = await client.pipelines.list_pipelines("group/app", status="failed")
            print(page.count, [p.id for p in page.items])
        ```
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.credentials = credentials
        self._transport = Transport(credentials, timeout=timeout, transport=transport)

        self.projects = ProjectsResource(self._transport)
        self.repository = RepositoryResource(self._transport)
        self.issues = IssuesResource(self._transport)
        self.labels = LabelsResource(self._transport)
        self.merge_requests = MergeRequestsResource(self._transport)
        self.pipelines = PipelinesResource(self._transport)
        self.wikis = WikisResource(self._transport)
        self.users = UsersResource(self._transport)
        self.groups = GroupsResource(self._transport)

    async def __aenter__(self) -> "GitLabClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def validate_ci_yaml(
        self,
        project_id: ProjectId,
        content: str | None = None,
        include_merged_yaml: bool = True,
    ) -> CIValidationResult:
        """Lint CI configuration, reading ``.gitlab-ci.yml`` when no content is given.

        An empty string counts as "no content" and triggers the read.

        Raises:
            CIConfigUnavailableError: if no content was given and the file
                could not be read from the default branch
        """
        return await CIConfigValidator(self).validate(project_id, content, include_merged_yaml)

    async def verify_connection(self) -> UserDetail:
        return await self.users.verify_connection()
