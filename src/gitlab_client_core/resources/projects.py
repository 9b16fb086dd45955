"""Project-level endpoints: lookup, search, creation, events, members."""

from typing import Literal

from gitlab_client_core.models.base import Page
from gitlab_client_core.models.projects import Event, Project, ProjectDetail, Visibility
from gitlab_client_core.models.users import Member
from gitlab_client_core.resources.base import (
    GroupId,
    ProjectId,
    Resource,
    compact,
    group_label,
    project_label,
)
from gitlab_client_core.transport.urls import build_path

SortOrder = Literal["asc", "desc"]


class ProjectsResource(Resource):
    async def get_project(
        self,
        project_id: ProjectId,
        statistics: bool | None = None,
        license: bool | None = None,
        with_custom_attributes: bool | None = None,
    ) -> ProjectDetail:
        return await self._get_record(
            ProjectDetail,
            build_path("/projects/{project_id}", project_id=project_id),
            context=project_label(project_id),
            params={
                "statistics": statistics,
                "license": license,
                "with_custom_attributes": with_custom_attributes,
            },
        )

    async def update_project(
        self,
        project_id: ProjectId,
        name: str | None = None,
        description: str | None = None,
        default_branch: str | None = None,
        visibility: Visibility | None = None,
        issues_enabled: bool | None = None,
        merge_requests_enabled: bool | None = None,
        wiki_enabled: bool | None = None,
        jobs_enabled: bool | None = None,
        archived: bool | None = None,
    ) -> ProjectDetail:
        body = compact(
            {
                "name": name,
                "description": description,
                "default_branch": default_branch,
                "visibility": visibility,
                "issues_enabled": issues_enabled,
                "merge_requests_enabled": merge_requests_enabled,
                "wiki_enabled": wiki_enabled,
                "jobs_enabled": jobs_enabled,
                "archived": archived,
            }
        )
        return await self._send_record(
            "PUT",
            ProjectDetail,
            build_path("/projects/{project_id}", project_id=project_id),
            context=project_label(project_id),
            json=body,
        )

    async def search_repositories(self, search: str, page: int = 1, per_page: int = 20) -> Page[Project]:
        return await self._get_page(
            Project,
            "/projects",
            context=f"projects matching '{search}'",
            params={"search": search, "page": page, "per_page": per_page},
        )

    async def create_repository(
        self,
        name: str,
        description: str | None = None,
        visibility: Visibility = "private",
        initialize_with_readme: bool = True,
    ) -> Project:
        body = compact(
            {
                "name": name,
                "description": description,
                "visibility": visibility,
                "initialize_with_readme": initialize_with_readme,
            }
        )
        return await self._send_record("POST", Project, "/projects", context=f"new project '{name}'", json=body)

    async def fork_repository(self, project_id: ProjectId, namespace: str | None = None) -> Project:
        return await self._send_record(
            "POST",
            Project,
            build_path("/projects/{project_id}/fork", project_id=project_id),
            context=project_label(project_id),
            params={"namespace": namespace},
        )

    async def list_group_projects(
        self,
        group_id: GroupId,
        archived: bool | None = None,
        visibility: Visibility | None = None,
        order_by: Literal["id", "name", "path", "created_at", "updated_at", "last_activity_at"] | None = None,
        sort: SortOrder | None = None,
        search: str | None = None,
        simple: bool | None = None,
        include_subgroups: bool | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Project]:
        return await self._get_page(
            Project,
            build_path("/groups/{group_id}/projects", group_id=group_id),
            context=group_label(group_id),
            params={
                "archived": archived,
                "visibility": visibility,
                "order_by": order_by,
                "sort": sort,
                "search": search,
                "simple": simple,
                "include_subgroups": include_subgroups,
                "page": page,
                "per_page": per_page,
            },
        )

    async def get_project_events(
        self,
        project_id: ProjectId,
        action: str | None = None,
        target_type: str | None = None,
        before: str | None = None,
        after: str | None = None,
        sort: SortOrder | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Event]:
        return await self._get_page(
            Event,
            build_path("/projects/{project_id}/events", project_id=project_id),
            context=f"events of {project_label(project_id)}",
            params={
                "action": action,
                "target_type": target_type,
                "before": before,
                "after": after,
                "sort": sort,
                "page": page,
                "per_page": per_page,
            },
        )

    async def list_project_members(
        self,
        project_id: ProjectId,
        query: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Member]:
        """List members including those inherited from parent groups."""
        return await self._get_page(
            Member,
            build_path("/projects/{project_id}/members/all", project_id=project_id),
            context=f"members of {project_label(project_id)}",
            params={"query": query, "page": page, "per_page": per_page},
        )
