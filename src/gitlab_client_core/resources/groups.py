"""Group endpoints: lookup, hierarchy, lifecycle, members."""

from typing import Literal

from gitlab_client_core.models.base import Page
from gitlab_client_core.models.groups import Group
from gitlab_client_core.models.projects import Visibility
from gitlab_client_core.models.users import Member
from gitlab_client_core.resources.base import GroupId, Resource, compact, group_label
from gitlab_client_core.transport.urls import build_path

GroupOrder = Literal["name", "path", "id", "similarity"]
ProjectCreationLevel = Literal["noone", "maintainer", "developer"]
SubgroupCreationLevel = Literal["owner", "maintainer"]


class GroupsResource(Resource):
    async def list_groups(
        self,
        search: str | None = None,
        owned: bool | None = None,
        min_access_level: int | None = None,
        top_level_only: bool | None = None,
        order_by: GroupOrder | None = None,
        sort: Literal["asc", "desc"] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Group]:
        return await self._get_page(
            Group,
            "/groups",
            context="groups",
            params={
                "search": search,
                "owned": owned,
                "min_access_level": min_access_level,
                "top_level_only": top_level_only,
                "order_by": order_by,
                "sort": sort,
                "page": page,
                "per_page": per_page,
            },
        )

    async def get_group(
        self,
        group_id: GroupId,
        with_custom_attributes: bool | None = None,
        with_projects: bool | None = None,
    ) -> Group:
        return await self._get_record(
            Group,
            build_path("/groups/{group_id}", group_id=group_id),
            context=group_label(group_id),
            params={"with_custom_attributes": with_custom_attributes, "with_projects": with_projects},
        )

    async def list_group_subgroups(
        self,
        group_id: GroupId,
        search: str | None = None,
        owned: bool | None = None,
        min_access_level: int | None = None,
        order_by: GroupOrder | None = None,
        sort: Literal["asc", "desc"] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Group]:
        return await self._get_page(
            Group,
            build_path("/groups/{group_id}/subgroups", group_id=group_id),
            context=f"subgroups of {group_label(group_id)}",
            params={
                "search": search,
                "owned": owned,
                "min_access_level": min_access_level,
                "order_by": order_by,
                "sort": sort,
                "page": page,
                "per_page": per_page,
            },
        )

    async def create_group(
        self,
        name: str,
        path: str,
        description: str | None = None,
        visibility: Visibility | None = None,
        parent_id: int | None = None,
        project_creation_level: ProjectCreationLevel | None = None,
        subgroup_creation_level: SubgroupCreationLevel | None = None,
    ) -> Group:
        return await self._send_record(
            "POST",
            Group,
            "/groups",
            context=f"new group '{path}'",
            json=compact(
                {
                    "name": name,
                    "path": path,
                    "description": description,
                    "visibility": visibility,
                    "parent_id": parent_id,
                    "project_creation_level": project_creation_level,
                    "subgroup_creation_level": subgroup_creation_level,
                }
            ),
        )

    async def update_group(
        self,
        group_id: GroupId,
        name: str | None = None,
        path: str | None = None,
        description: str | None = None,
        visibility: Visibility | None = None,
        project_creation_level: ProjectCreationLevel | None = None,
        subgroup_creation_level: SubgroupCreationLevel | None = None,
    ) -> Group:
        return await self._send_record(
            "PUT",
            Group,
            build_path("/groups/{group_id}", group_id=group_id),
            context=group_label(group_id),
            json=compact(
                {
                    "name": name,
                    "path": path,
                    "description": description,
                    "visibility": visibility,
                    "project_creation_level": project_creation_level,
                    "subgroup_creation_level": subgroup_creation_level,
                }
            ),
        )

    async def delete_group(self, group_id: GroupId) -> None:
        """Schedule a group for deletion (GitLab answers 202 Accepted)."""
        await self._send_no_content(
            "DELETE",
            build_path("/groups/{group_id}", group_id=group_id),
            context=group_label(group_id),
        )

    async def list_group_members(
        self,
        group_id: GroupId,
        query: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Member]:
        return await self._get_page(
            Member,
            build_path("/groups/{group_id}/members/all", group_id=group_id),
            context=f"members of {group_label(group_id)}",
            params={"query": query, "page": page, "per_page": per_page},
        )
