"""Project label and milestone endpoints."""

from typing import Literal

from gitlab_client_core.models.base import Page
from gitlab_client_core.models.issues import Label, Milestone
from gitlab_client_core.resources.base import ProjectId, Resource, compact, project_label
from gitlab_client_core.transport.urls import build_path


class LabelsResource(Resource):
    async def list_labels(
        self,
        project_id: ProjectId,
        search: str | None = None,
        include_ancestor_groups: bool | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Label]:
        return await self._get_page(
            Label,
            build_path("/projects/{project_id}/labels", project_id=project_id),
            context=f"labels of {project_label(project_id)}",
            params={
                "search": search,
                "include_ancestor_groups": include_ancestor_groups,
                "page": page,
                "per_page": per_page,
            },
        )

    async def create_label(
        self,
        project_id: ProjectId,
        name: str,
        color: str,
        description: str | None = None,
        priority: int | None = None,
    ) -> Label:
        return await self._send_record(
            "POST",
            Label,
            build_path("/projects/{project_id}/labels", project_id=project_id),
            context=f"label '{name}' in {project_label(project_id)}",
            json=compact({"name": name, "color": color, "description": description or None, "priority": priority}),
        )

    async def update_label(
        self,
        project_id: ProjectId,
        label_id: int,
        new_name: str | None = None,
        color: str | None = None,
        description: str | None = None,
        priority: int | None = None,
    ) -> Label:
        return await self._send_record(
            "PUT",
            Label,
            build_path("/projects/{project_id}/labels/{label_id}", project_id=project_id, label_id=label_id),
            context=f"label {label_id} in {project_label(project_id)}",
            json=compact({"new_name": new_name, "color": color, "description": description, "priority": priority}),
        )

    async def list_milestones(
        self,
        project_id: ProjectId,
        iids: list[int] | None = None,
        state: Literal["active", "closed"] | None = None,
        title: str | None = None,
        search: str | None = None,
        include_parent_milestones: bool | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Milestone]:
        return await self._get_page(
            Milestone,
            build_path("/projects/{project_id}/milestones", project_id=project_id),
            context=f"milestones of {project_label(project_id)}",
            params={
                "iids": iids,
                "state": state,
                "title": title,
                "search": search,
                "include_parent_milestones": include_parent_milestones,
                "page": page,
                "per_page": per_page,
            },
        )

    async def create_milestone(
        self,
        project_id: ProjectId,
        title: str,
        description: str | None = None,
        due_date: str | None = None,
        start_date: str | None = None,
    ) -> Milestone:
        return await self._send_record(
            "POST",
            Milestone,
            build_path("/projects/{project_id}/milestones", project_id=project_id),
            context=f"milestone '{title}' in {project_label(project_id)}",
            json=compact({"title": title, "description": description, "due_date": due_date, "start_date": start_date}),
        )

    async def update_milestone(
        self,
        project_id: ProjectId,
        milestone_id: int,
        title: str | None = None,
        description: str | None = None,
        due_date: str | None = None,
        start_date: str | None = None,
        state_event: Literal["close", "activate"] | None = None,
    ) -> Milestone:
        return await self._send_record(
            "PUT",
            Milestone,
            build_path(
                "/projects/{project_id}/milestones/{milestone_id}", project_id=project_id, milestone_id=milestone_id
            ),
            context=f"milestone {milestone_id} in {project_label(project_id)}",
            json=compact(
                {
                    "title": title,
                    "description": description,
                    "due_date": due_date,
                    "start_date": start_date,
                    "state_event": state_event,
                }
            ),
        )
