"""Issue endpoints, including notes and discussions."""

from typing import Literal

from gitlab_client_core.models.base import Page
from gitlab_client_core.models.issues import Discussion, Issue, Note
from gitlab_client_core.resources.base import ProjectId, Resource, compact, project_label
from gitlab_client_core.transport.urls import build_path
from gitlab_client_core.validation import validate_items

SortOrder = Literal["asc", "desc"]
Scope = Literal["created_by_me", "assigned_to_me", "all"]


def issue_label(project_id: ProjectId, issue_iid: int) -> str:
    return f"issue #{issue_iid} in {project_label(project_id)}"


def join_labels(labels: list[str] | None) -> str | None:
    return ",".join(labels) if labels is not None else None


class IssuesResource(Resource):
    async def list_issues(
        self,
        project_id: ProjectId,
        iid: int | str | None = None,
        state: Literal["opened", "closed", "all"] | None = None,
        labels: str | None = None,
        milestone: str | None = None,
        scope: Scope | None = None,
        author_id: int | None = None,
        assignee_id: int | None = None,
        search: str | None = None,
        created_after: str | None = None,
        created_before: str | None = None,
        updated_after: str | None = None,
        updated_before: str | None = None,
        order_by: str | None = None,
        sort: SortOrder | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Issue]:
        """List issues of a project.

        ``iid`` is not sent to the server. When given, the fetched page is
        narrowed client-side to issues whose ``iid`` matches it as a string,
        keeping their order, and ``count`` is then the number of matches on
        this page rather than the server-side ``X-Total``.
        """
        params = {
            "state": state,
            "labels": labels,
            "milestone": milestone,
            "scope": scope,
            "author_id": author_id,
            "assignee_id": assignee_id,
            "search": search,
            "created_after": created_after,
            "created_before": created_before,
            "updated_after": updated_after,
            "updated_before": updated_before,
            "order_by": order_by,
            "sort": sort,
            "page": page,
            "per_page": per_page,
        }
        path = build_path("/projects/{project_id}/issues", project_id=project_id)
        context = f"issues of {project_label(project_id)}"
        if iid is None:
            return await self._get_page(Issue, path, context=context, params=params)

        response = await self._request("GET", path, context=context, params=params)
        raw_items = self._json(response, context)
        if isinstance(raw_items, list):
            wanted = str(iid)
            raw_items = [item for item in raw_items if isinstance(item, dict) and str(item.get("iid")) == wanted]
        items = validate_items(Issue, raw_items, context)
        return Page[Issue](count=len(items), items=items)

    async def create_issue(
        self,
        project_id: ProjectId,
        title: str,
        description: str | None = None,
        assignee_ids: list[int] | None = None,
        milestone_id: int | None = None,
        labels: list[str] | None = None,
    ) -> Issue:
        return await self._send_record(
            "POST",
            Issue,
            build_path("/projects/{project_id}/issues", project_id=project_id),
            context=f"new issue in {project_label(project_id)}",
            json=compact(
                {
                    "title": title,
                    "description": description,
                    "assignee_ids": assignee_ids,
                    "milestone_id": milestone_id,
                    "labels": join_labels(labels),
                }
            ),
        )

    async def update_issue(
        self,
        project_id: ProjectId,
        issue_iid: int,
        title: str | None = None,
        description: str | None = None,
        assignee_ids: list[int] | None = None,
        milestone_id: int | None = None,
        labels: list[str] | None = None,
        state_event: Literal["close", "reopen"] | None = None,
        due_date: str | None = None,
        confidential: bool | None = None,
    ) -> Issue:
        return await self._send_record(
            "PUT",
            Issue,
            build_path("/projects/{project_id}/issues/{issue_iid}", project_id=project_id, issue_iid=issue_iid),
            context=issue_label(project_id, issue_iid),
            json=compact(
                {
                    "title": title,
                    "description": description,
                    "assignee_ids": assignee_ids,
                    "milestone_id": milestone_id,
                    "labels": join_labels(labels),
                    "state_event": state_event,
                    "due_date": due_date,
                    "confidential": confidential,
                }
            ),
        )

    async def list_issue_notes(
        self,
        project_id: ProjectId,
        issue_iid: int,
        sort: SortOrder | None = None,
        order_by: Literal["created_at", "updated_at"] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Note]:
        return await self._get_page(
            Note,
            build_path("/projects/{project_id}/issues/{issue_iid}/notes", project_id=project_id, issue_iid=issue_iid),
            context=f"notes of {issue_label(project_id, issue_iid)}",
            params={"sort": sort, "order_by": order_by, "page": page, "per_page": per_page},
        )

    async def create_issue_note(
        self,
        project_id: ProjectId,
        issue_iid: int,
        body: str,
        internal: bool | None = None,
    ) -> Note:
        return await self._send_record(
            "POST",
            Note,
            build_path("/projects/{project_id}/issues/{issue_iid}/notes", project_id=project_id, issue_iid=issue_iid),
            context=issue_label(project_id, issue_iid),
            json=compact({"body": body, "internal": internal}),
        )

    async def list_issue_discussions(
        self,
        project_id: ProjectId,
        issue_iid: int,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Discussion]:
        return await self._get_page(
            Discussion,
            build_path(
                "/projects/{project_id}/issues/{issue_iid}/discussions", project_id=project_id, issue_iid=issue_iid
            ),
            context=f"discussions of {issue_label(project_id, issue_iid)}",
            params={"page": page, "per_page": per_page},
        )
