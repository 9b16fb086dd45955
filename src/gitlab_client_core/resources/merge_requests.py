"""Merge request endpoints: lifecycle, approvals, merging, notes, discussions."""

from typing import Literal

from gitlab_client_core.models.base import Page
from gitlab_client_core.models.inputs import DiffPosition
from gitlab_client_core.models.issues import Discussion, Note
from gitlab_client_core.models.merge_requests import (
    MergeRequest,
    MergeRequestApprovals,
    MergeRequestChanges,
    RebaseStatus,
)
from gitlab_client_core.models.projects import Commit
from gitlab_client_core.resources.base import ProjectId, Resource, compact, project_label
from gitlab_client_core.resources.issues import join_labels
from gitlab_client_core.transport.urls import build_path

SortOrder = Literal["asc", "desc"]

MR_PATH = "/projects/{project_id}/merge_requests/{merge_request_iid}"


def merge_request_label(project_id: ProjectId, merge_request_iid: int) -> str:
    return f"merge request !{merge_request_iid} in {project_label(project_id)}"


class MergeRequestsResource(Resource):
    def _path(self, project_id: ProjectId, merge_request_iid: int, suffix: str = "") -> str:
        return build_path(MR_PATH + suffix, project_id=project_id, merge_request_iid=merge_request_iid)

    async def list_merge_requests(
        self,
        project_id: ProjectId,
        state: Literal["opened", "closed", "locked", "merged", "all"] | None = None,
        order_by: Literal["created_at", "updated_at"] | None = None,
        sort: SortOrder | None = None,
        milestone: str | None = None,
        labels: str | None = None,
        created_after: str | None = None,
        created_before: str | None = None,
        updated_after: str | None = None,
        updated_before: str | None = None,
        scope: Literal["created_by_me", "assigned_to_me", "all"] | None = None,
        author_id: int | None = None,
        assignee_id: int | None = None,
        search: str | None = None,
        source_branch: str | None = None,
        target_branch: str | None = None,
        wip: Literal["yes", "no"] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[MergeRequest]:
        return await self._get_page(
            MergeRequest,
            build_path("/projects/{project_id}/merge_requests", project_id=project_id),
            context=f"merge requests of {project_label(project_id)}",
            params={
                "state": state,
                "order_by": order_by,
                "sort": sort,
                "milestone": milestone,
                "labels": labels,
                "created_after": created_after,
                "created_before": created_before,
                "updated_after": updated_after,
                "updated_before": updated_before,
                "scope": scope,
                "author_id": author_id,
                "assignee_id": assignee_id,
                "search": search,
                "source_branch": source_branch,
                "target_branch": target_branch,
                "wip": wip,
                "page": page,
                "per_page": per_page,
            },
        )

    async def create_merge_request(
        self,
        project_id: ProjectId,
        title: str,
        source_branch: str,
        target_branch: str,
        description: str | None = None,
        allow_collaboration: bool | None = None,
        draft: bool | None = None,
    ) -> MergeRequest:
        return await self._send_record(
            "POST",
            MergeRequest,
            build_path("/projects/{project_id}/merge_requests", project_id=project_id),
            context=f"new merge request '{source_branch}' into '{target_branch}' in {project_label(project_id)}",
            json=compact(
                {
                    "title": title,
                    "description": description,
                    "source_branch": source_branch,
                    "target_branch": target_branch,
                    "allow_collaboration": allow_collaboration,
                    "draft": draft,
                }
            ),
        )

    async def update_merge_request(
        self,
        project_id: ProjectId,
        merge_request_iid: int,
        title: str | None = None,
        description: str | None = None,
        target_branch: str | None = None,
        assignee_ids: list[int] | None = None,
        reviewer_ids: list[int] | None = None,
        labels: list[str] | None = None,
        milestone_id: int | None = None,
        state_event: Literal["close", "reopen"] | None = None,
        remove_source_branch: bool | None = None,
        squash: bool | None = None,
        draft: bool | None = None,
    ) -> MergeRequest:
        return await self._send_record(
            "PUT",
            MergeRequest,
            self._path(project_id, merge_request_iid),
            context=merge_request_label(project_id, merge_request_iid),
            json=compact(
                {
                    "title": title,
                    "description": description,
                    "target_branch": target_branch,
                    "assignee_ids": assignee_ids,
                    "reviewer_ids": reviewer_ids,
                    "labels": join_labels(labels),
                    "milestone_id": milestone_id,
                    "state_event": state_event,
                    "remove_source_branch": remove_source_branch,
                    "squash": squash,
                    "draft": draft,
                }
            ),
        )

    async def approve_merge_request(
        self,
        project_id: ProjectId,
        merge_request_iid: int,
        sha: str | None = None,
    ) -> MergeRequestApprovals:
        """Approve a merge request.

        With ``sha``, GitLab answers 409 (``ConflictError``) if the source
        branch head has moved since that commit.
        """
        return await self._send_record(
            "POST",
            MergeRequestApprovals,
            self._path(project_id, merge_request_iid, "/approve"),
            context=merge_request_label(project_id, merge_request_iid),
            json=compact({"sha": sha}) or None,
        )

    async def unapprove_merge_request(self, project_id: ProjectId, merge_request_iid: int) -> MergeRequestApprovals:
        return await self._send_record(
            "POST",
            MergeRequestApprovals,
            self._path(project_id, merge_request_iid, "/unapprove"),
            context=merge_request_label(project_id, merge_request_iid),
        )

    async def merge_merge_request(
        self,
        project_id: ProjectId,
        merge_request_iid: int,
        merge_commit_message: str | None = None,
        squash_commit_message: str | None = None,
        squash: bool | None = None,
        should_remove_source_branch: bool | None = None,
        sha: str | None = None,
    ) -> MergeRequest:
        return await self._send_record(
            "PUT",
            MergeRequest,
            self._path(project_id, merge_request_iid, "/merge"),
            context=merge_request_label(project_id, merge_request_iid),
            json=compact(
                {
                    "merge_commit_message": merge_commit_message,
                    "squash_commit_message": squash_commit_message,
                    "squash": squash,
                    "should_remove_source_branch": should_remove_source_branch,
                    "sha": sha,
                }
            ),
        )

    async def set_auto_merge(
        self,
        project_id: ProjectId,
        merge_request_iid: int,
        merge_commit_message: str | None = None,
        squash_commit_message: str | None = None,
        squash: bool | None = None,
        should_remove_source_branch: bool | None = None,
        sha: str | None = None,
    ) -> MergeRequest:
        """Merge automatically once the head pipeline succeeds."""
        return await self._send_record(
            "PUT",
            MergeRequest,
            self._path(project_id, merge_request_iid, "/merge"),
            context=merge_request_label(project_id, merge_request_iid),
            json=compact(
                {
                    "merge_commit_message": merge_commit_message,
                    "squash_commit_message": squash_commit_message,
                    "squash": squash,
                    "should_remove_source_branch": should_remove_source_branch,
                    "sha": sha,
                    "merge_when_pipeline_succeeds": True,
                }
            ),
        )

    async def cancel_auto_merge(self, project_id: ProjectId, merge_request_iid: int) -> MergeRequest:
        return await self._send_record(
            "POST",
            MergeRequest,
            self._path(project_id, merge_request_iid, "/cancel_merge_when_pipeline_succeeds"),
            context=merge_request_label(project_id, merge_request_iid),
        )

    async def rebase_merge_request(
        self,
        project_id: ProjectId,
        merge_request_iid: int,
        skip_ci: bool | None = None,
    ) -> RebaseStatus:
        return await self._send_record(
            "PUT",
            RebaseStatus,
            self._path(project_id, merge_request_iid, "/rebase"),
            context=merge_request_label(project_id, merge_request_iid),
            json=compact({"skip_ci": skip_ci}),
        )

    async def get_merge_request_changes(
        self,
        project_id: ProjectId,
        merge_request_iid: int,
        access_raw_diffs: bool | None = None,
    ) -> MergeRequestChanges:
        return await self._get_record(
            MergeRequestChanges,
            self._path(project_id, merge_request_iid, "/changes"),
            context=merge_request_label(project_id, merge_request_iid),
            params={"access_raw_diffs": access_raw_diffs},
        )

    async def get_merge_request_commits(
        self,
        project_id: ProjectId,
        merge_request_iid: int,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Commit]:
        return await self._get_page(
            Commit,
            self._path(project_id, merge_request_iid, "/commits"),
            context=f"commits of {merge_request_label(project_id, merge_request_iid)}",
            params={"page": page, "per_page": per_page},
        )

    async def list_merge_request_notes(
        self,
        project_id: ProjectId,
        merge_request_iid: int,
        sort: SortOrder | None = None,
        order_by: Literal["created_at", "updated_at"] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Note]:
        return await self._get_page(
            Note,
            self._path(project_id, merge_request_iid, "/notes"),
            context=f"notes of {merge_request_label(project_id, merge_request_iid)}",
            params={"sort": sort, "order_by": order_by, "page": page, "per_page": per_page},
        )

    async def create_merge_request_note(
        self,
        project_id: ProjectId,
        merge_request_iid: int,
        body: str,
        internal: bool | None = None,
    ) -> Note:
        return await self._send_record(
            "POST",
            Note,
            self._path(project_id, merge_request_iid, "/notes"),
            context=merge_request_label(project_id, merge_request_iid),
            json=compact({"body": body, "internal": internal}),
        )

    async def update_merge_request_note(
        self,
        project_id: ProjectId,
        merge_request_iid: int,
        note_id: int,
        body: str,
    ) -> Note:
        return await self._send_record(
            "PUT",
            Note,
            build_path(
                MR_PATH + "/notes/{note_id}",
                project_id=project_id,
                merge_request_iid=merge_request_iid,
                note_id=note_id,
            ),
            context=f"note {note_id} on {merge_request_label(project_id, merge_request_iid)}",
            json={"body": body},
        )

    async def list_merge_request_discussions(
        self,
        project_id: ProjectId,
        merge_request_iid: int,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Discussion]:
        return await self._get_page(
            Discussion,
            self._path(project_id, merge_request_iid, "/discussions"),
            context=f"discussions of {merge_request_label(project_id, merge_request_iid)}",
            params={"page": page, "per_page": per_page},
        )

    async def create_merge_request_discussion(
        self,
        project_id: ProjectId,
        merge_request_iid: int,
        body: str,
        position: DiffPosition | None = None,
    ) -> Discussion:
        """Start a discussion thread, anchored to a diff line when ``position`` is given."""
        payload: dict = {"body": body}
        if position is not None:
            payload["position"] = DiffPosition.model_validate(position).model_dump(exclude_none=True)
        return await self._send_record(
            "POST",
            Discussion,
            self._path(project_id, merge_request_iid, "/discussions"),
            context=merge_request_label(project_id, merge_request_iid),
            json=payload,
        )
