"""Merge request records."""

from gitlab_client_core.models.base import Record
from gitlab_client_core.models.projects import Diff
from gitlab_client_core.models.users import User


class DiffRefs(Record):
    base_sha: str
    head_sha: str
    start_sha: str


class MergeRequest(Record):
    id: int
    iid: int
    project_id: int
    title: str
    description: str | None = None
    state: str
    merged: bool | None = None
    draft: bool | None = None
    author: User
    assignees: list[User] = []
    reviewers: list[User] = []
    source_branch: str
    target_branch: str
    diff_refs: DiffRefs | None = None
    web_url: str
    created_at: str
    updated_at: str
    merged_at: str | None = None
    closed_at: str | None = None
    merge_commit_sha: str | None = None
    sha: str | None = None
    merge_when_pipeline_succeeds: bool | None = None


class MergeRequestChanges(MergeRequest):
    changes: list[Diff] = []
    # GitLab sends this as a string ("12", or "1000+" when truncated)
    changes_count: str | None = None
    overflow: bool | None = None


class Approver(Record):
    user: User


class MergeRequestApprovals(Record):
    """Approval state returned by the approve and unapprove endpoints."""

    id: int
    iid: int
    project_id: int
    title: str | None = None
    state: str | None = None
    merge_status: str | None = None
    approved: bool | None = None
    approvals_required: int | None = None
    approvals_left: int | None = None
    approved_by: list[Approver] = []


class RebaseStatus(Record):
    rebase_in_progress: bool
