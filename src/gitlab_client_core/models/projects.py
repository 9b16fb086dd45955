"""Project, repository, and release records."""

from typing import Any, Literal

from gitlab_client_core.models.base import Record
from gitlab_client_core.models.users import User

Visibility = Literal["private", "internal", "public"]


class Project(Record):
    id: int
    name: str
    description: str | None = None
    web_url: str
    default_branch: str | None = None
    visibility: Visibility | None = None
    ssh_url_to_repo: str | None = None
    http_url_to_repo: str | None = None
    readme_url: str | None = None
    forks_count: int | None = None
    star_count: int | None = None
    created_at: str | None = None
    last_activity_at: str | None = None


class Namespace(Record):
    id: int
    name: str
    path: str
    kind: str
    full_path: str
    avatar_url: str | None = None
    web_url: str | None = None


class AccessInfo(Record):
    access_level: int
    notification_level: int | None = None


class ProjectPermissions(Record):
    project_access: AccessInfo | None = None
    group_access: AccessInfo | None = None


class ProjectDetail(Project):
    path: str | None = None
    path_with_namespace: str | None = None
    issues_enabled: bool | None = None
    merge_requests_enabled: bool | None = None
    wiki_enabled: bool | None = None
    jobs_enabled: bool | None = None
    snippets_enabled: bool | None = None
    container_registry_enabled: bool | None = None
    creator_id: int | None = None
    namespace: Namespace | None = None
    import_status: str | None = None
    open_issues_count: int | None = None
    ci_config_path: str | None = None
    shared_runners_enabled: bool | None = None
    archived: bool | None = None
    permissions: ProjectPermissions | None = None


class EventNote(Record):
    id: int
    body: str
    author: User | None = None
    created_at: str | None = None
    noteable_id: int | None = None
    noteable_type: str | None = None


class PushData(Record):
    commit_count: int | None = None
    action: str | None = None
    ref: str | None = None
    ref_type: str | None = None
    commit_from: str | None = None
    commit_to: str | None = None
    commit_title: str | None = None


class Event(Record):
    id: int
    project_id: int | None = None
    action_name: str
    target_id: int | None = None
    target_type: str | None = None
    target_title: str | None = None
    author: User | None = None
    created_at: str
    note: EventNote | None = None
    push_data: PushData | None = None


class FileContent(Record):
    """File read from a repository. ``content`` is already decoded text."""

    file_name: str
    file_path: str
    size: int
    encoding: str
    content: str
    content_sha256: str | None = None
    ref: str
    blob_id: str
    commit_id: str
    last_commit_id: str | None = None


class FileWriteResult(Record):
    file_path: str
    branch: str
    commit_id: str
    content: Any = None


class TreeEntry(Record):
    id: str
    name: str
    type: Literal["tree", "blob", "commit"]
    path: str
    mode: str


class CommitStats(Record):
    additions: int
    deletions: int
    total: int


class Commit(Record):
    id: str
    short_id: str
    title: str
    author_name: str | None = None
    author_email: str | None = None
    authored_date: str | None = None
    committer_name: str | None = None
    committer_email: str | None = None
    committed_date: str | None = None
    created_at: str | None = None
    message: str | None = None
    parent_ids: list[str] | None = None
    web_url: str | None = None
    stats: CommitStats | None = None


class Diff(Record):
    old_path: str
    new_path: str
    a_mode: str | None = None
    b_mode: str | None = None
    new_file: bool
    renamed_file: bool
    deleted_file: bool
    diff: str


class CompareResult(Record):
    commit: Commit | None = None
    commits: list[Commit] = []
    diffs: list[Diff] = []
    compare_timeout: bool | None = None
    compare_same_ref: bool | None = None
    web_url: str | None = None


class Branch(Record):
    name: str
    commit: Commit
    merged: bool | None = None
    protected: bool
    developers_can_push: bool | None = None
    developers_can_merge: bool | None = None
    can_push: bool | None = None
    default: bool | None = None
    web_url: str | None = None


class TagRelease(Record):
    tag_name: str
    description: str | None = None


class Tag(Record):
    name: str
    message: str | None = None
    target: str | None = None
    commit: Commit | None = None
    release: TagRelease | None = None
    protected: bool | None = None


class ReleaseMilestone(Record):
    id: int
    iid: int
    title: str
    state: str


class ReleaseSource(Record):
    format: str
    url: str


class ReleaseLink(Record):
    id: int
    name: str
    url: str
    link_type: str | None = None


class ReleaseAssets(Record):
    count: int
    sources: list[ReleaseSource] | None = None
    links: list[ReleaseLink] | None = None


class Release(Record):
    tag_name: str
    name: str | None = None
    description: str | None = None
    created_at: str
    released_at: str | None = None
    author: User | None = None
    commit: Commit | None = None
    milestones: list[ReleaseMilestone] | None = None
    commit_path: str | None = None
    tag_path: str | None = None
    assets: ReleaseAssets | None = None


class AccessLevel(Record):
    access_level: int
    access_level_description: str
    user_id: int | None = None
    group_id: int | None = None


class ProtectedBranch(Record):
    id: int
    name: str
    push_access_levels: list[AccessLevel] | None = None
    merge_access_levels: list[AccessLevel] | None = None
    allow_force_push: bool | None = None
    code_owner_approval_required: bool | None = None
