"""Issue, note, discussion, label, and milestone records."""

from typing import Any, Literal

from gitlab_client_core.models.base import Record
from gitlab_client_core.models.users import User


class Milestone(Record):
    id: int
    iid: int
    project_id: int | None = None
    group_id: int | None = None
    title: str
    description: str | None = None
    state: Literal["active", "closed"]
    created_at: str | None = None
    updated_at: str | None = None
    due_date: str | None = None
    start_date: str | None = None
    expired: bool | None = None
    web_url: str | None = None


class LabelRef(Record):
    name: str


class Issue(Record):
    id: int
    iid: int
    project_id: int
    title: str
    description: str | None = None
    state: str
    created_at: str
    updated_at: str
    closed_at: str | None = None
    closed_by: User | None = None
    labels: list[str | LabelRef] = []
    milestone: Milestone | None = None
    assignees: list[User] = []
    author: User
    user_notes_count: int | None = None
    upvotes: int | None = None
    downvotes: int | None = None
    due_date: str | None = None
    confidential: bool | None = None
    web_url: str


class Note(Record):
    id: int
    body: str
    attachment: Any = None
    author: User
    created_at: str
    updated_at: str | None = None
    system: bool = False
    noteable_id: int | None = None
    noteable_type: str | None = None
    noteable_iid: int | None = None
    resolvable: bool | None = None
    confidential: bool | None = None
    internal: bool | None = None
    type: str | None = None


class Discussion(Record):
    id: str
    individual_note: bool
    notes: list[Note] = []


class Label(Record):
    id: int
    name: str
    color: str
    text_color: str | None = None
    description: str | None = None
    description_html: str | None = None
    open_issues_count: int | None = None
    closed_issues_count: int | None = None
    open_merge_requests_count: int | None = None
    subscribed: bool | None = None
    priority: int | None = None
    is_project_label: bool | None = None
