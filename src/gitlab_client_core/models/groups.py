"""Group records."""

from gitlab_client_core.models.base import Record
from gitlab_client_core.models.projects import Visibility


class Group(Record):
    id: int
    name: str
    path: str
    description: str | None = None
    visibility: Visibility | None = None
    share_with_group_lock: bool | None = None
    require_two_factor_authentication: bool | None = None
    two_factor_grace_period: int | None = None
    project_creation_level: str | None = None
    auto_devops_enabled: bool | None = None
    subgroup_creation_level: str | None = None
    emails_disabled: bool | None = None
    mentions_disabled: bool | None = None
    lfs_enabled: bool | None = None
    avatar_url: str | None = None
    web_url: str
    request_access_enabled: bool | None = None
    full_name: str | None = None
    full_path: str | None = None
    parent_id: int | None = None
    created_at: str | None = None
