"""User and membership records."""

from gitlab_client_core.models.base import Record


class User(Record):
    id: int
    name: str
    username: str
    avatar_url: str | None = None
    web_url: str | None = None


class Identity(Record):
    provider: str
    extern_uid: str


class UserDetail(User):
    email: str | None = None
    state: str | None = None
    is_admin: bool | None = None
    bio: str | None = None
    location: str | None = None
    public_email: str | None = None
    website_url: str | None = None
    organization: str | None = None
    job_title: str | None = None
    created_at: str | None = None
    last_sign_in_at: str | None = None
    confirmed_at: str | None = None
    two_factor_enabled: bool | None = None
    identities: list[Identity] | None = None


class Member(User):
    state: str | None = None
    access_level: int
    expires_at: str | None = None
    created_at: str | None = None
