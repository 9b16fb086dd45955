"""Wiki records, shared by project and group wikis."""

from typing import Literal

from gitlab_client_core.models.base import Record

WikiFormat = Literal["markdown", "rdoc", "asciidoc", "org"]


class WikiPage(Record):
    slug: str
    title: str
    format: WikiFormat = "markdown"
    content: str | None = None
    encoding: str | None = None
    web_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class WikiAttachmentLink(Record):
    url: str
    markdown: str | None = None


class WikiAttachment(Record):
    file_name: str
    file_path: str
    branch: str
    commit_id: str | None = None
    url: str | None = None
    link: WikiAttachmentLink | None = None
