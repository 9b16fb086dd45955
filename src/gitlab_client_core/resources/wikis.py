"""Project and group wiki endpoints.

Both wikis expose the same API under ``/projects/:id/wikis`` and
``/groups/:id/wikis``; the public methods differ only in which owner they
address.
"""

import posixpath

from gitlab_client_core.encoding import to_data_uri
from gitlab_client_core.models.base import Page
from gitlab_client_core.models.wikis import WikiAttachment, WikiFormat, WikiPage
from gitlab_client_core.pagination import total_count
from gitlab_client_core.resources.base import GroupId, ProjectId, Resource, compact, group_label, project_label
from gitlab_client_core.transport.urls import build_path, encode_segment
from gitlab_client_core.validation import validate_items


class WikisResource(Resource):
    async def _list_pages(self, owner: str, label: str, with_content: bool | None) -> Page[WikiPage]:
        # Wiki listings are not paginated; without X-Total the count is the list length.
        context = f"wiki pages of {label}"
        response = await self._request(
            "GET",
            f"{owner}/wikis",
            context=context,
            params={"with_content": with_content or None},
        )
        items = validate_items(WikiPage, self._json(response, context), context)
        return Page[WikiPage](count=total_count(response.headers, default=len(items)), items=items)

    async def _get_page_by_slug(
        self, owner: str, label: str, slug: str, render_html: bool | None, version: str | None
    ) -> WikiPage:
        return await self._get_record(
            WikiPage,
            f"{owner}/wikis/{encode_segment(slug)}",
            context=f"wiki page '{slug}' of {label}",
            params={"render_html": render_html or None, "version": version or None},
        )

    async def _create_page(self, owner: str, label: str, title: str, content: str, format: WikiFormat | None) -> WikiPage:
        return await self._send_record(
            "POST",
            WikiPage,
            f"{owner}/wikis",
            context=f"new wiki page '{title}' of {label}",
            json={"title": title, "content": content, "format": format or "markdown"},
        )

    async def _edit_page(
        self,
        owner: str,
        label: str,
        slug: str,
        title: str | None,
        content: str | None,
        format: WikiFormat | None,
    ) -> WikiPage:
        return await self._send_record(
            "PUT",
            WikiPage,
            f"{owner}/wikis/{encode_segment(slug)}",
            context=f"wiki page '{slug}' of {label}",
            json=compact({"title": title, "content": content, "format": format}),
        )

    async def _delete_page(self, owner: str, label: str, slug: str) -> None:
        await self._send_no_content(
            "DELETE",
            f"{owner}/wikis/{encode_segment(slug)}",
            context=f"wiki page '{slug}' of {label}",
        )

    async def _upload_attachment(
        self, owner: str, label: str, file_path: str, content: str, branch: str | None
    ) -> WikiAttachment:
        return await self._send_record(
            "POST",
            WikiAttachment,
            f"{owner}/wikis/attachments",
            context=f"wiki attachment '{file_path}' of {label}",
            json=compact(
                {
                    "file_name": posixpath.basename(file_path),
                    "file_path": file_path,
                    "content": to_data_uri(content),
                    "branch": branch,
                }
            ),
        )

    @staticmethod
    def _project(project_id: ProjectId) -> tuple[str, str]:
        return build_path("/projects/{project_id}", project_id=project_id), project_label(project_id)

    @staticmethod
    def _group(group_id: GroupId) -> tuple[str, str]:
        return build_path("/groups/{group_id}", group_id=group_id), group_label(group_id)

    async def list_project_wiki_pages(self, project_id: ProjectId, with_content: bool | None = None) -> Page[WikiPage]:
        return await self._list_pages(*self._project(project_id), with_content)

    async def get_project_wiki_page(
        self,
        project_id: ProjectId,
        slug: str,
        render_html: bool | None = None,
        version: str | None = None,
    ) -> WikiPage:
        return await self._get_page_by_slug(*self._project(project_id), slug, render_html, version)

    async def create_project_wiki_page(
        self,
        project_id: ProjectId,
        title: str,
        content: str,
        format: WikiFormat | None = None,
    ) -> WikiPage:
        return await self._create_page(*self._project(project_id), title, content, format)

    async def edit_project_wiki_page(
        self,
        project_id: ProjectId,
        slug: str,
        title: str | None = None,
        content: str | None = None,
        format: WikiFormat | None = None,
    ) -> WikiPage:
        return await self._edit_page(*self._project(project_id), slug, title, content, format)

    async def delete_project_wiki_page(self, project_id: ProjectId, slug: str) -> None:
        await self._delete_page(*self._project(project_id), slug)

    async def upload_project_wiki_attachment(
        self,
        project_id: ProjectId,
        file_path: str,
        content: str,
        branch: str | None = None,
    ) -> WikiAttachment:
        """Upload an attachment; plain content is sent as a base64 data URI."""
        return await self._upload_attachment(*self._project(project_id), file_path, content, branch)

    async def list_group_wiki_pages(self, group_id: GroupId, with_content: bool | None = None) -> Page[WikiPage]:
        return await self._list_pages(*self._group(group_id), with_content)

    async def get_group_wiki_page(
        self,
        group_id: GroupId,
        slug: str,
        render_html: bool | None = None,
        version: str | None = None,
    ) -> WikiPage:
        return await self._get_page_by_slug(*self._group(group_id), slug, render_html, version)

    async def create_group_wiki_page(
        self,
        group_id: GroupId,
        title: str,
        content: str,
        format: WikiFormat | None = None,
    ) -> WikiPage:
        return await self._create_page(*self._group(group_id), title, content, format)

    async def edit_group_wiki_page(
        self,
        group_id: GroupId,
        slug: str,
        title: str | None = None,
        content: str | None = None,
        format: WikiFormat | None = None,
    ) -> WikiPage:
        return await self._edit_page(*self._group(group_id), slug, title, content, format)

    async def delete_group_wiki_page(self, group_id: GroupId, slug: str) -> None:
        await self._delete_page(*self._group(group_id), slug)

    async def upload_group_wiki_attachment(
        self,
        group_id: GroupId,
        file_path: str,
        content: str,
        branch: str | None = None,
    ) -> WikiAttachment:
        return await self._upload_attachment(*self._group(group_id), file_path, content, branch)
