"""Repository endpoints: files, commits, branches, tags, tree, releases."""

import logging
from typing import Literal

from gitlab_client_core.encoding import decode_base64
from gitlab_client_core.errors.exceptions import FieldError, GitLabError, NotFoundError, ValidationError
from gitlab_client_core.models.base import Page
from gitlab_client_core.models.inputs import FileAction
from gitlab_client_core.models.projects import (
    Branch,
    Commit,
    CompareResult,
    FileContent,
    FileWriteResult,
    Project,
    ProtectedBranch,
    Release,
    Tag,
    TreeEntry,
)
from gitlab_client_core.resources.base import ProjectId, Resource, compact, project_label
from gitlab_client_core.transport.urls import build_path
from gitlab_client_core.validation import validate_record

logger = logging.getLogger(__name__)

SortOrder = Literal["asc", "desc"]


def file_label(project_id: ProjectId, file_path: str, ref: str | None = None) -> str:
    at = f" at '{ref}'" if ref else ""
    return f"file '{file_path}'{at} in {project_label(project_id)}"


def branch_label(project_id: ProjectId, branch: str) -> str:
    return f"branch '{branch}' in {project_label(project_id)}"


class RepositoryResource(Resource):
    async def get_default_branch_ref(self, project_id: ProjectId) -> str:
        """Return the name of the project's default branch.

        Raises:
            NotFoundError: if the project has no default branch (empty repository)
        """
        project = await self._get_record(
            Project,
            build_path("/projects/{project_id}", project_id=project_id),
            context=project_label(project_id),
        )
        if not project.default_branch:
            raise NotFoundError(f"Default branch of {project_label(project_id)} not found")
        return project.default_branch

    async def create_branch(self, project_id: ProjectId, branch: str, ref: str | None = None) -> Branch:
        """Create ``branch`` from ``ref``, or from the default branch when ``ref`` is omitted."""
        if not ref:
            ref = await self.get_default_branch_ref(project_id)
        return await self._send_record(
            "POST",
            Branch,
            build_path("/projects/{project_id}/repository/branches", project_id=project_id),
            context=branch_label(project_id, branch),
            json={"branch": branch, "ref": ref},
        )

    async def list_branches(
        self,
        project_id: ProjectId,
        search: str | None = None,
        regex: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Branch]:
        return await self._get_page(
            Branch,
            build_path("/projects/{project_id}/repository/branches", project_id=project_id),
            context=f"branches of {project_label(project_id)}",
            params={"search": search, "regex": regex, "page": page, "per_page": per_page},
        )

    async def delete_branch(self, project_id: ProjectId, branch: str) -> None:
        await self._send_no_content(
            "DELETE",
            build_path("/projects/{project_id}/repository/branches/{branch}", project_id=project_id, branch=branch),
            context=branch_label(project_id, branch),
        )

    async def compare_branches(
        self,
        project_id: ProjectId,
        from_ref: str,
        to_ref: str,
        straight: bool | None = None,
    ) -> CompareResult:
        return await self._get_record(
            CompareResult,
            build_path("/projects/{project_id}/repository/compare", project_id=project_id),
            context=f"comparison '{from_ref}...{to_ref}' in {project_label(project_id)}",
            params={"from": from_ref, "to": to_ref, "straight": straight},
        )

    async def get_file_contents(self, project_id: ProjectId, file_path: str, ref: str) -> FileContent:
        """Read one file; the returned ``content`` is decoded from base64 to text.

        Bytes that are not valid UTF-8 are replaced with U+FFFD, so binary
        files do not survive the round trip. Content that is not valid base64
        raises ``ValidationError``.
        """
        context = file_label(project_id, file_path, ref)
        response = await self._request(
            "GET",
            build_path("/projects/{project_id}/repository/files/{file_path}", project_id=project_id, file_path=file_path),
            context=context,
            params={"ref": ref},
        )
        data = self._json(response, context)
        if isinstance(data, dict) and data.get("encoding") == "base64" and isinstance(data.get("content"), str):
            try:
                decoded = decode_base64(data["content"])
            except ValueError as e:
                raise ValidationError(
                    f"Invalid response for {context}: content is not valid base64",
                    errors=[FieldError(path="content", message=str(e), type="base64_decode")],
                ) from e
            data = {**data, "content": decoded}
        return validate_record(FileContent, data, context)


    async def file_exists(self, project_id: ProjectId, file_path: str, ref: str) -> bool:
        """Probe whether ``file_path`` exists at ``ref``.

        Any failure of the probe, whatever its cause, is read as "absent" and
        is not raised.
        """
        try:
            await self.get_file_contents(project_id, file_path, ref)
        except GitLabError as e:
            logger.debug(f"Existence probe for {file_path} at {ref} failed ({e.kind}); treating as absent")
            return False
        return True

    async def create_or_update_file(
        self,
        project_id: ProjectId,
        file_path: str,
        content: str,
        commit_message: str,
        branch: str,
        previous_path: str | None = None,
    ) -> FileWriteResult:
        """Write one file, updating it if it exists on ``branch`` and creating it otherwise."""
        exists = await self.file_exists(project_id, file_path, branch)
        method = "PUT" if exists else "POST"
        context = file_label(project_id, file_path, branch)
        response = await self._request(
            method,
            build_path("/projects/{project_id}/repository/files/{file_path}", project_id=project_id, file_path=file_path),
            context=context,
            json=compact(
                {
                    "branch": branch,
                    "content": content,
                    "commit_message": commit_message,
                    "previous_path": previous_path,
                }
            ),
        )
        data = self._json(response, context)
        data = data if isinstance(data, dict) else {}
        return validate_record(
            FileWriteResult,
            {
                "file_path": file_path,
                "branch": branch,
                "commit_id": data.get("commit_id") or data.get("id") or "unknown",
                "content": data.get("content"),
            },
            context,
        )

    async def push_files(
        self,
        project_id: ProjectId,
        files: list[FileAction],
        commit_message: str,
        branch: str,
    ) -> list[FileWriteResult]:
        """Write each file in order, one commit per file; stops at the first failure."""
        results = []
        for file in files:
            file = FileAction.model_validate(file)
            results.append(await self.create_or_update_file(project_id, file.path, file.content, commit_message, branch))
        return results

    async def create_commit(
        self,
        project_id: ProjectId,
        message: str,
        branch: str,
        actions: list[FileAction],
    ) -> Commit:
        """Create one commit that adds every file in ``actions``."""
        files = [FileAction.model_validate(action) for action in actions]
        return await self._send_record(
            "POST",
            Commit,
            build_path("/projects/{project_id}/repository/commits", project_id=project_id),
            context=branch_label(project_id, branch),
            json={
                "branch": branch,
                "commit_message": message,
                "actions": [{"action": "create", "file_path": f.path, "content": f.content} for f in files],
            },
        )

    async def list_commits(
        self,
        project_id: ProjectId,
        sha: str | None = None,
        since: str | None = None,
        until: str | None = None,
        path: str | None = None,
        all: bool | None = None,
        with_stats: bool | None = None,
        first_parent: bool | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Commit]:
        return await self._get_page(
            Commit,
            build_path("/projects/{project_id}/repository/commits", project_id=project_id),
            context=f"commits of {project_label(project_id)}",
            params={
                "ref_name": sha,
                "since": since,
                "until": until,
                "path": path,
                "all": all,
                "with_stats": with_stats,
                "first_parent": first_parent,
                "page": page,
                "per_page": per_page,
            },
        )

    async def list_tags(
        self,
        project_id: ProjectId,
        search: str | None = None,
        order_by: Literal["name", "updated", "version"] | None = None,
        sort: SortOrder | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Tag]:
        return await self._get_page(
            Tag,
            build_path("/projects/{project_id}/repository/tags", project_id=project_id),
            context=f"tags of {project_label(project_id)}",
            params={"search": search, "order_by": order_by, "sort": sort, "page": page, "per_page": per_page},
        )

    async def create_tag(
        self,
        project_id: ProjectId,
        tag_name: str,
        ref: str,
        message: str | None = None,
        release_description: str | None = None,
    ) -> Tag:
        return await self._send_record(
            "POST",
            Tag,
            build_path("/projects/{project_id}/repository/tags", project_id=project_id),
            context=f"tag '{tag_name}' in {project_label(project_id)}",
            json=compact(
                {
                    "tag_name": tag_name,
                    "ref": ref,
                    "message": message or None,
                    "release_description": release_description or None,
                }
            ),
        )

    async def get_repository_tree(
        self,
        project_id: ProjectId,
        path: str | None = None,
        ref: str | None = None,
        recursive: bool | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[TreeEntry]:
        return await self._get_page(
            TreeEntry,
            build_path("/projects/{project_id}/repository/tree", project_id=project_id),
            context=f"repository tree of {project_label(project_id)}",
            params={"path": path, "ref": ref, "recursive": recursive, "page": page, "per_page": per_page},
        )

    async def list_releases(
        self,
        project_id: ProjectId,
        order_by: Literal["released_at", "created_at"] | None = None,
        sort: SortOrder | None = None,
        include_html_description: bool | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Release]:
        return await self._get_page(
            Release,
            build_path("/projects/{project_id}/releases", project_id=project_id),
            context=f"releases of {project_label(project_id)}",
            params={
                "order_by": order_by,
                "sort": sort,
                "include_html_description": include_html_description,
                "page": page,
                "per_page": per_page,
            },
        )

    async def create_release(
        self,
        project_id: ProjectId,
        tag_name: str,
        name: str | None = None,
        description: str | None = None,
        ref: str | None = None,
        milestones: list[str] | None = None,
        released_at: str | None = None,
    ) -> Release:
        return await self._send_record(
            "POST",
            Release,
            build_path("/projects/{project_id}/releases", project_id=project_id),
            context=f"release '{tag_name}' in {project_label(project_id)}",
            json=compact(
                {
                    "tag_name": tag_name,
                    "name": name,
                    "description": description,
                    "ref": ref,
                    "milestones": milestones,
                    "released_at": released_at,
                }
            ),
        )

    async def list_protected_branches(
        self,
        project_id: ProjectId,
        search: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[ProtectedBranch]:
        return await self._get_page(
            ProtectedBranch,
            build_path("/projects/{project_id}/protected_branches", project_id=project_id),
            context=f"protected branches of {project_label(project_id)}",
            params={"search": search, "page": page, "per_page": per_page},
        )

    async def protect_branch(
        self,
        project_id: ProjectId,
        name: str,
        push_access_level: int | None = None,
        merge_access_level: int | None = None,
        allow_force_push: bool | None = None,
        code_owner_approval_required: bool | None = None,
    ) -> ProtectedBranch:
        return await self._send_record(
            "POST",
            ProtectedBranch,
            build_path("/projects/{project_id}/protected_branches", project_id=project_id),
            context=branch_label(project_id, name),
            json=compact(
                {
                    "name": name,
                    "push_access_level": push_access_level,
                    "merge_access_level": merge_access_level,
                    "allow_force_push": allow_force_push,
                    "code_owner_approval_required": code_owner_approval_required,
                }
            ),
        )

    async def unprotect_branch(self, project_id: ProjectId, name: str) -> None:
        await self._send_no_content(
            "DELETE",
            build_path("/projects/{project_id}/protected_branches/{name}", project_id=project_id, name=name),
            context=f"protected {branch_label(project_id, name)}",
        )
