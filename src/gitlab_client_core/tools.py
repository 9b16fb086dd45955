"""Named tools over the client's operations.

A :class:`ToolRegistry` maps a tool name to a bound client method. Arguments
arrive as a plain dict and are checked against a pydantic model derived from
the method's signature before any request is sent. Results come back as JSON
text.

Example:
    ```python
    async with GitLabClient(settings.credentials) as client:
        registry = build_registry(client)
        names = [tool.name for tool in registry.list_tools(read_only=settings.read_only)]
        text = await registry.call("list_pipelines", {"project_id": "group/app"}, read_only=settings.read_only)
    ```
"""

import inspect
import json
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, create_model
from pydantic import ValidationError as PydanticValidationError

from gitlab_client_core.errors.exceptions import GitLabError, ValidationError
from gitlab_client_core.validation import field_errors

if TYPE_CHECKING:
    from gitlab_client_core.client import GitLabClient

logger = logging.getLogger(__name__)

Handler = Callable[..., Awaitable[Any]]


class UnknownToolError(GitLabError):
    kind = "unknown_tool"


class ReadOnlyModeError(GitLabError):
    """A mutating tool was called while read-only mode is on."""

    kind = "read_only"


@dataclass(frozen=True)
class Tool:
    """One callable tool.

    Attributes:
        name: Tool name, unique within a registry
        description: One-line summary shown to callers
        handler: Async callable that does the work
        read_only: ``True`` when the tool never changes anything on the server
        arguments: Model that validates the argument dict
    """

    name: str
    description: str
    handler: Handler
    read_only: bool
    arguments: type[BaseModel]

    def input_schema(self) -> dict[str, Any]:
        return self.arguments.model_json_schema()


def arguments_model(name: str, handler: Handler) -> type[BaseModel]:
    """Build a strict argument model from a handler's signature.

    Parameters without a default are required; unknown keys are rejected.
    """
    fields: dict[str, Any] = {}
    for param in inspect.signature(handler).parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        annotation = Any if param.annotation is param.empty else param.annotation
        default = ... if param.default is param.empty else param.default
        fields[param.name] = (annotation, default)
    return create_model(f"{name}_arguments", __config__=ConfigDict(extra="forbid"), **fields)


def serialize_result(result: Any) -> str:
    """Render a handler result as the text returned to the caller."""
    if result is None:
        return json.dumps({"status": "success"})
    if isinstance(result, str):
        return result
    if isinstance(result, BaseModel):
        return json.dumps(result.model_dump(mode="json", exclude_unset=True), indent=2)
    if isinstance(result, list):
        return json.dumps(
            [item.model_dump(mode="json", exclude_unset=True) if isinstance(item, BaseModel) else item for item in result],
            indent=2,
        )
    return json.dumps(result, indent=2)


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def register(self, name: str, handler: Handler, description: str, *, read_only: bool) -> Tool:
        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")
        tool = Tool(
            name=name,
            description=description,
            handler=handler,
            read_only=read_only,
            arguments=arguments_model(name, handler),
        )
        self._tools[name] = tool
        return tool

    def get(self, name: str) -> Tool:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(f"Unknown tool: {name}") from None

    def list_tools(self, read_only: bool = False) -> list[Tool]:
        """Return registered tools; in read-only mode only the non-mutating ones."""
        return [tool for tool in self._tools.values() if tool.read_only or not read_only]

    async def call(self, name: str, arguments: dict[str, Any] | None = None, *, read_only: bool = False) -> str:
        """Validate arguments, run the tool and serialize its result.

        Raises:
            UnknownToolError: if no tool has this name
            ReadOnlyModeError: if the tool mutates and read-only mode is on
            ValidationError: if the arguments do not match the tool's signature
            GitLabError: whatever the underlying operation raises
        """
        tool = self.get(name)
        if read_only and not tool.read_only:
            raise ReadOnlyModeError(f"Tool '{name}' is not available in read-only mode")

        try:
            parsed = tool.arguments.model_validate(arguments or {})
        except PydanticValidationError as e:
            errors = field_errors(e)
            raise ValidationError(
                f"Invalid arguments for {name}: {'; '.join(str(error) for error in errors)}",
                errors=errors,
            ) from e

        logger.debug(f"Calling tool {name}")
        kwargs = {field: getattr(parsed, field) for field in type(parsed).model_fields}
        return serialize_result(await tool.handler(**kwargs))


# (resource attribute, method name, read-only, description); attribute None means the client itself
OPERATIONS: list[tuple[str | None, str, bool, str]] = [
    ("repository", "create_or_update_file", False, "Create or update a single file in a GitLab project"),
    ("projects", "search_repositories", True, "Search for GitLab projects"),
    ("projects", "create_repository", False, "Create a new GitLab project"),
    ("repository", "get_file_contents", True, "Get the contents of a file from a GitLab project"),
    ("repository", "file_exists", True, "Check whether a file exists at a ref"),
    ("repository", "push_files", False, "Write several files to a branch, one commit per file"),
    ("repository", "create_commit", False, "Create a single commit that adds several files"),
    ("issues", "create_issue", False, "Create a new issue in a GitLab project"),
    ("merge_requests", "create_merge_request", False, "Create a new merge request in a GitLab project"),
    ("projects", "fork_repository", False, "Fork a GitLab project to your account or specified namespace"),
    ("repository", "create_branch", False, "Create a new branch in a GitLab project"),
    ("repository", "get_default_branch_ref", True, "Get the name of a project's default branch"),
    ("projects", "list_group_projects", True, "List all projects within a specific GitLab group"),
    ("projects", "get_project_events", True, "Get recent events for a GitLab project"),
    ("repository", "list_commits", True, "Get commit history for a GitLab project"),
    ("issues", "list_issues", True, "Get issues for a GitLab project"),
    ("merge_requests", "list_merge_requests", True, "Get merge requests for a GitLab project"),
    ("wikis", "list_project_wiki_pages", True, "List all wiki pages for a GitLab project"),
    ("wikis", "get_project_wiki_page", True, "Get a specific wiki page for a GitLab project"),
    ("wikis", "create_project_wiki_page", False, "Create a new wiki page for a GitLab project"),
    ("wikis", "edit_project_wiki_page", False, "Edit an existing wiki page for a GitLab project"),
    ("wikis", "delete_project_wiki_page", False, "Delete a wiki page from a GitLab project"),
    ("wikis", "upload_project_wiki_attachment", False, "Upload an attachment to a GitLab project wiki"),
    ("wikis", "list_group_wiki_pages", True, "List all wiki pages for a GitLab group"),
    ("wikis", "get_group_wiki_page", True, "Get a specific wiki page for a GitLab group"),
    ("wikis", "create_group_wiki_page", False, "Create a new wiki page for a GitLab group"),
    ("wikis", "edit_group_wiki_page", False, "Edit an existing wiki page for a GitLab group"),
    ("wikis", "delete_group_wiki_page", False, "Delete a wiki page from a GitLab group"),
    ("wikis", "upload_group_wiki_attachment", False, "Upload an attachment to a GitLab group wiki"),
    ("projects", "list_project_members", True, "List all members of a GitLab project, including inherited ones"),
    ("groups", "list_group_members", True, "List all members of a GitLab group, including inherited ones"),
    ("issues", "list_issue_notes", True, "Fetch all comments and system notes for a GitLab issue"),
    ("issues", "list_issue_discussions", True, "Fetch all threaded discussions for a GitLab issue"),
    ("merge_requests", "approve_merge_request", False, "Approve a merge request"),
    ("merge_requests", "unapprove_merge_request", False, "Remove your approval from a merge request"),
    ("merge_requests", "merge_merge_request", False, "Merge a merge request"),
    ("merge_requests", "set_auto_merge", False, "Merge a merge request once its pipeline succeeds"),
    ("merge_requests", "cancel_auto_merge", False, "Cancel auto-merge for a merge request"),
    ("merge_requests", "list_merge_request_notes", True, "List all comments and notes on a merge request"),
    ("merge_requests", "create_merge_request_note", False, "Add a comment to a merge request"),
    ("merge_requests", "update_merge_request_note", False, "Edit a comment on a merge request"),
    ("merge_requests", "list_merge_request_discussions", True, "List all threaded discussions on a merge request"),
    ("pipelines", "list_pipelines", True, "List pipelines for a GitLab project"),
    ("pipelines", "get_pipeline", True, "Get details of a specific pipeline"),
    ("pipelines", "trigger_pipeline", False, "Trigger a new pipeline for a branch or tag"),
    ("pipelines", "retry_pipeline", False, "Retry failed jobs in a pipeline"),
    ("pipelines", "cancel_pipeline", False, "Cancel a running pipeline"),
    ("pipelines", "list_pipeline_jobs", True, "List jobs for a specific pipeline"),
    ("pipelines", "get_job", True, "Get details of a specific job"),
    ("pipelines", "get_job_log", True, "Get the log output of a job"),
    ("pipelines", "retry_job", False, "Retry a failed job"),
    ("pipelines", "cancel_job", False, "Cancel a running job"),
    ("pipelines", "list_environments", True, "List environments for a GitLab project"),
    ("pipelines", "get_environment", True, "Get details of a specific environment"),
    ("pipelines", "lint_ci_config", True, "Lint the given CI/CD configuration text"),
    (None, "validate_ci_yaml", True, "Validate CI/CD configuration, reading .gitlab-ci.yml when no content is given"),
    ("repository", "list_branches", True, "List branches for a GitLab project"),
    ("repository", "delete_branch", False, "Delete a branch from a GitLab project"),
    ("repository", "compare_branches", True, "Compare two branches, tags, or commits"),
    ("repository", "list_tags", True, "List tags for a GitLab project"),
    ("repository", "create_tag", False, "Create a new tag in a GitLab project"),
    ("repository", "get_repository_tree", True, "Get the repository file tree"),
    ("repository", "list_releases", True, "List releases for a GitLab project"),
    ("repository", "create_release", False, "Create a new release for a GitLab project"),
    ("issues", "update_issue", False, "Update an existing issue"),
    ("issues", "create_issue_note", False, "Add a comment to an issue"),
    ("labels", "list_labels", True, "List labels for a GitLab project"),
    ("labels", "create_label", False, "Create a new label in a GitLab project"),
    ("labels", "update_label", False, "Update an existing label"),
    ("labels", "list_milestones", True, "List milestones for a GitLab project"),
    ("labels", "create_milestone", False, "Create a new milestone in a GitLab project"),
    ("labels", "update_milestone", False, "Update an existing milestone"),
    ("merge_requests", "get_merge_request_changes", True, "Get the diffs of a merge request"),
    ("merge_requests", "get_merge_request_commits", True, "Get the commits of a merge request"),
    ("merge_requests", "update_merge_request", False, "Update an existing merge request"),
    ("merge_requests", "rebase_merge_request", False, "Rebase a merge request onto the target branch"),
    ("merge_requests", "create_merge_request_discussion", False, "Start a new discussion on a merge request"),
    ("repository", "list_protected_branches", True, "List protected branches for a GitLab project"),
    ("repository", "protect_branch", False, "Protect a branch in a GitLab project"),
    ("repository", "unprotect_branch", False, "Remove protection from a branch"),
    ("projects", "get_project", True, "Get details of a GitLab project"),
    ("projects", "update_project", False, "Update a GitLab project's settings"),
    ("users", "get_current_user", True, "Get details of the currently authenticated user"),
    ("users", "list_users", True, "List GitLab users"),
    ("users", "get_user", True, "Get details of a specific user"),
    ("groups", "list_groups", True, "List GitLab groups"),
    ("groups", "get_group", True, "Get details of a specific group"),
    ("groups", "list_group_subgroups", True, "List subgroups of a group"),
    ("groups", "create_group", False, "Create a new GitLab group"),
    ("groups", "update_group", False, "Update a GitLab group's settings"),
    ("groups", "delete_group", False, "Delete a GitLab group"),
    (None, "verify_connection", True, "Check that the API is reachable and the token has the scopes it needs"),
]


def build_registry(client: "GitLabClient") -> ToolRegistry:
    """Register every client operation as a tool bound to ``client``."""
    registry = ToolRegistry()
    for resource, method, read_only, description in OPERATIONS:
        owner = client if resource is None else getattr(client, resource)
        registry.register(method, getattr(owner, method), description, read_only=read_only)
    return registry
