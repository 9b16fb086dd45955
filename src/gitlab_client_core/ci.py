"""CI configuration validation: resolve the content, lint it, reshape the result.

The workflow runs in three steps:

1. Content resolution. Non-empty text from the caller is used verbatim. ``None``
   *and* the empty string both mean "nothing supplied": the project's
   ``.gitlab-ci.yml`` is read from its default branch instead. If that read
   fails, the whole call fails with ``CIConfigUnavailableError`` and no lint
   request is made.
2. Linting. The text is posted to ``/projects/:id/ci/lint``.
3. Result. GitLab's ``status`` string (``"valid"``/``"invalid"``) becomes the
   boolean ``valid``; ``errors`` and ``warnings`` pass through, and
   ``merged_yaml``/``includes`` are kept only when they were asked for.

Any other failure in either request propagates unchanged. Nothing is retried
and no partial result is returned.
"""

import logging
from typing import TYPE_CHECKING

from gitlab_client_core.errors.exceptions import (
    CIConfigUnavailableError,
    FieldError,
    GitLabError,
    ValidationError,
)
from gitlab_client_core.models.pipelines import CILintResponse, CIValidationResult

if TYPE_CHECKING:
    from gitlab_client_core.client import GitLabClient
    from gitlab_client_core.resources.base import ProjectId

logger = logging.getLogger(__name__)

CI_CONFIG_PATH = ".gitlab-ci.yml"

LINT_STATUSES = {"valid": True, "invalid": False}


def lint_status_to_valid(status: str | bool) -> bool:
    """Map a lint ``status`` to a boolean.

    ``"valid"`` gives ``True`` and ``"invalid"`` gives ``False``. A boolean is
    returned unchanged, so applying the mapping to its own output is a no-op.

    Raises:
        ValueError: for any other string
    """
    if isinstance(status, bool):
        return status
    try:
        return LINT_STATUSES[status]
    except KeyError:
        raise ValueError(f"Unknown CI lint status {status!r}; expected 'valid' or 'invalid'") from None


def build_validation_result(
    lint: CILintResponse,
    include_merged_yaml: bool,
    context: str = "CI lint",
) -> CIValidationResult:
    """Reshape a raw lint response into a :class:`CIValidationResult`."""
    signal = lint.status if lint.status is not None else lint.valid
    if signal is None:
        raise ValidationError(
            f"Unexpected response for {context}: no lint status",
            errors=[FieldError(path="status", message="Field required", type="missing")],
        )
    try:
        valid = lint_status_to_valid(signal)
    except ValueError as e:
        raise ValidationError(
            f"Unexpected response for {context}: {e}",
            errors=[FieldError(path="status", message=str(e), type="literal_error")],
        ) from e

    fields: dict = {
        "valid": valid and not lint.errors,
        "errors": lint.errors,
        "warnings": lint.warnings,
    }
    if include_merged_yaml:
        fields["merged_yaml"] = lint.merged_yaml
        fields["includes"] = lint.includes
    return CIValidationResult(**fields)


class CIConfigValidator:
    """Auto-load-then-lint workflow on top of a :class:`GitLabClient`."""

    def __init__(self, client: "GitLabClient"):
        self._client = client

    async def resolve_content(self, project_id: "ProjectId", content: str | None) -> str:
        """Return ``content`` if non-empty, else the project's CI file text.

        Raises:
            CIConfigUnavailableError: if the CI file cannot be read
        """
        if content:
            return content

        logger.debug(f"No CI content supplied; loading {CI_CONFIG_PATH} from project {project_id}")
        try:
            ref = await self._client.repository.get_default_branch_ref(project_id)
            file = await self._client.repository.get_file_contents(project_id, CI_CONFIG_PATH, ref)
        except GitLabError as e:
            raise CIConfigUnavailableError(
                f"No content provided and could not read {CI_CONFIG_PATH} from project '{project_id}': {e.message}"
            ) from e
        return file.content

    async def validate(
        self,
        project_id: "ProjectId",
        content: str | None = None,
        include_merged_yaml: bool = True,
    ) -> CIValidationResult:
        resolved = await self.resolve_content(project_id, content)
        logger.debug(f"Linting {len(resolved)} characters of CI configuration for project {project_id}")
        result = await self._client.pipelines.lint_ci_config(project_id, resolved, include_merged_yaml)
        logger.debug(
            f"CI lint for project {project_id}: valid={result.valid}, "
            f"{len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return result
