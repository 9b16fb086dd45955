"""CI/CD endpoints: pipelines, jobs, environments, and CI lint."""

from typing import Literal

from gitlab_client_core.ci import build_validation_result
from gitlab_client_core.models.base import Page
from gitlab_client_core.models.inputs import PipelineVariable
from gitlab_client_core.models.pipelines import (
    CILintResponse,
    CIValidationResult,
    Environment,
    Job,
    JobStatus,
    Pipeline,
    PipelineStatus,
)
from gitlab_client_core.resources.base import ProjectId, Resource, compact, project_label
from gitlab_client_core.transport.urls import build_path


def pipeline_label(project_id: ProjectId, pipeline_id: int) -> str:
    return f"pipeline {pipeline_id} in {project_label(project_id)}"


def job_label(project_id: ProjectId, job_id: int) -> str:
    return f"job {job_id} in {project_label(project_id)}"


class PipelinesResource(Resource):
    async def list_pipelines(
        self,
        project_id: ProjectId,
        status: PipelineStatus | None = None,
        ref: str | None = None,
        sha: str | None = None,
        yaml_errors: bool | None = None,
        username: str | None = None,
        updated_after: str | None = None,
        updated_before: str | None = None,
        order_by: Literal["id", "status", "ref", "updated_at", "user_id"] | None = None,
        sort: Literal["asc", "desc"] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Pipeline]:
        return await self._get_page(
            Pipeline,
            build_path("/projects/{project_id}/pipelines", project_id=project_id),
            context=f"pipelines of {project_label(project_id)}",
            params={
                "status": status,
                "ref": ref,
                "sha": sha,
                "yaml_errors": yaml_errors,
                "username": username,
                "updated_after": updated_after,
                "updated_before": updated_before,
                "order_by": order_by,
                "sort": sort,
                "page": page,
                "per_page": per_page,
            },
        )

    async def get_pipeline(self, project_id: ProjectId, pipeline_id: int) -> Pipeline:
        return await self._get_record(
            Pipeline,
            build_path("/projects/{project_id}/pipelines/{pipeline_id}", project_id=project_id, pipeline_id=pipeline_id),
            context=pipeline_label(project_id, pipeline_id),
        )

    async def trigger_pipeline(
        self,
        project_id: ProjectId,
        ref: str,
        variables: list[PipelineVariable] | None = None,
    ) -> Pipeline:
        body: dict = {"ref": ref}
        if variables is not None:
            body["variables"] = [
                PipelineVariable.model_validate(variable).model_dump(exclude_none=True) for variable in variables
            ]
        return await self._send_record(
            "POST",
            Pipeline,
            build_path("/projects/{project_id}/pipeline", project_id=project_id),
            context=f"new pipeline for '{ref}' in {project_label(project_id)}",
            json=body,
        )

    async def retry_pipeline(self, project_id: ProjectId, pipeline_id: int) -> Pipeline:
        return await self._send_record(
            "POST",
            Pipeline,
            build_path(
                "/projects/{project_id}/pipelines/{pipeline_id}/retry", project_id=project_id, pipeline_id=pipeline_id
            ),
            context=pipeline_label(project_id, pipeline_id),
        )

    async def cancel_pipeline(self, project_id: ProjectId, pipeline_id: int) -> Pipeline:
        return await self._send_record(
            "POST",
            Pipeline,
            build_path(
                "/projects/{project_id}/pipelines/{pipeline_id}/cancel", project_id=project_id, pipeline_id=pipeline_id
            ),
            context=pipeline_label(project_id, pipeline_id),
        )

    async def list_pipeline_jobs(
        self,
        project_id: ProjectId,
        pipeline_id: int,
        scope: list[JobStatus] | None = None,
        include_retried: bool | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Job]:
        """List the jobs of a pipeline; ``scope`` is sent as repeated ``scope[]``."""
        return await self._get_page(
            Job,
            build_path(
                "/projects/{project_id}/pipelines/{pipeline_id}/jobs", project_id=project_id, pipeline_id=pipeline_id
            ),
            context=f"jobs of {pipeline_label(project_id, pipeline_id)}",
            params={"scope": scope, "include_retried": include_retried, "page": page, "per_page": per_page},
        )

    async def get_job(self, project_id: ProjectId, job_id: int) -> Job:
        return await self._get_record(
            Job,
            build_path("/projects/{project_id}/jobs/{job_id}", project_id=project_id, job_id=job_id),
            context=job_label(project_id, job_id),
        )

    async def get_job_log(self, project_id: ProjectId, job_id: int) -> str:
        """Return the raw job trace as plain text."""
        return await self._get_text(
            build_path("/projects/{project_id}/jobs/{job_id}/trace", project_id=project_id, job_id=job_id),
            context=f"log of {job_label(project_id, job_id)}",
        )

    async def retry_job(self, project_id: ProjectId, job_id: int) -> Job:
        return await self._send_record(
            "POST",
            Job,
            build_path("/projects/{project_id}/jobs/{job_id}/retry", project_id=project_id, job_id=job_id),
            context=job_label(project_id, job_id),
        )

    async def cancel_job(self, project_id: ProjectId, job_id: int) -> Job:
        return await self._send_record(
            "POST",
            Job,
            build_path("/projects/{project_id}/jobs/{job_id}/cancel", project_id=project_id, job_id=job_id),
            context=job_label(project_id, job_id),
        )

    async def list_environments(
        self,
        project_id: ProjectId,
        name: str | None = None,
        search: str | None = None,
        states: Literal["available", "stopped"] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[Environment]:
        return await self._get_page(
            Environment,
            build_path("/projects/{project_id}/environments", project_id=project_id),
            context=f"environments of {project_label(project_id)}",
            params={"name": name, "search": search, "states": states, "page": page, "per_page": per_page},
        )

    async def get_environment(self, project_id: ProjectId, environment_id: int) -> Environment:
        return await self._get_record(
            Environment,
            build_path(
                "/projects/{project_id}/environments/{environment_id}",
                project_id=project_id,
                environment_id=environment_id,
            ),
            context=f"environment {environment_id} in {project_label(project_id)}",
        )

    async def lint_ci_config(
        self,
        project_id: ProjectId,
        content: str,
        include_merged_yaml: bool = False,
    ) -> CIValidationResult:
        """Lint literal CI configuration text in the context of a project.

        The text is sent as is; for the variant that reads the project's own
        ``.gitlab-ci.yml`` when no text is given, see ``GitLabClient.validate_ci_yaml``.
        """
        context = f"CI lint of {project_label(project_id)}"
        lint = await self._send_record(
            "POST",
            CILintResponse,
            build_path("/projects/{project_id}/ci/lint", project_id=project_id),
            context=context,
            json=compact({"content": content, "include_merged_yaml": include_merged_yaml}),
        )
        return build_validation_result(lint, include_merged_yaml, context)
