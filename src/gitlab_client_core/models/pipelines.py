"""CI/CD records: pipelines, jobs, environments, and lint results."""

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from gitlab_client_core.models.base import Record
from gitlab_client_core.models.users import User

PipelineStatus = Literal[
    "created",
    "waiting_for_resource",
    "preparing",
    "pending",
    "running",
    "success",
    "failed",
    "canceled",
    "skipped",
    "manual",
    "scheduled",
]

JobStatus = Literal["created", "pending", "running", "failed", "success", "canceled", "skipped", "manual"]


class DetailedStatus(Record):
    icon: str
    text: str
    label: str
    group: str
    tooltip: str
    has_details: bool
    details_path: str | None = None
    illustration: Any = None
    favicon: str | None = None


class Pipeline(Record):
    id: int
    iid: int | None = None
    project_id: int
    sha: str
    ref: str
    status: PipelineStatus
    source: str | None = None
    created_at: str
    updated_at: str
    web_url: str
    before_sha: str | None = None
    tag: bool | None = None
    yaml_errors: str | None = None
    user: User | None = None
    started_at: str | None = None
    finished_at: str | None = None
    committed_at: str | None = None
    duration: float | None = None
    queued_duration: float | None = None
    coverage: str | None = None
    detailed_status: DetailedStatus | None = None


class JobCommit(Record):
    id: str
    short_id: str
    title: str
    created_at: str | None = None
    author_name: str | None = None
    author_email: str | None = None
    message: str | None = None


class JobPipeline(Record):
    id: int
    project_id: int
    sha: str
    ref: str
    status: str
    created_at: str | None = None
    updated_at: str | None = None
    web_url: str | None = None


class Runner(Record):
    id: int
    description: str
    active: bool
    is_shared: bool | None = None
    name: str | None = None


class Job(Record):
    id: int
    status: JobStatus
    stage: str
    name: str
    ref: str
    tag: bool
    coverage: float | None = None
    allow_failure: bool | None = None
    created_at: str
    started_at: str | None = None
    finished_at: str | None = None
    duration: float | None = None
    queued_duration: float | None = None
    user: User | None = None
    commit: JobCommit | None = None
    pipeline: JobPipeline | None = None
    web_url: str
    artifacts: list[Any] | None = None
    runner: Runner | None = None
    artifacts_expire_at: str | None = None
    failure_reason: str | None = None


class Deployment(Record):
    id: int
    iid: int
    ref: str
    sha: str
    created_at: str
    status: str
    user: User | None = None
    deployable: Any = None


class Environment(Record):
    id: int
    name: str
    slug: str | None = None
    external_url: str | None = None
    state: Literal["available", "stopped"] | None = None
    created_at: str | None = None
    updated_at: str | None = None
    tier: str | None = None
    last_deployment: Deployment | None = None


class CILintResponse(Record):
    """Raw body of ``POST /projects/:id/ci/lint``.

    ``status`` is the only validity signal; older instances send a boolean
    ``valid`` instead.
    """

    status: str | bool | None = None
    valid: bool | None = None
    errors: list[str] = []
    warnings: list[str] = []
    merged_yaml: str | None = None
    includes: list[Any] | None = None


class CIValidationResult(BaseModel):
    """Client-side result of a CI lint call.

    ``valid`` is never true while ``errors`` is non-empty. ``merged_yaml`` and
    ``includes`` are only set when the caller asked for the merged document.
    """

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    merged_yaml: str | None = None
    includes: list[Any] | None = None

    @model_validator(mode="after")
    def _errors_mean_invalid(self) -> "CIValidationResult":
        if self.errors and self.valid:
            raise ValueError("a result with errors cannot be valid")
        return self
