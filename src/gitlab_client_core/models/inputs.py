"""Structured arguments accepted by write operations."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class FileAction(BaseModel):
    """One file to write in a multi-file push or commit."""

    model_config = ConfigDict(extra="forbid")

    path: str
    content: str


class PipelineVariable(BaseModel):
    model_config = ConfigDict(extra="forbid")

    key: str
    value: str
    variable_type: Literal["env_var", "file"] | None = None


class DiffPosition(BaseModel):
    """Anchor of a merge request discussion on a line of the diff."""

    model_config = ConfigDict(extra="forbid")

    base_sha: str
    start_sha: str
    head_sha: str
    position_type: Literal["text", "image"]
    old_path: str | None = None
    new_path: str | None = None
    old_line: int | None = None
    new_line: int | None = None
