"""Shared request plumbing for the resource groups of :class:`GitLabClient`.

Each resource method follows the same path: template the URL with encoded
segments, assemble the query, send one request, map a failure status to a
typed error using the call's context label, then validate the body into a
record or a :class:`Page`.
"""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from gitlab_client_core.errors.exceptions import FieldError, ValidationError
from gitlab_client_core.errors.handler import raise_for_status
from gitlab_client_core.models.base import Page
from gitlab_client_core.pagination import build_page, total_count
from gitlab_client_core.transport.http import Transport
from gitlab_client_core.validation import validate_record

ModelT = TypeVar("ModelT", bound=BaseModel)

ProjectId = str | int
GroupId = str | int


def compact(values: dict[str, Any]) -> dict[str, Any]:
    """Drop ``None`` entries from a request body."""
    return {key: value for key, value in values.items() if value is not None}


def project_label(project_id: ProjectId) -> str:
    return f"project '{project_id}'"


def group_label(group_id: GroupId) -> str:
    return f"group '{group_id}'"


class Resource:
    """Base for one group of GitLab endpoints bound to a shared transport."""

    def __init__(self, transport: Transport):
        self._transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        *,
        context: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        response = await self._transport.send(method, path, params=params, json=json)
        raise_for_status(response, context)
        return response

    @staticmethod
    def _json(response: httpx.Response, context: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ValidationError(
                f"Malformed JSON in response for {context}: {e}",
                errors=[FieldError(path="", message=str(e), type="json_invalid")],
            ) from e

    async def _get_record(
        self,
        model: type[ModelT],
        path: str,
        *,
        context: str,
        params: dict[str, Any] | None = None,
    ) -> ModelT:
        return await self._send_record("GET", model, path, context=context, params=params)

    async def _send_record(
        self,
        method: str,
        model: type[ModelT],
        path: str,
        *,
        context: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> ModelT:
        response = await self._request(method, path, context=context, params=params, json=json)
        return validate_record(model, self._json(response, context), context)

    async def _get_page(
        self,
        model: type[ModelT],
        path: str,
        *,
        context: str,
        params: dict[str, Any] | None = None,
    ) -> Page[ModelT]:
        response = await self._request("GET", path, context=context, params=params)
        return build_page(model, self._json(response, context), total_count(response.headers), context)

    async def _send_no_content(
        self,
        method: str,
        path: str,
        *,
        context: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> None:
        await self._request(method, path, context=context, params=params, json=json)

    async def _get_text(self, path: str, *, context: str) -> str:
        response = await self._request("GET", path, context=context)
        return response.text
