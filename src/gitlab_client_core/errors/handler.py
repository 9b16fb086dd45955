"""Error mapping for HTTP responses."""

import httpx

from gitlab_client_core.errors.exceptions import (
    APIError,
    AuthError,
    BadRequestError,
    ClientError,
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    ServerError,
)
from gitlab_client_core.errors.models import ErrorBody

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: AuthError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def raise_for_status(response: httpx.Response, context: str | None = None) -> None:
    """Raise the mapped exception for an HTTP error response.

    The same status means different things depending on the call site, so the
    caller passes a short label describing what was being addressed, e.g.
    ``"merge request !5 in project 'group/app'"``. The label is folded into the
    exception message.

    Args:
        response: HTTP response object
        context: Human label for the addressed resource

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code
    error_body = ErrorBody.from_response(response)

    if status_code in EXCEPTION_MAP:
        exc_class = EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    detail = error_body.to_detail() if error_body else None
    if not detail:
        detail = response.reason_phrase or None
    message = build_message(status_code, detail, context)

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        raise RateLimitError(
            message=message,
            retry_after=retry_after,
            status_code=status_code,
            response=response,
            error_body=error_body,
        )

    raise exc_class(
        message=message,
        status_code=status_code,
        response=response,
        error_body=error_body,
    )


def build_message(status_code: int, detail: str | None, context: str | None) -> str:
    """Compose the user-facing message for a failed call."""
    subject = context or "resource"
    suffix = f": {detail}" if detail else ""

    if status_code == 401:
        return f"Authentication failed while accessing {subject}{suffix}"
    if status_code == 403:
        return f"Permission denied for {subject}{suffix}"
    if status_code == 404:
        return f"{subject[:1].upper()}{subject[1:]} not found{suffix}"
    if status_code == 409:
        return f"Conflict on {subject}{suffix}"
    if status_code == 429:
        return f"GitLab API rate limit exceeded while accessing {subject}{suffix}"
    return f"GitLab API error on {subject} (HTTP {status_code}){suffix}"
