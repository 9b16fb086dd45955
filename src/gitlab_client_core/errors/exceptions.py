"""Structured exceptions for GitLab client errors."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from gitlab_client_core.errors.models import ErrorBody


class GitLabError(Exception):
    """Base exception for every error raised by the client layer."""

    kind = "error"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self) -> dict:
        """Convert to a plain dict for tool output."""
        result: dict = {"kind": self.kind, "message": self.message}
        if self.status_code is not None:
            result["status"] = self.status_code
        return result


class APIError(GitLabError):
    """The server answered with a non-success HTTP status."""

    kind = "api"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        error_body: "ErrorBody | None" = None,
    ):
        super().__init__(message, status_code=status_code)
        self.response = response
        self.error_body = error_body


class ClientError(APIError):
    """4xx client errors."""

    kind = "client"


class BadRequestError(ClientError):
    """400 Bad Request."""

    kind = "bad_request"


class AuthError(ClientError):
    """401 Unauthorized: invalid or expired token."""

    kind = "auth"


class PermissionDeniedError(ClientError):
    """403 Forbidden: the token lacks scope for the operation."""

    kind = "permission"


class NotFoundError(ClientError):
    """404 Not Found."""

    kind = "not_found"


class ConflictError(ClientError):
    """409 Conflict, e.g. an expected SHA no longer matches."""

    kind = "conflict"


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    kind = "rate_limit"

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    kind = "server"


@dataclass(frozen=True)
class FieldError:
    """One violated expectation at one field path."""

    path: str
    message: str
    type: str = "value_error"

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.message}"


class ValidationError(GitLabError):
    """A payload or a set of arguments does not match its declared shape."""

    kind = "validation"

    def __init__(self, message: str, errors: list[FieldError] | None = None):
        super().__init__(message)
        self.errors = errors if errors is not None else []

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["errors"] = [{"path": e.path, "message": e.message, "type": e.type} for e in self.errors]
        return result


class NetworkError(GitLabError):
    """Transport-level failure with no HTTP status (DNS, refused, timeout)."""

    kind = "network"


class CIConfigUnavailableError(GitLabError):
    """No CI content was supplied and the project's CI file could not be read."""

    kind = "ci_config_unavailable"
