"""Error taxonomy and HTTP error mapping for the GitLab client."""

from gitlab_client_core.errors.exceptions import (
    APIError,
    AuthError,
    BadRequestError,
    CIConfigUnavailableError,
    ClientError,
    ConflictError,
    FieldError,
    GitLabError,
    NetworkError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from gitlab_client_core.errors.handler import raise_for_status
from gitlab_client_core.errors.models import ErrorBody

__all__ = [
    "APIError",
    "AuthError",
    "BadRequestError",
    "CIConfigUnavailableError",
    "ClientError",
    "ConflictError",
    "ErrorBody",
    "FieldError",
    "GitLabError",
    "NetworkError",
    "NotFoundError",
    "PermissionDeniedError",
    "RateLimitError",
    "ServerError",
    "ValidationError",
    "raise_for_status",
]
