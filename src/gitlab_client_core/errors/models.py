"""GitLab error payload models."""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class ErrorBody:
    """Error payload returned by the GitLab API.

    GitLab is not consistent about the shape of its error bodies. Seen in the wild:

    - ``{"message": "404 Project Not Found"}``
    - ``{"message": ["branch is missing"]}``
    - ``{"message": {"name": ["has already been taken"]}}``
    - ``{"error": "invalid_token", "error_description": "Token was revoked"}``
    """

    message: Any = None
    error: str | None = None
    error_description: str | None = None

    # Remaining members of the payload
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorBody | None":
        """Parse an error payload from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorBody object or None if the body is not a JSON object
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # JSON decode errors, empty bodies, or missing .json() method
            return None

        if not isinstance(data, dict):
            return None

        known_fields = {"message", "error", "error_description"}
        if not any(field in data for field in known_fields):
            return None

        error = data.get("error")
        description = data.get("error_description")
        extensions = {k: v for k, v in data.items() if k not in known_fields}

        return cls(
            message=data.get("message"),
            error=error if isinstance(error, str) else None,
            error_description=description if isinstance(description, str) else None,
            extensions=extensions if extensions else None,
        )

    def to_detail(self) -> str | None:
        """Flatten the payload into a single human-readable line."""
        detail = _flatten_message(self.message)
        if detail:
            return detail
        if self.error and self.error_description:
            return f"{self.error}: {self.error_description}"
        return self.error or self.error_description


def _flatten_message(message: Any) -> str | None:
    if message is None:
        return None
    if isinstance(message, str):
        return message or None
    if isinstance(message, list):
        parts = [str(item) for item in message if item is not None]
        return "; ".join(parts) or None
    if isinstance(message, dict):
        parts = []
        for field, problems in message.items():
            if isinstance(problems, list):
                problems = ", ".join(str(p) for p in problems)
            parts.append(f"{field}: {problems}")
        return "; ".join(parts) or None
    return str(message)
