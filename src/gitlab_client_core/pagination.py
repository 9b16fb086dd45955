"""Turn one page of a GitLab list endpoint into a ``Page`` envelope.

GitLab reports the total number of matching items in the ``X-Total`` header
and pages through ``page``/``per_page`` query parameters. The envelope's
``count`` is that server-side total, not the length of the page.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from gitlab_client_core.models.base import Page
from gitlab_client_core.validation import validate_items

TOTAL_HEADER = "X-Total"

ModelT = TypeVar("ModelT", bound=BaseModel)


def total_count(headers: Mapping[str, str], default: int = 0) -> int:
    """Read ``X-Total``; absent, non-numeric or negative values give ``default``."""
    raw = headers.get(TOTAL_HEADER)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= 0 else default


def build_page(model: type[ModelT], raw_items: Any, total: int, context: str | None = None) -> Page[ModelT]:
    """Validate ``raw_items`` and wrap them with ``total``.

    Raises:
        ValidationError: if the body is not a list or any item fails validation
    """
    items = validate_items(model, raw_items, context)
    return Page[model](count=total, items=items)  # type: ignore[valid-type]
