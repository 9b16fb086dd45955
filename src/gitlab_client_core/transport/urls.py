"""Path templating and query assembly for GitLab API requests.

GitLab addresses projects, groups, branches and files by path-like identifiers
(``group/subgroup/project``, ``feature/login``, ``docs/index.md``). Inside a URL
path these must be escaped segment by segment: an unescaped ``/`` is read as a
path separator and silently addresses a different resource.

Example:
    ```python
    from gitlab_client_core.transport.urls import build_path, build_query

    build_path("/projects/{project_id}/repository/files/{file_path}",
               project_id="group/app", file_path="ci/base.yml")
    # '/projects/group%2Fapp/repository/files/ci%2Fbase.yml'

    build_query({"scope": ["failed", "canceled"], "page": 2, "ref": None})
    # [('scope[]', 'failed'), ('scope[]', 'canceled'), ('page', '2')]
    ```
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote


def encode_segment(value: str | int) -> str:
    """Percent-encode one dynamic path segment, including ``/``."""
    return quote(str(value), safe="")


def build_path(template: str, **segments: str | int) -> str:
    """Interpolate independently encoded segments into a path template.

    Only the substituted values are encoded; the template is used verbatim.
    """
    return template.format(**{name: encode_segment(value) for name, value in segments.items()})


def format_query_value(value: Any) -> str:
    """Render a scalar query value the way the GitLab API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Serialize query parameters.

    - ``None`` values are omitted.
    - Booleans become ``true``/``false``.
    - Lists and tuples are repeated under ``key[]``.
    """
    query: list[tuple[str, str]] = []
    if not params:
        return query

    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            query.extend((f"{key}[]", format_query_value(item)) for item in value)
        else:
            query.append((key, format_query_value(value)))
    return query
