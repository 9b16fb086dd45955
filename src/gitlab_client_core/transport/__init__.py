"""Transport layer: authenticated single-request HTTP plus URL building.

Modules:
    http: ``Transport``, one request per call with a bounded timeout
    auth: ``BearerTokenAuth``, an ``httpx.Auth`` flow adding the bearer header
    urls: per-segment path encoding and query serialization

Example:
    ```python
    from gitlab_client_core.transport import Transport, build_path

    async with Transport(credentials) as transport:
        path = build_path("/projects/{project_id}", project_id="group/app")
        response = await transport.send("GET", path)
    ```
"""

from gitlab_client_core.transport.auth import BearerTokenAuth
from gitlab_client_core.transport.http import DEFAULT_TIMEOUT, Transport
from gitlab_client_core.transport.urls import build_path, build_query, encode_segment

__all__ = [
    "DEFAULT_TIMEOUT",
    "BearerTokenAuth",
    "Transport",
    "build_path",
    "build_query",
    "encode_segment",
]
