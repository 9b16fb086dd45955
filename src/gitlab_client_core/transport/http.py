"""Single-request HTTP transport for the GitLab API.

One call to :meth:`Transport.send` issues exactly one HTTP request. There is no
retry, no backoff and no caching at this layer; the only policy applied is a
bounded timeout so that no call can hang forever.

Example:
    ```python
    from gitlab_client_core.auth import Credentials
    from gitlab_client_core.transport.http import Transport

    transport = Transport(Credentials(base_url="https://gitlab.com/api/v4", token=token))
    async with transport:
        response = await transport.send("GET", "/projects/group%2Fapp")
    ```
"""

import logging
from typing import Any

import httpx

from gitlab_client_core.auth.credentials import Credentials
from gitlab_client_core.errors.exceptions import NetworkError
from gitlab_client_core.transport.auth import BearerTokenAuth
from gitlab_client_core.transport.urls import build_query

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class Transport:
    """Authenticated HTTP transport bound to one set of credentials.

    Args:
        credentials: Base URL and token, fixed for the transport's lifetime
        timeout: Per-request timeout in seconds
        transport: Optional httpx transport (``httpx.MockTransport`` in tests)
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.credentials = credentials
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=credentials.base_url,
            auth=BearerTokenAuth(credentials.token),
            headers={"Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        """Send one request and return the raw response.

        Args:
            method: HTTP verb
            path: Already-encoded path relative to the API root
            params: Query parameters, serialized with ``build_query``
            json: Optional JSON body; sets ``Content-Type: application/json``

        Returns:
            The response, whatever its status code

        Raises:
            NetworkError: DNS failure, refused connection, timeout, or any other
                transport-level failure
        """
        logger.debug(f"{method} {path}")
        request = self._client.build_request(
            method,
            path.lstrip("/"),
            params=build_query(params) or None,
            json=json,
        )
        try:
            return await self._client.send(request)
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request {method} {path} timed out after {self.timeout}s") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Request {method} {path} failed: {e}") from e
