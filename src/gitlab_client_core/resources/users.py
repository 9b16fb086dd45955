"""User endpoints and the token/connection check."""

import logging
from typing import Literal

from gitlab_client_core.errors.exceptions import PermissionDeniedError
from gitlab_client_core.models.base import Page
from gitlab_client_core.models.users import UserDetail
from gitlab_client_core.resources.base import Resource
from gitlab_client_core.transport.urls import build_path

logger = logging.getLogger(__name__)

# (path, query, scope) probes run by verify_connection
SCOPE_PROBES = [("/projects", {"per_page": 1}, "read_api")]


class UsersResource(Resource):
    async def get_current_user(self) -> UserDetail:
        return await self._get_record(UserDetail, "/user", context="the current user")

    async def list_users(
        self,
        username: str | None = None,
        search: str | None = None,
        active: bool | None = None,
        blocked: bool | None = None,
        external: bool | None = None,
        order_by: Literal["id", "name", "username", "created_at", "updated_at"] | None = None,
        sort: Literal["asc", "desc"] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page[UserDetail]:
        return await self._get_page(
            UserDetail,
            "/users",
            context="users",
            params={
                "username": username,
                "search": search,
                "active": active,
                "blocked": blocked,
                "external": external,
                "order_by": order_by,
                "sort": sort,
                "page": page,
                "per_page": per_page,
            },
        )

    async def get_user(self, user_id: int) -> UserDetail:
        return await self._get_record(
            UserDetail,
            build_path("/users/{user_id}", user_id=user_id),
            context=f"user {user_id}",
        )

    async def verify_connection(self) -> UserDetail:
        """Check that the API is reachable and the token is usable.

        Resolves the token's user, then probes a read endpoint; a 403 there
        means the token lacks the ``read_api`` scope.

        Raises:
            AuthError: if the token is invalid or expired
            PermissionDeniedError: if the token lacks a required scope
            NetworkError: if the API cannot be reached
        """
        user = await self.get_current_user()

        missing = []
        for path, params, scope in SCOPE_PROBES:
            response = await self._transport.send("GET", path, params=params)
            if response.status_code == 403:
                missing.append(scope)
        if missing:
            raise PermissionDeniedError(
                f"Token for user '{user.username}' is missing scopes: {', '.join(missing)}",
                status_code=403,
            )

        logger.info(f"Connected to {self._transport.credentials.base_url} as {user.username}")
        return user
