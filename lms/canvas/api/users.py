"""User endpoints."""

from __future__ import annotations

from typing import Any

from ..models import User
from ..runtime.rest import PaginatedSequence, RestEndpointSpec, RestRunner


def _user_path(params: dict[str, Any]) -> str:
    return f"users/{params['user_id']}"


def _account_users_path(params: dict[str, Any]) -> str:
    return f"accounts/{params['account_id']}/users"


GET_USER = RestEndpointSpec(id="user", build_path=_user_path, model=User)

LIST_ACCOUNT_USERS = RestEndpointSpec(
    id="account_users",
    build_path=_account_users_path,
    model=User,
    paginated=True,
)


class UserHandler:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def get(self, user_id: int) -> User:
        """Get a specific user."""
        return await self._runner.fetch(spec=GET_USER, params={"user_id": user_id})

    def list_for_account(self, account_id: int) -> PaginatedSequence[User]:
        """List the users in an account."""
        return self._runner.stream(spec=LIST_ACCOUNT_USERS, params={"account_id": account_id})
