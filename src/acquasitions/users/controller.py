"""Users controller: the handlers behind the users route table.

UsersController is the contract the route table binds to. The in-memory
implementation is the default collaborator used when no other controller
is passed to ``create_app``.
"""

from collections.abc import Iterable
from typing import Literal, Protocol

from fastapi import HTTPException
from pydantic import BaseModel

Role = Literal["user", "admin"]


class User(BaseModel):
    """A user record."""

    id: str
    name: str
    email: str
    role: Role = "user"


class UserUpdate(BaseModel):
    """Partial update body for PUT /users/{id}."""

    name: str | None = None
    email: str | None = None
    role: Role | None = None


class UsersController(Protocol):
    async def fetch_all_users(self) -> dict: ...

    async def fetch_user_by_id(self, id: str) -> dict: ...

    async def update_user_by_id(self, id: str, update: UserUpdate) -> dict: ...

    async def delete_user_by_id(self, id: str) -> dict: ...


class InMemoryUsersController:
    """Dict-backed controller; state lives for the lifetime of the process."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: dict[str, User] = {user.id: user for user in users}

    def _get_or_404(self, id: str) -> User:
        user = self._users.get(id)
        if user is None:
            raise HTTPException(status_code=404, detail=f"User {id} not found")
        return user

    async def fetch_all_users(self) -> dict:
        """List all users."""
        users = [user.model_dump() for user in self._users.values()]
        return {"users": users, "count": len(users)}

    async def fetch_user_by_id(self, id: str) -> dict:
        """Get a user by ID."""
        return {"user": self._get_or_404(id).model_dump()}

    async def update_user_by_id(self, id: str, update: UserUpdate) -> dict:
        """Update a user's information."""
        user = self._get_or_404(id)
        updated = user.model_copy(update=update.model_dump(exclude_none=True))
        self._users[id] = updated
        return {"user": updated.model_dump()}

    async def delete_user_by_id(self, id: str) -> dict:
        """Delete a user."""
        self._get_or_404(id)
        del self._users[id]
        return {"deleted": id}
