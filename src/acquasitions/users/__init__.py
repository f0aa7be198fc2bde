"""Users resource: controller contract and route table."""

from acquasitions.users.controller import (
    InMemoryUsersController,
    User,
    UsersController,
    UserUpdate,
)
from acquasitions.users.routes import create_users_router, users_route_table

__all__ = [
    "InMemoryUsersController",
    "User",
    "UserUpdate",
    "UsersController",
    "create_users_router",
    "users_route_table",
]
