"""Route table for the users resource.

    GET    /      fetch_all_users                                  (public)
    GET    /:id   authenticate_token -> fetch_user_by_id
    PUT    /:id   authenticate_token -> update_user_by_id
    DELETE /:id   authenticate_token -> require_role(admin) -> delete_user_by_id

The list endpoint is public while fetching a single user requires a token.
That asymmetry is intentional as registered and pending product confirmation.
"""

from fastapi import APIRouter

from acquasitions.auth import require_role
from acquasitions.core.middleware import Gate, RouteSpec
from acquasitions.fastapi.router import create_router_from_table
from acquasitions.users.controller import UsersController

USERS_PREFIX = "/users"
ADMIN_ROLES = ("admin",)


def users_route_table(
    controller: UsersController,
    authenticate: Gate,
) -> tuple[RouteSpec, ...]:
    """Build the users route table bound to a controller and an auth gate."""
    return (
        RouteSpec("GET", "/", controller.fetch_all_users),
        RouteSpec("GET", "/:id", controller.fetch_user_by_id, gates=(authenticate,)),
        RouteSpec("PUT", "/:id", controller.update_user_by_id, gates=(authenticate,)),
        RouteSpec(
            "DELETE",
            "/:id",
            controller.delete_user_by_id,
            gates=(authenticate, require_role(ADMIN_ROLES)),
        ),
    )


def create_users_router(
    controller: UsersController,
    authenticate: Gate,
    *,
    prefix: str = USERS_PREFIX,
) -> APIRouter:
    return create_router_from_table(
        users_route_table(controller, authenticate),
        prefix=prefix,
        tags=["users"],
    )
