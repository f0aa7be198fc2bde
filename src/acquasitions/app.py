"""Application factory.

Run with: uvicorn acquasitions.app:create_app --factory
"""

import logging

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from acquasitions.auth import StaticTokenVerifier, TokenVerifier, authenticate_token
from acquasitions.config import Settings, load_settings
from acquasitions.users.controller import InMemoryUsersController, UsersController
from acquasitions.users.routes import USERS_PREFIX, create_users_router

logger = logging.getLogger(__name__)

GREETING = "Hello from acquasitions"


async def greet() -> PlainTextResponse:
    """Static greeting, also usable as a liveness check."""
    return PlainTextResponse(GREETING, status_code=200)


def create_app(
    settings: Settings | None = None,
    *,
    controller: UsersController | None = None,
    verifier: TokenVerifier | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Startup configuration; read from the environment if omitted.
        controller: Users handlers; defaults to an empty in-memory store.
        verifier: Bearer token verifier; defaults to the API_TOKENS table.

    Returns:
        The configured application, ready to be served.
    """
    settings = settings or load_settings()
    if controller is None:
        controller = InMemoryUsersController()
    if verifier is None:
        verifier = StaticTokenVerifier(settings.token_table)

    application = FastAPI(title="acquasitions")
    application.state.settings = settings

    application.add_api_route("/", greet, methods=["GET"], response_class=PlainTextResponse)
    application.include_router(
        create_users_router(controller, authenticate_token(verifier), prefix=USERS_PREFIX)
    )

    logger.debug(
        "Application created",
        extra={"controller": type(controller).__name__, "verifier": type(verifier).__name__},
    )
    return application
