"""Token authentication and role authorization gates.

``authenticate_token`` attaches an Identity to ``request.state.identity`` or
short-circuits with 401. ``require_role`` reads that identity and
short-circuits with 403 when the role is not allowed, so it must come after
``authenticate_token`` in a route's gate chain.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from starlette.requests import Request
from starlette.responses import JSONResponse

from acquasitions.core.middleware import Gate

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Identity:
    """Authenticated caller attached to the request by authenticate_token."""

    user_id: str
    role: str


class TokenVerifier(Protocol):
    """Resolves a bearer credential to an Identity, or None if it is invalid."""

    def verify(self, token: str) -> Identity | None: ...


class StaticTokenVerifier:
    """Verifier backed by a fixed ``{token: {"user_id", "role"}}`` table."""

    def __init__(self, table: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._identities = {
            token: Identity(user_id=entry["user_id"], role=entry["role"])
            for token, entry in (table or {}).items()
        }

    def verify(self, token: str) -> Identity | None:
        return self._identities.get(token)


def _unauthorized(message: str) -> JSONResponse:
    return JSONResponse(
        {"error": "Unauthorized", "message": message},
        status_code=401,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _forbidden(message: str) -> JSONResponse:
    return JSONResponse({"error": "Forbidden", "message": message}, status_code=403)


def get_identity(request: Request) -> Identity | None:
    """Return the identity attached by authenticate_token, if any."""
    return getattr(request.state, "identity", None)


def authenticate_token(verifier: TokenVerifier) -> Gate:
    """Build the gate that requires a valid bearer credential.

    Args:
        verifier: Resolves the presented token to an Identity.

    Returns:
        An async gate returning None (proceed) with ``request.state.identity``
        set, or a 401 JSONResponse.
    """

    async def authenticate_token(request: Request) -> Any:
        header = request.headers.get("authorization", "")
        if not header.startswith(BEARER_PREFIX):
            logger.info(
                "Rejected request without bearer token",
                extra={"method": request.method, "path": request.url.path},
            )
            return _unauthorized("Authentication required")

        token = header.removeprefix(BEARER_PREFIX).strip()
        identity = verifier.verify(token) if token else None
        if identity is None:
            logger.info(
                "Rejected request with invalid token",
                extra={"method": request.method, "path": request.url.path},
            )
            return _unauthorized("Invalid or expired token")

        request.state.identity = identity
        return None

    return authenticate_token


def require_role(roles: Iterable[str]) -> Gate:
    """Build the gate that requires the caller's role to be in ``roles``.

    Raises:
        ValueError: If the allow-list is empty.
    """
    allowed = frozenset(roles)
    if not allowed:
        raise ValueError("require_role needs at least one role")

    async def require_role(request: Request) -> Any:
        identity = get_identity(request)
        if identity is None:
            # Runs without a preceding authenticate_token
            return _unauthorized("Authentication required")

        if identity.role not in allowed:
            logger.info(
                "Rejected request with insufficient role",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "user_id": identity.user_id,
                    "role": identity.role,
                },
            )
            return _forbidden("Insufficient permissions")

        return None

    require_role.allowed_roles = allowed  # type: ignore[attr-defined]
    return require_role
