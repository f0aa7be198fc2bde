"""Router factory for route tables.

Composes the path parser and gate chain to turn an explicit route table
into a complete FastAPI router.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from fastapi import APIRouter
from fastapi.routing import APIRoute

from acquasitions.core.middleware import Gate, RouteSpec, build_gate_chain, validate_gates
from acquasitions.core.parser import parse_path_pattern, segments_to_fastapi_path
from acquasitions.exceptions import DuplicateRouteError, RouteValidationError

logger = logging.getLogger(__name__)

SUPPORTED_METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


def create_router_from_table(
    table: Iterable[RouteSpec],
    *,
    prefix: str = "",
    tags: Sequence[str] | None = None,
) -> APIRouter:
    """Create a FastAPI APIRouter from an explicit route table.

    Each RouteSpec is validated, its colon-style path pattern converted to
    FastAPI syntax, and its handler registered with its gates in front.

    Args:
        table: Route specifications, registered in the given order.
        prefix: Optional URL prefix for all routes (the mount path).
        tags: Optional OpenAPI tags applied to every route.

    Returns:
        A FastAPI APIRouter with all table entries registered.

    Raises:
        RouteValidationError: If an entry uses an unsupported method.
        GateValidationError: If an entry has a non-async gate.
        DuplicateRouteError: If two entries resolve to the same path+method.
        PathParseError: If a path pattern has invalid syntax.

    Example:
        from fastapi import FastAPI

        app = FastAPI()
        app.include_router(create_router_from_table(USERS_TABLE, prefix="/users"))
    """
    routes = tuple(table)
    router = APIRouter(prefix=prefix)

    logger.info(
        "Registering route table",
        extra={"count": len(routes), "prefix": prefix or "(none)"},
    )

    registered = _register_routes(router, routes, prefix=prefix, tags=tags)

    logger.info(
        "Route registration complete",
        extra={
            "route_count": len(registered),
            "prefix": prefix or "(none)",
        },
    )

    return router


def _register_routes(
    router: APIRouter,
    routes: Sequence[RouteSpec],
    *,
    prefix: str,
    tags: Sequence[str] | None,
) -> set[tuple[str, str]]:
    """Register every route table entry on the router.

    Returns:
        Set of registered (path, method) keys for duplicate detection.

    Raises:
        DuplicateRouteError: If two entries resolve to the same path+method.
    """
    registered: set[tuple[str, str]] = set()

    for spec in routes:
        if spec.method not in SUPPORTED_METHODS:
            raise RouteValidationError(
                f"Unsupported HTTP method '{spec.method}' for path '{spec.path}'"
            )

        path = segments_to_fastapi_path(parse_path_pattern(spec.path))
        # The mount path itself, e.g. "/users" rather than "/users/"
        if prefix and path == "/":
            path = ""

        route_key = (prefix + path or "/", spec.method)
        if route_key in registered:
            raise DuplicateRouteError(f"Duplicate route: {spec.method} {route_key[0]}")
        registered.add(route_key)

        route_class = None
        if spec.gates:
            validate_gates(spec.gates, source=f"{spec.method} {route_key[0]}")
            route_class = _make_gated_route(spec.gates)
            logger.debug(
                "Created gated route class",
                extra={
                    "method": spec.method,
                    "path": route_key[0],
                    "gates": list(spec.gate_names),
                },
            )

        _add_route(
            router=router,
            path=path,
            method=spec.method,
            handler=spec.handler,
            tags=list(tags) if tags else None,
            route_class=route_class,
        )

        logger.debug(
            "Registered route",
            extra={
                "method": spec.method,
                "path": route_key[0],
                "handler": getattr(spec.handler, "__name__", repr(spec.handler)),
            },
        )

    return registered


def _add_route(
    router: APIRouter,
    path: str,
    method: str,
    handler: Callable[..., Any],
    tags: list[str] | None,
    route_class: type[APIRoute] | None = None,
) -> None:
    """Add an HTTP route to the router with metadata."""
    kwargs: dict[str, Any] = {"description": handler.__doc__}

    if tags is not None:
        kwargs["tags"] = tags

    if route_class is not None:
        kwargs["route_class_override"] = route_class

    router.add_api_route(
        path=path,
        endpoint=handler,
        methods=[method],
        **kwargs,
    )


def _make_gated_route(gates: Sequence[Gate]) -> type[APIRoute]:
    """Create a custom APIRoute subclass that runs gates before the handler.

    The wrapping happens in get_route_handler(), whose result receives the
    raw request before FastAPI parses the body and resolves dependencies.
    A gate that terminates the chain therefore prevents body parsing and
    the endpoint call alike.

    Args:
        gates: Ordered sequence of gates (first runs first).

    Returns:
        A subclass of APIRoute with gate wrapping.
    """

    class GatedRoute(APIRoute):
        def get_route_handler(self) -> Callable[..., Any]:
            original_handler = super().get_route_handler()
            return build_gate_chain(original_handler, gates)

    return GatedRoute
