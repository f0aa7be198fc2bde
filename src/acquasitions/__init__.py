"""acquasitions: users HTTP service with token and role gated routes."""

# Primary API: application factory and entrypoint
from acquasitions.app import create_app
from acquasitions.auth import Identity, StaticTokenVerifier, authenticate_token, require_role
from acquasitions.config import Settings, load_settings

# Core types: route tables and gates
from acquasitions.core.middleware import RouteSpec, build_gate_chain
from acquasitions.core.parser import PathSegment, SegmentType

# Exceptions: for error handling
from acquasitions.exceptions import (
    AcquasitionsError,
    DuplicateRouteError,
    GateValidationError,
    PathParseError,
    RouteValidationError,
)
from acquasitions.fastapi.router import create_router_from_table
from acquasitions.server import serve

__all__ = [
    # Primary API
    "create_app",
    "serve",
    "Settings",
    "load_settings",
    # Route tables and gates
    "create_router_from_table",
    "build_gate_chain",
    "RouteSpec",
    "authenticate_token",
    "require_role",
    "Identity",
    "StaticTokenVerifier",
    # Core types
    "PathSegment",
    "SegmentType",
    # Exceptions
    "AcquasitionsError",
    "DuplicateRouteError",
    "GateValidationError",
    "PathParseError",
    "RouteValidationError",
]

__version__ = "1.0.0"
