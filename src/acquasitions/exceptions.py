"""Exception hierarchy for route table and gate configuration errors."""


class AcquasitionsError(Exception):
    """Base exception for all errors raised by the acquasitions package.

    Every error in this hierarchy is raised while the application is being
    assembled (route table conversion, gate validation). Request-time access
    failures are returned as responses by the gates instead.

    Example:
        try:
            app = create_app(settings)
        except AcquasitionsError as e:
            logger.error(f"Failed to build application: {e}")
    """


class PathParseError(AcquasitionsError):
    """Raised when a route path pattern has invalid syntax.

    Examples of invalid syntax:
        - Empty segment: /users//posts
        - Missing parameter name: /users/:
        - Invalid parameter names: /:123, /:not-valid
        - Repeated parameter names: /:id/:id

    Example:
        PathParseError("Invalid segment ':' in '/users/:': missing parameter name")
    """


class RouteValidationError(AcquasitionsError):
    """Raised for an invalid route table entry.

    This exception is raised when a route specification cannot be
    registered:
        - Unsupported HTTP method
        - Handler is not callable
        - Gates are neither a callable nor a list/tuple of callables

    Example:
        RouteValidationError("Unsupported HTTP method 'FETCH' for path '/:id'")
    """


class GateValidationError(AcquasitionsError):
    """Raised when a gate in a route's chain is invalid.

    This exception is raised when:
        - A gate is not callable
        - A gate is a sync function (gates must be async)

    Example:
        GateValidationError(
            "Gate at index 1 for DELETE /users/{id} must be async, got sync function check"
        )
    """


class DuplicateRouteError(AcquasitionsError):
    """Raised when two route table entries resolve to the same path+method.

    Example:
        DuplicateRouteError("Duplicate route: GET /users/{id}")
    """
