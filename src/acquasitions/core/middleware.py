"""Gate primitives for route tables.

Provides RouteSpec, the immutable route table entry, and gate chain assembly.
A gate is an async callable ``gate(request) -> Response | None``: returning
``None`` lets the chain proceed, returning a response terminates it.
Zero framework dependencies; works with any request/response objects.
"""

import inspect
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any

from acquasitions.exceptions import GateValidationError, RouteValidationError

Gate = Callable[[Any], Awaitable[Any]]


@dataclass(frozen=True)
class RouteSpec:
    """A single entry of a route table.

    Attributes:
        method: HTTP method, upper case (e.g. "GET").
        path: Colon-style path pattern (e.g. "/:id").
        handler: The terminal handler producing the response.
        gates: Ordered gates that run before the handler (first runs first).
    """

    method: str
    path: str
    handler: Callable[..., Any]
    gates: tuple[Gate, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(
            self,
            "gates",
            normalize_gates(self.gates, source=f"{self.method.upper()} {self.path}"),
        )
        if not callable(self.handler):
            raise RouteValidationError(
                f"{self.method.upper()} {self.path}: handler must be a callable, "
                f"got {type(self.handler).__name__}"
            )

    @property
    def gate_names(self) -> tuple[str, ...]:
        """Names of the gates in execution order, for logging and inspection."""
        return tuple(getattr(gate, "__name__", repr(gate)) for gate in self.gates)


def normalize_gates(
    gates_attr: Any,
    *,
    source: str = "",
) -> tuple[Gate, ...]:
    """Normalize a gates attribute to a tuple of callables.

    Accepts: None, single callable, list, or tuple.
    Returns: tuple of callables (empty if None).

    Args:
        gates_attr: The gates value to normalize.
        source: Context for error messages (e.g., "DELETE /:id").

    Raises:
        RouteValidationError: If gates_attr is not a valid type.
    """
    if gates_attr is None:
        return ()
    if callable(gates_attr) and not isinstance(gates_attr, (list, tuple)):
        return (gates_attr,)
    if isinstance(gates_attr, (list, tuple)):
        return tuple(gates_attr)
    raise RouteValidationError(
        f"{source + ': ' if source else ''}gates must be a list or callable, "
        f"got {type(gates_attr).__name__}"
    )


def validate_gates(gates: Sequence[Any], *, source: str = "") -> None:
    """Check that every gate is an async callable.

    Raises:
        GateValidationError: If a gate is not callable or not async.
    """
    where = f" for {source}" if source else ""
    for i, gate in enumerate(gates):
        if not callable(gate):
            raise GateValidationError(f"Non-callable gate at index {i}{where}")
        if not inspect.iscoroutinefunction(gate):
            raise GateValidationError(
                f"Gate at index {i}{where} must be async, "
                f"got sync function {getattr(gate, '__name__', repr(gate))}"
            )


def build_gate_chain(
    handler: Callable[..., Any],
    gates: Sequence[Gate],
) -> Callable[..., Any]:
    """Guard a request handler with an ordered sequence of gates.

    Gates run left to right. The first gate that returns a response
    terminates the chain: later gates and the handler never run and that
    response is returned as-is.

    Args:
        handler: The async request handler, called as ``handler(request)``.
        gates: Ordered sequence of gates (first runs first).

    Returns:
        A wrapped async handler. If gates is empty, returns the handler unchanged.
    """
    if not gates:
        return handler

    chain = tuple(gates)

    async def guarded(request: Any) -> Any:
        for gate in chain:
            response = await gate(request)
            if response is not None:
                return response
        return await handler(request)

    # Preserve metadata for debugging
    gate_names = "_".join(getattr(gate, "__name__", "gate") for gate in chain)
    guarded.__name__ = f"{gate_names}_guarding_{getattr(handler, '__name__', 'handler')}"
    guarded.__qualname__ = guarded.__name__

    return guarded
