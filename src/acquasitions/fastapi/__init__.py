"""FastAPI adapter for route tables."""

from acquasitions.fastapi.router import create_router_from_table

__all__ = ["create_router_from_table"]
