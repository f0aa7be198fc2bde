"""Shared pytest fixtures for acquasitions tests."""

from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from acquasitions.app import create_app
from acquasitions.config import Settings
from acquasitions.users.controller import UserUpdate

USER_TOKEN = "user-token"
ADMIN_TOKEN = "admin-token"


class RecordingController:
    """Users controller that records every handler invocation."""

    def __init__(self, events: list[str] | None = None) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.events = events if events is not None else []

    def _record(self, name: str, **kwargs: Any) -> None:
        self.calls.append((name, kwargs))
        self.events.append(name)

    def calls_to(self, name: str) -> list[dict[str, Any]]:
        return [kwargs for called, kwargs in self.calls if called == name]

    async def fetch_all_users(self) -> dict:
        self._record("fetch_all_users")
        return {"users": [], "count": 0}

    async def fetch_user_by_id(self, id: str) -> dict:
        self._record("fetch_user_by_id", id=id)
        return {"user": {"id": id}}

    async def update_user_by_id(self, id: str, update: UserUpdate) -> dict:
        self._record("update_user_by_id", id=id, update=update)
        return {"user": {"id": id, **update.model_dump(exclude_none=True)}}

    async def delete_user_by_id(self, id: str) -> dict:
        self._record("delete_user_by_id", id=id)
        return {"deleted": id}


@pytest.fixture
def settings() -> Settings:
    """Settings with one regular and one admin token, ignoring the process env."""
    return Settings(
        _env_file=None,
        port=3000,
        api_tokens=f"{USER_TOKEN}:user-1:user,{ADMIN_TOKEN}:admin-1:admin",
    )


@pytest.fixture
def controller() -> RecordingController:
    return RecordingController()


@pytest.fixture
def app(settings: Settings, controller: RecordingController) -> FastAPI:
    return create_app(settings, controller=controller)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def user_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {USER_TOKEN}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def recording_controller_cls() -> type[RecordingController]:
    return RecordingController
