"""Shared fixtures for concurrency integration tests.

Provides an application whose users handlers sleep for a random 10ms–200ms
and echo back the identity the gates attached, so that request isolation
issues surface under concurrent load.
"""

import asyncio
import random
from collections.abc import Callable

import pytest
from fastapi import FastAPI, Request

from acquasitions.app import create_app
from acquasitions.auth import StaticTokenVerifier, get_identity
from acquasitions.config import Settings
from acquasitions.users.controller import UserUpdate

CONCURRENT_REQUESTS = 50


class SlowEchoController:
    """Users handlers that echo the path id and the authenticated identity."""

    async def _pause(self) -> None:
        await asyncio.sleep(random.uniform(0.01, 0.2))

    async def fetch_all_users(self) -> dict:
        await self._pause()
        return {"users": [], "count": 0}

    async def fetch_user_by_id(self, id: str, request: Request) -> dict:
        await self._pause()
        identity = get_identity(request)
        return {"id": id, "user_id": identity.user_id, "role": identity.role}

    async def update_user_by_id(self, id: str, update: UserUpdate) -> dict:
        await self._pause()
        return {"id": id}

    async def delete_user_by_id(self, id: str, request: Request) -> dict:
        await self._pause()
        return {"deleted": id, "by": get_identity(request).user_id}


def token_for(user_id: str) -> str:
    return f"token-{user_id}"


@pytest.fixture
def app() -> FastAPI:
    """Application with one regular token per user-0000..user-NNNN plus one admin."""
    table = {
        token_for(f"user-{i:04d}"): {"user_id": f"user-{i:04d}", "role": "user"}
        for i in range(CONCURRENT_REQUESTS)
    }
    table[token_for("admin")] = {"user_id": "admin", "role": "admin"}
    return create_app(
        Settings(_env_file=None),
        controller=SlowEchoController(),
        verifier=StaticTokenVerifier(table),
    )


@pytest.fixture
def concurrent_requests() -> int:
    return CONCURRENT_REQUESTS


@pytest.fixture(name="token_for")
def token_for_fixture() -> Callable[[str], str]:
    return token_for
