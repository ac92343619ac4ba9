"""Fixtures for end-to-end tests against the HTTP API.

Requests go through httpx's ASGI transport on the test's own event loop,
so the in-memory database is shared by the seeding code and the app.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import pytest_asyncio

from social.domain.model import User
from social.domain.service import JWTService
from social.interface.api.app import create_app
from social.util.di.container import setup_di
from tests.builders import World
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    """Test container shared by the app and the seeding code."""
    test_container = build_test_container()
    try:
        yield test_container
    finally:
        await test_container.close()


@pytest_asyncio.fixture
async def client(container):
    """HTTP client for an app wired to the test container."""
    app_instance = create_app()
    setup_di(app_instance, container)

    transport = httpx.ASGITransport(app=app_instance)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as http_client:
        yield http_client


class Seeder:
    """Writes data in its own committed request scope and issues tokens."""

    def __init__(self, container) -> None:
        self.container = container

    @asynccontextmanager
    async def world(self) -> AsyncIterator[World]:
        async with self.container() as env:
            yield World(env)

    async def token(self, user: User) -> str:
        async with self.container() as env:
            jwt_service = await env.get(JWTService)
            return jwt_service.create_token(str(user.id), user.username.root)

    async def auth(self, user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {await self.token(user)}"}


@pytest_asyncio.fixture
async def seed(container):
    """Seeding helper.

    Usage:
        async with seed.world() as world:
            alice = await world.user("alice")
        headers = await seed.auth(alice)
    """
    return Seeder(container)
