"""Pytest configuration and fixtures."""

# pylint: disable=redefined-outer-name

import os
from dataclasses import dataclass, field
from typing import Optional, Union

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from doh_lookup.api.models import DoHResponse
from doh_lookup.core.config import Settings, get_settings
from doh_lookup.dns.doh import first_a_record
from doh_lookup.utils.exceptions import NoAddressFoundError

# Set test environment variables before settings are first loaded
os.environ.setdefault("RESOLVER_URL", "https://resolver.test/dns-query")
os.environ.pop("SENTRY_DSN", None)


@dataclass
class FakeDoHResolver:
    """Fake DoH resolver with predefined answers per domain."""

    answers: dict[str, Union[DoHResponse, Exception]] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    async def query(self, name: str) -> DoHResponse:
        self.calls.append(name)
        answer = self.answers.get(name, DoHResponse())
        if isinstance(answer, Exception):
            raise answer
        return answer

    async def resolve_ipv4(self, name: str) -> str:
        address = first_a_record(await self.query(name))
        if address is None:
            raise NoAddressFoundError(name)
        return address


@dataclass
class FakeClock:
    """Clock returning successive predefined readings."""

    readings: list[float] = field(default_factory=lambda: [0.0, 0.042])

    def __call__(self) -> float:
        return self.readings.pop(0) if len(self.readings) > 1 else self.readings[0]


@dataclass
class FakeDoHServer:
    """Local DoH JSON endpoint with a configurable reply."""

    status: int = 200
    body: str = '{"Status": 0, "Answer": []}'
    requests: list[web.Request] = field(default_factory=list)
    server: Optional[TestServer] = None

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append(request)
        return web.Response(
            status=self.status, text=self.body, content_type="application/dns-json"
        )

    @property
    def url(self) -> str:
        return str(self.server.make_url("/dns-query"))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings():
    """Provide test settings with predictable values."""
    return Settings(
        resolver_url="https://resolver.test/dns-query",
        resolver_timeout=None,
        sentry_dsn=None,
        _env_file=None,
    )


@pytest.fixture
def fake_resolver():
    """Create a fake DoH resolver."""
    return FakeDoHResolver()


@pytest.fixture
def fake_clock():
    """Clock that reports 42ms between the first two readings."""
    return FakeClock()


@pytest.fixture
async def doh_server():
    """Start a local DoH JSON endpoint."""
    fake = FakeDoHServer()
    app = web.Application()
    app.router.add_get("/dns-query", fake.handle)
    fake.server = TestServer(app)
    await fake.server.start_server()
    yield fake
    await fake.server.close()
