# tests/conftest.py
from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import httpx
import pytest
import structlog

from movie_catalog import CatalogClient
from movie_catalog.logging import LOGGER_NAMESPACE

FIXTURES_DIR = Path(__file__).parent / "fixtures"
BASE_URL = "http://catalog.test:8081"

Handler = Callable[[httpx.Request], httpx.Response]


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


def json_response(status_code: int, fixture: str) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=load_fixture(fixture).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )


class CatalogStub:
    """In-process stand-in for the catalog service.

    Routes match on method + path (and optionally the raw query string).
    Unmatched requests get a 404, like an unconfigured stub server.
    """

    def __init__(self) -> None:
        self._routes: list[tuple[str, str, str | None, Handler]] = []
        self.requests: list[httpx.Request] = []

    def route(
        self,
        method: str,
        path: str,
        response: httpx.Response | Handler,
        *,
        query: str | None = None,
    ) -> None:
        if isinstance(response, httpx.Response):
            canned = response

            def handler(_: httpx.Request) -> httpx.Response:
                return canned

        else:
            handler = response
        self._routes.append((method.upper(), path, query, handler))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        query = request.url.query.decode("ascii")
        for method, path, expected_query, handler in self._routes:
            if request.method != method or request.url.path != path:
                continue
            if expected_query is not None and query != expected_query:
                continue
            return handler(request)
        return httpx.Response(404, text="No response could be served as there are no stub mappings")

    @property
    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def stub() -> CatalogStub:
    return CatalogStub()


@pytest.fixture
def catalog(stub: CatalogStub) -> Iterator[CatalogClient]:
    transport = httpx.MockTransport(stub)
    with httpx.Client(transport=transport) as http_client:
        yield CatalogClient(BASE_URL, client=http_client)


@pytest.fixture
def fixture_response() -> Callable[[int, str], httpx.Response]:
    """Return a factory building responses from files under tests/fixtures."""
    return json_response


@pytest.fixture
def fixture_text() -> Callable[[str], str]:
    return load_fixture


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "integration: requires a running catalog service")


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    namespace = logging.getLogger(LOGGER_NAMESPACE)
    handlers, level, propagate = list(namespace.handlers), namespace.level, namespace.propagate
    yield
    for handler in namespace.handlers:
        if handler not in handlers:
            handler.close()
    namespace.handlers[:] = handlers
    namespace.setLevel(level)
    namespace.propagate = propagate
    structlog.reset_defaults()
