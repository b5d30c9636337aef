"""Shared HTTP utilities for executing catalog requests over httpx."""

from __future__ import annotations

import httpx

from movie_catalog.core.exceptions import TransportError

DEFAULT_USER_AGENT = "MovieCatalogClient/0.1"
DEFAULT_TIMEOUT = 10.0
DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "User-Agent": DEFAULT_USER_AGENT,
}


def build_client(*, timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """Return an ``httpx.Client`` configured for the catalog service.

    The client keeps a connection pool and is safe to share between threads.
    Headers are not set here; ``execute`` sends them on every request so
    injected clients get them too.
    """
    return httpx.Client(timeout=timeout)


def execute(
    client: httpx.Client,
    method: str,
    url: str,
    *,
    content: str | None = None,
) -> httpx.Response:
    """Execute one blocking request and return the completed response.

    Any status code is returned as-is. Transport failures (connection errors,
    timeouts, protocol errors) and URLs httpx cannot build (bad port, control
    characters in a path segment) are raised as ``TransportError`` with the
    original exception chained.

    Raises:
        TransportError: If no response could be obtained.
    """
    try:
        return client.request(method, url, content=content, headers=DEFAULT_HEADERS)
    except httpx.InvalidURL as exc:
        raise TransportError(f"{method} {url} invalid URL: {exc}") from exc
    except httpx.TimeoutException as exc:
        raise TransportError(f"{method} {url} timed out: {exc}") from exc
    except httpx.HTTPError as exc:
        detail = str(exc) or exc.__class__.__name__
        raise TransportError(f"{method} {url} failed: {detail}") from exc
