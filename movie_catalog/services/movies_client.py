"""Synchronous client for the movie catalog service."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import TypeVar

import httpx

from movie_catalog.core.config import Settings
from movie_catalog.core.config import settings as default_settings
from movie_catalog.core.exceptions import CatalogError, UpstreamError
from movie_catalog.dto import Movie
from movie_catalog.logging import get_logger
from movie_catalog.services import translator, urls
from movie_catalog.services.http_utils import build_client, execute

logger = get_logger(__name__)

T = TypeVar("T")


class CatalogClient:
    """Typed access to the catalog's fixed set of movie operations.

    Every call blocks until the exchange completes and either returns its
    result or raises a ``CatalogError`` subclass:

    - ``UpstreamError`` for non-2xx responses (status and body kept verbatim)
    - ``TransportError`` for connection failures, timeouts and malformed bodies

    Nothing is retried. The only state held between calls is the base URL
    and the underlying ``httpx.Client``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.Client | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = (base_url or default_settings.base_url).rstrip("/")
        self._owns_client = client is None
        self._client = client or build_client(
            timeout=timeout if timeout is not None else default_settings.timeout_seconds
        )

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> CatalogClient:
        config = config or default_settings
        return cls(config.base_url, timeout=config.timeout_seconds)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> CatalogClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------
    def list_all(self) -> list[Movie]:
        return self._call(
            "list_all",
            "GET",
            urls.all_movies_url(self.base_url),
            translator.decode_movies,
        )

    def get_by_id(self, movie_id: int) -> Movie:
        return self._call(
            "get_by_id",
            "GET",
            urls.movie_by_id_url(self.base_url, movie_id),
            translator.decode_movie,
        )

    def get_by_name(self, name: str) -> list[Movie]:
        return self._call(
            "get_by_name",
            "GET",
            urls.movie_by_name_url(self.base_url, name),
            translator.decode_movies,
        )

    def get_by_year(self, year: int) -> list[Movie]:
        return self._call(
            "get_by_year",
            "GET",
            urls.movie_by_year_url(self.base_url, year),
            translator.decode_movies,
        )

    def add(self, movie: Movie) -> Movie:
        """Create ``movie`` and return it with its server-assigned ``movie_id``."""
        return self._call(
            "add",
            "POST",
            urls.add_movie_url(self.base_url),
            translator.decode_movie,
            content=urls.serialize_movie(movie, include_id=False),
        )

    def update(self, movie_id: int, movie: Movie) -> Movie:
        """Send the fields set on ``movie`` and return the merged record."""
        return self._call(
            "update",
            "PUT",
            urls.movie_by_id_url(self.base_url, movie_id),
            translator.decode_movie,
            content=urls.serialize_movie(movie),
        )

    def delete(self, movie_id: int) -> str:
        """Delete a movie and return the service's confirmation text."""
        return self._call(
            "delete",
            "DELETE",
            urls.movie_by_id_url(self.base_url, movie_id),
            translator.decode_text,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _call(
        self,
        operation: str,
        method: str,
        url: str,
        decode: Callable[[httpx.Response], T],
        *,
        content: str | None = None,
    ) -> T:
        try:
            response = execute(self._client, method, url, content=content)
            return decode(response)
        except UpstreamError as exc:
            logger.error(
                "movies_upstream_error",
                operation=operation,
                url=url,
                status_code=exc.status_code,
                body=exc.body,
            )
            raise
        except CatalogError as exc:
            logger.error(
                "movies_transport_error",
                operation=operation,
                url=url,
                error=exc.message,
            )
            raise


__all__ = ["CatalogClient"]
