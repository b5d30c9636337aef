"""Typed, synchronous client for the movie catalog service."""

from movie_catalog.core.exceptions import CatalogError, TransportError, UpstreamError
from movie_catalog.dto import Movie
from movie_catalog.services.movies_client import CatalogClient

__all__ = ["CatalogClient", "CatalogError", "Movie", "TransportError", "UpstreamError"]
