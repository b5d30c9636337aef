"""URL and request body construction for catalog operations."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote, urlencode

from movie_catalog.dto import Movie

GET_ALL_MOVIES_V1 = "/movieservice/v1/allMovies"
MOVIE_BY_ID_PATH_PARAM_V1 = "/movieservice/v1/movie/{id}"
MOVIE_BY_NAME_QUERY_PARAM_V1 = "/movieservice/v1/movieName"
MOVIE_BY_YEAR_QUERY_PARAM_V1 = "/movieservice/v1/movieYear"
ADD_MOVIE_V1 = "/movieservice/v1/movie"


def _join(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}{path}"


def _with_query(url: str, params: dict[str, Any]) -> str:
    return f"{url}?{urlencode(params, quote_via=quote)}"


def all_movies_url(base_url: str) -> str:
    return _join(base_url, GET_ALL_MOVIES_V1)


def movie_by_id_url(base_url: str, movie_id: Any) -> str:
    """Return the by-id URL. ``movie_id`` is substituted as given; the service validates it."""
    return _join(base_url, MOVIE_BY_ID_PATH_PARAM_V1.format(id=movie_id))


def movie_by_name_url(base_url: str, name: str) -> str:
    return _with_query(_join(base_url, MOVIE_BY_NAME_QUERY_PARAM_V1), {"movie_name": name})


def movie_by_year_url(base_url: str, year: int) -> str:
    return _with_query(_join(base_url, MOVIE_BY_YEAR_QUERY_PARAM_V1), {"year": year})


def add_movie_url(base_url: str) -> str:
    return _join(base_url, ADD_MOVIE_V1)


def serialize_movie(movie: Movie, *, include_id: bool = True) -> str:
    """Serialize ``movie`` to the JSON wire body.

    Unset fields are omitted so partial updates only carry what the caller
    supplied. With ``include_id=False`` the identifier is dropped even if set,
    since ids are assigned by the service on create.
    """
    exclude = None if include_id else {"movie_id"}
    return movie.model_dump_json(exclude_none=True, exclude=exclude)


__all__ = [
    "ADD_MOVIE_V1",
    "GET_ALL_MOVIES_V1",
    "MOVIE_BY_ID_PATH_PARAM_V1",
    "MOVIE_BY_NAME_QUERY_PARAM_V1",
    "MOVIE_BY_YEAR_QUERY_PARAM_V1",
    "add_movie_url",
    "all_movies_url",
    "movie_by_id_url",
    "movie_by_name_url",
    "movie_by_year_url",
    "serialize_movie",
]
