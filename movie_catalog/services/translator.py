"""Translate completed HTTP exchanges into movies, text or catalog errors."""

from __future__ import annotations

import httpx
from pydantic import TypeAdapter, ValidationError

from movie_catalog.core.exceptions import TransportError, UpstreamError
from movie_catalog.dto import Movie

_MOVIE_LIST = TypeAdapter(list[Movie])


def ensure_success(response: httpx.Response) -> httpx.Response:
    """Raise ``UpstreamError`` for any non-2xx response, keeping status and body verbatim."""
    if not response.is_success:
        raise UpstreamError(
            response.status_code,
            response.text,
            reason=response.reason_phrase or None,
        )
    return response


def decode_movie(response: httpx.Response) -> Movie:
    ensure_success(response)
    try:
        return Movie.model_validate_json(response.content)
    except ValidationError as exc:
        raise TransportError(f"Malformed movie body: {_summarize(exc)}") from exc


def decode_movies(response: httpx.Response) -> list[Movie]:
    ensure_success(response)
    try:
        return _MOVIE_LIST.validate_json(response.content)
    except ValidationError as exc:
        raise TransportError(f"Malformed movie list body: {_summarize(exc)}") from exc


def decode_text(response: httpx.Response) -> str:
    return ensure_success(response).text


def _summarize(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "body"
    return f"{location}: {first.get('msg')} ({exc.error_count()} error(s))"
