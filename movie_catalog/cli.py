"""Command-line access to the movie catalog service."""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from datetime import date

from movie_catalog.core.config import settings
from movie_catalog.core.exceptions import CatalogError
from movie_catalog.dto import Movie
from movie_catalog.logging import get_logger, setup_logging
from movie_catalog.services.movies_client import CatalogClient

logger = get_logger(__name__)


def _add_movie_fields(parser: argparse.ArgumentParser, *, require_name: bool) -> None:
    parser.add_argument("--name", required=require_name, help="Movie title")
    parser.add_argument("--cast", default=None, help="Cast, free text")
    parser.add_argument("--year", type=int, default=None, help="Release year")
    parser.add_argument(
        "--release-date",
        type=date.fromisoformat,
        default=None,
        help="Release date (YYYY-MM-DD)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query and edit the movie catalog")
    parser.add_argument(
        "--base-url",
        default=None,
        help=f"Catalog service base URL (default: {settings.base_url})",
    )
    parser.add_argument("--log-file", default=None, help="Also write JSON logs to this file")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: MOVIES_LOG_LEVEL, LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("all", help="List every movie")

    get_parser = sub.add_parser("get", help="Fetch one movie by id")
    get_parser.add_argument("movie_id", type=int)

    name_parser = sub.add_parser("name", help="Search movies by name")
    name_parser.add_argument("name")

    year_parser = sub.add_parser("year", help="List movies released in a year")
    year_parser.add_argument("year", type=int)

    add_parser = sub.add_parser("add", help="Create a movie")
    _add_movie_fields(add_parser, require_name=True)

    update_parser = sub.add_parser("update", help="Update fields of a movie")
    update_parser.add_argument("movie_id", type=int)
    _add_movie_fields(update_parser, require_name=False)

    delete_parser = sub.add_parser("delete", help="Delete a movie by id")
    delete_parser.add_argument("movie_id", type=int)
    return parser


def _movie_from_args(args: argparse.Namespace) -> Movie:
    return Movie(
        name=args.name,
        cast=args.cast,
        year=args.year,
        release_date=args.release_date,
    )


def _run(client: CatalogClient, args: argparse.Namespace) -> str:
    command = args.command
    if command == "delete":
        return client.delete(args.movie_id)

    if command == "all":
        result: Movie | list[Movie] = client.list_all()
    elif command == "get":
        result = client.get_by_id(args.movie_id)
    elif command == "name":
        result = client.get_by_name(args.name)
    elif command == "year":
        result = client.get_by_year(args.year)
    elif command == "add":
        result = client.add(_movie_from_args(args))
    else:
        result = client.update(args.movie_id, _movie_from_args(args))

    if isinstance(result, list):
        payload = [movie.model_dump(mode="json") for movie in result]
    else:
        payload = result.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2)


def main(argv: Sequence[str] | None = None, *, client: CatalogClient | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_file, level=args.log_level)

    catalog = client or CatalogClient(args.base_url)
    try:
        output = _run(catalog, args)
    except CatalogError as exc:
        logger.error(
            "movies_command_failed",
            command=args.command,
            status_code=exc.status_code,
            message=exc.message,
            body=exc.body,
        )
        return 1
    finally:
        if client is None:
            catalog.close()

    print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
