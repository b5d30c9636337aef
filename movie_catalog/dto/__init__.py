"""Public DTO exports for catalog requests and responses."""

from .movie import Movie

__all__ = ["Movie"]
