"""DTO for movie records exchanged with the catalog service."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    """Catalog record. Every field is optional so partial updates can be expressed."""

    movie_id: int | None = Field(
        default=None, description="Server-assigned identifier (absent until persisted)"
    )
    name: str | None = Field(default=None, description="Title; required by the server on create")
    cast: str | None = Field(default=None, description="Cast, free text")
    year: int | None = Field(default=None, description="Release year")
    release_date: date | None = Field(default=None, description="Release date (ISO8601)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "movie_id": 1,
                "name": "Batman Begins",
                "cast": "Christian Bale, Katie Holmes , Liam Neeson",
                "year": 2005,
                "release_date": "2005-06-15",
            }
        },
    )
