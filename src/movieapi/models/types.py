"""Pydantic models for the movie catalog API.

Wire format uses PascalCase keys (Title, ReleaseDate, ...). Input also
accepts the snake_case field names.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class ApiModel(BaseModel):
    """Base model with PascalCase aliases."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class MovieRequest(ApiModel):
    """Body of POST and PUT /api/movie.

    id is ignored on create and required (> 0) on update.
    """

    id: int = 0
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    language: str | None = Field(default=None, max_length=64)
    release_date: date
    cover_image: str | None = Field(default=None, max_length=512)
    actors: list[int] = Field(default_factory=list)


class ActorSummary(ApiModel):
    """Actor as shown in movie lists."""

    id: int
    name: str


class ActorView(ApiModel):
    """Actor as shown in movie detail."""

    id: int
    name: str
    date_of_birth: date


class MovieListView(ApiModel):
    """Movie row in a paginated list."""

    id: int
    title: str
    language: str | None
    release_date: date
    cover_image: str | None
    actors: list[ActorSummary]


class MovieDetailView(ApiModel):
    """Full movie record."""

    id: int
    title: str
    description: str | None
    language: str | None
    release_date: date
    cover_image: str | None
    actors: list[ActorView]


class MoviePage(ApiModel):
    """One page of movies plus the total row count."""

    movies: list[MovieListView]
    count: int


class PosterUpload(ApiModel):
    """Public location of an uploaded poster."""

    profile_image: str


class ResponseEnvelope(ApiModel):
    """Uniform response wrapper returned by every endpoint."""

    status: bool
    message: str
    data: Any = None
