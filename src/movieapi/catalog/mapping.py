"""Conversions between movie aggregates and API records.

Pure functions - no database access. Callers validate requests
before mapping; nothing here swallows a missing field.
"""

from __future__ import annotations

from movieapi.models.domain import MovieEntity, PersonEntity
from movieapi.models.types import (
    ActorSummary,
    ActorView,
    MovieDetailView,
    MovieListView,
    MoviePage,
    MovieRequest,
)


def to_actor_summary(person: PersonEntity) -> ActorSummary:
    """Convert PersonEntity to the short list form."""
    return ActorSummary(id=person.id, name=person.name)


def to_actor_view(person: PersonEntity) -> ActorView:
    """Convert PersonEntity to the detail form."""
    return ActorView(id=person.id, name=person.name, date_of_birth=person.date_of_birth)


def to_list_view(movie: MovieEntity) -> MovieListView:
    """Convert a movie aggregate to a list row."""
    return MovieListView(
        id=movie.id,
        title=movie.title,
        language=movie.language,
        release_date=movie.release_date,
        cover_image=movie.cover_image,
        actors=[to_actor_summary(a) for a in movie.actors],
    )


def to_detail_view(movie: MovieEntity) -> MovieDetailView:
    """Convert a movie aggregate to the full record."""
    return MovieDetailView(
        id=movie.id,
        title=movie.title,
        description=movie.description,
        language=movie.language,
        release_date=movie.release_date,
        cover_image=movie.cover_image,
        actors=[to_actor_view(a) for a in movie.actors],
    )


def to_page(movies: list[MovieEntity], count: int) -> MoviePage:
    """Build a list page from a window of movies and the total count."""
    return MoviePage(movies=[to_list_view(m) for m in movies], count=count)


def to_movie_entity(
    request: MovieRequest,
    actors: list[PersonEntity],
    movie_id: int | None = None,
) -> MovieEntity:
    """Build a movie aggregate from a request.

    Args:
        request: Validated create/update body.
        actors: People already resolved from request.actors.
        movie_id: Existing id for updates, None for inserts.

    Returns:
        MovieEntity ready to be saved.
    """
    return MovieEntity(
        id=movie_id,
        title=request.title,
        description=request.description,
        language=request.language,
        release_date=request.release_date,
        cover_image=request.cover_image,
        actors=list(actors),
    )
