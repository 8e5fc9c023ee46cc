"""Movie catalog operations.

Each operation validates its input, makes its repository calls,
maps the result and returns an Outcome. HTTP concerns stay in the
api layer; database work goes through repo.

Store errors never escape an operation: they are logged, the session
is rolled back and a fault Outcome is returned.
"""

from __future__ import annotations

import functools
import logging
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError

from movieapi.catalog import mapping
from movieapi.db import repo
from movieapi.db.repo import DbSession
from movieapi.models.domain import ActorChanges, Outcome, PersonEntity
from movieapi.models.types import MovieRequest

logger = logging.getLogger(__name__)

MSG_SUCCESS = "Success"
MSG_CREATED = "Created Successfully"
MSG_UPDATED = "Updated Successfully"
MSG_DELETED = "Deleted Successfully"
MSG_NOT_FOUND = "Record Not Found"
MSG_INVALID_MOVIE = "Invalid Movie Record"
MSG_INVALID_ACTOR = "Invalid Actor assigned"
MSG_FAILURE = "Something went wrong"


def _guarded(operation: Callable[..., Outcome]) -> Callable[..., Outcome]:
    """Turn store errors raised by an operation into a fault Outcome."""

    @functools.wraps(operation)
    def wrapper(session: DbSession, *args, **kwargs) -> Outcome:
        try:
            return operation(session, *args, **kwargs)
        except SQLAlchemyError:
            logger.exception(f"{operation.__name__} failed")
            repo.rollback(session)
            return Outcome.fault(MSG_FAILURE)

    return wrapper


def diff_actor_ids(current: set[int], requested: set[int]) -> ActorChanges:
    """Compute join-row changes between current and requested actor sets.

    Example:
        >>> diff_actor_ids({1, 2, 3}, {2, 3, 4})
        ActorChanges(removed={1}, added={4})
    """
    return ActorChanges(removed=current - requested, added=requested - current)


def _resolve_actors(session: DbSession, actor_ids: list[int]) -> list[PersonEntity] | None:
    """Fetch the requested people, or None if any id does not resolve.

    Duplicate ids also fail, since they match fewer rows than requested.
    """
    people = repo.get_people_by_ids(session, actor_ids)
    if len(people) != len(actor_ids):
        return None
    return people


@_guarded
def list_movies(session: DbSession, page_index: int, page_size: int) -> Outcome:
    """Get a window of movies plus the total count.

    Args:
        session: Database session.
        page_index: Number of movies to skip.
        page_size: Maximum number of movies to return.

    Returns:
        Outcome whose data is a MoviePage.
    """
    count = repo.count_movies(session)
    movies = repo.list_movies(session, skip=page_index, take=page_size)
    return Outcome.success(MSG_SUCCESS, mapping.to_page(movies, count))


@_guarded
def get_movie(session: DbSession, movie_id: int) -> Outcome:
    """Get one movie with its actors."""
    movie = repo.get_movie(session, movie_id)
    if movie is None:
        return Outcome.not_found(MSG_NOT_FOUND)
    return Outcome.success(MSG_SUCCESS, mapping.to_detail_view(movie))


@_guarded
def create_movie(session: DbSession, request: MovieRequest) -> Outcome:
    """Create a movie.

    All requested actors must exist; otherwise nothing is written.

    Returns:
        Outcome whose data is the list view of the new movie.
    """
    actors = _resolve_actors(session, request.actors)
    if actors is None:
        return Outcome.invalid(MSG_INVALID_ACTOR)

    created = repo.create_movie(session, mapping.to_movie_entity(request, actors))
    repo.commit(session)

    logger.info(f"Created movie {created.id} with {len(created.actors)} actors")
    return Outcome.success(MSG_CREATED, mapping.to_list_view(created))


@_guarded
def update_movie(session: DbSession, request: MovieRequest) -> Outcome:
    """Replace a movie's fields and reconcile its actor set.

    Ids <= 0 are rejected before any lookup.

    Returns:
        Outcome whose data is the updated detail view.
    """
    if request.id <= 0:
        return Outcome.invalid(MSG_INVALID_MOVIE)

    current = repo.get_movie(session, request.id)
    if current is None:
        return Outcome.not_found(MSG_INVALID_MOVIE)

    actors = _resolve_actors(session, request.actors)
    if actors is None:
        return Outcome.invalid(MSG_INVALID_ACTOR)

    changes = diff_actor_ids(current.actor_ids, {a.id for a in actors})
    updated = repo.update_movie(
        session, mapping.to_movie_entity(request, actors, movie_id=request.id), changes
    )
    if updated is None:
        # Deleted between the lookup and the save
        return Outcome.not_found(MSG_INVALID_MOVIE)
    repo.commit(session)

    logger.info(
        f"Updated movie {updated.id}: removed actors {sorted(changes.removed)}, "
        f"added actors {sorted(changes.added)}"
    )
    return Outcome.success(MSG_UPDATED, mapping.to_detail_view(updated))


@_guarded
def delete_movie(session: DbSession, movie_id: int) -> Outcome:
    """Delete a movie. Its actors are kept."""
    if not repo.delete_movie(session, movie_id):
        return Outcome.not_found(MSG_INVALID_MOVIE)
    repo.commit(session)

    logger.info(f"Deleted movie {movie_id}")
    return Outcome.success(MSG_DELETED)
