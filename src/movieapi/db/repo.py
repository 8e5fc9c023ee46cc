"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping catalog logic pure.
Returns domain models (not SQLAlchemy entities) to external callers;
every movie is returned with its actor set already loaded.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from movieapi.db.schema import Movie, Person
from movieapi.models.domain import ActorChanges, MovieEntity, PersonEntity

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _person_to_entity(person: Person) -> PersonEntity:
    """Convert SQLAlchemy Person to domain entity."""
    return PersonEntity(
        id=person.id,
        name=person.name,
        date_of_birth=person.date_of_birth,
    )


def _movie_to_entity(movie: Movie) -> MovieEntity:
    """Convert SQLAlchemy Movie (with actors) to domain aggregate."""
    return MovieEntity(
        id=movie.id,
        title=movie.title,
        description=movie.description,
        language=movie.language,
        release_date=movie.release_date,
        cover_image=movie.cover_image,
        actors=[_person_to_entity(p) for p in sorted(movie.actors, key=lambda p: p.id)],
    )


def _load_movie(session: DbSession, movie_id: int) -> Movie | None:
    return session.scalars(
        select(Movie).options(selectinload(Movie.actors)).where(Movie.id == movie_id)
    ).first()


def _load_people(session: DbSession, person_ids: Iterable[int]) -> list[Person]:
    ids = set(person_ids)
    if not ids:
        return []
    return list(session.scalars(select(Person).where(Person.id.in_(ids)).order_by(Person.id)))


# ============================================================================
# Movie Repository
# ============================================================================


def count_movies(session: DbSession) -> int:
    """Count all movies."""
    return session.scalar(select(func.count()).select_from(Movie)) or 0


def list_movies(session: DbSession, skip: int, take: int) -> list[MovieEntity]:
    """Get a window of movies ordered by id, actors eagerly loaded."""
    movies = session.scalars(
        select(Movie)
        .options(selectinload(Movie.actors))
        .order_by(Movie.id)
        .offset(skip)
        .limit(take)
    ).all()
    return [_movie_to_entity(m) for m in movies]


def get_movie(session: DbSession, movie_id: int) -> MovieEntity | None:
    """Get movie by ID."""
    movie = _load_movie(session, movie_id)
    return _movie_to_entity(movie) if movie else None


def create_movie(session: DbSession, entity: MovieEntity) -> MovieEntity:
    """Insert a movie with its actor links.

    The actor set must already be validated; unknown ids are ignored.
    Flushes so the returned aggregate carries the generated id.
    """
    movie = Movie(
        title=entity.title,
        description=entity.description,
        language=entity.language,
        release_date=entity.release_date,
        cover_image=entity.cover_image,
    )
    movie.actors = _load_people(session, entity.actor_ids)
    session.add(movie)
    session.flush()
    return _movie_to_entity(movie)


def update_movie(
    session: DbSession, entity: MovieEntity, changes: ActorChanges
) -> MovieEntity | None:
    """Overwrite a movie's scalar fields and apply actor link changes.

    Returns None if the movie does not exist.
    """
    movie = _load_movie(session, entity.id)
    if movie is None:
        return None

    movie.title = entity.title
    movie.description = entity.description
    movie.language = entity.language
    movie.release_date = entity.release_date
    movie.cover_image = entity.cover_image

    for person in [p for p in movie.actors if p.id in changes.removed]:
        movie.actors.remove(person)

    present = {p.id for p in movie.actors}
    for person in _load_people(session, changes.added - present):
        movie.actors.append(person)

    session.flush()
    return _movie_to_entity(movie)


def delete_movie(session: DbSession, movie_id: int) -> bool:
    """Delete a movie and its join rows. People are kept.

    Returns False if the movie does not exist.
    """
    movie = session.get(Movie, movie_id)
    if movie is None:
        return False
    session.delete(movie)
    session.flush()
    return True


# ============================================================================
# Person Repository
# ============================================================================


def get_people_by_ids(session: DbSession, person_ids: Iterable[int]) -> list[PersonEntity]:
    """Get the people whose ids are in person_ids."""
    return [_person_to_entity(p) for p in _load_people(session, person_ids)]


def create_person(session: DbSession, name: str, date_of_birth: date) -> PersonEntity:
    """Create a new person."""
    person = Person(name=name, date_of_birth=date_of_birth)
    session.add(person)
    session.flush()
    return _person_to_entity(person)


# ============================================================================
# Batch Operations
# ============================================================================


def commit(session: DbSession) -> None:
    """Commit current transaction."""
    session.commit()


def rollback(session: DbSession) -> None:
    """Discard the current transaction."""
    session.rollback()
