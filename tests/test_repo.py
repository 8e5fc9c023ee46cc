"""Tests for repository functions."""

from datetime import date

from movieapi.db import repo
from movieapi.models.domain import ActorChanges, MovieEntity, PersonEntity


def _entity(title: str, actors: list[PersonEntity], movie_id: int | None = None) -> MovieEntity:
    return MovieEntity(
        id=movie_id,
        title=title,
        description=f"About {title}",
        language="English",
        release_date=date(2010, 7, 16),
        cover_image="http://host/StaticFiles/a.png",
        actors=actors,
    )


class TestCreateAndGet:
    """create_movie / get_movie round trip."""

    def test_create_assigns_id(self, session, people):
        """Created movie gets a generated id and its actors."""
        created = repo.create_movie(session, _entity("Inception", people[:2]))
        session.commit()

        assert created.id is not None
        assert created.actor_ids == {people[0].id, people[1].id}

    def test_get_returns_aggregate(self, session, people):
        """get_movie returns the movie with its actors, ordered by id."""
        created = repo.create_movie(session, _entity("Inception", [people[2], people[0]]))
        session.commit()

        movie = repo.get_movie(session, created.id)

        assert movie is not None
        assert movie.title == "Inception"
        assert [a.id for a in movie.actors] == [people[0].id, people[2].id]
        assert movie.actors[0].date_of_birth == date(1970, 1, 1)

    def test_get_missing_returns_none(self, session):
        """Unknown id gives None."""
        assert repo.get_movie(session, 999) is None


class TestListMovies:
    """list_movies / count_movies."""

    def test_window_and_count(self, session, people):
        """skip/take select a window; count is the total."""
        for i in range(5):
            repo.create_movie(session, _entity(f"Movie {i}", people[:1]))
        session.commit()

        window = repo.list_movies(session, skip=1, take=2)

        assert [m.title for m in window] == ["Movie 1", "Movie 2"]
        assert all(m.actor_ids == {people[0].id} for m in window)
        assert repo.count_movies(session) == 5

    def test_skip_past_end(self, session, people):
        """Skipping past the last row gives an empty list."""
        repo.create_movie(session, _entity("Only", []))
        session.commit()

        assert repo.list_movies(session, skip=10, take=10) == []

    def test_empty_catalog(self, session):
        """Empty catalog counts zero."""
        assert repo.count_movies(session) == 0


class TestPeople:
    """get_people_by_ids."""

    def test_returns_matching_people(self, session, people):
        """Only existing ids are returned."""
        found = repo.get_people_by_ids(session, [people[1].id, 999])
        assert [p.name for p in found] == ["Actor Two"]

    def test_empty_ids(self, session, people):
        """No ids means no query and no people."""
        assert repo.get_people_by_ids(session, []) == []


class TestUpdateMovie:
    """update_movie applies scalar fields and actor changes."""

    def test_applies_changes(self, session, people):
        """Removed links go, added links come, others stay."""
        created = repo.create_movie(session, _entity("Old", people[:3]))
        session.commit()

        replacement = _entity("New", people[1:4], movie_id=created.id)
        replacement.language = "French"
        updated = repo.update_movie(
            session,
            replacement,
            ActorChanges(removed={people[0].id}, added={people[3].id}),
        )
        session.commit()

        assert updated is not None
        assert updated.title == "New"
        assert updated.language == "French"
        assert updated.actor_ids == {people[1].id, people[2].id, people[3].id}
        assert repo.get_movie(session, created.id).actor_ids == updated.actor_ids

    def test_missing_movie(self, session):
        """Updating an unknown id returns None."""
        assert repo.update_movie(session, _entity("X", [], movie_id=42), ActorChanges()) is None


class TestDeleteMovie:
    """delete_movie."""

    def test_delete_existing(self, session, people):
        """Movie goes away, people stay."""
        created = repo.create_movie(session, _entity("Doomed", people[:2]))
        session.commit()

        assert repo.delete_movie(session, created.id) is True
        session.commit()

        assert repo.get_movie(session, created.id) is None
        assert len(repo.get_people_by_ids(session, [p.id for p in people])) == 4

    def test_delete_missing(self, session):
        """Unknown id returns False."""
        assert repo.delete_movie(session, 7) is False
