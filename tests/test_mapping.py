"""Tests for view mapping functions."""

from datetime import date

from movieapi.catalog import mapping
from movieapi.models.domain import MovieEntity, PersonEntity
from movieapi.models.types import MovieRequest

ALICE = PersonEntity(id=1, name="Alice", date_of_birth=date(1980, 5, 1))
BOB = PersonEntity(id=2, name="Bob", date_of_birth=date(1982, 6, 2))

MOVIE = MovieEntity(
    id=7,
    title="Inception",
    description="Dreams within dreams",
    language="English",
    release_date=date(2010, 7, 16),
    cover_image="http://host/StaticFiles/x.png",
    actors=[ALICE, BOB],
)


class TestListView:
    """to_list_view keeps a subset of fields."""

    def test_fields(self):
        view = mapping.to_list_view(MOVIE)
        assert view.id == 7
        assert view.title == "Inception"
        assert view.cover_image == "http://host/StaticFiles/x.png"
        assert [(a.id, a.name) for a in view.actors] == [(1, "Alice"), (2, "Bob")]

    def test_wire_keys(self):
        """List view has no description and uses PascalCase keys."""
        dumped = mapping.to_list_view(MOVIE).model_dump(by_alias=True, mode="json")
        assert "Description" not in dumped
        assert dumped["ReleaseDate"] == "2010-07-16"
        assert dumped["Actors"][0] == {"Id": 1, "Name": "Alice"}


class TestDetailView:
    """to_detail_view has the full field set."""

    def test_fields(self):
        dumped = mapping.to_detail_view(MOVIE).model_dump(by_alias=True, mode="json")
        assert dumped["Description"] == "Dreams within dreams"
        assert dumped["Language"] == "English"
        assert dumped["Actors"][1] == {"Id": 2, "Name": "Bob", "DateOfBirth": "1982-06-02"}

    def test_no_actors(self):
        movie = MovieEntity(id=1, title="Solo", release_date=date(2000, 1, 1))
        assert mapping.to_detail_view(movie).actors == []


class TestPage:
    def test_page(self):
        page = mapping.to_page([MOVIE], count=12)
        dumped = page.model_dump(by_alias=True)
        assert dumped["Count"] == 12
        assert dumped["Movies"][0]["Title"] == "Inception"


class TestToMovieEntity:
    """to_movie_entity copies request fields and takes actors from the caller."""

    def test_copies_fields(self):
        request = MovieRequest(
            Title="Tenet",
            Description="Time inversion",
            Language="English",
            ReleaseDate="2020-08-26",
            CoverImage=None,
            Actors=[1, 2],
        )
        entity = mapping.to_movie_entity(request, [ALICE])

        assert entity.id is None
        assert entity.title == "Tenet"
        assert entity.release_date == date(2020, 8, 26)
        assert entity.actors == [ALICE]

    def test_keeps_movie_id(self):
        request = MovieRequest(id=3, title="Tenet", release_date=date(2020, 8, 26))
        assert mapping.to_movie_entity(request, [], movie_id=3).id == 3
