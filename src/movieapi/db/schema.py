"""Database schema for the movie catalog.

Movies and people are linked through the movie_actors join table.
Deleting a movie removes its join rows; people are never cascaded.
"""

from datetime import date

from sqlalchemy import Column, Date, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


movie_actors = Table(
    "movie_actors",
    Base.metadata,
    Column("movie_id", Integer, ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True),
    Column("person_id", Integer, ForeignKey("people.id"), primary_key=True),
)


class Person(Base):
    """An actor that can appear in any number of movies."""

    __tablename__ = "people"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)

    movies: Mapped[list["Movie"]] = relationship(
        secondary=movie_actors, back_populates="actors"
    )


class Movie(Base):
    """A catalog entry."""

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    language: Mapped[str | None] = mapped_column(String(64), nullable=True)
    release_date: Mapped[date] = mapped_column(Date, nullable=False)
    cover_image: Mapped[str | None] = mapped_column(String(512), nullable=True)

    actors: Mapped[list[Person]] = relationship(
        secondary=movie_actors, back_populates="movies", order_by=Person.id
    )
