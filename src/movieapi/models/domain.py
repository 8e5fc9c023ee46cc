"""Domain models for the movie catalog.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy; repository functions
return them fully materialized so callers never touch lazy relations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Literal


# ============================================================================
# Catalog Domain
# ============================================================================


@dataclass
class PersonEntity:
    """Domain model for an actor."""

    id: int
    name: str
    date_of_birth: date


@dataclass
class MovieEntity:
    """A movie together with its actor set (the movie aggregate).

    id is None until the movie has been inserted.
    """

    id: int | None
    title: str
    release_date: date
    description: str | None = None
    language: str | None = None
    cover_image: str | None = None
    actors: list[PersonEntity] = field(default_factory=list)

    @property
    def actor_ids(self) -> set[int]:
        return {actor.id for actor in self.actors}


@dataclass
class ActorChanges:
    """Join-row changes for a movie update.

    Removals are applied before additions.
    """

    removed: set[int] = field(default_factory=set)
    added: set[int] = field(default_factory=set)


# ============================================================================
# Operation Outcomes
# ============================================================================

ErrorKind = Literal["validation", "not_found", "fault"]


@dataclass
class Outcome:
    """Result of a catalog operation.

    Attributes:
        message: Human-readable message placed in the response envelope.
        data: Payload for successful operations (or validation details).
        error: None on success, otherwise the failure category.
    """

    message: str
    data: Any = None
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, message: str, data: Any = None) -> Outcome:
        return cls(message=message, data=data)

    @classmethod
    def invalid(cls, message: str, data: Any = None) -> Outcome:
        return cls(message=message, data=data, error="validation")

    @classmethod
    def not_found(cls, message: str) -> Outcome:
        return cls(message=message, error="not_found")

    @classmethod
    def fault(cls, message: str) -> Outcome:
        return cls(message=message, error="fault")
