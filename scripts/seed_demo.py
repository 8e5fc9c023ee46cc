#!/usr/bin/env python3
"""Seed a demo catalog.

Usage:
    python scripts/seed_demo.py [DATABASE_URL]

This script:
1. Initializes the database schema
2. Creates demo actors (there is no HTTP endpoint for people)
3. Creates demo movies linked to those actors

Re-running is a no-op once movies exist.
"""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from movieapi.config import Settings  # noqa: E402
from movieapi.db import repo  # noqa: E402
from movieapi.db.session import get_db_session, init_db  # noqa: E402
from movieapi.models.domain import MovieEntity  # noqa: E402

DEMO_PEOPLE = [
    ("Leonardo DiCaprio", date(1974, 11, 11)),
    ("Joseph Gordon-Levitt", date(1981, 2, 17)),
    ("Elliot Page", date(1987, 2, 21)),
    ("Matthew McConaughey", date(1969, 11, 4)),
    ("Anne Hathaway", date(1982, 11, 12)),
]

# (title, language, release date, indexes into DEMO_PEOPLE)
DEMO_MOVIES = [
    ("Inception", "English", date(2010, 7, 16), [0, 1, 2]),
    ("Interstellar", "English", date(2014, 11, 7), [3, 4]),
    ("The Wolf of Wall Street", "English", date(2013, 12, 25), [0, 3]),
]


def seed_database(database_url: str) -> int:
    """Create demo people and movies. Returns number of movies created."""
    init_db(database_url)

    with get_db_session(database_url) as session:
        if repo.count_movies(session) > 0:
            print("Catalog already has movies, skipping")
            return 0

        people = [repo.create_person(session, name, dob) for name, dob in DEMO_PEOPLE]
        print(f"Created {len(people)} people")

        for title, language, released, cast in DEMO_MOVIES:
            movie = repo.create_movie(
                session,
                MovieEntity(
                    id=None,
                    title=title,
                    description=f"{title} ({released.year})",
                    language=language,
                    release_date=released,
                    actors=[people[i] for i in cast],
                ),
            )
            print(f"Created movie {movie.id}: {movie.title}")

    return len(DEMO_MOVIES)


def main() -> int:
    """Main entry point."""
    settings = Settings.from_env()
    database_url = sys.argv[1] if len(sys.argv) > 1 else settings.database_url

    print("=" * 60)
    print("Movie Catalog Demo Seeding Script")
    print("=" * 60)

    created = seed_database(database_url)

    print("\n" + "=" * 60)
    print(f"Seeding complete: {created} movies created")
    print(f"Database: {database_url}")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
