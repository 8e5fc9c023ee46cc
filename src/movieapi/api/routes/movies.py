"""Movie API endpoints.

GET    /api/movie                       - List movies (skip=pageIndex, take=pageSize)
GET    /api/movie/{movie_id}            - Get movie detail
POST   /api/movie                       - Create movie
PUT    /api/movie                       - Update movie
DELETE /api/movie?id=                   - Delete movie
POST   /api/movie/upload-movie-poster   - Upload poster image
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile
from fastapi.responses import JSONResponse

from movieapi.api.app import get_db_session, get_settings
from movieapi.api.responses import envelope_response
from movieapi.catalog import movies as catalog
from movieapi.config import Settings
from movieapi.db.repo import DbSession
from movieapi.models.types import MovieRequest
from movieapi.storage.posters import PosterStore, upload_poster

router = APIRouter(prefix="/movie", tags=["movie"])


@router.get("")
def list_movies(
    page_index: int = Query(0, alias="pageIndex", ge=0),
    page_size: int = Query(10, alias="pageSize", gt=0),
    session: DbSession = Depends(get_db_session),
) -> JSONResponse:
    """List movies with their actors.

    Args:
        page_index: Number of movies to skip.
        page_size: Maximum number of movies to return.
        session: Database session (injected).

    Returns:
        Envelope with {Movies, Count}.
    """
    return envelope_response(catalog.list_movies(session, page_index, page_size))


@router.get("/{movie_id}")
def get_movie(
    movie_id: int,
    session: DbSession = Depends(get_db_session),
) -> JSONResponse:
    """Get movie detail, or "Record Not Found"."""
    return envelope_response(catalog.get_movie(session, movie_id))


@router.post("")
def create_movie(
    movie: MovieRequest,
    session: DbSession = Depends(get_db_session),
) -> JSONResponse:
    """Create a movie with existing actors."""
    return envelope_response(catalog.create_movie(session, movie))


@router.put("")
def update_movie(
    movie: MovieRequest,
    session: DbSession = Depends(get_db_session),
) -> JSONResponse:
    """Update a movie and reconcile its actors."""
    return envelope_response(catalog.update_movie(session, movie))


@router.delete("")
def delete_movie(
    movie_id: int = Query(0, alias="id"),
    session: DbSession = Depends(get_db_session),
) -> JSONResponse:
    """Delete a movie by id. A missing id is treated as 0."""
    return envelope_response(catalog.delete_movie(session, movie_id))


@router.post("/upload-movie-poster")
def upload_movie_poster(
    request: Request,
    image_file: UploadFile = File(alias="imageFile"),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Store a poster image and return its public URL.

    Args:
        request: Current request, used for scheme and host.
        image_file: Multipart file field "imageFile".
        settings: App settings (injected).

    Returns:
        Envelope with {ProfileImage}.
    """
    outcome = upload_poster(
        PosterStore(settings.upload_dir),
        filename=image_file.filename,
        stream=image_file.file,
        base_url=str(request.base_url),
        static_path=settings.static_path,
    )
    return envelope_response(outcome)
