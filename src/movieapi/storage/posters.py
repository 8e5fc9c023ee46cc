"""Poster image storage.

Posters are written to a local directory that the app also serves as
static files. The extension check is the only content gate: there is
no size limit and no content sniffing.
"""

from __future__ import annotations

import logging
import shutil
import uuid
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import BinaryIO

from movieapi.models.domain import Outcome
from movieapi.models.types import PosterUpload

logger = logging.getLogger(__name__)

# Exact, case-sensitive suffix match
ALLOWED_POSTER_EXTENSIONS = (".jpg", ".jpeg", ".png")

MSG_UPLOADED = "Success"
MSG_BAD_EXTENSION = "Only .jpg, .jpeg and .png extensions allowed"
MSG_UPLOAD_FAILED = "Something went wrong"


class PosterRejected(ValueError):
    """Uploaded file name has a disallowed extension."""


@dataclass
class StoredPoster:
    """A poster written to disk."""

    filename: str
    path: Path


def clean_filename(raw: str | None) -> str:
    """Strip wrapping quotes and any directory part from a client filename.

    Raises:
        ValueError: If no filename is left.
    """
    name = PurePath((raw or "").strip().strip('"')).name
    if not name:
        raise ValueError("Upload has no filename")
    return name


def poster_extension(filename: str) -> str:
    """Return the allowed extension of filename.

    Raises:
        PosterRejected: If the extension is not in ALLOWED_POSTER_EXTENSIONS.
    """
    # Last dot onwards, so a bare ".png" counts as a png
    dot = filename.rfind(".")
    extension = filename[dot:] if dot >= 0 else ""
    if extension not in ALLOWED_POSTER_EXTENSIONS:
        raise PosterRejected(f"Extension not allowed: {extension or '<none>'}")
    return extension


class PosterStore:
    """Writes posters under collision-free names into one directory."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def save(self, filename: str | None, stream: BinaryIO) -> StoredPoster:
        """Validate and store an uploaded poster.

        Args:
            filename: Client-supplied name, possibly quoted.
            stream: Readable binary stream with the file content.

        Returns:
            StoredPoster with the generated name and disk path.

        Raises:
            PosterRejected: If the extension is not allowed. Nothing is written.
            ValueError: If the upload has no filename.
            OSError: If the file cannot be written.
        """
        extension = poster_extension(clean_filename(filename))

        new_name = f"{uuid.uuid4()}{extension}"
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / new_name

        with open(path, "wb") as out:
            shutil.copyfileobj(stream, out)

        return StoredPoster(filename=new_name, path=path)


def upload_poster(
    store: PosterStore,
    filename: str | None,
    stream: BinaryIO,
    base_url: str,
    static_path: str,
) -> Outcome:
    """Store a poster and report the URL it is served from.

    Args:
        store: Destination store.
        filename: Client-supplied name.
        stream: File content.
        base_url: Scheme and host of the current request.
        static_path: URL path the store directory is mounted at.

    Returns:
        Outcome whose data is a PosterUpload.
    """
    try:
        stored = store.save(filename, stream)
    except PosterRejected as e:
        logger.info(f"Rejected poster {filename!r}: {e}")
        return Outcome.invalid(MSG_BAD_EXTENSION)
    except (ValueError, OSError):
        logger.exception(f"Failed to store poster {filename!r}")
        return Outcome.fault(MSG_UPLOAD_FAILED)

    url = f"{base_url.rstrip('/')}/{static_path.strip('/')}/{stored.filename}"
    logger.info(f"Stored poster {stored.path}")
    return Outcome.success(MSG_UPLOADED, PosterUpload(profile_image=url))
