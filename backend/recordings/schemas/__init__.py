"""Pydantic schemas for API request/response validation."""
from recordings.schemas.album import AlbumCreate, AlbumUpdate, AlbumResponse, AlbumOutput
from recordings.schemas.artist import ArtistCreate, ArtistResponse
from recordings.schemas.label import LabelCreate, LabelResponse
from recordings.schemas.common import MessageResponse

__all__ = [
    "AlbumCreate",
    "AlbumUpdate",
    "AlbumResponse",
    "AlbumOutput",
    "ArtistCreate",
    "ArtistResponse",
    "LabelCreate",
    "LabelResponse",
    "MessageResponse",
]
