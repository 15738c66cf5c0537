"""SQLAlchemy models for Recordings."""
from recordings.models.album import Album
from recordings.models.artist import Artist
from recordings.models.label import Label

__all__ = [
    "Album",
    "Artist",
    "Label",
]
