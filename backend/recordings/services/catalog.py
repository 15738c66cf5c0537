"""Catalog service for albums, artists and labels."""
import logging
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recordings.models.album import Album
from recordings.models.artist import Artist
from recordings.models.label import Label
from recordings.schemas.album import AlbumCreate, AlbumUpdate, AlbumOutput
from recordings.schemas.artist import ArtistCreate
from recordings.schemas.label import LabelCreate
from recordings.services.aggregator import AlbumAggregator
from recordings.services.fetchers import RowFetcher, StoreError

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """A single row was expected but none exists."""
    pass


class CatalogService:
    """Reads and writes catalog rows on behalf of the API and CLI."""

    def __init__(self, db: Session):
        self.db = db
        self.fetcher = RowFetcher(db)
        self.aggregator = AlbumAggregator(self.fetcher)

    @contextmanager
    def _store(self, action: str):
        """Roll back and re-raise store failures as StoreError."""
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Store error while trying to {action}: {e}")
            raise StoreError(str(e)) from e

    # ------------------------------------------------------------------
    # Albums
    # ------------------------------------------------------------------

    def list_albums(self, query: Optional[str] = None) -> List[AlbumOutput]:
        """List albums with artists and label, optionally filtered by title.

        ``query`` matches titles by case-insensitive substring; LIKE
        wildcards in it are matched literally.
        """
        with self._store("list albums"):
            q = self.db.query(Album)
            if query:
                q = q.filter(Album.title.icontains(query, autoescape=True))
            albums = q.order_by(Album.id).all()

        return self.aggregator.aggregate(albums)

    def get_album_row(self, album_id: int) -> Album:
        """Get a single album row by ID."""
        with self._store("read album"):
            album = self.db.query(Album).filter(Album.id == album_id).first()
        if album is None:
            raise NotFoundError("album not found")
        return album

    def get_album(self, album_id: int) -> AlbumOutput:
        """Get a single album with its artists and label.

        Goes through the same aggregation as ``list_albums`` so a missing
        label is reported the same way on both paths.
        """
        album = self.get_album_row(album_id)
        return self.aggregator.aggregate([album])[0]

    def create_album(self, data: AlbumCreate) -> Album:
        return self._insert(Album(**data.model_dump()), "album")

    def update_album(self, album_id: int, data: AlbumUpdate) -> Album:
        """Replace an album's fields and return the stored row."""
        with self._store("update album"):
            self.db.query(Album).filter(Album.id == album_id).update(
                data.model_dump(), synchronize_session=False
            )
            self.db.commit()

        # Affected-row counts are unreliable for no-op updates, read back instead
        album = self.get_album_row(album_id)
        logger.info(f"Updated album {album_id}: {album.title}")
        return album

    def delete_album(self, album_id: int) -> None:
        """Delete an album. Its artists are left in place."""
        with self._store("delete album"):
            deleted = self.db.query(Album).filter(Album.id == album_id).delete(
                synchronize_session=False
            )
            self.db.commit()

        if not deleted:
            raise NotFoundError("album not found")
        logger.info(f"Deleted album {album_id}")

    # ------------------------------------------------------------------
    # Artists and labels
    # ------------------------------------------------------------------

    def create_artist(self, data: ArtistCreate) -> Artist:
        return self._insert(Artist(**data.model_dump()), "artist")

    def create_label(self, data: LabelCreate) -> Label:
        return self._insert(Label(**data.model_dump()), "label")

    def _insert(self, entity, kind: str):
        """Insert a row, then re-read it so callers see stored values."""
        model = type(entity)
        with self._store(f"create {kind}"):
            self.db.add(entity)
            self.db.flush()
            new_id = entity.id
            self.db.commit()

            row = self.db.query(model).filter(model.id == new_id).first()

        if row is None:
            raise NotFoundError(f"{kind} not found")
        logger.info(f"Created {kind} {new_id}")
        return row
