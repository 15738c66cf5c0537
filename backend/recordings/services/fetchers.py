"""Batch row fetchers used by album aggregation."""
import logging
from typing import Iterable, List, Set

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recordings.models.artist import Artist
from recordings.models.label import Label

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Store unavailable or query failed."""
    pass


class RowFetcher:
    """Loads artist and label rows for a whole set of ids in one query."""

    def __init__(self, db: Session):
        self.db = db

    def fetch_artists_by_album_ids(self, album_ids: Iterable[int]) -> List[Artist]:
        """Get all artists credited on any of the given albums."""
        ids = set(album_ids)
        if not ids:
            return []
        return self._fetch_in(Artist, Artist.album_id, ids)

    def fetch_labels_by_ids(self, label_ids: Iterable[int]) -> List[Label]:
        """Get the labels with the given ids. Missing ids are skipped."""
        ids = set(label_ids)
        if not ids:
            return []
        return self._fetch_in(Label, Label.id, ids)

    def _fetch_in(self, model, column, ids: Set[int]) -> list:
        try:
            rows = (
                self.db.query(model)
                .filter(column.in_(sorted(ids)))
                .order_by(model.id)
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to fetch {model.__tablename__} for {len(ids)} id(s): {e}")
            raise StoreError(f"Failed to fetch {model.__tablename__}: {e}") from e

        logger.debug(f"Fetched {len(rows)} {model.__tablename__} row(s) for {len(ids)} id(s)")
        return rows
