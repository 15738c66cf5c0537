"""Tests for batch row fetchers."""
import pytest
from unittest.mock import MagicMock
from sqlalchemy.exc import OperationalError
from recordings.services.fetchers import RowFetcher, StoreError


class TestFetchArtists:

    def test_fetch_by_album_ids(self, db, sample_catalog):
        albums = sample_catalog["albums"]
        fetcher = RowFetcher(db)

        artists = fetcher.fetch_artists_by_album_ids({albums[0].id})

        assert sorted(a.name for a in artists) == ["John Lennon", "Paul McCartney"]

    def test_duplicate_ids_collapse(self, db, sample_catalog):
        album_id = sample_catalog["albums"][1].id
        artists = RowFetcher(db).fetch_artists_by_album_ids([album_id, album_id, album_id])

        assert [a.name for a in artists] == ["John Coltrane"]

    def test_unknown_ids_return_nothing(self, db, sample_catalog):
        assert RowFetcher(db).fetch_artists_by_album_ids({999}) == []

    def test_empty_ids_skip_the_store(self):
        session = MagicMock()

        assert RowFetcher(session).fetch_artists_by_album_ids(set()) == []
        session.query.assert_not_called()


class TestFetchLabels:

    def test_fetch_by_ids(self, db, sample_catalog):
        labels = sample_catalog["labels"]
        result = RowFetcher(db).fetch_labels_by_ids({labels[0].id, labels[1].id, 404})

        assert [l.name for l in result] == ["Apple", "Blue Note"]

    def test_empty_ids_skip_the_store(self):
        session = MagicMock()

        assert RowFetcher(session).fetch_labels_by_ids([]) == []
        session.query.assert_not_called()

    def test_store_failure_raises_store_error(self):
        session = MagicMock()
        session.query.side_effect = OperationalError("SELECT", {}, Exception("server has gone away"))

        with pytest.raises(StoreError) as exc_info:
            RowFetcher(session).fetch_labels_by_ids({1})

        assert "labels" in str(exc_info.value)
        session.rollback.assert_called_once()
