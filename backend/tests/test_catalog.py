"""Tests for the catalog service."""
import pytest
from unittest.mock import patch
from sqlalchemy.exc import OperationalError
from recordings.models.album import Album
from recordings.schemas.album import AlbumCreate, AlbumUpdate
from recordings.schemas.label import LabelCreate, LabelResponse
from recordings.services.catalog import CatalogService, NotFoundError
from recordings.services.fetchers import StoreError


class TestAlbumReads:

    def test_get_album_not_found(self, db_session):
        service = CatalogService(db_session)

        with pytest.raises(NotFoundError):
            service.get_album(99999)

    def test_get_album_matches_list_entry(self, db_session, sample_catalog):
        """Single and list reads agree, including the missing-label case."""
        service = CatalogService(db_session)
        listed = service.list_albums()

        for entry in listed:
            assert service.get_album(entry.id) == entry

        assert listed[2].label == LabelResponse.zero()

    def test_list_albums_filters_by_title(self, db_session, sample_catalog):
        service = CatalogService(db_session)

        assert [a.title for a in service.list_albums("ab")] == ["Abbey Road"]
        assert [a.title for a in service.list_albums("")] == [
            "Abbey Road", "Blue Train", "Let It Be",
        ]


class TestAlbumWrites:

    def test_create_album_reads_back_row(self, db_session):
        service = CatalogService(db_session)

        album = service.create_album(AlbumCreate(title="Giant Steps", price=8.25, label_id=1))

        assert album.id is not None
        assert album.title == "Giant Steps"
        assert album.price == pytest.approx(8.25)

    def test_update_album_not_found(self, db_session):
        service = CatalogService(db_session)

        with pytest.raises(NotFoundError):
            service.update_album(99999, AlbumUpdate(title="A", price=1.0, label_id=1))

    def test_delete_album_not_found(self, db_session):
        service = CatalogService(db_session)

        with pytest.raises(NotFoundError):
            service.delete_album(99999)

    def test_delete_album_removes_row(self, db_session, test_album):
        album_id = test_album.id
        service = CatalogService(db_session)

        service.delete_album(album_id)

        assert db_session.query(Album).filter(Album.id == album_id).first() is None

    def test_store_failure_rolls_back(self, db_session):
        service = CatalogService(db_session)
        error = OperationalError("INSERT", {}, Exception("database is locked"))

        with patch.object(db_session, "flush", side_effect=error), \
                patch.object(db_session, "rollback") as mock_rollback:
            with pytest.raises(StoreError) as exc_info:
                service.create_label(LabelCreate(name="Indie Co", country="US"))

        assert "database is locked" in str(exc_info.value)
        mock_rollback.assert_called_once()
