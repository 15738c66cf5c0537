"""Assembles album rows with their artists and labels.

Related rows are loaded once per call for the whole album list, never per
album, then grouped in memory:

    artists  -> {album_id: [artist, ...]}
    labels   -> {label_id: label}

Missing relations never raise. An album without artists gets an empty list
and an album pointing at a missing label gets ``LabelResponse.zero()``.
"""
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from recordings.models.album import Album
from recordings.models.artist import Artist
from recordings.models.label import Label
from recordings.schemas.album import AlbumOutput
from recordings.schemas.artist import ArtistResponse
from recordings.schemas.label import LabelResponse
from recordings.services.fetchers import RowFetcher


def group_artists_by_album(artists: Sequence[Artist]) -> Dict[int, List[Artist]]:
    """Group artists by album id, keeping fetch order within each group."""
    grouped: Dict[int, List[Artist]] = defaultdict(list)
    for artist in artists:
        grouped[artist.album_id].append(artist)
    return dict(grouped)


def index_labels(labels: Sequence[Label]) -> Dict[int, Label]:
    return {label.id: label for label in labels}


class AlbumAggregator:
    """Builds AlbumOutput records for a list of albums."""

    def __init__(self, fetcher: RowFetcher):
        self.fetcher = fetcher

    def aggregate(self, albums: Sequence[Album]) -> List[AlbumOutput]:
        """Attach artists and label to each album, preserving input order.

        Issues exactly one artist query and one label query for a non-empty
        list and none for an empty one. Store failures from the fetchers
        propagate as ``StoreError``.
        """
        if not albums:
            return []

        album_ids = {album.id for album in albums}
        label_ids = {album.label_id for album in albums}

        artists_by_album = group_artists_by_album(
            self.fetcher.fetch_artists_by_album_ids(album_ids)
        )
        labels_by_id = index_labels(self.fetcher.fetch_labels_by_ids(label_ids))

        return [
            self._merge(
                album,
                artists_by_album.get(album.id, []),
                labels_by_id.get(album.label_id),
            )
            for album in albums
        ]

    @staticmethod
    def _merge(album: Album, artists: List[Artist], label: Optional[Label]) -> AlbumOutput:
        return AlbumOutput(
            id=album.id,
            title=album.title,
            price=album.price,
            label_id=album.label_id,
            artists=[ArtistResponse.model_validate(a) for a in artists],
            label=LabelResponse.model_validate(label) if label else LabelResponse.zero(),
        )
