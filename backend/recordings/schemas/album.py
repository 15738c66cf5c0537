"""Album schemas."""
from pydantic import BaseModel, ConfigDict
from typing import List

from recordings.schemas.artist import ArtistResponse
from recordings.schemas.label import LabelResponse


class AlbumBase(BaseModel):
    """Base album fields; omitted fields bind to zero values."""
    title: str = ""
    price: float = 0.0
    label_id: int = 0


class AlbumCreate(AlbumBase):
    """Album creation request."""


class AlbumUpdate(AlbumBase):
    """Full replacement of an album's fields."""


class AlbumResponse(AlbumBase):
    """Album response."""
    model_config = ConfigDict(from_attributes=True)

    id: int


class AlbumOutput(AlbumResponse):
    """Album with its artists and label."""
    artists: List[ArtistResponse] = []
    label: LabelResponse
