"""Artist schemas."""
from pydantic import BaseModel, ConfigDict


class ArtistBase(BaseModel):
    """Base artist fields."""
    name: str = ""
    album_id: int = 0


class ArtistCreate(ArtistBase):
    """Artist creation request."""


class ArtistResponse(ArtistBase):
    """Artist response."""
    model_config = ConfigDict(from_attributes=True)

    id: int
