"""Artist endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from recordings.database import get_db
from recordings.services.catalog import CatalogService, NotFoundError
from recordings.services.fetchers import StoreError
from recordings.schemas.artist import ArtistCreate, ArtistResponse

router = APIRouter()


@router.post("/artists", response_model=ArtistResponse, status_code=status.HTTP_201_CREATED)
def create_artist(
    data: ArtistCreate,
    db: Session = Depends(get_db),
):
    """Create an artist on an album.

    The album is not checked for existence.
    """
    service = CatalogService(db)
    try:
        artist = service.create_artist(data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ArtistResponse.model_validate(artist)
