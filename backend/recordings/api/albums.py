"""Album endpoints."""
from typing import Optional, List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from recordings.database import get_db
from recordings.services.catalog import CatalogService, NotFoundError
from recordings.services.fetchers import StoreError
from recordings.schemas.album import AlbumCreate, AlbumUpdate, AlbumResponse, AlbumOutput
from recordings.schemas.common import MessageResponse

router = APIRouter()


@router.get("/albums", response_model=List[AlbumOutput])
def list_albums(
    q: Optional[str] = Query(None, description="Case-insensitive title substring"),
    db: Session = Depends(get_db),
):
    """List albums with their artists and label."""
    service = CatalogService(db)
    try:
        return service.list_albums(q)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/albums/{album_id}", response_model=AlbumOutput)
def get_album(
    album_id: int,
    db: Session = Depends(get_db),
):
    """Get a single album with its artists and label."""
    service = CatalogService(db)
    try:
        return service.get_album(album_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/albums", response_model=AlbumResponse, status_code=status.HTTP_201_CREATED)
def create_album(
    data: AlbumCreate,
    db: Session = Depends(get_db),
):
    """Create an album."""
    service = CatalogService(db)
    try:
        album = service.create_album(data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return AlbumResponse.model_validate(album)


@router.put("/albums/{album_id}", response_model=AlbumResponse)
def update_album(
    album_id: int,
    data: AlbumUpdate,
    db: Session = Depends(get_db),
):
    """Replace an album's title, price and label."""
    service = CatalogService(db)
    try:
        album = service.update_album(album_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return AlbumResponse.model_validate(album)


@router.delete("/albums/{album_id}", response_model=MessageResponse)
def delete_album(
    album_id: int,
    db: Session = Depends(get_db),
):
    """Delete an album. Artists credited on it are kept."""
    service = CatalogService(db)
    try:
        service.delete_album(album_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return MessageResponse(message="album deleted")
