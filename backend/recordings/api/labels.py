"""Label endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from recordings.database import get_db
from recordings.services.catalog import CatalogService, NotFoundError
from recordings.services.fetchers import StoreError
from recordings.schemas.label import LabelCreate, LabelResponse

router = APIRouter()


@router.post("/labels", response_model=LabelResponse, status_code=status.HTTP_201_CREATED)
def create_label(
    data: LabelCreate,
    db: Session = Depends(get_db),
):
    """Create a label."""
    service = CatalogService(db)
    try:
        label = service.create_label(data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return LabelResponse.model_validate(label)
