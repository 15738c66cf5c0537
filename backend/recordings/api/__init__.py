"""API routes."""
from fastapi import APIRouter
from recordings.api import albums, artists, labels

api_router = APIRouter()

# Catalog
api_router.include_router(albums.router, tags=["albums"])
api_router.include_router(artists.router, tags=["artists"])
api_router.include_router(labels.router, tags=["labels"])
