from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from schemas.catalog import PlaceDetail, PlaceResponse
from services import catalog_service

router = APIRouter(
    prefix="/api/places",
    tags=["places"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[PlaceResponse])
def list_places(db: Session = Depends(get_db)):
    return catalog_service.list_places(db)


@router.get("/{place_id}", response_model=PlaceDetail)
def get_place(place_id: int, db: Session = Depends(get_db)):
    """Place (with region name) and its attractions."""
    return catalog_service.get_place(db, place_id)
