from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import get_current_user
from schemas.catalog import PlaceResponse
from schemas.favorite import FavoriteCreate, MessageResponse
from services import favorite_service

# every route here needs a valid bearer token; the user id always comes from it
router = APIRouter(
    prefix="/api/favorites",
    tags=["favorites"],
)


@router.get("", response_model=List[PlaceResponse])
def list_favorites(current_user: dict = Depends(get_current_user), db: Session = Depends(get_db)):
    return favorite_service.list_favorites(db, current_user["id"])


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def add_favorite(
    request: FavoriteCreate,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    favorite_service.add_favorite(db, current_user["id"], request.place_id)
    return {"message": "Added to favorites"}


@router.delete("/{place_id}", response_model=MessageResponse)
def remove_favorite(
    place_id: int,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    favorite_service.remove_favorite(db, current_user["id"], place_id)
    return {"message": "Removed from favorites"}
