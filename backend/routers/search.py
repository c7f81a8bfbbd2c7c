from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from schemas.catalog import SearchResult
from services import catalog_service

router = APIRouter(
    prefix="/api/search",
    tags=["search"],
)


@router.get("", response_model=List[SearchResult])
def search(q: str = "", db: Session = Depends(get_db)):
    return catalog_service.search(db, q)
