from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from schemas.catalog import RegionDetail, RegionResponse
from services import catalog_service

router = APIRouter(
    prefix="/api/regions",
    tags=["regions"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[RegionResponse])
def list_regions(db: Session = Depends(get_db)):
    return catalog_service.list_regions(db)


@router.get("/{region_id}", response_model=RegionDetail)
def get_region(region_id: int, db: Session = Depends(get_db)):
    """Region with its places."""
    return catalog_service.get_region(db, region_id)
