import math
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from schemas.hotel import Hotel
from services import hotel_service

router = APIRouter(
    prefix="/api/hotels",
    tags=["hotels"],
)


def get_hotel_client():
    return hotel_service.get_openai_client()


def parse_coordinate(value: Optional[str]) -> Optional[float]:
    """Lenient coordinate parsing: the client may send "null"/"undefined" for places without one."""
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


# Nearby hotels (AI, falls back to a static list)
@router.get("", response_model=List[Hotel], response_model_by_alias=True)
def nearby_hotels(
    place: Optional[str] = None,
    lat: Optional[str] = None,
    lng: Optional[str] = None,
    client=Depends(get_hotel_client),
):
    if not place or not place.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Place name is required")

    suggestions = hotel_service.suggest_hotels(
        place.strip(), parse_coordinate(lat), parse_coordinate(lng), client=client
    )
    return suggestions.hotels
