from pydantic import BaseModel
from typing import List, Optional


class AttractionResponse(BaseModel):
    id: int
    place_id: int
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


class RegionResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    culture: Optional[str] = None
    cuisine: Optional[str] = None
    image_url: Optional[str] = None

    class Config:
        from_attributes = True


class PlaceSummary(BaseModel):
    """Place row as stored (no joins)."""
    id: int
    region_id: int
    name: str
    description: Optional[str] = None
    history: Optional[str] = None
    best_time: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    image_url: Optional[str] = None

    class Config:
        from_attributes = True


class PlaceResponse(PlaceSummary):
    region_name: Optional[str] = None


class RegionDetail(RegionResponse):
    places: List[PlaceSummary] = []


class PlaceDetail(PlaceResponse):
    attractions: List[AttractionResponse] = []


class SearchResult(BaseModel):
    type: str  # "region" | "place"
    id: int
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
